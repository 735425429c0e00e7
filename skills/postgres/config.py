"""
PostgreSQL skill configuration, read from the environment.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from ..common.config import env_flag, env_port, optional_env, require_env

REQUIRED_ENV = ["POSTGRES_HOST", "POSTGRES_USER", "POSTGRES_DATABASE"]
DEFAULT_PORT = 5432


class PostgresConfig(BaseModel):
  model_config = ConfigDict(frozen=True)

  host: str
  port: int = DEFAULT_PORT
  user: str
  password: str = Field(default="", repr=False)
  database: str
  ssl: bool = Field(default=False, description="TLS without certificate verification")

  @classmethod
  def from_env(cls, environ: Mapping[str, str] | None = None) -> PostgresConfig:
    values = require_env(REQUIRED_ENV, environ)
    return cls(
      host=values["POSTGRES_HOST"],
      port=env_port("POSTGRES_PORT", DEFAULT_PORT, environ),
      user=values["POSTGRES_USER"],
      password=optional_env("POSTGRES_PASSWORD", "", environ),
      database=values["POSTGRES_DATABASE"],
      ssl=env_flag("POSTGRES_SSL", environ),
    )

  def settings(self) -> dict[str, object]:
    return {
      "POSTGRES_HOST": self.host,
      "POSTGRES_PORT": self.port,
      "POSTGRES_USER": self.user,
      "POSTGRES_DATABASE": self.database,
      "POSTGRES_SSL": self.ssl,
      "POSTGRES_PASSWORD": self.password,
    }
