"""
MySQL skill configuration, read from the environment.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from ..common.config import env_port, optional_env, require_env

REQUIRED_ENV = ["MYSQL_HOST", "MYSQL_USER", "MYSQL_DATABASE"]
DEFAULT_PORT = 3306


class MySQLConfig(BaseModel):
  model_config = ConfigDict(frozen=True)

  host: str
  port: int = DEFAULT_PORT
  user: str
  password: str = Field(default="", repr=False)
  database: str

  @classmethod
  def from_env(cls, environ: Mapping[str, str] | None = None) -> MySQLConfig:
    values = require_env(REQUIRED_ENV, environ)
    return cls(
      host=values["MYSQL_HOST"],
      port=env_port("MYSQL_PORT", DEFAULT_PORT, environ),
      user=values["MYSQL_USER"],
      password=optional_env("MYSQL_PASSWORD", "", environ),
      database=values["MYSQL_DATABASE"],
    )

  def settings(self) -> dict[str, object]:
    return {
      "MYSQL_HOST": self.host,
      "MYSQL_PORT": self.port,
      "MYSQL_USER": self.user,
      "MYSQL_DATABASE": self.database,
      "MYSQL_PASSWORD": self.password,
    }
