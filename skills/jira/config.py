"""
Jira skill configuration, read from the environment.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from ..common.config import require_env

ENV_BASE_URL = "JIRA_BASE_URL"
ENV_EMAIL = "JIRA_EMAIL"
ENV_API_TOKEN = "JIRA_API_TOKEN"


class JiraConfig(BaseModel):
  model_config = ConfigDict(frozen=True)

  base_url: str = Field(description="Site URL, e.g. https://example.atlassian.net")
  email: str = Field(description="Account e-mail used for Basic auth")
  api_token: str = Field(repr=False, description="Atlassian API token")

  @classmethod
  def from_env(cls, environ: Mapping[str, str] | None = None) -> JiraConfig:
    values = require_env([ENV_BASE_URL, ENV_EMAIL, ENV_API_TOKEN], environ)
    return cls(
      base_url=values[ENV_BASE_URL].rstrip("/"),
      email=values[ENV_EMAIL],
      api_token=values[ENV_API_TOKEN],
    )
