"""
Async HTTP client for the Jira Cloud REST API v3.

Uses aiohttp with Basic auth (account e-mail + API token). Every request
opens and closes its own session; nothing is kept between calls.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Any

import aiohttp

from ...common.errors import ErrorCategory, SkillError
from ..config import JiraConfig

log = logging.getLogger("skill.jira.client")

API_PREFIX = "/rest/api/3"


class JiraApiError(SkillError):
  """Non-2xx response from Jira."""

  category = ErrorCategory.API

  def __init__(self, status: int, reason: str, message: str):
    self.status = status
    self.reason = reason
    super().__init__(f"Jira API {status} {reason}: {message}")


def basic_auth_header(email: str, token: str) -> str:
  raw = f"{email}:{token}".encode()
  return f"Basic {base64.b64encode(raw).decode('ascii')}"


def error_detail(payload: Any, text: str, reason: str) -> str:
  """Pick the most useful message out of an error response."""
  if isinstance(payload, dict):
    messages = payload.get("errorMessages")
    if messages:
      return " | ".join(str(m) for m in messages)
    errors = payload.get("errors")
    if errors:
      return json.dumps(errors) if isinstance(errors, (dict, list)) else str(errors)
  return text or reason


def _parse_body(text: str) -> Any:
  if not text:
    return None
  try:
    return json.loads(text)
  except ValueError as e:
    log.warning("Could not parse JSON response: %s", e)
    return {"raw": text}


class JiraClient:
  """Thin request helper bound to one Jira site and account."""

  def __init__(self, config: JiraConfig) -> None:
    self._config = config
    self._headers = {
      "Authorization": basic_auth_header(config.email, config.api_token),
      "Accept": "application/json",
      "Content-Type": "application/json",
    }

  @property
  def base_url(self) -> str:
    return self._config.base_url

  async def request(
    self,
    method: str,
    path: str,
    *,
    params: dict[str, Any] | None = None,
    body: dict[str, Any] | None = None,
  ) -> dict[str, Any]:
    """Call `API_PREFIX + path` and return the decoded JSON body ({} when empty)."""
    url = f"{self._config.base_url}{API_PREFIX}{path}"
    query = {k: str(v) for k, v in (params or {}).items() if v is not None}
    data = json.dumps(body) if body is not None else None

    log.debug("%s %s %s", method, path, query or "")
    async with aiohttp.ClientSession(headers=self._headers) as session:
      async with session.request(method, url, params=query or None, data=data) as resp:
        text = await resp.text()
        status = resp.status
        reason = resp.reason or ""

    payload = _parse_body(text)
    if not 200 <= status < 300:
      raise JiraApiError(status, reason, error_detail(payload, text, reason))
    if payload is None:
      return {}
    if not isinstance(payload, dict):
      return {"data": payload}
    return payload

  async def get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
    return await self.request("GET", path, params=params)

  async def post(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
    return await self.request("POST", path, body=body)
