"""
Shared formatting helpers for the Jira skill.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any
from urllib.parse import quote

from ..common.errors import ValidationError

# ---------------------------------------------------------------------------
# Worklog "started" timestamps
# ---------------------------------------------------------------------------

# Jira wants "YYYY-MM-DDTHH:mm:ss.SSS+HHMM".
_OFFSET_ISO = re.compile(
  r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3})?([+-]\d{2}:?\d{2}|Z|[+-]\d{4})$"
)
_COLON_OFFSET = re.compile(r"([+-]\d{2}):(\d{2})$")


def format_offset(dt: datetime) -> str:
  offset = dt.utcoffset()
  minutes = int(offset.total_seconds() // 60) if offset is not None else 0
  sign = "+" if minutes >= 0 else "-"
  hh, mm = divmod(abs(minutes), 60)
  return f"{sign}{hh:02d}{mm:02d}"


def format_started(dt: datetime) -> str:
  """Render a datetime in local time as YYYY-MM-DDTHH:mm:ss.sss+HHMM."""
  local = dt.astimezone()
  return f"{local:%Y-%m-%dT%H:%M:%S}.{local.microsecond // 1000:03d}{format_offset(local)}"


def normalize_started(value: str) -> str:
  """Normalize a worklog start time for Jira.

  Values that already carry an offset keep everything but a `+03:00` style
  offset, which becomes `+0300`. Anything else is read as an ISO date/time in
  the local zone and rendered with the local offset in effect at that instant.
  """
  text = value.strip()
  if _OFFSET_ISO.fullmatch(text):
    return _COLON_OFFSET.sub(r"\1\2", text)
  try:
    parsed = datetime.fromisoformat(text)
  except (TypeError, ValueError):
    raise ValidationError(f"invalid started value: {value}") from None
  return format_started(parsed)


def now_started() -> str:
  return format_started(datetime.now().astimezone())


# ---------------------------------------------------------------------------
# Request shaping
# ---------------------------------------------------------------------------


def adf_document(text: str) -> dict[str, Any]:
  """Wrap plain text in the Atlassian Document Format envelope comment bodies require."""
  return {
    "type": "doc",
    "version": 1,
    "content": [{"type": "paragraph", "content": [{"type": "text", "text": text}]}],
  }


def issue_path(issue_key: str, suffix: str = "") -> str:
  path = f"/issue/{quote(issue_key, safe='')}"
  return f"{path}/{suffix}" if suffix else path


# ---------------------------------------------------------------------------
# Response shaping
# ---------------------------------------------------------------------------


def _name(obj: Any, key: str = "name") -> Any:
  return obj.get(key) if isinstance(obj, dict) else None


def format_search_issue(issue: dict[str, Any]) -> dict[str, Any]:
  fields = issue.get("fields") or {}
  return {
    "key": issue.get("key"),
    "id": issue.get("id"),
    "self": issue.get("self"),
    "summary": fields.get("summary"),
    "status": _name(fields.get("status")),
    "assignee": _name(fields.get("assignee"), "displayName"),
  }


def format_issue(issue: dict[str, Any]) -> dict[str, Any]:
  fields = issue.get("fields") or {}
  status = fields.get("status") or {}
  assignee = fields.get("assignee")
  project = fields.get("project") or {}
  return {
    "key": issue.get("key"),
    "id": issue.get("id"),
    "self": issue.get("self"),
    "fields": {
      "summary": fields.get("summary"),
      "description": fields.get("description"),
      "status": {
        "name": status.get("name"),
        "id": status.get("id"),
        "statusCategory": _name(status.get("statusCategory")),
      },
      "assignee": {
        "displayName": assignee.get("displayName"),
        "emailAddress": assignee.get("emailAddress"),
        "accountId": assignee.get("accountId"),
      }
      if isinstance(assignee, dict)
      else None,
      "priority": _name(fields.get("priority")),
      "issuetype": _name(fields.get("issuetype")),
      "project": {"key": project.get("key"), "name": project.get("name")},
      "created": fields.get("created"),
      "updated": fields.get("updated"),
    },
  }


def format_comment(comment: dict[str, Any]) -> dict[str, Any]:
  author = comment.get("author") or {}
  return {
    "id": comment.get("id"),
    "author": {
      "displayName": author.get("displayName"),
      "emailAddress": author.get("emailAddress"),
      "accountId": author.get("accountId"),
    },
    "body": comment.get("body"),
    "created": comment.get("created"),
    "updated": comment.get("updated"),
    "visibility": comment.get("visibility"),
  }


def format_transition(transition: dict[str, Any]) -> dict[str, Any]:
  to = transition.get("to") or {}
  return {
    "id": transition.get("id"),
    "name": transition.get("name"),
    "to": {
      "id": to.get("id"),
      "name": to.get("name"),
      "statusCategory": _name(to.get("statusCategory")),
    },
    "hasScreen": transition.get("hasScreen"),
    "isGlobal": transition.get("isGlobal"),
    "isInitial": transition.get("isInitial"),
    "isConditional": transition.get("isConditional"),
    "fields": transition.get("fields"),
  }
