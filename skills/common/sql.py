"""
Statement policy shared by the database skills.

All checks are textual: the statement is never parsed. The MySQL driver
always negotiates multi-statement support, so batching is refused here.
"""

from __future__ import annotations

from collections.abc import Sequence

from .errors import PolicyViolationError

DEFAULT_ROW_LIMIT = 100
MAX_ROW_LIMIT = 1000


def ensure_single_statement(query: str) -> str:
  """Return the statement without trailing `;`, or raise if a second statement follows."""
  body = query.strip().rstrip(";").rstrip()
  if ";" in body:
    raise PolicyViolationError("Only one statement per query is allowed")
  return body


def ensure_read_only(query: str, keywords: Sequence[str] = ("select",)) -> str:
  """Return the single, stripped statement, or raise if it does not start with a read-only keyword."""
  stripped = ensure_single_statement(query)
  lowered = stripped.lower()
  if not any(lowered.startswith(k) for k in keywords):
    allowed = " and ".join(k.upper() for k in keywords)
    raise PolicyViolationError(f"Only {allowed} queries are allowed")
  return stripped


def row_limit(requested: int | None) -> int:
  if requested is None or requested <= 0:
    return DEFAULT_ROW_LIMIT
  return min(requested, MAX_ROW_LIMIT)


def apply_row_limit(query: str, requested: int | None = None) -> str:
  """Append a LIMIT clause unless the statement already mentions one."""
  if "limit" in query.lower():
    return query
  body = query.rstrip().rstrip(";").rstrip()
  return f"{body} LIMIT {row_limit(requested)}"


def describe_settings(settings: dict[str, object]) -> dict[str, object]:
  """Settings summary for connection-failure logs, with the password masked."""
  out: dict[str, object] = {}
  for k, v in settings.items():
    if "PASSWORD" in k.upper():
      out[k] = "***" if v else "not set"
    else:
      out[k] = v
  return out
