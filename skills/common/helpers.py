"""
Shared formatting helpers for tool output.
"""

from __future__ import annotations

import datetime
import json
import uuid
from decimal import Decimal
from typing import Any


def _json_default(value: Any) -> Any:
  if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
    return value.isoformat()
  if isinstance(value, datetime.timedelta):
    return str(value)
  if isinstance(value, (bytes, bytearray, memoryview)):
    return bytes(value).decode("utf-8", errors="replace")
  if isinstance(value, (Decimal, uuid.UUID)):
    return str(value)
  return str(value)


def to_json(data: Any) -> str:
  """Pretty-print data as JSON, stringifying values JSON has no type for."""
  return json.dumps(data, indent=2, ensure_ascii=False, default=_json_default)


def json_block(data: Any) -> str:
  return f"```json\n{to_json(data)}\n```"


def text_block(text: str) -> str:
  return f"```\n{text}\n```"


def format_query_results(rows: list[dict[str, Any]]) -> str:
  return f"Query executed successfully.\n\nResults ({len(rows)} rows):\n\n{json_block(rows)}"
