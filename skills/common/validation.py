"""
Input validation helpers for tool arguments.
"""

from __future__ import annotations

from typing import Any

from .errors import ValidationError


def req_string(args: dict[str, Any], key: str) -> str:
  """Read a required, non-blank string from args."""
  v = args.get(key)
  if not isinstance(v, str) or not v.strip():
    raise ValidationError(f"Missing required parameter: {key}")
  return v


def req_id(args: dict[str, Any], key: str) -> str:
  """Read a required identifier that may arrive as a string or an integer."""
  v = args.get(key)
  if isinstance(v, int) and not isinstance(v, bool):
    return str(v)
  return req_string(args, key)


def opt_string(args: dict[str, Any], key: str) -> str | None:
  """Read an optional string from args."""
  v = args.get(key)
  return v if isinstance(v, str) and v else None


def opt_number(args: dict[str, Any], key: str, fallback: int) -> int:
  """Read an optional number from args with a fallback."""
  v = args.get(key)
  if isinstance(v, bool):
    return fallback
  if isinstance(v, (int, float)):
    return int(v)
  return fallback


def opt_boolean(args: dict[str, Any], key: str, fallback: bool = False) -> bool:
  """Read an optional boolean from args."""
  v = args.get(key)
  return v if isinstance(v, bool) else fallback


def opt_string_list(args: dict[str, Any], key: str) -> list[str]:
  """Read an optional list of strings; a single string becomes a one-item list."""
  v = args.get(key)
  if isinstance(v, str):
    return [v] if v else []
  if isinstance(v, list):
    return [str(item) for item in v if item is not None and item != ""]
  return []


def opt_object(args: dict[str, Any], key: str) -> dict[str, Any] | None:
  v = args.get(key)
  if v is None:
    return None
  if not isinstance(v, dict):
    raise ValidationError(f"Parameter {key} must be an object")
  return v
