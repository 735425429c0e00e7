"""
Environment variable helpers for skill configuration.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from .errors import ConfigurationError


def _clean(environ: Mapping[str, str], name: str) -> str | None:
  v = environ.get(name)
  if v is None or v.strip() == "":
    return None
  return v.strip()


def require_env(names: list[str], environ: Mapping[str, str] | None = None) -> dict[str, str]:
  """Return the values of all `names`, or raise one error listing every missing one."""
  env = os.environ if environ is None else environ
  values: dict[str, str] = {}
  missing: list[str] = []
  for name in names:
    v = _clean(env, name)
    if v is None:
      missing.append(name)
    else:
      values[name] = v
  if missing:
    raise ConfigurationError(f"Missing environment variables: {', '.join(missing)}")
  return values


def optional_env(name: str, default: str, environ: Mapping[str, str] | None = None) -> str:
  env = os.environ if environ is None else environ
  v = _clean(env, name)
  return default if v is None else v


def env_port(name: str, default: int, environ: Mapping[str, str] | None = None) -> int:
  raw = optional_env(name, str(default), environ)
  try:
    port = int(raw)
  except ValueError:
    raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None
  if not 0 < port < 65536:
    raise ConfigurationError(f"{name} is out of range: {port}")
  return port


def env_flag(name: str, environ: Mapping[str, str] | None = None) -> bool:
  return optional_env(name, "false", environ).lower() == "true"
