"""Handler dispatch table: maps tool names to handler functions."""

from __future__ import annotations

import inspect
from typing import Any

# Import all handler modules
from . import catalog, query

# Build dispatch table from handler modules
HANDLERS: dict[str, Any] = {}

for mod in (query, catalog):
  for name, fn in inspect.getmembers(mod, inspect.iscoroutinefunction):
    if not name.startswith("_") and fn.__module__ == mod.__name__:
      HANDLERS[name] = fn
