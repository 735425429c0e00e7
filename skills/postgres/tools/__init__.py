"""
PostgreSQL tool definitions.

Each module exports a list of Tool objects that are combined into ALL_TOOLS.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .catalog import catalog_tools
from .query import query_tools

if TYPE_CHECKING:
  from mcp.types import Tool

ALL_TOOLS: list[Tool] = [
  *query_tools,
  *catalog_tools,
]
