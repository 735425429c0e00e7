"""
Jira tool definitions organized by domain.

Each module exports a list of Tool objects that are combined into ALL_TOOLS.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .issue import issue_tools
from .transition import transition_tools
from .worklog import worklog_tools

if TYPE_CHECKING:
  from mcp.types import Tool

ALL_TOOLS: list[Tool] = [
  *worklog_tools,
  *issue_tools,
  *transition_tools,
]
