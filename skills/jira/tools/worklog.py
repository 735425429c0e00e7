"""
Worklog tools (1 tool).
"""

from __future__ import annotations

from mcp.types import Tool

worklog_tools: list[Tool] = [
  Tool(
    name="jira.addWorklog",
    title="Add Worklog",
    description="Add a worklog entry to a Jira Cloud issue.",
    inputSchema={
      "type": "object",
      "required": ["issueKey", "timeSpentSeconds"],
      "properties": {
        "issueKey": {"type": "string", "description": "Issue key (e.g. ABC-123)."},
        "timeSpentSeconds": {
          "type": "integer",
          "description": "Time spent in seconds (e.g. 3600 = 1h).",
        },
        "started": {
          "type": "string",
          "description": (
            "Start date/time in ISO format. Accepts 'YYYY-MM-DDTHH:mm:ss' (local time) "
            "or a value with an offset (e.g. 2025-10-03T09:00:00-03:00). Defaults to now."
          ),
        },
        "comment": {"type": "string", "description": "Optional plain-text worklog comment."},
        "visibility": {
          "type": "object",
          "description": "Worklog visibility restriction.",
          "properties": {
            "type": {"type": "string", "enum": ["role", "group"]},
            "value": {"type": "string"},
          },
        },
      },
    },
  ),
]
