"""
Workflow transition tools (2 tools).
"""

from __future__ import annotations

from mcp.types import Tool

transition_tools: list[Tool] = [
  Tool(
    name="jira.getTransitions",
    title="Get Available Transitions",
    description=(
      "List the status transitions currently available for an issue, "
      "according to the board's workflow rules."
    ),
    inputSchema={
      "type": "object",
      "required": ["issueKey"],
      "properties": {
        "issueKey": {"type": "string", "description": "Issue key (e.g. ABC-123)"},
        "expand": {
          "type": "string",
          "description": "Fields to expand (e.g. 'transitions.fields')",
        },
      },
    },
  ),
  Tool(
    name="jira.transitionIssue",
    title="Transition Issue",
    description=(
      "Move an issue to another status using a transition ID. "
      "Use jira.getTransitions to find the available transitions."
    ),
    inputSchema={
      "type": "object",
      "required": ["issueKey", "transitionId"],
      "properties": {
        "issueKey": {"type": "string", "description": "Issue key (e.g. ABC-123)"},
        "transitionId": {
          "type": "string",
          "description": "Transition ID (from jira.getTransitions)",
        },
        "fields": {
          "type": "object",
          "description": "Extra fields required by the transition (e.g. resolution, assignee)",
        },
        "comment": {"type": "string", "description": "Optional comment added with the transition"},
      },
    },
  ),
]
