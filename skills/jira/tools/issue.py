"""
Issue tools (3 tools).
"""

from __future__ import annotations

from mcp.types import Tool

issue_tools: list[Tool] = [
  Tool(
    name="jira.searchJql",
    title="Search Issues (JQL)",
    description="Search issues with JQL and return their main fields.",
    inputSchema={
      "type": "object",
      "required": ["jql"],
      "properties": {
        "jql": {
          "type": "string",
          "description": "e.g. project = ABC AND assignee = currentUser() ORDER BY updated DESC",
        },
        "maxResults": {"type": "integer", "default": 25},
        "fields": {
          "type": "array",
          "items": {"type": "string"},
          "description": "Fields to request (e.g. ['summary','status'])",
        },
      },
    },
  ),
  Tool(
    name="jira.getIssue",
    title="Get Issue",
    description=(
      "Get a Jira Cloud issue: summary, description, status, assignee, priority, "
      "type, project and dates. Use jira.getComments for comments."
    ),
    inputSchema={
      "type": "object",
      "required": ["issueKey"],
      "properties": {
        "issueKey": {"type": "string", "description": "Issue key (e.g. ABC-123)"},
        "expand": {
          "type": "array",
          "items": {"type": "string"},
          "description": "Expansions such as 'renderedFields' for a rendered description",
        },
      },
    },
  ),
  Tool(
    name="jira.getComments",
    title="Get Comments",
    description="Get the comments of a Jira Cloud issue.",
    inputSchema={
      "type": "object",
      "required": ["issueKey"],
      "properties": {
        "issueKey": {"type": "string", "description": "Issue key (e.g. ABC-123)"},
        "maxResults": {
          "type": "integer",
          "description": "Maximum number of comments (default: 50)",
        },
        "orderBy": {
          "type": "string",
          "enum": ["created", "-created", "+created"],
          "description": "Comment ordering",
        },
      },
    },
  ),
]
