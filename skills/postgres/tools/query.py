"""
Query tools (2 tools).
"""

from __future__ import annotations

from mcp.types import Tool

query_tools: list[Tool] = [
  Tool(
    name="execute_select_query",
    title="Run SELECT Query",
    description=(
      "Run a SELECT or CTE (WITH) query (read-only). A LIMIT is appended when the query has none."
    ),
    inputSchema={
      "type": "object",
      "properties": {
        "query": {"type": "string", "description": "SELECT or WITH query to run"},
        "limit": {
          "type": "number",
          "description": "Maximum number of rows (max 1000)",
          "default": 100,
          "maximum": 1000,
        },
      },
      "required": ["query"],
    },
  ),
  Tool(
    name="explain_query",
    title="Explain Query",
    description="Show the execution plan of a query",
    inputSchema={
      "type": "object",
      "properties": {
        "query": {"type": "string", "description": "Query to analyze"},
        "analyze": {
          "type": "boolean",
          "description": "Run EXPLAIN ANALYZE (executes the query for real timings)",
          "default": False,
        },
      },
      "required": ["query"],
    },
  ),
]
