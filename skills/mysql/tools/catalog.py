"""
Catalog tools (3 tools).
"""

from __future__ import annotations

from mcp.types import Tool

catalog_tools: list[Tool] = [
  Tool(
    name="describe_table",
    title="Describe Table",
    description="Show the columns of a table in the configured database",
    inputSchema={
      "type": "object",
      "properties": {
        "tableName": {"type": "string", "description": "Table name"},
      },
      "required": ["tableName"],
    },
  ),
  Tool(
    name="list_tables",
    title="List Tables",
    description="List the tables of the configured database (or of another schema)",
    inputSchema={
      "type": "object",
      "properties": {
        "schemaName": {
          "type": "string",
          "description": "Database/schema to list (default: the configured database)",
        },
      },
    },
  ),
  Tool(
    name="list_schemas",
    title="List Schemas",
    description="List the databases on the server, excluding system schemas",
    inputSchema={"type": "object", "properties": {}},
  ),
]
