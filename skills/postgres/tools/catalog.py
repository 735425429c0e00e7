"""
Catalog tools (3 tools).
"""

from __future__ import annotations

from mcp.types import Tool

catalog_tools: list[Tool] = [
  Tool(
    name="describe_table",
    title="Describe Table",
    description="Show the columns and key constraints of a table",
    inputSchema={
      "type": "object",
      "properties": {
        "tableName": {"type": "string", "description": "Table name"},
        "schemaName": {
          "type": "string",
          "description": "Schema name (default: public)",
          "default": "public",
        },
      },
      "required": ["tableName"],
    },
  ),
  Tool(
    name="list_tables",
    title="List Tables",
    description="List the tables of the database, excluding system schemas",
    inputSchema={
      "type": "object",
      "properties": {
        "schemaName": {"type": "string", "description": "Only list tables of this schema"},
      },
    },
  ),
  Tool(
    name="list_schemas",
    title="List Schemas",
    description="List the schemas of the database, excluding system schemas",
    inputSchema={"type": "object", "properties": {}},
  ),
]
