"""Catalog (information_schema) tool handlers."""

from __future__ import annotations

from typing import Any

from ...common.helpers import json_block
from ...common.validation import opt_string, req_string
from ..client.mysql_client import MySQLClient

SYSTEM_SCHEMAS = ("information_schema", "mysql", "performance_schema", "sys")

DESCRIBE_TABLE_SQL = """
  SELECT
    COLUMN_NAME AS `Field`,
    COLUMN_TYPE AS `Type`,
    IS_NULLABLE AS `Null`,
    COLUMN_KEY AS `Key`,
    COLUMN_DEFAULT AS `Default`,
    EXTRA AS `Extra`
  FROM information_schema.COLUMNS
  WHERE TABLE_SCHEMA = %s AND TABLE_NAME = %s
  ORDER BY ORDINAL_POSITION
"""

LIST_TABLES_SQL = """
  SELECT TABLE_NAME AS `Table`, TABLE_COMMENT AS `Comment`, TABLE_ROWS AS `Rows`
  FROM information_schema.TABLES
  WHERE TABLE_SCHEMA = %s
  ORDER BY TABLE_NAME
"""

LIST_SCHEMAS_SQL = """
  SELECT
    SCHEMA_NAME AS `Schema`,
    DEFAULT_CHARACTER_SET_NAME AS `Charset`,
    DEFAULT_COLLATION_NAME AS `Collation`
  FROM information_schema.SCHEMATA
  WHERE SCHEMA_NAME NOT IN ({placeholders})
  ORDER BY SCHEMA_NAME
""".format(placeholders=", ".join(["%s"] * len(SYSTEM_SCHEMAS)))


async def describe_table(db: MySQLClient, args: dict[str, Any]) -> str:
  table = req_string(args, "tableName")
  rows = await db.fetch_all(DESCRIBE_TABLE_SQL, (db.database, table))
  return f"Structure of table `{table}`:\n\n{json_block(rows)}"


async def list_tables(db: MySQLClient, args: dict[str, Any]) -> str:
  schema = opt_string(args, "schemaName") or db.database
  rows = await db.fetch_all(LIST_TABLES_SQL, (schema,))
  return f"Tables in database `{schema}`:\n\n{json_block(rows)}"


async def list_schemas(db: MySQLClient, args: dict[str, Any]) -> str:
  rows = await db.fetch_all(LIST_SCHEMAS_SQL, SYSTEM_SCHEMAS)
  return f"Schemas on server (connected to `{db.database}`):\n\n{json_block(rows)}"
