"""Catalog (information_schema / pg_catalog) tool handlers."""

from __future__ import annotations

from typing import Any

from ...common.helpers import json_block
from ...common.validation import opt_string, req_string
from ..client.pg_client import PostgresClient

DEFAULT_SCHEMA = "public"

DESCRIBE_COLUMNS_SQL = """
  SELECT
    column_name AS "Field",
    data_type AS "Type",
    is_nullable AS "Null",
    column_default AS "Default",
    character_maximum_length AS "Length",
    numeric_precision AS "Precision",
    numeric_scale AS "Scale"
  FROM information_schema.columns
  WHERE table_schema = $1 AND table_name = $2
  ORDER BY ordinal_position
"""

DESCRIBE_CONSTRAINTS_SQL = """
  SELECT
    tc.constraint_name AS "Constraint",
    tc.constraint_type AS "Type",
    kcu.column_name AS "Column"
  FROM information_schema.table_constraints tc
  JOIN information_schema.key_column_usage kcu
    ON tc.constraint_name = kcu.constraint_name
    AND tc.table_schema = kcu.table_schema
  WHERE tc.table_schema = $1 AND tc.table_name = $2
  ORDER BY tc.constraint_type, kcu.ordinal_position
"""

LIST_TABLES_SQL = """
  SELECT
    schemaname AS "Schema",
    tablename AS "Table",
    tableowner AS "Owner"
  FROM pg_tables
"""

LIST_SCHEMAS_SQL = """
  SELECT
    schema_name AS "Schema",
    schema_owner AS "Owner"
  FROM information_schema.schemata
  WHERE schema_name NOT IN ('information_schema', 'pg_catalog')
  ORDER BY schema_name
"""


async def describe_table(db: PostgresClient, args: dict[str, Any]) -> str:
  table = req_string(args, "tableName")
  schema = opt_string(args, "schemaName") or DEFAULT_SCHEMA

  columns = await db.fetch_all(DESCRIBE_COLUMNS_SQL, (schema, table))
  constraints = await db.fetch_all(DESCRIBE_CONSTRAINTS_SQL, (schema, table))
  return (
    f"Structure of table `{schema}.{table}`:\n\n"
    f"Columns:\n{json_block(columns)}\n\n"
    f"Constraints:\n{json_block(constraints)}"
  )


async def list_tables(db: PostgresClient, args: dict[str, Any]) -> str:
  schema = opt_string(args, "schemaName")
  if schema:
    sql = LIST_TABLES_SQL + " WHERE schemaname = $1"
    params: tuple[Any, ...] = (schema,)
  else:
    sql = LIST_TABLES_SQL + " WHERE schemaname NOT IN ('information_schema', 'pg_catalog')"
    params = ()
  sql += " ORDER BY schemaname, tablename"

  rows = await db.fetch_all(sql, params)
  return f"Tables in database `{db.database}`:\n\n{json_block(rows)}"


async def list_schemas(db: PostgresClient, args: dict[str, Any]) -> str:
  rows = await db.fetch_all(LIST_SCHEMAS_SQL)
  return f"Schemas in database `{db.database}`:\n\n{json_block(rows)}"
