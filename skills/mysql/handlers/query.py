"""Query execution tool handlers."""

from __future__ import annotations

from typing import Any

from ...common.helpers import format_query_results, json_block
from ...common.sql import DEFAULT_ROW_LIMIT, apply_row_limit, ensure_read_only, ensure_single_statement
from ...common.validation import opt_number, req_string
from ..client.mysql_client import MySQLClient

READ_ONLY_KEYWORDS = ("select",)


async def execute_select_query(db: MySQLClient, args: dict[str, Any]) -> str:
  query = ensure_read_only(req_string(args, "query"), READ_ONLY_KEYWORDS)
  final_query = apply_row_limit(query, opt_number(args, "limit", DEFAULT_ROW_LIMIT))
  rows = await db.fetch_all(final_query)
  return format_query_results(rows)


async def explain_query(db: MySQLClient, args: dict[str, Any]) -> str:
  query = ensure_single_statement(req_string(args, "query"))
  rows = await db.fetch_all(f"EXPLAIN {query}")
  return f"Execution plan:\n\n{json_block(rows)}"
