"""Query execution tool handlers."""

from __future__ import annotations

from typing import Any

from ...common.helpers import format_query_results, text_block
from ...common.sql import DEFAULT_ROW_LIMIT, apply_row_limit, ensure_read_only, ensure_single_statement
from ...common.validation import opt_boolean, opt_number, req_string
from ..client.pg_client import PostgresClient

READ_ONLY_KEYWORDS = ("select", "with")


async def execute_select_query(db: PostgresClient, args: dict[str, Any]) -> str:
  query = ensure_read_only(req_string(args, "query"), READ_ONLY_KEYWORDS)
  final_query = apply_row_limit(query, opt_number(args, "limit", DEFAULT_ROW_LIMIT))
  rows = await db.fetch_all(final_query)
  return format_query_results(rows)


async def explain_query(db: PostgresClient, args: dict[str, Any]) -> str:
  query = ensure_single_statement(req_string(args, "query"))
  analyze = opt_boolean(args, "analyze")
  command = "EXPLAIN ANALYZE" if analyze else "EXPLAIN"

  rows = await db.fetch_all(f"{command} {query}")
  plan = "\n".join(str(r.get("QUERY PLAN", "")) for r in rows)
  title = "Execution plan (with analysis)" if analyze else "Execution plan"
  return f"{title}:\n\n{text_block(plan)}"
