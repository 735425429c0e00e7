"""End-to-end PostgreSQL tool tests through the dispatcher, with a fake connection."""

from __future__ import annotations

import pytest

from skills.postgres.handlers import HANDLERS
from skills.postgres.tools import ALL_TOOLS

from .fakes import FakeDB, make_dispatcher


def dispatcher_for(db: FakeDB):
  return make_dispatcher("postgresql-mcp-server", ALL_TOOLS, HANDLERS, db)


def test_catalog_matches_handlers():
  assert set(HANDLERS) == {t.name for t in ALL_TOOLS} == {
    "execute_select_query",
    "explain_query",
    "describe_table",
    "list_tables",
    "list_schemas",
  }


class TestExecuteSelectQuery:
  async def test_select_with_limit(self):
    db = FakeDB([{"id": 1}, {"id": 2}, {"id": 3}])
    result = await dispatcher_for(db).invoke(
      "execute_select_query", {"query": "select * from users", "limit": 5}
    )
    assert db.calls[0][0].endswith("LIMIT 5")
    assert "Results (3 rows)" in result.content

  async def test_cte_allowed(self):
    db = FakeDB()
    query = "WITH recent AS (SELECT * FROM orders) SELECT count(*) FROM recent"
    result = await dispatcher_for(db).invoke("execute_select_query", {"query": query})
    assert not result.is_error
    assert db.calls[0][0] == f"{query} LIMIT 100"

  @pytest.mark.parametrize("query", ["truncate users", "insert into users values (1)"])
  async def test_writes_rejected(self, query):
    db = FakeDB()
    result = await dispatcher_for(db).invoke("execute_select_query", {"query": query})
    assert result.content == "Error: Only SELECT and WITH queries are allowed"
    assert db.calls == []

  @pytest.mark.parametrize(
    "query", ["select 1 limit 1; drop table users", "SELECT * FROM users;DELETE FROM users;"]
  )
  async def test_batched_statements_rejected(self, query):
    db = FakeDB()
    result = await dispatcher_for(db).invoke("execute_select_query", {"query": query})
    assert result.is_error
    assert result.content == "Error: Only one statement per query is allowed"
    assert db.calls == []

  async def test_single_trailing_semicolon_allowed(self):
    db = FakeDB()
    await dispatcher_for(db).invoke("execute_select_query", {"query": "select * from users;  ", "limit": 5})
    assert db.calls[0][0] == "select * from users LIMIT 5"


class TestExplainQuery:
  async def test_plan_lines_joined(self):
    db = FakeDB(
      [
        {"QUERY PLAN": "Seq Scan on users  (cost=0.00..22.70 rows=1270 width=36)"},
        {"QUERY PLAN": "  Filter: (id > 1)"},
      ]
    )
    result = await dispatcher_for(db).invoke("explain_query", {"query": "select * from users where id > 1"})
    assert db.calls[0][0] == "EXPLAIN select * from users where id > 1"
    assert result.content == (
      "Execution plan:\n\n```\n"
      "Seq Scan on users  (cost=0.00..22.70 rows=1270 width=36)\n"
      "  Filter: (id > 1)\n```"
    )

  async def test_analyze(self):
    db = FakeDB([{"QUERY PLAN": "Result  (actual time=0.001..0.001 rows=1 loops=1)"}])
    result = await dispatcher_for(db).invoke("explain_query", {"query": "select 1", "analyze": True})
    assert db.calls[0][0] == "EXPLAIN ANALYZE select 1"
    assert result.content.startswith("Execution plan (with analysis):")


class TestCatalog:
  async def test_describe_table_columns_and_constraints(self):
    columns = [{"Field": "id", "Type": "integer", "Null": "NO"}]
    constraints = [{"Constraint": "users_pkey", "Type": "PRIMARY KEY", "Column": "id"}]
    db = FakeDB(columns, constraints)
    result = await dispatcher_for(db).invoke("describe_table", {"tableName": "users"})

    (cols_sql, cols_params), (cons_sql, cons_params) = db.calls
    assert "information_schema.columns" in cols_sql
    assert "table_constraints" in cons_sql
    assert cols_params == cons_params == ("public", "users")
    assert result.content.startswith("Structure of table `public.users`:")
    assert "Columns:" in result.content
    assert '"Constraint": "users_pkey"' in result.content

  async def test_describe_table_other_schema(self):
    db = FakeDB()
    await dispatcher_for(db).invoke("describe_table", {"tableName": "invoices", "schemaName": "billing"})
    assert db.calls[0][1] == ("billing", "invoices")

  async def test_list_tables_excludes_system_schemas(self):
    db = FakeDB([{"Schema": "public", "Table": "users", "Owner": "app"}])
    result = await dispatcher_for(db).invoke("list_tables", {})
    sql, params = db.calls[0]
    assert "NOT IN ('information_schema', 'pg_catalog')" in sql
    assert params == ()
    assert result.content.startswith("Tables in database `shop`:")

  async def test_list_tables_filtered(self):
    db = FakeDB()
    await dispatcher_for(db).invoke("list_tables", {"schemaName": "billing"})
    sql, params = db.calls[0]
    assert "schemaname = $1" in sql
    assert params == ("billing",)

  async def test_list_schemas(self):
    db = FakeDB([{"Schema": "public", "Owner": "postgres"}])
    result = await dispatcher_for(db).invoke("list_schemas", {})
    assert "information_schema.schemata" in db.calls[0][0]
    assert '"Owner": "postgres"' in result.content


@pytest.mark.parametrize("analyze", [False, True])
async def test_explain_rejects_batched_statements(analyze):
  db = FakeDB()
  result = await dispatcher_for(db).invoke(
    "explain_query", {"query": "select 1; drop table users", "analyze": analyze}
  )
  assert result.is_error
  assert result.content == "Error: Only one statement per query is allowed"
  assert db.calls == []
