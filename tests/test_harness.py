"""Tests for the developer harness."""

from __future__ import annotations

import pytest

from dev.harness import runner


@pytest.mark.parametrize("skill", ["jira", "mysql", "postgres"])
async def test_catalog_checks_pass(skill, capsys):
  assert await runner._run(skill, None, {}, verbose=False) == 0
  out = capsys.readouterr().out
  assert "0 failed" in out


async def test_unknown_skill_fails(capsys):
  assert await runner._run("nope", None, {}, verbose=False) == 1
  assert "Failed to load skill" in capsys.readouterr().out


async def test_call_reports_error_envelope(capsys):
  # no MYSQL_* variables are set, so the call fails before any connection
  assert await runner._run("mysql", "list_tables", {}, verbose=False) == 1
  out = capsys.readouterr().out
  assert '"isError": true' in out
  assert "Missing environment variables" in out
