from __future__ import annotations

import os

import pytest

ENV_PREFIXES = ("JIRA_", "MYSQL_", "POSTGRES_")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
  """Keep backend credentials from the developer's shell out of the tests."""
  for key in list(os.environ):
    if key.startswith(ENV_PREFIXES):
      monkeypatch.delenv(key, raising=False)
