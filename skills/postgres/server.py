"""
PostgreSQL skill wiring: tool catalog + handlers + lazily opened connection.
"""

from __future__ import annotations

from dev.runtime.dispatcher import ToolDispatcher

from .client.pg_client import PostgresClient
from .config import PostgresConfig
from .handlers import HANDLERS
from .tools import ALL_TOOLS

SERVER_NAME = "postgresql-mcp-server"


async def connect() -> PostgresClient:
  """Validate the environment, then open the connection."""
  client = PostgresClient(PostgresConfig.from_env())
  await client.connect()
  return client


async def close(client: PostgresClient) -> None:
  await client.close()


def create_dispatcher() -> ToolDispatcher[PostgresClient]:
  return ToolDispatcher(SERVER_NAME, ALL_TOOLS, HANDLERS, connect, close)
