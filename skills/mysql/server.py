"""
MySQL skill wiring: tool catalog + handlers + lazily opened connection.
"""

from __future__ import annotations

from dev.runtime.dispatcher import ToolDispatcher

from .client.mysql_client import MySQLClient
from .config import MySQLConfig
from .handlers import HANDLERS
from .tools import ALL_TOOLS

SERVER_NAME = "mysql-mcp-server"


async def connect() -> MySQLClient:
  """Validate the environment, then open the connection."""
  client = MySQLClient(MySQLConfig.from_env())
  await client.connect()
  return client


async def close(client: MySQLClient) -> None:
  await client.close()


def create_dispatcher() -> ToolDispatcher[MySQLClient]:
  return ToolDispatcher(SERVER_NAME, ALL_TOOLS, HANDLERS, connect, close)
