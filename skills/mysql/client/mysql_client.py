"""
MySQL connection wrapper using aiomysql.

One connection per process, opened on the first tool call and reused until
shutdown. Rows come back as dicts keyed by column name.
"""

from __future__ import annotations

import logging
from typing import Any

import aiomysql

from ...common.sql import describe_settings
from ..config import MySQLConfig

log = logging.getLogger("skill.mysql.client")


class MySQLClient:
  """Async wrapper around a single aiomysql connection."""

  def __init__(self, config: MySQLConfig) -> None:
    self._config = config
    self._conn: aiomysql.Connection | None = None

  @property
  def database(self) -> str:
    return self._config.database

  @property
  def is_connected(self) -> bool:
    return self._conn is not None

  async def connect(self) -> None:
    """Open the connection and ping it."""
    if self._conn is not None:
      return
    cfg = self._config
    try:
      conn = await aiomysql.connect(
        host=cfg.host,
        port=cfg.port,
        user=cfg.user,
        password=cfg.password,
        db=cfg.database,
        autocommit=True,
        cursorclass=aiomysql.DictCursor,
      )
      await conn.ping()
    except Exception as e:
      log.error("Failed to connect to MySQL: %s", e)
      log.error("Settings: %s", describe_settings(cfg.settings()))
      raise
    self._conn = conn
    log.info("Connected to MySQL: %s@%s", cfg.database, cfg.host)

  async def fetch_all(self, sql: str, params: tuple[Any, ...] | None = None) -> list[dict[str, Any]]:
    """Run one statement and return all rows. Without params the SQL is sent as-is."""
    if self._conn is None:
      raise RuntimeError("MySQLClient not connected. Call connect() first.")
    async with self._conn.cursor() as cur:
      await cur.execute(sql, params)
      rows = await cur.fetchall()
    return list(rows or [])

  async def close(self) -> None:
    if self._conn is not None:
      conn, self._conn = self._conn, None
      await conn.ensure_closed()
      log.info("MySQL connection closed")
