"""
PostgreSQL connection wrapper using asyncpg.

One connection per process, opened on the first tool call and reused until
shutdown. asyncpg sends every statement through the extended protocol, so a
single call can never carry more than one statement.
"""

from __future__ import annotations

import logging
import ssl
from typing import Any

import asyncpg

from ...common.sql import describe_settings
from ..config import PostgresConfig

log = logging.getLogger("skill.postgres.client")


def unverified_ssl_context() -> ssl.SSLContext:
  ctx = ssl.create_default_context()
  ctx.check_hostname = False
  ctx.verify_mode = ssl.CERT_NONE
  return ctx


class PostgresClient:
  """Async wrapper around a single asyncpg connection."""

  def __init__(self, config: PostgresConfig) -> None:
    self._config = config
    self._conn: asyncpg.Connection | None = None

  @property
  def database(self) -> str:
    return self._config.database

  @property
  def is_connected(self) -> bool:
    return self._conn is not None

  async def connect(self) -> None:
    if self._conn is not None:
      return
    cfg = self._config
    try:
      self._conn = await asyncpg.connect(
        host=cfg.host,
        port=cfg.port,
        user=cfg.user,
        password=cfg.password or None,
        database=cfg.database,
        ssl=unverified_ssl_context() if cfg.ssl else "disable",
      )
    except Exception as e:
      log.error("Failed to connect to PostgreSQL: %s", e)
      log.error("Settings: %s", describe_settings(cfg.settings()))
      raise
    log.info("Connected to PostgreSQL: %s@%s", cfg.database, cfg.host)

  async def fetch_all(self, sql: str, params: tuple[Any, ...] | None = None) -> list[dict[str, Any]]:
    """Run one statement and return all rows as dicts."""
    if self._conn is None:
      raise RuntimeError("PostgresClient not connected. Call connect() first.")
    records = await self._conn.fetch(sql, *(params or ()))
    return [dict(r) for r in records]

  async def close(self) -> None:
    if self._conn is not None:
      conn, self._conn = self._conn, None
      await conn.close()
      log.info("PostgreSQL connection closed")
