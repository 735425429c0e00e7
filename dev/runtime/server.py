"""
MCP stdio server shared by every skill.

Skills build a ToolDispatcher and hand it to `run_skill`:

    from dev.runtime.server import run_skill
    from .server import create_dispatcher

    run_skill(create_dispatcher)

The SDK's own JSON-schema check on arguments is turned off: tool schemas are
advisory and the dispatcher is the single place that produces error results.
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from collections.abc import Callable
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from dev.runtime.dispatcher import ToolDispatcher
from dev.types.tool_types import ToolResult

log = logging.getLogger("dev.runtime.server")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> None:
  """Log to stderr; stdout carries the protocol."""
  level = os.environ.get("SKILL_LOG_LEVEL", "INFO").upper()
  logging.basicConfig(
    level=getattr(logging, level, logging.INFO),
    format=LOG_FORMAT,
    stream=sys.stderr,
  )


def to_call_tool_result(result: ToolResult) -> CallToolResult:
  return CallToolResult(
    content=[TextContent(type="text", text=result.content)],
    isError=result.is_error,
  )


def create_mcp_server(dispatcher: ToolDispatcher[Any]) -> Server:
  """Create and configure the MCP server around a dispatcher."""
  server = Server(dispatcher.name)

  @server.list_tools()
  async def list_tools() -> list[Tool]:
    return dispatcher.list_tools()

  @server.call_tool(validate_input=False)
  async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
    result = await dispatcher.invoke(name, arguments or {})
    return to_call_tool_result(result)

  return server


async def run_stdio(dispatcher: ToolDispatcher[Any]) -> None:
  """Serve MCP on stdio until the input closes, then release the connection."""
  server = create_mcp_server(dispatcher)
  try:
    async with stdio_server() as (read_stream, write_stream):
      log.info("%s started", dispatcher.name)
      await server.run(read_stream, write_stream, server.create_initialization_options())
  finally:
    await dispatcher.aclose()


def run_skill(factory: Callable[[], ToolDispatcher[Any]]) -> None:
  """Process entry point. Exits 0 on interrupt, 1 on a fatal error."""
  configure_logging()
  try:
    dispatcher = factory()
    asyncio.run(run_stdio(dispatcher))
  except KeyboardInterrupt:
    log.info("Interrupted, disconnecting")
    sys.exit(0)
  except Exception:
    log.exception("Fatal error")
    sys.exit(1)
