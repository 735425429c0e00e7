"""
Tool dispatcher shared by every skill.

A skill hands the dispatcher its static tool catalog, a table of handlers
and a `connect` factory. The dispatcher:

- looks tools up by name,
- opens the skill's connection context on first use and keeps it for the
  life of the process,
- calls the handler with that context and the raw arguments,
- turns the handler's text, or any exception it raised, into a ToolResult.

It is the only place where exceptions become error results. Handlers just
raise.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any, Generic, TypeVar

from mcp.types import Tool

from dev.types.tool_types import ToolResult

log = logging.getLogger("dev.runtime.dispatcher")

C = TypeVar("C")

Handler = Callable[[C, dict[str, Any]], Awaitable[str]]

# Exceptions carrying one of these categories are caller mistakes, not outages.
_EXPECTED_CATEGORIES = {"CONFIG", "POLICY", "VALIDATION"}


def _category(error: BaseException) -> str:
  category = getattr(error, "category", None)
  return str(getattr(category, "value", category or "BACKEND"))


class ToolDispatcher(Generic[C]):
  """Routes tool invocations to handlers and wraps their outcome."""

  def __init__(
    self,
    name: str,
    tools: Sequence[Tool],
    handlers: Mapping[str, Handler[C]],
    connect: Callable[[], Awaitable[C]],
    close: Callable[[C], Awaitable[None]] | None = None,
  ) -> None:
    seen: set[str] = set()
    for tool in tools:
      if tool.name in seen:
        raise ValueError(f"Duplicate tool name: {tool.name}")
      seen.add(tool.name)

    missing = sorted(seen - set(handlers))
    if missing:
      raise ValueError(f"Tools without a handler: {', '.join(missing)}")
    orphans = sorted(set(handlers) - seen)
    if orphans:
      raise ValueError(f"Handlers without a tool: {', '.join(orphans)}")

    self.name = name
    self._tools = list(tools)
    self._handlers = dict(handlers)
    self._connect = connect
    self._close = close
    self._context: C | None = None

  # --------------------------------------------------------------------- #
  # Registry
  # --------------------------------------------------------------------- #

  def list_tools(self) -> list[Tool]:
    return list(self._tools)

  def has_tool(self, name: str) -> bool:
    return name in self._handlers

  # --------------------------------------------------------------------- #
  # Connection context
  # --------------------------------------------------------------------- #

  @property
  def is_connected(self) -> bool:
    return self._context is not None

  async def context(self) -> C:
    """Return the cached connection context, opening it on first use."""
    if self._context is None:
      self._context = await self._connect()
    return self._context

  async def aclose(self) -> None:
    """Close the connection context, if one was opened."""
    ctx, self._context = self._context, None
    if ctx is None or self._close is None:
      return
    try:
      await self._close(ctx)
      log.info("[%s] Connection closed", self.name)
    except Exception:
      log.exception("[%s] Error while closing connection", self.name)

  # --------------------------------------------------------------------- #
  # Invocation
  # --------------------------------------------------------------------- #

  async def invoke(self, tool_name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
    """Run one tool and return its result. Never raises."""
    handler = self._handlers.get(tool_name)
    if handler is None:
      log.warning("[%s] Unknown tool requested: %s", self.name, tool_name)
      return ToolResult.error(f"Unknown tool: {tool_name}")

    args = arguments if arguments is not None else {}
    try:
      ctx = await self.context()
      text = await handler(ctx, args)
    except Exception as e:
      return self._format_error(tool_name, e)
    return ToolResult(content=text)

  def _format_error(self, tool_name: str, error: Exception) -> ToolResult:
    category = _category(error)
    if category in _EXPECTED_CATEGORIES:
      log.warning("[%s] %s failed (%s): %s", self.name, tool_name, category, error)
    else:
      log.error("[%s] %s failed (%s): %s", self.name, tool_name, category, error)
      if log.isEnabledFor(logging.DEBUG):
        log.debug("Traceback for %s", tool_name, exc_info=error)
    message = str(error) or type(error).__name__
    return ToolResult.error(message)

