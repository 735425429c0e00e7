"""
Skill Test Runner

Loads a skill's dispatcher, validates its tool catalog, and optionally
invokes one tool through the real dispatcher (so the skill's environment
variables must be set for that part).

Usage:
    python -m dev.harness.runner <skill> [--call TOOL [--args JSON]] [--verbose]

Examples:
    python -m dev.harness.runner mysql
    python -m dev.harness.runner jira --call jira.getIssue --args '{"issueKey": "PROJ-1"}'
"""

from __future__ import annotations

import asyncio
import importlib
import json
import logging
import sys
from typing import Any

from dev.runtime.dispatcher import ToolDispatcher
from dev.runtime.server import configure_logging

# ---------------------------------------------------------------------------
# Console helpers
# ---------------------------------------------------------------------------

PASS = "\033[32m✓\033[0m"
FAIL = "\033[31m✗\033[0m"
WARN = "\033[33m!\033[0m"


def bold(s: str) -> str:
  return f"\033[1m{s}\033[0m"


def dim(s: str) -> str:
  return f"\033[2m{s}\033[0m"


pass_count = 0
fail_count = 0
warn_count = 0


def _pass(msg: str) -> None:
  global pass_count
  pass_count += 1
  print(f"  {PASS} {msg}")


def _fail(msg: str) -> None:
  global fail_count
  fail_count += 1
  print(f"  {FAIL} {msg}")


def _warn(msg: str) -> None:
  global warn_count
  warn_count += 1
  print(f"  {WARN} {msg}")


def _info(msg: str) -> None:
  print(f"  {dim(msg)}")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def load_dispatcher(skill_name: str) -> ToolDispatcher[Any]:
  """Import skills.<name>.server and build its dispatcher."""
  module = importlib.import_module(f"skills.{skill_name}.server")
  factory = getattr(module, "create_dispatcher", None)
  if factory is None:
    raise ImportError(f"skills.{skill_name}.server must define create_dispatcher()")
  return factory()


def check_catalog(dispatcher: ToolDispatcher[Any]) -> None:
  tools = dispatcher.list_tools()
  if tools:
    _pass(f"{len(tools)} tool(s) registered")
  else:
    _fail("No tools registered")

  for tool in tools:
    if not tool.description:
      _warn(f'Tool "{tool.name}": missing description')
    schema = tool.inputSchema or {}
    if schema.get("type") != "object":
      _fail(f'Tool "{tool.name}": inputSchema must be {{"type": "object", ...}}')
      continue
    props = schema.get("properties", {})
    unknown = [r for r in schema.get("required", []) if r not in props]
    if unknown:
      _fail(f'Tool "{tool.name}": required but not declared: {", ".join(unknown)}')
      continue
    if not dispatcher.has_tool(tool.name):
      _fail(f'Tool "{tool.name}": no handler')
      continue
    _pass(tool.name)


async def call_tool(dispatcher: ToolDispatcher[Any], tool: str, args: dict[str, Any]) -> None:
  try:
    result = await dispatcher.invoke(tool, args)
  finally:
    await dispatcher.aclose()

  print(json.dumps(result.to_envelope(), indent=2, ensure_ascii=False))
  if result.is_error:
    _fail(f"{tool}: returned an error")
  else:
    _pass(f"{tool}: OK")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


async def _run(skill_name: str, tool: str | None, args: dict[str, Any], verbose: bool) -> int:
  global pass_count, fail_count, warn_count
  pass_count = fail_count = warn_count = 0

  print()
  print(bold(f"Testing skill: {skill_name}"))
  print()

  print(bold("Dispatcher"))
  try:
    dispatcher = load_dispatcher(skill_name)
    _pass(f'server name: "{dispatcher.name}"')
  except Exception as exc:
    _fail(f"Failed to load skill: {exc}")
    if verbose:
      import traceback

      traceback.print_exc()
    _print_summary()
    return 1
  print()

  print(bold("Tools"))
  check_catalog(dispatcher)
  print()

  if tool:
    print(bold(f"Call {tool}"))
    _info(f"args: {json.dumps(args)}")
    await call_tool(dispatcher, tool, args)
    print()

  _print_summary()
  return 1 if fail_count > 0 else 0


def _print_summary() -> None:
  print(bold("Summary"))
  print(f"  {PASS} {pass_count} passed   {FAIL} {fail_count} failed   {WARN} {warn_count} warnings")
  print()


def _usage() -> None:
  print(
    "Usage: python -m dev.harness.runner <skill> [--call TOOL [--args JSON]] [--verbose]",
    file=sys.stderr,
  )
  sys.exit(1)


def main() -> None:
  argv = sys.argv[1:]
  verbose = "--verbose" in argv
  skill_name: str | None = None
  tool: str | None = None
  raw_args = "{}"

  it = iter(argv)
  for a in it:
    if a == "--call":
      tool = next(it, None)
    elif a == "--args":
      raw_args = next(it, "{}")
    elif not a.startswith("--") and skill_name is None:
      skill_name = a

  if not skill_name or (tool is None and "--call" in argv):
    _usage()

  try:
    args = json.loads(raw_args)
  except ValueError as exc:
    print(f"--args is not valid JSON: {exc}", file=sys.stderr)
    sys.exit(1)
  if not isinstance(args, dict):
    print("--args must be a JSON object", file=sys.stderr)
    sys.exit(1)

  configure_logging()
  if verbose:
    logging.getLogger().setLevel(logging.DEBUG)

  exit_code = asyncio.run(_run(skill_name, tool, args, verbose))
  sys.exit(exit_code)


if __name__ == "__main__":
  main()
