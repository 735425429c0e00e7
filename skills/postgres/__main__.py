"""
PostgreSQL skill entry point: starts the MCP server on stdio.

Run with: python -m skills.postgres
"""

from __future__ import annotations

from dev.runtime.server import run_skill

from .server import create_dispatcher


def main() -> None:
  run_skill(create_dispatcher)


if __name__ == "__main__":
  main()
