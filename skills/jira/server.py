"""
Jira skill wiring: tool catalog + handlers + lazily built client.
"""

from __future__ import annotations

import logging

from dev.runtime.dispatcher import ToolDispatcher

from .client.jira_client import JiraClient
from .config import JiraConfig
from .handlers import HANDLERS
from .tools import ALL_TOOLS

log = logging.getLogger("skill.jira.server")

SERVER_NAME = "jira-mcp-server"


async def connect() -> JiraClient:
  """Build the client from the environment. Raises before any network call if unset."""
  config = JiraConfig.from_env()
  log.info("Using Jira site %s as %s", config.base_url, config.email)
  return JiraClient(config)


def create_dispatcher() -> ToolDispatcher[JiraClient]:
  return ToolDispatcher(SERVER_NAME, ALL_TOOLS, HANDLERS, connect)
