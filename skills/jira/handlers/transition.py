"""Workflow transition tool handlers."""

from __future__ import annotations

from typing import Any

from ...common.helpers import json_block
from ...common.validation import opt_object, opt_string, req_id, req_string
from ..client.jira_client import JiraClient
from ..helpers import adf_document, format_transition, issue_path

TRANSITIONS_HINT = (
  "Tip: pass the 'id' of the transition you want to jira.transitionIssue. "
  "If there is no direct transition to the target status, go through the "
  "intermediate transitions first."
)


async def get_transitions(client: JiraClient, args: dict[str, Any]) -> str:
  issue_key = req_string(args, "issueKey")
  expand = opt_string(args, "expand")

  res = await client.get(issue_path(issue_key, "transitions"), {"expand": expand})
  transitions = [format_transition(t) for t in res.get("transitions") or []]
  return (
    f"Available transitions for {issue_key}:\n\n"
    + json_block({"transitions": transitions, "expand": res.get("expand")})
    + f"\n\n{TRANSITIONS_HINT}"
  )


async def transition_issue(client: JiraClient, args: dict[str, Any]) -> str:
  issue_key = req_string(args, "issueKey")
  transition_id = req_id(args, "transitionId")
  fields = opt_object(args, "fields")
  comment = opt_string(args, "comment")

  body: dict[str, Any] = {"transition": {"id": transition_id}}
  if fields:
    body["fields"] = fields
  if comment:
    body["update"] = {"comment": [{"add": {"body": adf_document(comment)}}]}

  await client.post(issue_path(issue_key, "transitions"), body)

  updated = await client.get(issue_path(issue_key), {"fields": "status"})
  status = ((updated.get("fields") or {}).get("status") or {}).get("name")
  return (
    f"Issue {issue_key} transitioned successfully.\n\n"
    f"New status: {status}\n\n"
    "If you need a specific status with no direct transition, use "
    "jira.getTransitions to find the intermediate steps."
  )
