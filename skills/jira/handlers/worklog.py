"""Worklog domain tool handlers."""

from __future__ import annotations

from typing import Any

from ...common.errors import ValidationError
from ...common.validation import opt_object, opt_string, req_string
from ..client.jira_client import JiraClient
from ..helpers import adf_document, issue_path, normalize_started, now_started


async def add_worklog(client: JiraClient, args: dict[str, Any]) -> str:
  issue_key = req_string(args, "issueKey")
  seconds = args.get("timeSpentSeconds")
  if isinstance(seconds, bool) or not isinstance(seconds, (int, float)) or seconds <= 0:
    raise ValidationError("timeSpentSeconds must be a positive number")
  seconds = int(seconds)

  started_arg = opt_string(args, "started")
  started = normalize_started(started_arg) if started_arg else now_started()
  comment = opt_string(args, "comment")
  visibility = opt_object(args, "visibility")

  body: dict[str, Any] = {"timeSpentSeconds": seconds, "started": started}
  if comment:
    body["comment"] = adf_document(comment)
  if visibility:
    body["visibility"] = visibility

  data = await client.post(issue_path(issue_key, "worklog"), body)
  worklog_id = data.get("id") or "?"
  return f"Worklog created on {issue_key} with {seconds}s (started={started}). id={worklog_id}"
