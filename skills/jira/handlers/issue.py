"""Issue domain tool handlers."""

from __future__ import annotations

from typing import Any

from ...common.helpers import json_block
from ...common.validation import opt_number, opt_string, opt_string_list, req_string
from ..client.jira_client import JiraClient
from ..helpers import format_comment, format_issue, format_search_issue, issue_path

DEFAULT_SEARCH_FIELDS = ["summary", "status", "assignee", "timetracking"]
ISSUE_FIELDS = "summary,description,status,assignee,created,updated,priority,issuetype,project"


async def search_jql(client: JiraClient, args: dict[str, Any]) -> str:
  jql = req_string(args, "jql")
  max_results = opt_number(args, "maxResults", 25)
  fields = opt_string_list(args, "fields") or DEFAULT_SEARCH_FIELDS

  res = await client.get(
    "/search",
    {"jql": jql, "maxResults": max_results, "fields": ",".join(fields)},
  )
  issues = [format_search_issue(it) for it in res.get("issues") or []]
  total = res.get("total", len(issues))
  return f"JQL search results ({total} issues found):\n\n" + json_block(
    {"total": total, "issues": issues}
  )


async def get_issue(client: JiraClient, args: dict[str, Any]) -> str:
  issue_key = req_string(args, "issueKey")
  expand = opt_string_list(args, "expand")

  params: dict[str, Any] = {"fields": ISSUE_FIELDS}
  if expand:
    params["expand"] = ",".join(expand)

  res = await client.get(issue_path(issue_key), params)
  return f"Issue {issue_key}:\n\n" + json_block(format_issue(res))


async def get_comments(client: JiraClient, args: dict[str, Any]) -> str:
  issue_key = req_string(args, "issueKey")
  max_results = opt_number(args, "maxResults", 50)
  order_by = opt_string(args, "orderBy") or "created"

  res = await client.get(
    issue_path(issue_key, "comment"),
    {"maxResults": max_results, "orderBy": order_by},
  )
  comments = [format_comment(c) for c in res.get("comments") or []]
  total = res.get("total", len(comments))
  return f"Comments on {issue_key} ({total} total):\n\n" + json_block(
    {"total": total, "maxResults": res.get("maxResults"), "comments": comments}
  )
