"""Handler table: maps Jira tool names to handler functions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import issue, transition, worklog

if TYPE_CHECKING:
  from dev.runtime.dispatcher import Handler

  from ..client.jira_client import JiraClient

HANDLERS: dict[str, Handler[JiraClient]] = {
  "jira.addWorklog": worklog.add_worklog,
  "jira.searchJql": issue.search_jql,
  "jira.getIssue": issue.get_issue,
  "jira.getComments": issue.get_comments,
  "jira.getTransitions": transition.get_transitions,
  "jira.transitionIssue": transition.transition_issue,
}
