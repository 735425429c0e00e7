"""End-to-end Jira tool tests through the dispatcher, with a fake client."""

from __future__ import annotations

import pytest

from skills.jira.client.jira_client import JiraApiError
from skills.jira.handlers import HANDLERS
from skills.jira.tools import ALL_TOOLS

from .fakes import FakeJiraClient, make_dispatcher

ISSUE = {
  "key": "PROJ-1",
  "id": "10000",
  "self": "https://example.atlassian.net/rest/api/3/issue/10000",
  "fields": {
    "summary": "Login fails",
    "status": {"name": "To Do", "id": "1", "statusCategory": {"name": "New"}},
    "assignee": {"displayName": "Ada", "emailAddress": "ada@example.com", "accountId": "acc-1"},
    "priority": {"name": "High"},
    "issuetype": {"name": "Bug"},
    "project": {"key": "PROJ", "name": "Project"},
    "created": "2025-10-01T10:00:00.000+0000",
    "updated": "2025-10-02T10:00:00.000+0000",
  },
}


@pytest.fixture
def client():
  return FakeJiraClient()


@pytest.fixture
def dispatcher(client):
  return make_dispatcher("jira-mcp-server", ALL_TOOLS, HANDLERS, client)


def test_catalog_matches_handlers():
  names = [t.name for t in ALL_TOOLS]
  assert names == [
    "jira.addWorklog",
    "jira.searchJql",
    "jira.getIssue",
    "jira.getComments",
    "jira.getTransitions",
    "jira.transitionIssue",
  ]
  assert set(names) == set(HANDLERS)


class TestAddWorklog:
  async def test_creates_worklog(self, dispatcher, client):
    client.responses[("POST", "/issue/PROJ-1/worklog")] = {"id": "10001"}
    result = await dispatcher.invoke(
      "jira.addWorklog",
      {
        "issueKey": "PROJ-1",
        "timeSpentSeconds": 3600,
        "started": "2025-10-03T09:00:00+03:00",
        "comment": "Fixed login",
      },
    )

    assert not result.is_error
    assert result.content == (
      "Worklog created on PROJ-1 with 3600s (started=2025-10-03T09:00:00+0300). id=10001"
    )
    method, path, _, body = client.calls[0]
    assert (method, path) == ("POST", "/issue/PROJ-1/worklog")
    assert body["timeSpentSeconds"] == 3600
    assert body["started"] == "2025-10-03T09:00:00+0300"
    assert body["comment"]["content"][0]["content"][0]["text"] == "Fixed login"
    assert "visibility" not in body

  async def test_defaults_started_to_now_and_unknown_id(self, dispatcher, client):
    result = await dispatcher.invoke("jira.addWorklog", {"issueKey": "PROJ-1", "timeSpentSeconds": 60})
    assert result.content.endswith("id=?")
    assert "comment" not in client.calls[0][3]

  async def test_visibility_passed_through(self, dispatcher, client):
    visibility = {"type": "group", "value": "jira-developers"}
    await dispatcher.invoke(
      "jira.addWorklog", {"issueKey": "PROJ-1", "timeSpentSeconds": 60, "visibility": visibility}
    )
    assert client.calls[0][3]["visibility"] == visibility

  @pytest.mark.parametrize("seconds", [0, -10, "3600", True, None])
  async def test_rejects_bad_duration(self, dispatcher, client, seconds):
    result = await dispatcher.invoke("jira.addWorklog", {"issueKey": "PROJ-1", "timeSpentSeconds": seconds})
    assert result.is_error
    assert result.content == "Error: timeSpentSeconds must be a positive number"
    assert client.calls == []

  async def test_rejects_bad_started(self, dispatcher, client):
    result = await dispatcher.invoke(
      "jira.addWorklog", {"issueKey": "PROJ-1", "timeSpentSeconds": 60, "started": "yesterday"}
    )
    assert result.content == "Error: invalid started value: yesterday"
    assert client.calls == []

  async def test_missing_issue_key(self, dispatcher):
    result = await dispatcher.invoke("jira.addWorklog", {"timeSpentSeconds": 60})
    assert result.content == "Error: Missing required parameter: issueKey"


class TestIssues:
  async def test_search_jql(self, dispatcher, client):
    client.responses[("GET", "/search")] = {"total": 1, "issues": [ISSUE]}
    result = await dispatcher.invoke("jira.searchJql", {"jql": "project = PROJ"})

    _, _, params, _ = client.calls[0]
    assert params == {
      "jql": "project = PROJ",
      "maxResults": 25,
      "fields": "summary,status,assignee,timetracking",
    }
    assert result.content.startswith("JQL search results (1 issues found):")
    assert '"status": "To Do"' in result.content
    assert '"assignee": "Ada"' in result.content

  async def test_search_jql_custom_fields(self, dispatcher, client):
    await dispatcher.invoke(
      "jira.searchJql", {"jql": "assignee = currentUser()", "maxResults": 5, "fields": ["summary"]}
    )
    _, _, params, _ = client.calls[0]
    assert params["maxResults"] == 5
    assert params["fields"] == "summary"

  async def test_get_issue(self, dispatcher, client):
    client.responses[("GET", "/issue/PROJ-1")] = ISSUE
    result = await dispatcher.invoke(
      "jira.getIssue", {"issueKey": "PROJ-1", "expand": ["renderedFields", "changelog"]}
    )
    _, path, params, _ = client.calls[0]
    assert path == "/issue/PROJ-1"
    assert params["expand"] == "renderedFields,changelog"
    assert "summary" in params["fields"]
    assert result.content.startswith("Issue PROJ-1:")
    assert '"statusCategory": "New"' in result.content

  async def test_get_comments_defaults(self, dispatcher, client):
    client.responses[("GET", "/issue/PROJ-1/comment")] = {
      "total": 1,
      "maxResults": 50,
      "comments": [{"id": "5", "author": {"displayName": "Ada"}, "body": "Looks good"}],
    }
    result = await dispatcher.invoke("jira.getComments", {"issueKey": "PROJ-1"})
    _, _, params, _ = client.calls[0]
    assert params == {"maxResults": 50, "orderBy": "created"}
    assert result.content.startswith("Comments on PROJ-1 (1 total):")
    assert '"displayName": "Ada"' in result.content

  async def test_api_error_becomes_error_result(self, dispatcher, client):
    client.responses[("GET", "/issue/NOPE-1")] = JiraApiError(404, "Not Found", "Issue does not exist")
    result = await dispatcher.invoke("jira.getIssue", {"issueKey": "NOPE-1"})
    assert result.is_error
    assert result.content == "Error: Jira API 404 Not Found: Issue does not exist"


class TestTransitions:
  async def test_get_transitions(self, dispatcher, client):
    client.responses[("GET", "/issue/PROJ-1/transitions")] = {
      "transitions": [{"id": "31", "name": "Done", "to": {"id": "3", "name": "Done"}}]
    }
    result = await dispatcher.invoke("jira.getTransitions", {"issueKey": "PROJ-1"})
    assert result.content.startswith("Available transitions for PROJ-1:")
    assert '"id": "31"' in result.content
    assert "jira.transitionIssue" in result.content

  async def test_transition_issue(self, dispatcher, client):
    client.responses[("GET", "/issue/PROJ-1")] = {"fields": {"status": {"name": "Done"}}}
    result = await dispatcher.invoke(
      "jira.transitionIssue",
      {"issueKey": "PROJ-1", "transitionId": 31, "comment": "Shipped", "fields": {"resolution": {"name": "Fixed"}}},
    )

    post, get = client.calls
    assert post[:2] == ("POST", "/issue/PROJ-1/transitions")
    assert post[3]["transition"] == {"id": "31"}
    assert post[3]["fields"] == {"resolution": {"name": "Fixed"}}
    assert post[3]["update"]["comment"][0]["add"]["body"]["type"] == "doc"
    assert get[:3] == ("GET", "/issue/PROJ-1", {"fields": "status"})
    assert "New status: Done" in result.content

  async def test_transition_requires_id(self, dispatcher, client):
    result = await dispatcher.invoke("jira.transitionIssue", {"issueKey": "PROJ-1"})
    assert result.content == "Error: Missing required parameter: transitionId"
    assert client.calls == []
