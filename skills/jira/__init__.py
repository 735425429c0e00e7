"""
Jira Cloud skill: worklogs, JQL search, issues, comments and workflow transitions.

Requires JIRA_BASE_URL, JIRA_EMAIL and JIRA_API_TOKEN.
"""
