from .jira_client import API_PREFIX, JiraApiError, JiraClient, basic_auth_header

__all__ = ["API_PREFIX", "JiraApiError", "JiraClient", "basic_auth_header"]
