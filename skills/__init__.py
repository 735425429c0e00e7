"""MCP adapter skills: Jira, MySQL and PostgreSQL."""
