"""
MySQL skill: read-only queries, query plans and information_schema browsing.

Requires MYSQL_HOST, MYSQL_USER and MYSQL_DATABASE.
"""
