"""
PostgreSQL skill: read-only queries (SELECT / WITH), query plans and catalog browsing.

Requires POSTGRES_HOST, POSTGRES_USER and POSTGRES_DATABASE. Set POSTGRES_SSL=true for TLS.
"""
