from .pg_client import PostgresClient

__all__ = ["PostgresClient"]
