from .mysql_client import MySQLClient

__all__ = ["MySQLClient"]
