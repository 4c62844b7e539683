"""Database layer for ridelog application."""

from ridelog.database.base import Database
from ridelog.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
