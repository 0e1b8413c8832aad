"""Persistence layer: the abstract Database and its SQLAlchemy implementation."""

from pocketbook.database.base import Database
from pocketbook.database.factories import create_sqlite_database
from pocketbook.database.sqlalchemy_db import SQLAlchemyDatabase

__all__ = ["Database", "SQLAlchemyDatabase", "create_sqlite_database"]
