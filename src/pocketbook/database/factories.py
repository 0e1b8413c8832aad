"""Database factory functions for creating database instances."""

import logging
import os
from pathlib import Path
from typing import Optional

from pocketbook.database.sqlalchemy_db import SQLAlchemyDatabase

logger = logging.getLogger(__name__)

DB_PATH_ENV_VAR = "POCKETBOOK_DB_PATH"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Pick the SQLite file: explicit path, then POCKETBOOK_DB_PATH, then ~/.pocketbook/pocketbook.db."""
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV_VAR)
    if database_path is None:
        return Path.home() / ".pocketbook" / "pocketbook.db"
    return Path(database_path).expanduser()


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance, creating its directory if needed.

    Args:
        database_path: Path to SQLite database file, see resolve_database_path

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    path = resolve_database_path(database_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.debug("Using SQLite database at %s", path)
    return SQLAlchemyDatabase(f"sqlite:///{path}")
