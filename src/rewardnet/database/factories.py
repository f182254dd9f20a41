"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from rewardnet.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks REWARDNET_DB_PATH
            environment variable, then defaults to ~/.rewardnet/rewardnet.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("REWARDNET_DB_PATH")

    if database_path is None:
        # Default to ~/.rewardnet/rewardnet.db
        home = Path.home()
        db_dir = home / ".rewardnet"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "rewardnet.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)


def create_database(
    database_url: Optional[str] = None, database_path: Optional[str] = None
) -> SQLAlchemyDatabase:
    """Create a database instance from a SQLAlchemy URL.

    Args:
        database_url: Any SQLAlchemy URL. If None, checks REWARDNET_DATABASE_URL
            environment variable, then falls back to SQLite
        database_path: SQLite file used for the fallback (see create_sqlite_database)

    Returns:
        SQLAlchemyDatabase instance
    """
    if database_url is None:
        database_url = os.environ.get("REWARDNET_DATABASE_URL")

    if database_url is None:
        return create_sqlite_database(database_path=database_path)

    return SQLAlchemyDatabase(database_url)
