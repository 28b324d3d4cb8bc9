"""SQLAlchemy engine helpers for the SQL-backed account directory.

The directory lives in an in-memory SQLite database for the lifetime of
the session. ``StaticPool`` keeps a single connection so every checkout
sees the same database.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool


IN_MEMORY_SQLITE_URL = "sqlite://"


def create_directory_engine(db_url: str = IN_MEMORY_SQLITE_URL) -> Engine:
    """Create the engine backing a SQL account directory.

    Args:
        db_url: SQLite URL; defaults to a private in-memory database.

    Returns:
        Engine: Engine sharing one connection across threads.
    """
    return create_engine(
        db_url,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        future=True,
    )


__all__ = ["IN_MEMORY_SQLITE_URL", "create_directory_engine"]
