"""In-memory SQLite engine setup.

The database lives for the lifetime of the process. A single shared
connection (``StaticPool``) keeps every caller on the same in-memory
database; the store serializes access to it with its own lock.

SQLAlchemy Core (not ORM) is used: entities are frozen pydantic models,
so there is nothing for an identity map to track.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from homestaff.infrastructure.database.schema import metadata


def create_memory_engine() -> Engine:
    """Create an in-memory SQLite engine with foreign keys enabled and all tables created."""
    engine = create_engine(
        "sqlite://",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    metadata.create_all(engine)
    return engine
