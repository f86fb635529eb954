"""Database layer — SQLAlchemy Core tables on an in-memory SQLite engine."""

from homestaff.infrastructure.database.engine import create_memory_engine
from homestaff.infrastructure.database.schema import (
    event_log,
    metadata,
    notifications,
    tasks,
    users,
)

__all__ = [
    "create_memory_engine",
    "event_log",
    "metadata",
    "notifications",
    "tasks",
    "users",
]
