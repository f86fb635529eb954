"""SQLAlchemy Core table definitions.

One table per entity kind. Timestamps are stored as ISO 8601 text in UTC
and parsed back into aware datetimes by the entity models.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
)

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Text, primary_key=True),
    Column("username", Text, nullable=False, unique=True),
    Column("password_hash", Text, nullable=False),
    Column("name", Text, nullable=False),
    Column("role", Text, nullable=False),
    Column("language", Text, nullable=False, default="en", server_default="en"),
    Column("avatar_url", Text),
)

tasks = Table(
    "tasks",
    metadata,
    Column("id", Text, primary_key=True),
    Column("title", Text, nullable=False),
    Column("description", Text),
    Column("status", Text, nullable=False, default="pending", server_default="pending"),
    Column("priority", Text, nullable=False, default="medium", server_default="medium"),
    Column("assigned_to", Text, ForeignKey("users.id")),
    Column("created_by", Text, ForeignKey("users.id"), nullable=False),
    Column("deadline", Text),
    Column("completed_at", Text),
    Column("photo_evidence", Text),
    Column("notes", Text),
    Index("ix_tasks_assigned_to", "assigned_to"),
    Index("ix_tasks_created_by", "created_by"),
)

notifications = Table(
    "notifications",
    metadata,
    Column("id", Text, primary_key=True),
    Column("user_id", Text, ForeignKey("users.id"), nullable=False),
    Column("title", Text, nullable=False),
    Column("message", Text, nullable=False),
    Column("type", Text, nullable=False),
    Column("read", Integer, nullable=False, default=0, server_default="0"),
    Column("created_at", Text, nullable=False),
    Index("ix_notifications_user_id", "user_id"),
)

event_log = Table(
    "event_log",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("hook_name", Text, nullable=False),
    Column("payload", Text, nullable=False),  # JSON
    Column("status", Text, nullable=False),  # pending | completed | failed | dead_letter
    Column("retries", Integer, default=0, server_default="0"),
    Column("error", Text),
    Column("created", Text, nullable=False),
    Column("completed", Text),
)
