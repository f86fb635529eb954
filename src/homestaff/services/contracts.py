"""Typed payload contracts for service and adapter boundaries.

These models validate operation payload shapes before they leave the
service layer, so a renamed key (``items`` vs ``tasks``) fails fast in
tests rather than in a client.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="json")


class UserItem(BaseModel):
    """Public view of a user. Never carries the password hash."""

    model_config = ConfigDict(extra="forbid")

    id: str
    username: str
    name: str
    role: str
    language: str
    avatar_url: str | None = None


class TaskItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    title: str
    description: str | None = None
    status: str
    priority: str
    assigned_to: str | None = None
    created_by: str
    deadline: str | None = None
    completed_at: str | None = None
    photo_evidence: str | None = None
    notes: str | None = None


class NotificationItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    user_id: str
    title: str
    message: str
    type: str
    read: bool
    created_at: str


class SessionData(BaseModel):
    """Payload contract for ``register`` and ``login``."""

    user: UserItem
    session_token: str


class UserData(BaseModel):
    """Payload contract for ``current_user`` and ``update_language``."""

    user: UserItem


class UserListData(BaseModel):
    """Payload contract for ``list_maids``."""

    count: int
    items: list[UserItem]


class TaskData(BaseModel):
    """Payload contract for ``get_task`` and ``create_task``."""

    task: TaskItem


class TaskUpdateData(BaseModel):
    """Payload contract for ``update_task``."""

    task: TaskItem
    fields_changed: list[str]
    completed: bool


class TaskListData(BaseModel):
    """Payload contract for ``list_tasks`` and ``list_my_tasks``."""

    scope: str
    count: int
    items: list[TaskItem]


class TaskDeleteData(BaseModel):
    id: str
    message: str


class NotificationData(BaseModel):
    notification: NotificationItem


class NotificationListData(BaseModel):
    """Payload contract for ``list_notifications``."""

    count: int
    unread: int
    items: list[NotificationItem]


class MarkAllReadData(BaseModel):
    user_id: str
    count: int
    message: str
