"""Entity models for users, tasks, and notifications.

Entities are frozen snapshots handed out by the store. They reference each
other by id only, so a caller holding one never sees stale embedded data.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict

from homestaff.domain.lifecycle import TaskStatus
from homestaff.domain.types import Language, NotificationType, TaskPriority, UserRole


def as_utc(value: datetime | None) -> datetime | None:
    """Normalize *value* to an aware UTC datetime (naive input is taken as UTC)."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class User(BaseModel):
    """A registered account."""

    model_config = ConfigDict(frozen=True)

    id: str
    username: str
    password_hash: str
    name: str
    role: UserRole
    language: Language = Language.EN
    avatar_url: str | None = None

    @property
    def is_owner(self) -> bool:
        return self.role == UserRole.OWNER

    def public_view(self) -> dict[str, Any]:
        """Serializable payload without the credential."""
        return self.model_dump(mode="json", exclude={"password_hash"})


class Task(BaseModel):
    """A unit of household work."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    assigned_to: str | None = None
    created_by: str
    deadline: UtcDatetime | None = None
    completed_at: UtcDatetime | None = None
    photo_evidence: str | None = None
    notes: str | None = None

    def sort_key(self) -> float:
        """Deadline as epoch seconds; a missing deadline counts as the epoch."""
        return self.deadline.timestamp() if self.deadline else 0.0

    def view(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class Notification(BaseModel):
    """A read-tracked message addressed to one user."""

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    title: str
    message: str
    type: NotificationType
    read: bool = False
    created_at: UtcDatetime

    def view(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
