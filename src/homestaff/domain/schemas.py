"""Input schemas for the request operations.

Each schema validates one operation's raw payload. Unknown keys are ignored.
Validation is fail-fast at the boundary: callers report only the first
error, via :func:`first_error_message`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from homestaff.domain.lifecycle import TaskStatus
from homestaff.domain.models import UtcDatetime
from homestaff.domain.types import Language, TaskPriority, UserRole

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 4
NAME_MIN_LENGTH = 2


def _min_length(value: str, minimum: int, label: str) -> str:
    if len(value) < minimum:
        msg = f"{label} must be at least {minimum} characters"
        raise ValueError(msg)
    return value


class LoginData(BaseModel):
    """Payload for ``login``."""

    model_config = ConfigDict(extra="ignore")

    username: str
    password: str
    role: UserRole

    @field_validator("username")
    @classmethod
    def _check_username(cls, v: str) -> str:
        return _min_length(v, USERNAME_MIN_LENGTH, "Username")

    @field_validator("password")
    @classmethod
    def _check_password(cls, v: str) -> str:
        return _min_length(v, PASSWORD_MIN_LENGTH, "Password")


class RegisterData(LoginData):
    """Payload for ``register``."""

    name: str

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        return _min_length(v, NAME_MIN_LENGTH, "Name")


class CreateTaskData(BaseModel):
    """Payload for ``create_task``."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(default="", validate_default=True)
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    assigned_to: str | None = None
    deadline: UtcDatetime | None = None
    notes: str | None = None

    @field_validator("title")
    @classmethod
    def _check_title(cls, v: str) -> str:
        if not v:
            msg = "Title is required"
            raise ValueError(msg)
        return v


class UpdateTaskData(BaseModel):
    """Payload for ``update_task``. Only fields actually sent are applied."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    assigned_to: str | None = None
    deadline: UtcDatetime | None = None
    completed_at: UtcDatetime | None = None
    photo_evidence: str | None = None
    notes: str | None = None

    @field_validator("title")
    @classmethod
    def _check_title(cls, v: str | None) -> str:
        if not v:
            msg = "Title cannot be empty"
            raise ValueError(msg)
        return v

    @field_validator("description", "assigned_to", "photo_evidence", "notes")
    @classmethod
    def _blank_to_none(cls, v: str | None) -> str | None:
        # Same as create: an empty string clears the field.
        return v or None

    @field_validator("status", "priority")
    @classmethod
    def _not_null(cls, v: Any) -> Any:
        if v is None:
            msg = "Field cannot be null"
            raise ValueError(msg)
        return v

    def changes(self) -> dict[str, Any]:
        """Fields the caller actually sent, as python values."""
        return self.model_dump(exclude_unset=True)


class LanguageData(BaseModel):
    """Payload for ``update_language``."""

    model_config = ConfigDict(extra="ignore")

    language: Language


def first_error_message(exc: ValidationError) -> str:
    """Return one human-readable message for the first validation error."""
    errors = exc.errors()
    if not errors:
        return "Validation failed"
    first = errors[0]
    ctx = first.get("ctx") or {}
    if first["type"] == "value_error" and "error" in ctx:
        return str(ctx["error"])
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return f"{loc}: {first['msg']}" if loc else str(first["msg"])
