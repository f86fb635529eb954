"""Classification enums for users, tasks, and notifications."""

from __future__ import annotations

from enum import StrEnum


class UserRole(StrEnum):
    """Account roles. Owners assign work, maids carry it out."""

    OWNER = "owner"
    MAID = "maid"


class TaskPriority(StrEnum):
    """Task priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Language(StrEnum):
    """Interface languages a user can pick."""

    EN = "en"
    AR = "ar"
    HI = "hi"
    ID = "id"
    FIL = "fil"
    UR = "ur"
    TW = "tw"
    AM = "am"


class NotificationType(StrEnum):
    """Kinds of notification a user can receive."""

    TASK_ASSIGNED = "task_assigned"
    TASK_COMPLETED = "task_completed"
    REMINDER = "reminder"
    GENERAL = "general"
