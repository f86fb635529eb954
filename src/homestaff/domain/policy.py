"""Role-based authorization rules for tasks.

Owners may create, delete, and freely update any task, and see every task
(visibility is global, not partitioned per owner). Maids may update only
tasks assigned to them, and only the fields in
:data:`MAID_UPDATABLE_FIELDS`; other fields in a maid's update are dropped,
not rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from homestaff.domain.types import UserRole

if TYPE_CHECKING:
    from homestaff.domain.models import Task, User

MAID_UPDATABLE_FIELDS: frozenset[str] = frozenset(
    {"status", "notes", "photo_evidence", "completed_at"}
)

# Never writable through an update, whoever asks.
IMMUTABLE_TASK_FIELDS: frozenset[str] = frozenset({"id", "created_by"})


@dataclass(frozen=True)
class AccessDecision:
    """Result of an authorization check."""

    allowed: bool
    reason: str = ""


ALLOW = AccessDecision(allowed=True)


def authorize_create(actor: User) -> AccessDecision:
    if actor.role != UserRole.OWNER:
        return AccessDecision(False, "Only owners can create tasks")
    return ALLOW


def authorize_delete(actor: User) -> AccessDecision:
    if actor.role != UserRole.OWNER:
        return AccessDecision(False, "Only owners can delete tasks")
    return ALLOW


def authorize_update(actor: User, task: Task) -> AccessDecision:
    """Owners may update anything; maids only their own assigned tasks."""
    if actor.role == UserRole.OWNER:
        return ALLOW
    if task.assigned_to is not None and task.assigned_to == actor.id:
        return ALLOW
    return AccessDecision(False, "Cannot update this task")


def filter_update_fields(
    actor: User,
    changes: dict[str, Any],
) -> tuple[dict[str, Any], list[str]]:
    """Intersect *changes* with what *actor* may write.

    Returns ``(kept, dropped)`` where *dropped* lists the field names that
    were silently removed, in request order.
    """
    if actor.role == UserRole.OWNER:
        allowed = None
    else:
        allowed = MAID_UPDATABLE_FIELDS

    kept: dict[str, Any] = {}
    dropped: list[str] = []
    for key, value in changes.items():
        if key in IMMUTABLE_TASK_FIELDS or (allowed is not None and key not in allowed):
            dropped.append(key)
            continue
        kept[key] = value
    return kept, dropped


def sees_all_tasks(actor: User) -> bool:
    """Owners list every task; maids list only tasks assigned to them."""
    return actor.role == UserRole.OWNER
