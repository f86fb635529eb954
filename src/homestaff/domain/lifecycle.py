"""Task status lifecycle and completion-edge detection.

The transition map is advisory: the store accepts any status value, and the
map documents the protocol the clients expose (pending may go straight to
completed; completed has no way back in normal flow).

Completion is edge-triggered. Only an update that moves a task from a
non-completed status into ``completed`` stamps ``completed_at`` and fires
the completion notification.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """Lifecycle status for tasks."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


# --- Transition map ---

TASK_TRANSITIONS: dict[str, list[str]] = {
    "pending": ["in_progress", "completed"],
    "in_progress": ["completed"],
    "completed": [],
}


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]] = TASK_TRANSITIONS,
) -> bool:
    """Check if transitioning from *current* to *target* is allowed."""
    allowed = transitions.get(current, [])
    return target in allowed


def is_completion_edge(previous: str, new: str) -> bool:
    """True when a status change crosses into ``completed``."""
    return previous != TaskStatus.COMPLETED and new == TaskStatus.COMPLETED


@dataclass(frozen=True)
class TransitionPlan:
    """Outcome of planning a task update against the lifecycle rules."""

    changes: dict[str, Any] = field(default_factory=dict)
    completed_edge: bool = False
    advisory: str | None = None


def plan_update(
    current_status: str,
    changes: dict[str, Any],
    *,
    now: datetime,
) -> TransitionPlan:
    """Work out the effective changes for an update of a task in *current_status*.

    On a completion edge ``completed_at`` is set to *now* unless the caller
    supplied a value. Leaving ``completed`` keeps the existing timestamp.
    A transition outside :data:`TASK_TRANSITIONS` is still applied; the plan
    carries an advisory message for it.
    """
    planned = dict(changes)
    new_status = planned.get("status")
    if new_status is None or str(new_status) == current_status:
        return TransitionPlan(changes=planned)

    new_status = str(new_status)
    advisory: str | None = None
    if not is_valid_transition(current_status, new_status):
        advisory = f"Unusual status transition: {current_status} -> {new_status}"

    edge = is_completion_edge(current_status, new_status)
    if edge and planned.get("completed_at") is None:
        planned["completed_at"] = now

    return TransitionPlan(changes=planned, completed_edge=edge, advisory=advisory)
