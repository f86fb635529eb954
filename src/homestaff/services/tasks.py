"""TaskService — task CRUD behind role-based authorization.

Pipeline for mutations: AUTHENTICATE → AUTHORIZE → VALIDATE → APPLY → RESPOND.
Notifications are not created here; the store emits them inside the same
transaction as the task write.
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from homestaff.domain.policy import (
    authorize_create,
    authorize_delete,
    authorize_update,
    filter_update_fields,
    sees_all_tasks,
)
from homestaff.domain.schemas import CreateTaskData, UpdateTaskData, first_error_message
from homestaff.domain.types import UserRole
from homestaff.services.base import BaseService
from homestaff.services.contracts import (
    TaskData,
    TaskDeleteData,
    TaskListData,
    TaskUpdateData,
    dump_validated,
)
from homestaff.services.result import ErrorCode, ServiceResult

log = structlog.get_logger(__name__)

TASK_NOT_FOUND = "Task not found"
BAD_ASSIGNEE = "Assignee must be an existing maid"


class TaskService(BaseService):
    """Create, read, update, and delete household tasks."""

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_tasks(self, session_token: str | None) -> ServiceResult:
        """All tasks for an owner; only the caller's assigned tasks for a maid.

        Ordered by deadline, latest first. Tasks without a deadline sort last.
        """
        op = "list_tasks"
        actor = self._authenticate(op, session_token)
        if isinstance(actor, ServiceResult):
            return actor

        if sees_all_tasks(actor):
            scope, found = "all", self._store.list_tasks()
        else:
            scope, found = "assigned", self._store.list_tasks_by_assignee(actor.id)
        return self._task_list(op, scope, found)

    def list_my_tasks(self, session_token: str | None) -> ServiceResult:
        """Tasks assigned to the caller, whatever their role."""
        op = "list_my_tasks"
        actor = self._authenticate(op, session_token)
        if isinstance(actor, ServiceResult):
            return actor
        return self._task_list(op, "assigned", self._store.list_tasks_by_assignee(actor.id))

    def get_task(self, session_token: str | None, task_id: str) -> ServiceResult:
        op = "get_task"
        actor = self._authenticate(op, session_token)
        if isinstance(actor, ServiceResult):
            return actor

        task = self._store.get_task(task_id)
        if task is None:
            return ServiceResult.failure(op, ErrorCode.NOT_FOUND, TASK_NOT_FOUND, id=task_id)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(TaskData, {"task": task.view()}),
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create_task(self, session_token: str | None, fields: dict[str, Any]) -> ServiceResult:
        """Create a task (owners only). The assignee, if any, is notified."""
        op = "create_task"
        warnings: list[str] = []
        actor = self._authenticate(op, session_token)
        if isinstance(actor, ServiceResult):
            return actor

        decision = authorize_create(actor)
        if not decision.allowed:
            return ServiceResult.failure(op, ErrorCode.FORBIDDEN, decision.reason)

        try:
            data = CreateTaskData.model_validate(fields)
        except ValidationError as exc:
            return ServiceResult.failure(op, ErrorCode.VALIDATION_FAILED, first_error_message(exc))

        if data.assigned_to and not self._is_maid(data.assigned_to):
            return ServiceResult.failure(
                op, ErrorCode.VALIDATION_FAILED, BAD_ASSIGNEE, assigned_to=data.assigned_to
            )

        task = self._store.create_task(data.model_dump(), created_by=actor.id)
        log.info(
            "task.created",
            task_id=task.id,
            actor_id=actor.id,
            assigned_to=task.assigned_to,
            notified=1 if task.assigned_to else 0,
        )

        self._dispatch_event(
            "post_task_create",
            {
                "task_id": task.id,
                "title": task.title,
                "created_by": task.created_by,
                "assigned_to": task.assigned_to,
            },
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(TaskData, {"task": task.view()}),
            warnings=warnings,
        )

    def update_task(
        self,
        session_token: str | None,
        task_id: str,
        fields: dict[str, Any],
    ) -> ServiceResult:
        """Apply a partial update.

        Owners may change any field but ``id`` and ``created_by``. A maid may
        change only ``status``, ``notes``, ``photo_evidence`` and
        ``completed_at`` of a task assigned to them; any other field in the
        request is dropped and reported as a warning. Moving a task into
        ``completed`` notifies every owner once.
        """
        op = "update_task"
        warnings: list[str] = []
        actor = self._authenticate(op, session_token)
        if isinstance(actor, ServiceResult):
            return actor

        current = self._store.get_task(task_id)
        if current is None:
            return ServiceResult.failure(op, ErrorCode.NOT_FOUND, TASK_NOT_FOUND, id=task_id)

        decision = authorize_update(actor, current)
        if not decision.allowed:
            return ServiceResult.failure(op, ErrorCode.FORBIDDEN, decision.reason, id=task_id)

        try:
            data = UpdateTaskData.model_validate(fields)
        except ValidationError as exc:
            return ServiceResult.failure(op, ErrorCode.VALIDATION_FAILED, first_error_message(exc))

        kept, dropped = filter_update_fields(actor, data.changes())
        # id and created_by are not schema fields, so report them here.
        dropped.extend(
            key for key in fields if key in ("id", "created_by") and key not in dropped
        )
        for name in dropped:
            warnings.append(f"Ignored field not writable by {actor.role}: {name}")

        if kept.get("assigned_to") and not self._is_maid(kept["assigned_to"]):
            return ServiceResult.failure(
                op, ErrorCode.VALIDATION_FAILED, BAD_ASSIGNEE, assigned_to=kept["assigned_to"]
            )

        outcome = self._store.update_task(task_id, kept)
        if outcome is None:
            return ServiceResult.failure(op, ErrorCode.NOT_FOUND, TASK_NOT_FOUND, id=task_id)
        if outcome.advisory:
            warnings.append(outcome.advisory)

        updated, completed = outcome.task, outcome.completed
        log.info(
            "task.updated",
            task_id=task_id,
            actor_id=actor.id,
            fields=sorted(kept),
            previous_status=str(outcome.previous_status),
            completed=completed,
        )

        self._dispatch_event(
            "post_task_update",
            {
                "task_id": task_id,
                "fields_changed": list(kept),
                "status": str(updated.status),
                "completed": completed,
            },
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                TaskUpdateData,
                {"task": updated.view(), "fields_changed": list(kept), "completed": completed},
            ),
            warnings=warnings,
        )

    def delete_task(self, session_token: str | None, task_id: str) -> ServiceResult:
        """Remove a task (owners only). Its notifications are left in place."""
        op = "delete_task"
        warnings: list[str] = []
        actor = self._authenticate(op, session_token)
        if isinstance(actor, ServiceResult):
            return actor

        decision = authorize_delete(actor)
        if not decision.allowed:
            return ServiceResult.failure(op, ErrorCode.FORBIDDEN, decision.reason, id=task_id)

        if not self._store.delete_task(task_id):
            return ServiceResult.failure(op, ErrorCode.NOT_FOUND, TASK_NOT_FOUND, id=task_id)

        log.info("task.deleted", task_id=task_id, actor_id=actor.id)
        self._dispatch_event("post_task_delete", {"task_id": task_id}, warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                TaskDeleteData, {"id": task_id, "message": "Task deleted successfully"}
            ),
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _is_maid(self, user_id: str) -> bool:
        user = self._store.get_user(user_id)
        return user is not None and user.role == UserRole.MAID

    @staticmethod
    def _task_list(op: str, scope: str, found: list[Any]) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                TaskListData,
                {"scope": scope, "count": len(found), "items": [t.view() for t in found]},
            ),
        )
