"""BaseService — shared foundation for homestaff services.

Every service receives a :class:`Workspace` at construction time and reads
and writes exclusively through ``self._store``. Session resolution and
event dispatch live here so each operation handles them the same way.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from homestaff.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from homestaff.domain.models import User
    from homestaff.infrastructure.store import EntityStore
    from homestaff.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)

NOT_AUTHENTICATED = "Not authenticated"


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class TaskService(BaseService):
            def get_task(self, session_token, task_id) -> ServiceResult:
                actor = self._authenticate("get_task", session_token)
                if isinstance(actor, ServiceResult):
                    return actor
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @property
    def _store(self) -> EntityStore:
        return self._workspace.store

    def _authenticate(self, op: str, session_token: str | None) -> User | ServiceResult:
        """Resolve the session to its user, or return the failure to hand back."""
        user_id = self._workspace.sessions.resolve(session_token)
        if user_id is None:
            return ServiceResult.failure(op, ErrorCode.NOT_AUTHENTICATED, NOT_AUTHENTICATED)
        user = self._store.get_user(user_id)
        if user is None:
            return ServiceResult.failure(op, ErrorCode.NOT_AUTHENTICATED, "User not found")
        return user

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Dispatch a lifecycle event. No-op if event bus not initialized.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        bus = self._workspace.event_bus
        if bus is None:
            return
        try:
            delivered = bus.dispatch(hook_name, payload)
        except Exception:
            logger.debug("Event dispatch failed for %s", hook_name, exc_info=True)
            delivered = False
        if not delivered:
            warnings.append(f"Event dispatch failed for {hook_name}")
