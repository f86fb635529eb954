"""NotificationDispatcher — notifications derived from task events.

The dispatcher is owned by the :class:`~homestaff.infrastructure.store.EntityStore`
and writes through it. When the store calls it from inside a task mutation
it passes its open connection, so the notification commits (or rolls back)
together with the mutation that caused it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from homestaff.domain.types import NotificationType

if TYPE_CHECKING:
    from sqlalchemy import Connection

    from homestaff.domain.models import Notification
    from homestaff.infrastructure.store import EntityStore

logger = logging.getLogger(__name__)

ASSIGNED_TITLE = "New Task Assigned"
ASSIGNED_MESSAGE = "You have been assigned '{title}'"
COMPLETED_TITLE = "Task Completed"
COMPLETED_MESSAGE = "'{title}' has been marked as completed"


class NotificationDispatcher:
    """Creates notifications as side effects and manages read state."""

    def __init__(self, store: EntityStore) -> None:
        self._store = store

    def notify_assigned(
        self,
        maid_id: str,
        task_title: str,
        *,
        conn: Connection | None = None,
    ) -> Notification:
        """Tell *maid_id* they were given the task titled *task_title*."""
        notification = self._store.create_notification(
            user_id=maid_id,
            title=ASSIGNED_TITLE,
            message=ASSIGNED_MESSAGE.format(title=task_title),
            type=NotificationType.TASK_ASSIGNED,
            conn=conn,
        )
        logger.debug("Assignment notification %s -> %s", notification.id, maid_id)
        return notification

    def notify_completed(
        self,
        owner_ids: Iterable[str],
        task_title: str,
        *,
        conn: Connection | None = None,
    ) -> list[Notification]:
        """Tell every owner in *owner_ids* that *task_title* was completed."""
        created = [
            self._store.create_notification(
                user_id=owner_id,
                title=COMPLETED_TITLE,
                message=COMPLETED_MESSAGE.format(title=task_title),
                type=NotificationType.TASK_COMPLETED,
                conn=conn,
            )
            for owner_id in owner_ids
        ]
        logger.debug("Completion notifications for %r: %d", task_title, len(created))
        return created

    def mark_read(self, notification_id: str) -> Notification | None:
        """Mark one notification read. ``None`` if the id is unknown."""
        return self._store.mark_notification_read(notification_id)

    def mark_all_read(self, user_id: str) -> int:
        """Mark all of *user_id*'s notifications read. Idempotent."""
        return self._store.mark_all_notifications_read(user_id)
