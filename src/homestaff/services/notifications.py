"""NotificationService — the caller's inbox and its read state."""

from __future__ import annotations

import structlog

from homestaff.services.base import BaseService
from homestaff.services.contracts import (
    MarkAllReadData,
    NotificationData,
    NotificationListData,
    dump_validated,
)
from homestaff.services.result import ErrorCode, ServiceResult

log = structlog.get_logger(__name__)


class NotificationService(BaseService):
    """List and acknowledge notifications."""

    def list_notifications(self, session_token: str | None) -> ServiceResult:
        """The caller's notifications, newest first."""
        op = "list_notifications"
        actor = self._authenticate(op, session_token)
        if isinstance(actor, ServiceResult):
            return actor

        inbox = self._store.list_notifications_for_user(actor.id)
        unread = sum(1 for n in inbox if not n.read)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                NotificationListData,
                {"count": len(inbox), "unread": unread, "items": [n.view() for n in inbox]},
            ),
        )

    def mark_read(self, session_token: str | None, notification_id: str) -> ServiceResult:
        """Mark one notification read. Marking it again is a no-op success.

        Any authenticated user may acknowledge any notification id.
        """
        op = "mark_notification_read"
        actor = self._authenticate(op, session_token)
        if isinstance(actor, ServiceResult):
            return actor

        notification = self._store.dispatcher.mark_read(notification_id)
        if notification is None:
            return ServiceResult.failure(
                op, ErrorCode.NOT_FOUND, "Notification not found", id=notification_id
            )
        log.info("notification.read", notification_id=notification.id, actor_id=actor.id)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(NotificationData, {"notification": notification.view()}),
        )

    def mark_all_read(self, session_token: str | None) -> ServiceResult:
        op = "mark_all_notifications_read"
        warnings: list[str] = []
        actor = self._authenticate(op, session_token)
        if isinstance(actor, ServiceResult):
            return actor

        count = self._store.dispatcher.mark_all_read(actor.id)
        log.info("notifications.read_all", user_id=actor.id, count=count)
        if count:
            self._dispatch_event(
                "post_notifications_read", {"user_id": actor.id, "count": count}, warnings
            )
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                MarkAllReadData,
                {
                    "user_id": actor.id,
                    "count": count,
                    "message": "All notifications marked as read",
                },
            ),
            warnings=warnings,
        )
