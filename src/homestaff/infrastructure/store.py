"""EntityStore — process-lifetime registry of users, tasks, and notifications.

The store owns one table per entity kind on an in-memory SQLite engine and
is the only component that touches them. Callers receive frozen entity
snapshots, never rows or connections.

Every mutation runs under one re-entrant lock and one ``engine.begin()``
transaction. Notifications derived from a task mutation (assignment on
create, the completion edge on update) are written inside that same
transaction, so once ``create_task`` or ``update_task`` returns, the
derived notifications are already queryable.

The store does not raise for unknown ids; lookups and mutations return
``None`` (or ``False``). The one exception is :class:`ConflictError` for a
duplicate username, which callers are expected to pre-check.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError

from homestaff.domain.ids import new_id
from homestaff.domain.lifecycle import TaskStatus, plan_update
from homestaff.domain.models import Notification, Task, User, as_utc
from homestaff.domain.types import Language, NotificationType, TaskPriority, UserRole
from homestaff.infrastructure.database.engine import create_memory_engine
from homestaff.infrastructure.database.schema import notifications, tasks, users
from homestaff.infrastructure.dispatcher import NotificationDispatcher

if TYPE_CHECKING:
    from sqlalchemy import Connection, Row
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

# Fields an update may never touch at the storage level.
_FROZEN_TASK_FIELDS = frozenset({"id", "created_by"})


class ConflictError(Exception):
    """A write would violate a uniqueness rule (duplicate username)."""


@dataclass(frozen=True)
class TaskUpdate:
    """What ``update_task`` applied, as seen inside its transaction."""

    task: Task
    previous_status: TaskStatus
    completed: bool = False
    advisory: str | None = None


def utc_now() -> datetime:
    return datetime.now(UTC)


# ---------------------------------------------------------------------------
# Row <-> entity conversion
# ---------------------------------------------------------------------------


def _iso(value: datetime | None) -> str | None:
    normalized = as_utc(value)
    return normalized.isoformat() if normalized is not None else None


def _user_row(user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "username": user.username,
        "password_hash": user.password_hash,
        "name": user.name,
        "role": str(user.role),
        "language": str(user.language),
        "avatar_url": user.avatar_url,
    }


def _task_row(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "status": str(task.status),
        "priority": str(task.priority),
        "assigned_to": task.assigned_to,
        "created_by": task.created_by,
        "deadline": _iso(task.deadline),
        "completed_at": _iso(task.completed_at),
        "photo_evidence": task.photo_evidence,
        "notes": task.notes,
    }


def _notification_row(notification: Notification) -> dict[str, Any]:
    return {
        "id": notification.id,
        "user_id": notification.user_id,
        "title": notification.title,
        "message": notification.message,
        "type": str(notification.type),
        "read": int(notification.read),
        "created_at": _iso(notification.created_at),
    }


def _to_user(row: Row[Any]) -> User:
    return User.model_validate(dict(row._mapping))


def _to_task(row: Row[Any]) -> Task:
    return Task.model_validate(dict(row._mapping))


def _to_notification(row: Row[Any]) -> Notification:
    return Notification.model_validate(dict(row._mapping))


def _by_deadline(items: Iterable[Task]) -> list[Task]:
    """Deadline descending; null deadlines count as the epoch. Stable on ties."""
    return sorted(items, key=Task.sort_key, reverse=True)


# ---------------------------------------------------------------------------
# EntityStore
# ---------------------------------------------------------------------------


class EntityStore:
    """Authoritative in-memory storage for the three entity kinds.

    Parameters:
        engine: SQLAlchemy engine with the schema created. Defaults to a
            fresh in-memory database.
        clock: Source of "now" for generated timestamps.
    """

    def __init__(
        self,
        engine: Engine | None = None,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._engine = engine if engine is not None else create_memory_engine()
        self._lock = threading.RLock()
        self._clock = clock
        self.dispatcher = NotificationDispatcher(self)

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def lock(self) -> threading.RLock:
        """The lock every store transaction holds."""
        return self._lock

    def now(self) -> datetime:
        return self._clock()

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Hold the store lock and an open transaction for a unit of work."""
        with self._lock, self._engine.begin() as conn:
            yield conn

    def close(self) -> None:
        self._engine.dispose()

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def create_user(
        self,
        *,
        username: str,
        password_hash: str,
        name: str,
        role: UserRole | str,
        language: Language | str | None = None,
        avatar_url: str | None = None,
    ) -> User:
        """Insert a new user with a fresh id.

        Raises:
            ConflictError: If *username* is already taken.
        """
        user = User(
            id=new_id(),
            username=username,
            password_hash=password_hash,
            name=name,
            role=UserRole(role),
            language=Language(language or Language.EN),
            avatar_url=avatar_url or None,
        )
        with self.transaction() as conn:
            taken = conn.execute(
                select(users.c.id).where(users.c.username == username)
            ).first()
            if taken is not None:
                msg = f"Username already exists: {username}"
                raise ConflictError(msg)
            try:
                conn.execute(insert(users).values(**_user_row(user)))
            except IntegrityError as exc:
                msg = f"Username already exists: {username}"
                raise ConflictError(msg) from exc
        logger.debug("Created user %s (%s)", user.id, user.role)
        return user

    def get_user(self, user_id: str) -> User | None:
        with self.transaction() as conn:
            row = conn.execute(select(users).where(users.c.id == user_id)).first()
        return _to_user(row) if row is not None else None

    def get_user_by_username(self, username: str) -> User | None:
        with self.transaction() as conn:
            row = conn.execute(select(users).where(users.c.username == username)).first()
        return _to_user(row) if row is not None else None

    def update_user_language(self, user_id: str, language: Language | str) -> User | None:
        with self.transaction() as conn:
            result = conn.execute(
                update(users).where(users.c.id == user_id).values(language=str(Language(language)))
            )
            if result.rowcount == 0:
                return None
            row = conn.execute(select(users).where(users.c.id == user_id)).one()
        return _to_user(row)

    def list_maids(self) -> list[User]:
        return self._users_with_role(UserRole.MAID)

    def list_owners(self) -> list[User]:
        return self._users_with_role(UserRole.OWNER)

    def _users_with_role(self, role: UserRole) -> list[User]:
        with self.transaction() as conn:
            rows = conn.execute(select(users).where(users.c.role == str(role))).fetchall()
        return [_to_user(r) for r in rows]

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    def create_task(self, data: Mapping[str, Any], created_by: str) -> Task:
        """Insert a task; notify the assignee in the same transaction.

        Status defaults to pending and priority to medium. A task created
        directly as completed gets ``completed_at`` stamped but no
        completion notification (that only fires on an update edge).
        """
        now = self._clock()
        status = TaskStatus(data.get("status") or TaskStatus.PENDING)
        task = Task(
            id=new_id(),
            title=data["title"],
            description=data.get("description") or None,
            status=status,
            priority=TaskPriority(data.get("priority") or TaskPriority.MEDIUM),
            assigned_to=data.get("assigned_to") or None,
            created_by=created_by,
            deadline=data.get("deadline"),
            completed_at=now if status == TaskStatus.COMPLETED else None,
            notes=data.get("notes") or None,
        )
        with self.transaction() as conn:
            conn.execute(insert(tasks).values(**_task_row(task)))
            if task.assigned_to:
                self.dispatcher.notify_assigned(task.assigned_to, task.title, conn=conn)
        logger.debug("Created task %s assigned_to=%s", task.id, task.assigned_to)
        return task

    def get_task(self, task_id: str) -> Task | None:
        with self.transaction() as conn:
            row = conn.execute(select(tasks).where(tasks.c.id == task_id)).first()
        return _to_task(row) if row is not None else None

    def update_task(self, task_id: str, changes: Mapping[str, Any]) -> TaskUpdate | None:
        """Merge *changes* onto a task and return a :class:`TaskUpdate`.

        If the merge moves the task into ``completed`` from any other status,
        every owner receives a completion notification inside the same
        transaction. Re-completing an already completed task notifies nobody.
        """
        with self.transaction() as conn:
            row = conn.execute(select(tasks).where(tasks.c.id == task_id)).first()
            if row is None:
                return None
            current = _to_task(row)

            writable = {
                k: v
                for k, v in changes.items()
                if k in Task.model_fields and k not in _FROZEN_TASK_FIELDS
            }
            plan = plan_update(str(current.status), writable, now=self._clock())
            if plan.advisory:
                logger.debug("Task %s: %s", task_id, plan.advisory)

            merged = Task.model_validate({**current.model_dump(), **plan.changes})
            conn.execute(update(tasks).where(tasks.c.id == task_id).values(**_task_row(merged)))

            if plan.completed_edge:
                owner_ids = [
                    r.id
                    for r in conn.execute(
                        select(users.c.id).where(users.c.role == str(UserRole.OWNER))
                    )
                ]
                self.dispatcher.notify_completed(owner_ids, current.title, conn=conn)
        return TaskUpdate(
            task=merged,
            previous_status=current.status,
            completed=plan.completed_edge,
            advisory=plan.advisory,
        )

    def delete_task(self, task_id: str) -> bool:
        with self.transaction() as conn:
            result = conn.execute(delete(tasks).where(tasks.c.id == task_id))
        return result.rowcount > 0

    def list_tasks(self) -> list[Task]:
        with self.transaction() as conn:
            rows = conn.execute(select(tasks)).fetchall()
        return _by_deadline(_to_task(r) for r in rows)

    def list_tasks_by_assignee(self, assignee_id: str) -> list[Task]:
        with self.transaction() as conn:
            rows = conn.execute(select(tasks).where(tasks.c.assigned_to == assignee_id)).fetchall()
        return _by_deadline(_to_task(r) for r in rows)

    def list_tasks_by_creator(self, creator_id: str) -> list[Task]:
        with self.transaction() as conn:
            rows = conn.execute(select(tasks).where(tasks.c.created_by == creator_id)).fetchall()
        return _by_deadline(_to_task(r) for r in rows)

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def create_notification(
        self,
        *,
        user_id: str,
        title: str,
        message: str,
        type: NotificationType | str,  # noqa: A002
        read: bool = False,
        created_at: datetime | None = None,
        conn: Connection | None = None,
    ) -> Notification:
        """Insert a notification, joining the caller's transaction if *conn* is given."""
        notification = Notification(
            id=new_id(),
            user_id=user_id,
            title=title,
            message=message,
            type=NotificationType(type),
            read=read,
            created_at=created_at or self._clock(),
        )
        if conn is not None:
            conn.execute(insert(notifications).values(**_notification_row(notification)))
        else:
            with self.transaction() as own_conn:
                own_conn.execute(insert(notifications).values(**_notification_row(notification)))
        return notification

    def list_notifications_for_user(self, user_id: str) -> list[Notification]:
        """Notifications for *user_id*, newest first."""
        with self.transaction() as conn:
            rows = conn.execute(
                select(notifications).where(notifications.c.user_id == user_id)
            ).fetchall()
        items = [_to_notification(r) for r in rows]
        return sorted(items, key=lambda n: n.created_at, reverse=True)

    def get_notification(self, notification_id: str) -> Notification | None:
        with self.transaction() as conn:
            row = conn.execute(
                select(notifications).where(notifications.c.id == notification_id)
            ).first()
        return _to_notification(row) if row is not None else None

    def mark_notification_read(self, notification_id: str) -> Notification | None:
        with self.transaction() as conn:
            result = conn.execute(
                update(notifications)
                .where(notifications.c.id == notification_id)
                .values(read=1)
            )
            if result.rowcount == 0:
                return None
            row = conn.execute(
                select(notifications).where(notifications.c.id == notification_id)
            ).one()
        return _to_notification(row)

    def mark_all_notifications_read(self, user_id: str) -> int:
        """Flip every unread notification of *user_id*. Returns how many changed."""
        with self.transaction() as conn:
            result = conn.execute(
                update(notifications)
                .where(notifications.c.user_id == user_id, notifications.c.read == 0)
                .values(read=1)
            )
        return result.rowcount

    # ------------------------------------------------------------------
    # Bulk load and stats
    # ------------------------------------------------------------------

    def import_entities(self, entities: Iterable[User | Task | Notification]) -> int:
        """Insert prebuilt entities verbatim, without side effects. Used for seeding.

        Entities are written in the order given, so users must precede the
        tasks and notifications that reference them. Returns the number written.
        """
        count = 0
        with self.transaction() as conn:
            for entity in entities:
                if isinstance(entity, User):
                    conn.execute(insert(users).values(**_user_row(entity)))
                elif isinstance(entity, Task):
                    conn.execute(insert(tasks).values(**_task_row(entity)))
                elif isinstance(entity, Notification):
                    conn.execute(insert(notifications).values(**_notification_row(entity)))
                else:
                    msg = f"Cannot import {type(entity).__name__}"
                    raise TypeError(msg)
                count += 1
        return count

    def counts(self) -> dict[str, int]:
        """Row counts per entity kind."""
        with self.transaction() as conn:
            return {
                "users": conn.execute(select(func.count()).select_from(users)).scalar_one(),
                "tasks": conn.execute(select(func.count()).select_from(tasks)).scalar_one(),
                "notifications": conn.execute(
                    select(func.count()).select_from(notifications)
                ).scalar_one(),
            }
