"""Tests for NotificationDispatcher."""

from __future__ import annotations

from homestaff.domain.types import NotificationType
from homestaff.infrastructure.dispatcher import (
    ASSIGNED_MESSAGE,
    COMPLETED_MESSAGE,
    NotificationDispatcher,
)
from homestaff.infrastructure.store import EntityStore


def _users(store: EntityStore) -> tuple[str, str, str]:
    owner = store.create_user(username="owner", password_hash="h", name="O", role="owner")
    boss = store.create_user(username="boss", password_hash="h", name="B", role="owner")
    maid = store.create_user(username="maria", password_hash="h", name="M", role="maid")
    return owner.id, boss.id, maid.id


class TestNotifyAssigned:
    def test_creates_unread_assignment(self, store: EntityStore) -> None:
        _, _, maid = _users(store)
        notification = store.dispatcher.notify_assigned(maid, "Laundry")
        assert notification.user_id == maid
        assert notification.type is NotificationType.TASK_ASSIGNED
        assert notification.message == ASSIGNED_MESSAGE.format(title="Laundry")
        assert notification.read is False
        assert store.get_notification(notification.id) == notification

    def test_store_owns_a_dispatcher(self, store: EntityStore) -> None:
        assert isinstance(store.dispatcher, NotificationDispatcher)


class TestNotifyCompleted:
    def test_one_per_owner(self, store: EntityStore) -> None:
        owner, boss, maid = _users(store)
        created = store.dispatcher.notify_completed([owner, boss], "Laundry")
        assert [n.user_id for n in created] == [owner, boss]
        assert all(n.message == COMPLETED_MESSAGE.format(title="Laundry") for n in created)
        assert store.list_notifications_for_user(maid) == []

    def test_no_owners_no_notifications(self, store: EntityStore) -> None:
        assert store.dispatcher.notify_completed([], "Laundry") == []


class TestReadState:
    def test_mark_read_and_all(self, store: EntityStore) -> None:
        _, _, maid = _users(store)
        first = store.dispatcher.notify_assigned(maid, "A")
        store.dispatcher.notify_assigned(maid, "B")

        marked = store.dispatcher.mark_read(first.id)
        assert marked is not None and marked.read
        assert store.dispatcher.mark_all_read(maid) == 1
        assert store.dispatcher.mark_all_read(maid) == 0

    def test_mark_read_unknown(self, store: EntityStore) -> None:
        assert store.dispatcher.mark_read("missing") is None
