"""Demo household loaded into a fresh store.

One owner and two maids (password ``1234`` each), five tasks in mixed
states, and two notifications. Deadlines and timestamps are relative to the
store clock so the demo always looks current.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from homestaff.domain.credentials import DEFAULT_ITERATIONS, hash_password
from homestaff.domain.ids import seed_id
from homestaff.domain.lifecycle import TaskStatus
from homestaff.domain.models import Notification, Task, User
from homestaff.domain.types import Language, NotificationType, TaskPriority, UserRole

if TYPE_CHECKING:
    from homestaff.infrastructure.store import EntityStore

DEMO_PASSWORD = "1234"

OWNER_ID = seed_id("owner", 1)
MAID1_ID = seed_id("maid", 1)
MAID2_ID = seed_id("maid", 2)


def seed_demo_data(store: EntityStore, *, hash_iterations: int = DEFAULT_ITERATIONS) -> int:
    """Populate *store* with the demo household. Returns the number of entities written."""
    now = store.now()
    tomorrow = now + timedelta(days=1)
    next_week = now + timedelta(days=7)
    secret = hash_password(DEMO_PASSWORD, iterations=hash_iterations)

    people = [
        User(
            id=OWNER_ID,
            username="owner",
            password_hash=secret,
            name="John Smith",
            role=UserRole.OWNER,
            language=Language.EN,
        ),
        User(
            id=MAID1_ID,
            username="maid1",
            password_hash=secret,
            name="Maria Santos",
            role=UserRole.MAID,
            language=Language.FIL,
        ),
        User(
            id=MAID2_ID,
            username="maid2",
            password_hash=secret,
            name="Fatima Ahmed",
            role=UserRole.MAID,
            language=Language.AR,
        ),
    ]

    chores = [
        Task(
            id=seed_id("task", 1),
            title="Clean living room",
            description="Vacuum, dust all surfaces, and organize the coffee table",
            status=TaskStatus.PENDING,
            priority=TaskPriority.HIGH,
            assigned_to=MAID1_ID,
            created_by=OWNER_ID,
            deadline=now,
        ),
        Task(
            id=seed_id("task", 2),
            title="Wash dishes",
            description="Clean all dishes in the sink and organize the kitchen",
            status=TaskStatus.IN_PROGRESS,
            priority=TaskPriority.MEDIUM,
            assigned_to=MAID1_ID,
            created_by=OWNER_ID,
            deadline=now,
            notes="Started at 10:00 AM",
        ),
        Task(
            id=seed_id("task", 3),
            title="Laundry",
            description="Wash, dry, fold, and put away all laundry",
            status=TaskStatus.PENDING,
            priority=TaskPriority.MEDIUM,
            assigned_to=MAID2_ID,
            created_by=OWNER_ID,
            deadline=tomorrow,
        ),
        Task(
            id=seed_id("task", 4),
            title="Clean bathrooms",
            description="Deep clean all bathrooms including toilets, sinks, and mirrors",
            status=TaskStatus.COMPLETED,
            priority=TaskPriority.HIGH,
            assigned_to=MAID1_ID,
            created_by=OWNER_ID,
            deadline=now - timedelta(days=1),
            completed_at=now - timedelta(hours=12),
            notes="All done, used new cleaning supplies",
        ),
        Task(
            id=seed_id("task", 5),
            title="Grocery shopping",
            description="Buy items from the shopping list on the fridge",
            status=TaskStatus.PENDING,
            priority=TaskPriority.LOW,
            assigned_to=MAID2_ID,
            created_by=OWNER_ID,
            deadline=next_week,
        ),
    ]

    inbox = [
        Notification(
            id=seed_id("notif", 1),
            user_id=OWNER_ID,
            title="Task Completed",
            message="Maria Santos completed 'Clean bathrooms'",
            type=NotificationType.TASK_COMPLETED,
            created_at=now - timedelta(hours=12),
        ),
        Notification(
            id=seed_id("notif", 2),
            user_id=MAID1_ID,
            title="New Task Assigned",
            message="You have been assigned 'Clean living room'",
            type=NotificationType.TASK_ASSIGNED,
            created_at=now - timedelta(hours=1),
        ),
    ]

    return store.import_entities([*people, *chores, *inbox])
