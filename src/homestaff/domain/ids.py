"""Entity id generation.

Generated ids are uuid4 strings. Seed data uses readable fixed ids
(``owner-1``, ``task-3``, ``notif-2``), so callers must treat ids as opaque.

INVARIANT: IDs are permanent. Once generated, an ID never changes.
"""

from __future__ import annotations

import uuid


def new_id() -> str:
    """Return a fresh opaque entity id."""
    return str(uuid.uuid4())


def seed_id(kind: str, number: int) -> str:
    """Return the fixed id used for seeded entity *number* of *kind*."""
    return f"{kind}-{number}"
