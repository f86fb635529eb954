"""Logged synchronous event dispatch via pluggy.

Every event is written to the ``event_log`` table before its hook runs and
marked ``completed`` or ``failed`` afterwards, so failed deliveries can be
inspected and retried with :meth:`EventBus.drain`. After ``max_retries``
failed attempts an event becomes ``dead_letter`` and is no longer retried.

INVARIANT: Plugin failures are warnings, never errors.
"""

from __future__ import annotations

import json
import logging
import threading
from typing import TYPE_CHECKING, Any

from sqlalchemy import func, insert, select, update

from homestaff.infrastructure.database.schema import event_log
from homestaff.services._helpers import now_iso

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from homestaff.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class EventBus:
    """Synchronous hook dispatch with an event log.

    Parameters:
        engine: SQLAlchemy engine with the ``event_log`` table.
        plugin_manager: Loaded PluginManager for hook dispatch.
        max_retries: Attempts before an event is marked ``dead_letter``.
        lock: Lock guarding the engine's connection. Pass the store's lock
            when both share one in-memory database.
    """

    def __init__(
        self,
        engine: Engine,
        plugin_manager: PluginManager,
        *,
        max_retries: int = 3,
        lock: threading.RLock | None = None,
    ) -> None:
        self._engine = engine
        self._pm = plugin_manager
        self._max_retries = max_retries
        self._lock = lock if lock is not None else threading.RLock()

    @property
    def plugin_manager(self) -> PluginManager:
        return self._pm

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> bool:
        """Log the event, run its hook, and record the outcome.

        Returns True if the hook ran without raising.
        """
        event_id = self._write_log(hook_name, payload)
        return self._execute_hook(event_id, hook_name, payload)

    def drain(self) -> list[dict[str, Any]]:
        """Retry failed events synchronously.

        Returns a summary list of ``{id, hook_name, status}`` for each retried event.
        """
        with self._lock, self._engine.connect() as conn:
            rows = conn.execute(
                select(event_log.c.id, event_log.c.hook_name, event_log.c.payload)
                .where(event_log.c.status.in_(["pending", "failed"]))
                .order_by(event_log.c.id)
            ).fetchall()

        results: list[dict[str, Any]] = []
        for row in rows:
            self._execute_hook(row.id, row.hook_name, json.loads(row.payload))
            with self._lock, self._engine.connect() as conn:
                status = conn.execute(
                    select(event_log.c.status).where(event_log.c.id == row.id)
                ).scalar_one()
            results.append({"id": row.id, "hook_name": row.hook_name, "status": status})
        return results

    def status_counts(self) -> dict[str, int]:
        """Number of logged events per status."""
        with self._lock, self._engine.connect() as conn:
            rows = conn.execute(
                select(event_log.c.status, func.count()).group_by(event_log.c.status)
            ).fetchall()
        return {status: count for status, count in rows}

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _write_log(self, hook_name: str, payload: dict[str, Any]) -> int:
        with self._lock, self._engine.begin() as conn:
            result = conn.execute(
                insert(event_log).values(
                    hook_name=hook_name,
                    payload=json.dumps(payload),
                    status="pending",
                    retries=0,
                    created=now_iso(),
                )
            )
            assert result.inserted_primary_key is not None
            return int(result.inserted_primary_key[0])

    def _execute_hook(self, event_id: int, hook_name: str, payload: dict[str, Any]) -> bool:
        hook_fn = getattr(self._pm.hook, hook_name, None)
        if hook_fn is None:
            self._mark_completed(event_id)
            return True

        try:
            hook_fn(**payload)
        except Exception as exc:
            logger.debug("Hook %s failed: %s", hook_name, exc)
            self._mark_failed(event_id, str(exc))
            return False
        self._mark_completed(event_id)
        return True

    def _mark_completed(self, event_id: int) -> None:
        with self._lock, self._engine.begin() as conn:
            conn.execute(
                update(event_log)
                .where(event_log.c.id == event_id)
                .values(status="completed", completed=now_iso())
            )

    def _mark_failed(self, event_id: int, error: str) -> None:
        """Increment retries, mark failed or dead_letter."""
        with self._lock, self._engine.begin() as conn:
            retries = conn.execute(
                select(event_log.c.retries).where(event_log.c.id == event_id)
            ).scalar_one()

            new_retries = retries + 1
            new_status = "dead_letter" if new_retries >= self._max_retries else "failed"

            conn.execute(
                update(event_log)
                .where(event_log.c.id == event_id)
                .values(
                    status=new_status,
                    error=error,
                    retries=new_retries,
                    completed=now_iso() if new_status == "dead_letter" else None,
                )
            )
