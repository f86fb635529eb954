"""Workspace — the single dependency injected into every service.

Owns the entity store, the session registry, and (once initialized) the
plugin event bus. One workspace is one household: its state lives exactly
as long as the object does.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from homestaff.infrastructure.seed import seed_demo_data
from homestaff.infrastructure.sessions import SessionRegistry
from homestaff.infrastructure.store import EntityStore

if TYPE_CHECKING:
    from homestaff.config.settings import HomestaffSettings
    from homestaff.plugins.event_bus import EventBus

logger = logging.getLogger(__name__)


class Workspace:
    """Composition root for one in-memory household.

    Parameters:
        settings: Resolved settings. Controls seeding, hashing cost, and
            session token size.
        store: Pre-built store (tests inject one with a fixed clock).
    """

    def __init__(
        self,
        settings: HomestaffSettings,
        *,
        store: EntityStore | None = None,
    ) -> None:
        self._settings = settings
        self._store = store if store is not None else EntityStore()
        self._sessions = SessionRegistry(token_bytes=settings.auth.session_token_bytes)
        self._event_bus: EventBus | None = None

        if settings.store.seed_demo_data:
            written = seed_demo_data(self._store, hash_iterations=settings.auth.hash_iterations)
            logger.debug("Seeded demo household (%d entities)", written)

    @property
    def settings(self) -> HomestaffSettings:
        return self._settings

    @property
    def store(self) -> EntityStore:
        return self._store

    @property
    def sessions(self) -> SessionRegistry:
        return self._sessions

    @property
    def event_bus(self) -> EventBus | None:
        """The event bus, or None if :meth:`init_event_bus` has not run."""
        return self._event_bus

    def init_event_bus(self) -> EventBus | None:
        """Discover plugins and create the event bus.

        No-op (returns None) when plugins are disabled in settings.
        """
        if not self._settings.plugins.enabled:
            return None
        if self._event_bus is not None:
            return self._event_bus

        from homestaff.plugins.event_bus import EventBus
        from homestaff.plugins.manager import PluginManager

        pm = PluginManager()
        loaded = pm.discover_and_load()
        if loaded:
            logger.debug("Loaded plugins: %s", ", ".join(loaded))
        self._event_bus = EventBus(
            self._store.engine,
            pm,
            max_retries=self._settings.plugins.max_retries,
            lock=self._store.lock,
        )
        return self._event_bus

    def close(self) -> None:
        self._store.close()
