"""Tests for Workspace composition."""

from __future__ import annotations

from homestaff.config.models import PluginsConfig
from homestaff.config.settings import HomestaffSettings
from homestaff.infrastructure.workspace import Workspace
from homestaff.plugins.event_bus import EventBus


class TestWorkspace:
    def test_seeded_by_default(self, workspace: Workspace) -> None:
        assert workspace.store.counts() == {"users": 3, "tasks": 5, "notifications": 2}

    def test_unseeded(self, empty_workspace: Workspace) -> None:
        assert empty_workspace.store.counts() == {"users": 0, "tasks": 0, "notifications": 0}

    def test_seed_uses_configured_iterations(self, workspace: Workspace) -> None:
        owner = workspace.store.get_user_by_username("owner")
        assert owner is not None
        assert owner.password_hash.split("$")[1] == "1000"

    def test_sessions_start_empty(self, workspace: Workspace) -> None:
        assert len(workspace.sessions) == 0

    def test_event_bus_disabled(self, workspace: Workspace) -> None:
        assert workspace.init_event_bus() is None
        assert workspace.event_bus is None

    def test_event_bus_enabled_and_idempotent(self, settings: HomestaffSettings) -> None:
        enabled = settings.model_copy(update={"plugins": PluginsConfig(enabled=True)})
        ws = Workspace(enabled)
        try:
            bus = ws.init_event_bus()
            assert isinstance(bus, EventBus)
            assert ws.init_event_bus() is bus
            assert ws.event_bus is bus
            assert bus.plugin_manager.is_loaded
        finally:
            ws.close()
