"""StatusService — store and event log summary for operators."""

from __future__ import annotations

from homestaff.services.base import BaseService
from homestaff.services.result import ServiceResult


class StatusService(BaseService):
    """Reports what the workspace holds. Needs no session; exposes only counts."""

    def status(self) -> ServiceResult:
        bus = self._workspace.event_bus
        config_path = self._workspace.settings.config_path
        return ServiceResult(
            ok=True,
            op="status",
            data={
                "counts": self._store.counts(),
                "sessions": len(self._workspace.sessions),
                "seeded": self._workspace.settings.store.seed_demo_data,
                "config_path": str(config_path) if config_path else None,
                "events": bus.status_counts() if bus is not None else {},
                "plugins": bus.plugin_manager.list_plugin_names() if bus is not None else [],
            },
        )
