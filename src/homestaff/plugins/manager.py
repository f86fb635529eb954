"""Plugin registry for household lifecycle hooks.

Plugins come from the ``homestaff.plugins`` entry point group or are
registered in-process (tests, embedding applications).
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from homestaff.plugins.hookspecs import HomestaffHookSpec

PROJECT_NAME = "homestaff"
ENTRY_POINT_GROUP = "homestaff.plugins"

hookimpl = pluggy.HookimplMarker(PROJECT_NAME)

logger = logging.getLogger(__name__)


class PluginManager:
    """Thin wrapper over :class:`pluggy.PluginManager` with homestaff hookspecs."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(HomestaffHookSpec)
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and return every registered plugin name."""
        count = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        if count:
            logger.debug("Loaded %d plugin(s) from %s", count, ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        label = name or type(plugin).__name__
        self._pm.register(plugin, name=label)
        logger.debug("Registered plugin: %s", label)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or type(p).__name__ for p in self._pm.get_plugins()]

    def _normalize_plugin_instances(self) -> None:
        # Entry points may expose a class; hooks on an unbound class get no self.
        for candidate in list(self._pm.get_plugins()):
            if inspect.isclass(candidate):
                label = self._pm.get_name(candidate) or candidate.__name__
                self._pm.unregister(candidate)
                self._instantiate(candidate, label)

    def _instantiate(self, plugin_cls: type, label: str) -> None:
        try:
            instance = plugin_cls()
        except Exception:
            logger.warning("Failed to instantiate entry-point plugin %s", label, exc_info=True)
            return
        self._pm.register(instance, name=label)
        logger.debug("Instantiated entry-point plugin: %s", label)
