"""Extension layer — lifecycle hooks via pluggy.

Discovery: entry points in the ``homestaff.plugins`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from homestaff.plugins.event_bus import EventBus
from homestaff.plugins.manager import PluginManager, hookimpl

__all__ = ["EventBus", "PluginManager", "hookimpl"]
