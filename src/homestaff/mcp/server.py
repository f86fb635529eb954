"""FastMCP server setup.

Optional extra — guarded behind try/except ImportError.
Transport: stdio by default; sse and streamable HTTP bind to the
``[server]`` host and port.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from homestaff.config.settings import HomestaffSettings

mcp_available = False
_FastMCP: Any = None

try:
    from mcp.server.fastmcp import FastMCP as _FastMCP  # type: ignore[no-redef,import-not-found]

    mcp_available = True
except ImportError:
    pass

__all__ = ["create_server", "mcp_available"]


def create_server(*, settings: HomestaffSettings | None = None) -> Any:
    """Create and configure the MCP server.

    Builds one :class:`Workspace` (seeded per settings) that lives as long
    as the server, initializes the plugin event bus, and registers every
    tool and resource. Returns the FastMCP instance.

    Raises RuntimeError if the mcp extra is not installed.
    """
    if not mcp_available or _FastMCP is None:
        msg = "MCP extra not installed. Install with: pip install homestaff[mcp]"
        raise RuntimeError(msg)

    from homestaff.config.settings import HomestaffSettings
    from homestaff.infrastructure.workspace import Workspace
    from homestaff.mcp.resources import register_resources
    from homestaff.mcp.tools import register_tools

    if settings is None:
        settings = HomestaffSettings.from_cli()
    workspace = Workspace(settings)
    workspace.init_event_bus()

    server = _FastMCP("homestaff", host=settings.server.host, port=settings.server.port)

    register_tools(server, workspace)
    register_resources(server, workspace)

    return server
