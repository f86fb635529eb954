"""MCP resource definitions — 2 URI-based resources.

URIs: homestaff://overview, homestaff://rules.
Each resource has an ``_impl`` function testable without the mcp package.
Resources never require a session and never expose user or task content.
"""

from __future__ import annotations

import json
from typing import Any

from homestaff.domain.lifecycle import TASK_TRANSITIONS
from homestaff.domain.policy import IMMUTABLE_TASK_FIELDS, MAID_UPDATABLE_FIELDS


def overview_impl(workspace: Any) -> dict[str, Any]:
    """Entity counts, active sessions, and event log status."""
    from homestaff.services.status import StatusService

    return StatusService(workspace).status().data


def rules_impl() -> dict[str, Any]:
    """Role permissions and the status transition map, for clients to display."""
    return {
        "owner": {
            "create_task": True,
            "delete_task": True,
            "updatable_fields": "all except " + ", ".join(sorted(IMMUTABLE_TASK_FIELDS)),
            "sees": "all tasks",
        },
        "maid": {
            "create_task": False,
            "delete_task": False,
            "updatable_fields": sorted(MAID_UPDATABLE_FIELDS),
            "sees": "assigned tasks",
        },
        "transitions": TASK_TRANSITIONS,
    }


def register_resources(server: Any, workspace: Any) -> None:
    """Register both MCP resources on the FastMCP server."""

    @server.resource("homestaff://overview")  # type: ignore[untyped-decorator]
    def overview_resource() -> str:
        """Store counts and event log status."""
        return json.dumps(overview_impl(workspace), indent=2)

    @server.resource("homestaff://rules")  # type: ignore[untyped-decorator]
    def rules_resource() -> str:
        """Who may do what, and the usual status transitions."""
        return json.dumps(rules_impl(), indent=2)
