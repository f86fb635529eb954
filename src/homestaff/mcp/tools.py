"""MCP tool definitions — 15 tools across 4 categories.

Categories: Account (4), Users (2), Tasks (6), Notifications (3).
Every tool except ``register`` and ``login`` takes the ``session_token``
those two return. Each tool has a ``_impl`` function testable without the
mcp package; ``register_tools()`` wraps them with FastMCP decorators.
"""

from __future__ import annotations

from typing import Any

from homestaff.services.result import ServiceResult


def _to_mcp_response(result: ServiceResult) -> dict[str, Any]:
    """Convert a ServiceResult to an MCP-friendly dict."""
    response: dict[str, Any] = {
        "ok": result.ok,
        "op": result.op,
        "data": result.data,
    }
    if result.warnings:
        response["warnings"] = result.warnings
    if result.error is not None:
        response["error"] = {
            "code": str(result.error.code),
            "message": result.error.message,
        }
    return response


# ---------------------------------------------------------------------------
# Account tools (4)
# ---------------------------------------------------------------------------


def register_impl(
    workspace: Any,
    username: str,
    password: str,
    name: str,
    role: str,
) -> dict[str, Any]:
    """Create an account and return a session token."""
    from homestaff.services.auth import AuthService

    result = AuthService(workspace).register(username, password, name, role)
    return _to_mcp_response(result)


def login_impl(workspace: Any, username: str, password: str, role: str) -> dict[str, Any]:
    """Log in as owner or maid and return a session token."""
    from homestaff.services.auth import AuthService

    result = AuthService(workspace).login(username, password, role)
    return _to_mcp_response(result)


def logout_impl(workspace: Any, session_token: str) -> dict[str, Any]:
    from homestaff.services.auth import AuthService

    result = AuthService(workspace).logout(session_token)
    return _to_mcp_response(result)


def current_user_impl(workspace: Any, session_token: str) -> dict[str, Any]:
    from homestaff.services.auth import AuthService

    result = AuthService(workspace).current_user(session_token)
    return _to_mcp_response(result)


# ---------------------------------------------------------------------------
# User tools (2)
# ---------------------------------------------------------------------------


def list_maids_impl(workspace: Any, session_token: str) -> dict[str, Any]:
    from homestaff.services.users import UserService

    result = UserService(workspace).list_maids(session_token)
    return _to_mcp_response(result)


def update_language_impl(workspace: Any, session_token: str, language: str) -> dict[str, Any]:
    from homestaff.services.users import UserService

    result = UserService(workspace).update_language(session_token, language)
    return _to_mcp_response(result)


# ---------------------------------------------------------------------------
# Task tools (6)
# ---------------------------------------------------------------------------


def list_tasks_impl(workspace: Any, session_token: str) -> dict[str, Any]:
    """All tasks for owners, assigned tasks for maids."""
    from homestaff.services.tasks import TaskService

    result = TaskService(workspace).list_tasks(session_token)
    return _to_mcp_response(result)


def list_my_tasks_impl(workspace: Any, session_token: str) -> dict[str, Any]:
    from homestaff.services.tasks import TaskService

    result = TaskService(workspace).list_my_tasks(session_token)
    return _to_mcp_response(result)


def get_task_impl(workspace: Any, session_token: str, task_id: str) -> dict[str, Any]:
    from homestaff.services.tasks import TaskService

    result = TaskService(workspace).get_task(session_token, task_id)
    return _to_mcp_response(result)


def create_task_impl(
    workspace: Any,
    session_token: str,
    title: str,
    *,
    description: str | None = None,
    priority: str | None = None,
    status: str | None = None,
    assigned_to: str | None = None,
    deadline: str | None = None,
    notes: str | None = None,
) -> dict[str, Any]:
    """Create a task (owners only)."""
    from homestaff.services.tasks import TaskService

    fields: dict[str, Any] = {"title": title}
    optional = {
        "description": description,
        "priority": priority,
        "status": status,
        "assigned_to": assigned_to,
        "deadline": deadline,
        "notes": notes,
    }
    fields.update({k: v for k, v in optional.items() if v is not None})
    result = TaskService(workspace).create_task(session_token, fields)
    return _to_mcp_response(result)


def update_task_impl(
    workspace: Any,
    session_token: str,
    task_id: str,
    *,
    changes: dict[str, Any],
) -> dict[str, Any]:
    """Partially update a task. Fields a maid may not write come back as warnings."""
    from homestaff.services.tasks import TaskService

    result = TaskService(workspace).update_task(session_token, task_id, changes)
    return _to_mcp_response(result)


def delete_task_impl(workspace: Any, session_token: str, task_id: str) -> dict[str, Any]:
    from homestaff.services.tasks import TaskService

    result = TaskService(workspace).delete_task(session_token, task_id)
    return _to_mcp_response(result)


# ---------------------------------------------------------------------------
# Notification tools (3)
# ---------------------------------------------------------------------------


def list_notifications_impl(workspace: Any, session_token: str) -> dict[str, Any]:
    from homestaff.services.notifications import NotificationService

    result = NotificationService(workspace).list_notifications(session_token)
    return _to_mcp_response(result)


def mark_notification_read_impl(
    workspace: Any,
    session_token: str,
    notification_id: str,
) -> dict[str, Any]:
    from homestaff.services.notifications import NotificationService

    result = NotificationService(workspace).mark_read(session_token, notification_id)
    return _to_mcp_response(result)


def mark_all_notifications_read_impl(workspace: Any, session_token: str) -> dict[str, Any]:
    from homestaff.services.notifications import NotificationService

    result = NotificationService(workspace).mark_all_read(session_token)
    return _to_mcp_response(result)


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def register_tools(server: Any, workspace: Any) -> None:
    """Register all 15 MCP tools on the FastMCP server."""

    @server.tool()  # type: ignore[untyped-decorator]
    def register(username: str, password: str, name: str, role: str) -> dict[str, Any]:
        """Create an owner or maid account and return a session token."""
        return register_impl(workspace, username, password, name, role)

    @server.tool()  # type: ignore[untyped-decorator]
    def login(username: str, password: str, role: str) -> dict[str, Any]:
        """Log in with username, password and role (owner or maid)."""
        return login_impl(workspace, username, password, role)

    @server.tool()  # type: ignore[untyped-decorator]
    def logout(session_token: str) -> dict[str, Any]:
        """End the session."""
        return logout_impl(workspace, session_token)

    @server.tool()  # type: ignore[untyped-decorator]
    def current_user(session_token: str) -> dict[str, Any]:
        """Return the logged-in user."""
        return current_user_impl(workspace, session_token)

    @server.tool()  # type: ignore[untyped-decorator]
    def list_maids(session_token: str) -> dict[str, Any]:
        """List every maid in the household."""
        return list_maids_impl(workspace, session_token)

    @server.tool()  # type: ignore[untyped-decorator]
    def update_language(session_token: str, language: str) -> dict[str, Any]:
        """Change your display language (en, ar, hi, id, fil, ur, tw, am)."""
        return update_language_impl(workspace, session_token, language)

    @server.tool()  # type: ignore[untyped-decorator]
    def list_tasks(session_token: str) -> dict[str, Any]:
        """List tasks visible to you, latest deadline first."""
        return list_tasks_impl(workspace, session_token)

    @server.tool()  # type: ignore[untyped-decorator]
    def list_my_tasks(session_token: str) -> dict[str, Any]:
        """List tasks assigned to you."""
        return list_my_tasks_impl(workspace, session_token)

    @server.tool()  # type: ignore[untyped-decorator]
    def get_task(session_token: str, task_id: str) -> dict[str, Any]:
        """Get one task by id."""
        return get_task_impl(workspace, session_token, task_id)

    @server.tool()  # type: ignore[untyped-decorator]
    def create_task(
        session_token: str,
        title: str,
        description: str | None = None,
        priority: str | None = None,
        status: str | None = None,
        assigned_to: str | None = None,
        deadline: str | None = None,
        notes: str | None = None,
    ) -> dict[str, Any]:
        """Create a task and notify its assignee (owners only)."""
        return create_task_impl(
            workspace,
            session_token,
            title,
            description=description,
            priority=priority,
            status=status,
            assigned_to=assigned_to,
            deadline=deadline,
            notes=notes,
        )

    @server.tool()  # type: ignore[untyped-decorator]
    def update_task(session_token: str, task_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        """Update task fields. Completing a task notifies the owners."""
        return update_task_impl(workspace, session_token, task_id, changes=changes)

    @server.tool()  # type: ignore[untyped-decorator]
    def delete_task(session_token: str, task_id: str) -> dict[str, Any]:
        """Delete a task (owners only)."""
        return delete_task_impl(workspace, session_token, task_id)

    @server.tool()  # type: ignore[untyped-decorator]
    def list_notifications(session_token: str) -> dict[str, Any]:
        """List your notifications, newest first."""
        return list_notifications_impl(workspace, session_token)

    @server.tool()  # type: ignore[untyped-decorator]
    def mark_notification_read(session_token: str, notification_id: str) -> dict[str, Any]:
        """Mark one notification as read."""
        return mark_notification_read_impl(workspace, session_token, notification_id)

    @server.tool()  # type: ignore[untyped-decorator]
    def mark_all_notifications_read(session_token: str) -> dict[str, Any]:
        """Mark all your notifications as read."""
        return mark_all_notifications_read_impl(workspace, session_token)
