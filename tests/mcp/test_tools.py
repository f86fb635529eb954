"""Tests for MCP tool implementations, exercised without the mcp package."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from homestaff.infrastructure.workspace import Workspace
from homestaff.mcp.tools import (
    create_task_impl,
    current_user_impl,
    delete_task_impl,
    get_task_impl,
    list_maids_impl,
    list_my_tasks_impl,
    list_notifications_impl,
    list_tasks_impl,
    login_impl,
    logout_impl,
    mark_all_notifications_read_impl,
    mark_notification_read_impl,
    register_impl,
    register_tools,
    update_language_impl,
    update_task_impl,
)


class RecordingServer:
    """Stands in for FastMCP: keeps each decorated tool by name."""

    def __init__(self) -> None:
        self.tools: dict[str, Callable[..., Any]] = {}

    def tool(self) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self.tools[fn.__name__] = fn
            return fn

        return decorator


class TestAccountTools:
    def test_login_returns_token(self, workspace: Workspace) -> None:
        resp = login_impl(workspace, "owner", "1234", "owner")
        assert resp["ok"] is True
        assert resp["op"] == "login"
        assert resp["data"]["session_token"]
        assert "error" not in resp

    def test_error_shape(self, workspace: Workspace) -> None:
        resp = login_impl(workspace, "owner", "wrong", "owner")
        assert resp["ok"] is False
        assert resp["error"] == {
            "code": "NOT_AUTHENTICATED",
            "message": "Invalid username or password",
        }

    def test_register_and_current_user(self, workspace: Workspace) -> None:
        resp = register_impl(workspace, "maid3", "secret", "Ana", "maid")
        assert resp["ok"] is True
        token = resp["data"]["session_token"]
        me = current_user_impl(workspace, token)
        assert me["data"]["user"]["username"] == "maid3"

    def test_duplicate_register_conflicts(self, workspace: Workspace) -> None:
        resp = register_impl(workspace, "maid1", "secret", "Ana", "maid")
        assert resp["error"]["code"] == "CONFLICT"

    def test_logout(self, workspace: Workspace, maid1_token: str) -> None:
        assert logout_impl(workspace, maid1_token)["ok"] is True
        assert current_user_impl(workspace, maid1_token)["ok"] is False


class TestUserTools:
    def test_list_maids(self, workspace: Workspace, maid2_token: str) -> None:
        resp = list_maids_impl(workspace, maid2_token)
        assert [u["username"] for u in resp["data"]["items"]] == ["maid1", "maid2"]

    def test_update_language(self, workspace: Workspace, maid2_token: str) -> None:
        resp = update_language_impl(workspace, maid2_token, "en")
        assert resp["data"]["user"]["language"] == "en"

    def test_update_language_rejects_unknown(
        self, workspace: Workspace, maid2_token: str
    ) -> None:
        resp = update_language_impl(workspace, maid2_token, "klingon")
        assert resp["error"]["code"] == "VALIDATION_FAILED"


class TestTaskTools:
    def test_list_and_get(self, workspace: Workspace, owner_token: str) -> None:
        assert list_tasks_impl(workspace, owner_token)["data"]["count"] == 5
        assert list_my_tasks_impl(workspace, owner_token)["data"]["count"] == 0
        assert get_task_impl(workspace, owner_token, "task-3")["data"]["task"]["title"] == "Laundry"

    def test_create_drops_unset_optionals(self, workspace: Workspace, owner_token: str) -> None:
        resp = create_task_impl(workspace, owner_token, "Mop kitchen", assigned_to="maid-2")
        task = resp["data"]["task"]
        assert task["priority"] == "medium"
        assert task["status"] == "pending"
        assert task["description"] is None
        assert task["assigned_to"] == "maid-2"

    def test_create_forbidden_for_maid(self, workspace: Workspace, maid1_token: str) -> None:
        resp = create_task_impl(workspace, maid1_token, "Nap")
        assert resp["error"]["code"] == "FORBIDDEN"

    def test_update_reports_warnings(self, workspace: Workspace, maid1_token: str) -> None:
        resp = update_task_impl(
            workspace, maid1_token, "task-1", changes={"status": "in_progress", "title": "x"}
        )
        assert resp["ok"] is True
        assert resp["warnings"] == ["Ignored field not writable by maid: title"]

    def test_delete(self, workspace: Workspace, owner_token: str) -> None:
        assert delete_task_impl(workspace, owner_token, "task-4")["ok"] is True
        assert delete_task_impl(workspace, owner_token, "task-4")["error"]["code"] == "NOT_FOUND"


class TestNotificationTools:
    def test_inbox_and_read_state(self, workspace: Workspace, maid1_token: str) -> None:
        inbox = list_notifications_impl(workspace, maid1_token)
        assert inbox["data"]["unread"] == 1

        nid = inbox["data"]["items"][0]["id"]
        assert mark_notification_read_impl(workspace, maid1_token, nid)["ok"] is True
        assert list_notifications_impl(workspace, maid1_token)["data"]["unread"] == 0

    def test_mark_all(self, workspace: Workspace, owner_token: str) -> None:
        resp = mark_all_notifications_read_impl(workspace, owner_token)
        assert resp["data"]["count"] == 1


class TestRegisterTools:
    def test_registers_fifteen_tools(self, workspace: Workspace) -> None:
        server = RecordingServer()
        register_tools(server, workspace)
        assert len(server.tools) == 15
        assert {"login", "create_task", "mark_all_notifications_read"} <= set(server.tools)

    @pytest.mark.parametrize("tool", ["list_tasks", "list_notifications", "current_user"])
    def test_session_required(self, workspace: Workspace, tool: str) -> None:
        server = RecordingServer()
        register_tools(server, workspace)
        resp = server.tools[tool](session_token="stale")
        assert resp["error"]["code"] == "NOT_AUTHENTICATED"

    def test_wrapped_create_task(self, workspace: Workspace, owner_token: str) -> None:
        server = RecordingServer()
        register_tools(server, workspace)
        resp = server.tools["create_task"](
            session_token=owner_token, title="Dust shelves", priority="low"
        )
        assert resp["data"]["task"]["priority"] == "low"
