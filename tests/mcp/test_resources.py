"""Tests for MCP resource implementations."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from homestaff.infrastructure.workspace import Workspace
from homestaff.mcp.resources import overview_impl, register_resources, rules_impl


class RecordingServer:
    def __init__(self) -> None:
        self.resources: dict[str, Callable[[], str]] = {}

    def resource(self, uri: str) -> Callable[[Callable[[], str]], Callable[[], str]]:
        def decorator(fn: Callable[[], str]) -> Callable[[], str]:
            self.resources[uri] = fn
            return fn

        return decorator


class TestResources:
    def test_overview(self, workspace: Workspace) -> None:
        data = overview_impl(workspace)
        assert data["counts"]["tasks"] == 5
        assert data["events"] == {}

    def test_rules(self) -> None:
        rules = rules_impl()
        assert rules["maid"]["updatable_fields"] == [
            "completed_at",
            "notes",
            "photo_evidence",
            "status",
        ]
        assert rules["owner"]["updatable_fields"] == "all except created_by, id"
        assert rules["transitions"]["completed"] == []

    def test_register_resources(self, workspace: Workspace) -> None:
        server = RecordingServer()
        register_resources(server, workspace)
        assert set(server.resources) == {"homestaff://overview", "homestaff://rules"}
        rules: dict[str, Any] = json.loads(server.resources["homestaff://rules"]())
        assert rules["owner"]["create_task"] is True
        overview = json.loads(server.resources["homestaff://overview"]())
        assert overview["counts"]["users"] == 3
