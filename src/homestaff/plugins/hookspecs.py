"""Pluggy hook specifications for homestaff lifecycle events.

Hooks fire after the store mutation has committed, so an implementation
always observes the new state (including derived notifications). They are
the attachment point for delivery channels such as push or e-mail.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("homestaff")


class HomestaffHookSpec:
    """Hook specifications for the homestaff plugin system."""

    @hookspec
    def post_register(self, user_id: str, username: str, role: str) -> None:
        """Called after a new account is registered."""

    @hookspec
    def post_task_create(
        self,
        task_id: str,
        title: str,
        created_by: str,
        assigned_to: str | None,
    ) -> None:
        """Called after a task is created (and its assignee notified)."""

    @hookspec
    def post_task_update(
        self,
        task_id: str,
        fields_changed: list[str],
        status: str,
        completed: bool,
    ) -> None:
        """Called after a task update. *completed* is True only on the completion edge."""

    @hookspec
    def post_task_delete(self, task_id: str) -> None:
        """Called after a task is deleted."""

    @hookspec
    def post_notifications_read(self, user_id: str, count: int) -> None:
        """Called after notifications are marked read."""
