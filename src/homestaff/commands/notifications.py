"""notifications — show your notifications."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from homestaff.commands._base import HsCommand, login_options
from homestaff.services.notifications import NotificationService

if TYPE_CHECKING:
    from homestaff.commands._context import AppContext


@click.command(
    cls=HsCommand,
    examples="""\
  homestaff notifications -u owner --password 1234
  homestaff --json notifications -u maid1 --password 1234 --role maid""",
)
@login_options
@click.pass_obj
def notifications(app: AppContext, username: str, password: str, role: str) -> None:
    """List your notifications, newest first."""
    token = app.login(username, password, role)
    app.emit(NotificationService(app.workspace).list_notifications(token))
