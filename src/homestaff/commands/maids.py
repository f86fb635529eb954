"""maids — list the household's maids."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from homestaff.commands._base import HsCommand, login_options
from homestaff.services.users import UserService

if TYPE_CHECKING:
    from homestaff.commands._context import AppContext


@click.command(
    cls=HsCommand,
    examples="""\
  homestaff maids -u owner --password 1234
  homestaff -v maids -u maid1 --password 1234 --role maid""",
)
@login_options
@click.pass_obj
def maids(app: AppContext, username: str, password: str, role: str) -> None:
    """List every maid account."""
    token = app.login(username, password, role)
    app.emit(UserService(app.workspace).list_maids(token))
