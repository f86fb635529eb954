"""status — summarize the household store."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from homestaff.commands._base import HsCommand
from homestaff.services.status import StatusService

if TYPE_CHECKING:
    from homestaff.commands._context import AppContext


@click.command(
    cls=HsCommand,
    examples="""\
  homestaff status
  homestaff --json status
  homestaff -v status""",
)
@click.pass_obj
def status(app: AppContext) -> None:
    """Show entity counts for a fresh workspace under the current config."""
    app.emit(StatusService(app.workspace).status())
