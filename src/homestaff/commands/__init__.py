"""Subcommand modules for homestaff.

Provides register_commands() which uses deferred imports to keep
``homestaff --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    1 group (has subcommands) + 4 standalone commands.
    """
    # --- Groups ---
    from homestaff.commands.tasks import tasks

    cli.add_command(tasks)

    # --- Standalone commands ---
    from homestaff.commands.maids import maids
    from homestaff.commands.notifications import notifications
    from homestaff.commands.serve import serve
    from homestaff.commands.status import status

    cli.add_command(status)
    cli.add_command(maids)
    cli.add_command(notifications)
    cli.add_command(serve)
