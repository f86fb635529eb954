"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy Workspace initialization, a login
helper, and centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from homestaff.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from homestaff.config.settings import HomestaffSettings
    from homestaff.infrastructure.workspace import Workspace
    from homestaff.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. The workspace is lazily
    initialized on first use so ``--help`` and ``--version`` never build
    (or seed) a store.
    """

    def __init__(self, settings: HomestaffSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None

        from homestaff.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def workspace(self) -> Workspace:
        """The workspace instance (created lazily on first access)."""
        if self._workspace is None:
            from homestaff.infrastructure.workspace import Workspace

            self._workspace = Workspace(self.settings)
            self._workspace.init_event_bus()
        return self._workspace

    def login(self, username: str, password: str, role: str) -> str:
        """Log in and return the session token. Emits the failure and exits 1 otherwise."""
        from homestaff.services.auth import AuthService

        result = AuthService(self.workspace).login(username, password, role)
        if not result.ok:
            self.emit(result)
        return str(result.data["session_token"])

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
