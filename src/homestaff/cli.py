"""Root ``homestaff`` command.

Every invocation is its own household: the first subcommand that needs data
builds a fresh in-memory workspace (seeded with the demo owner and maids
unless ``store.seed_demo_data`` is off), and everything in it, sessions
included, is gone when the process exits. Only ``serve`` keeps one household
alive across many requests.
"""

from __future__ import annotations

import click

from homestaff import __version__
from homestaff.commands import register_commands
from homestaff.commands._context import AppContext
from homestaff.config.settings import HomestaffSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="homestaff")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """homestaff: household task and notification manager.

    Read commands log in per call with -u/--password/--role against a fresh
    demo household; run `homestaff serve` for a long-lived one.
    """
    ctx.ensure_object(dict)
    settings = HomestaffSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
