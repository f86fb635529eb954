"""Custom Click base classes with --examples support.

Provides HsCommand and HsGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
Also provides :func:`login_options`, the credential flags shared by every
command that reads household data.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class HsCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class HsGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = HsCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = HsCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def login_options(func: F) -> F:
    """Add ``--username``, ``--password`` and ``--role`` to a command."""
    func = click.option(
        "--role",
        type=click.Choice(["owner", "maid"]),
        default="owner",
        show_default=True,
        help="Role to log in as.",
    )(func)
    func = click.option(
        "--password", prompt=True, hide_input=True, help="Account password."
    )(func)
    func = click.option("-u", "--username", required=True, help="Account username.")(func)
    return func
