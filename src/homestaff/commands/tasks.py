"""Command group: read household tasks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from homestaff.commands._base import HsGroup, login_options
from homestaff.services.tasks import TaskService

if TYPE_CHECKING:
    from homestaff.commands._context import AppContext

_TASKS_EXAMPLES = """\
  homestaff tasks list -u owner --password 1234
  homestaff tasks list -u maid1 --password 1234 --role maid
  homestaff tasks list -u owner --password 1234 --mine
  homestaff tasks show task-1 -u owner --password 1234
  homestaff --json tasks list -u owner --password 1234"""


@click.group(cls=HsGroup, examples=_TASKS_EXAMPLES)
@click.pass_obj
def tasks(app: AppContext) -> None:
    """List and inspect household tasks."""


@tasks.command(
    "list",
    examples="""\
  homestaff tasks list -u owner --password 1234
  homestaff tasks list -u maid2 --password 1234 --role maid
  homestaff -q tasks list -u owner --password 1234""",
)
@login_options
@click.option("--mine", is_flag=True, help="Only tasks assigned to you.")
@click.pass_obj
def list_cmd(app: AppContext, username: str, password: str, role: str, mine: bool) -> None:
    """List tasks, latest deadline first.

    Owners see every task, maids see the tasks assigned to them.
    """
    token = app.login(username, password, role)
    svc = TaskService(app.workspace)
    app.emit(svc.list_my_tasks(token) if mine else svc.list_tasks(token))


@tasks.command(
    examples="""\
  homestaff tasks show task-1 -u owner --password 1234
  homestaff --json tasks show task-4 -u maid1 --password 1234 --role maid"""
)
@click.argument("task_id")
@login_options
@click.pass_obj
def show(app: AppContext, task_id: str, username: str, password: str, role: str) -> None:
    """Show one task."""
    token = app.login(username, password, role)
    app.emit(TaskService(app.workspace).get_task(token, task_id))
