"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from homestaff.output.console import (
    create_console,
    get_output,
    style_for_priority,
    style_for_status,
)

if TYPE_CHECKING:
    from rich.console import Console

    from homestaff.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    # For list results, return IDs only
    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if isinstance(item, dict))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="hs.ok")
    op = Text(f"  {result.op}", style="hs.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="hs.key")
    if key == "id" or key.endswith("_id") or key in ("assigned_to", "created_by"):
        v = Text(str(value), style="hs.id")
    elif key == "title":
        v = Text(str(value), style="hs.title")
    elif key == "status":
        v = Text(str(value), style=style_for_status(str(value)))
    elif key == "priority":
        v = Text(str(value), style=style_for_priority(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _short_date(value: Any) -> str:
    """``2026-03-01T09:30:00+00:00`` -> ``2026-03-01 09:30``."""
    if not value:
        return "—"
    text = str(value)
    return text[:16].replace("T", " ")


def _task_table(items: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="hs.id", no_wrap=True)
    table.add_column("Title", style="hs.title")
    table.add_column("Status")
    table.add_column("Priority")
    table.add_column("Assigned To")
    table.add_column("Deadline", no_wrap=True)
    if verbose:
        table.add_column("Completed", style="dim", no_wrap=True)
        table.add_column("Notes", style="dim")

    for item in items:
        status = str(item.get("status", ""))
        priority = str(item.get("priority", ""))
        row: list[Any] = [
            str(item.get("id", "")),
            str(item.get("title", "")),
            Text(status, style=style_for_status(status)),
            Text(priority, style=style_for_priority(priority)),
            str(item.get("assigned_to") or "—"),
            _short_date(item.get("deadline")),
        ]
        if verbose:
            row.append(_short_date(item.get("completed_at")))
            row.append(str(item.get("notes") or ""))
        table.add_row(*row)
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="hs.error")
    op = Text(f"  {result.op}", style="hs.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Task renderers ────────────────────────────────────────────────────


def _render_task_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_tasks / list_my_tasks as a table."""
    items = result.data.get("items", [])
    console.print(_task_table(items, verbose=verbose))
    count = result.data.get("count", len(items))
    scope = result.data.get("scope")
    suffix = f" ({scope})" if scope else ""
    console.print(f"\n{count} task{'s' if count != 1 else ''}{suffix}")


def _render_task_panel(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single task as a panel."""
    task = result.data.get("task", {})
    lines: list[str] = []
    for key in ("status", "priority", "assigned_to", "created_by"):
        val = task.get(key)
        if val is not None:
            lines.append(f"{key}: {val}")
    for key in ("deadline", "completed_at"):
        val = task.get(key)
        if val is not None:
            lines.append(f"{key}: {_short_date(val)}")
    if task.get("photo_evidence"):
        lines.append(f"photo: {task['photo_evidence']}")
    if task.get("notes"):
        lines.append(f"notes: {task['notes']}")

    content = "\n".join(lines)
    if task.get("description"):
        content += f"\n\n{task['description'].strip()}"

    title = f"{task.get('id', '?')} — {task.get('title', 'Untitled')}"
    style = style_for_status(str(task.get("status", "")))
    console.print(Panel(content, title=title, border_style=style or "dim", expand=False))


def _render_task_mutation(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render create_task / update_task results."""
    _status_line(console, result)
    task = result.data.get("task", {})
    for key in ("id", "title", "status", "priority", "assigned_to"):
        if task.get(key) is not None:
            _field(console, key, task[key])
    if "fields_changed" in result.data:
        _field(console, "fields_changed", ", ".join(result.data["fields_changed"]) or "—")
    if result.data.get("completed"):
        _field(console, "completed_at", _short_date(task.get("completed_at")))


# ── User renderers ────────────────────────────────────────────────────


def _render_user_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_maids as a table."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="hs.id", no_wrap=True)
    table.add_column("Username")
    table.add_column("Name", style="hs.title")
    table.add_column("Language")
    if verbose:
        table.add_column("Role", style="dim")
    for item in items:
        row = [
            str(item.get("id", "")),
            str(item.get("username", "")),
            str(item.get("name", "")),
            str(item.get("language", "")),
        ]
        if verbose:
            row.append(str(item.get("role", "")))
        table.add_row(*row)
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} maids")


def _render_user(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render register / login / current_user / update_language."""
    _status_line(console, result)
    user = result.data.get("user", {})
    for key in ("id", "username", "name", "role", "language"):
        if key in user:
            _field(console, key, user[key])
    # session_token only in verbose mode
    if verbose and "session_token" in result.data:
        _field(console, "session_token", result.data["session_token"])


# ── Notification renderers ────────────────────────────────────────────


def _render_notification_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("", no_wrap=True)
    table.add_column("Title")
    table.add_column("Message")
    table.add_column("Type")
    table.add_column("When", no_wrap=True)
    if verbose:
        table.add_column("ID", style="dim", no_wrap=True)
    for item in items:
        unread = not item.get("read", False)
        marker = Text("●" if unread else " ", style="hs.warning" if unread else "")
        row: list[Any] = [
            marker,
            Text(str(item.get("title", "")), style="hs.unread" if unread else ""),
            str(item.get("message", "")),
            str(item.get("type", "")),
            _short_date(item.get("created_at")),
        ]
        if verbose:
            row.append(str(item.get("id", "")))
        table.add_row(*row)
    console.print(table)
    console.print(
        f"\n{result.data.get('count', len(items))} notifications, "
        f"{result.data.get('unread', 0)} unread"
    )


# ── Status renderer ───────────────────────────────────────────────────


def _render_status(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render store counts from ``homestaff status``."""
    _status_line(console, result)
    for key, value in result.data.get("counts", {}).items():
        _field(console, key, value)
    if result.data.get("config_path"):
        _field(console, "config", result.data["config_path"])
    if verbose:
        for key, value in result.data.get("events", {}).items():
            _field(console, f"events.{key}", value)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Account
    "register": _render_user,
    "login": _render_user,
    "current_user": _render_user,
    "update_language": _render_user,
    "list_maids": _render_user_table,
    # Tasks
    "list_tasks": _render_task_list,
    "list_my_tasks": _render_task_list,
    "get_task": _render_task_panel,
    "create_task": _render_task_mutation,
    "update_task": _render_task_mutation,
    # Notifications
    "list_notifications": _render_notification_table,
    # Store
    "status": _render_status,
}
