"""Rich Console factory and theme for homestaff output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

HS_THEME = Theme(
    {
        "hs.ok": "bold green",
        "hs.error": "bold red",
        "hs.warning": "bold yellow",
        "hs.op": "bold cyan",
        "hs.key": "dim",
        "hs.id": "bold blue",
        "hs.title": "bold",
        "hs.status.pending": "yellow",
        "hs.status.in_progress": "cyan",
        "hs.status.completed": "green",
        "hs.priority.high": "bold red",
        "hs.priority.medium": "",
        "hs.priority.low": "dim",
        "hs.unread": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=HS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Return the Rich style name for a task status."""
    return f"hs.status.{status}" if status in ("pending", "in_progress", "completed") else ""


def style_for_priority(priority: str) -> str:
    return f"hs.priority.{priority}" if priority in ("high", "medium", "low") else ""
