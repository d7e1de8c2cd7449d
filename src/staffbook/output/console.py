"""Rich Console factory and theme for staffbook output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

STAFFBOOK_THEME = Theme(
    {
        "sb.ok": "bold green",
        "sb.error": "bold red",
        "sb.warning": "bold yellow",
        "sb.op": "bold cyan",
        "sb.key": "dim",
        "sb.id": "bold blue",
        "sb.name": "bold",
        "sb.tag": "magenta",
        "sb.date": "green",
        "sb.kind.birthday": "yellow",
        "sb.kind.work_anniversary": "cyan",
        "sb.kind.custom": "magenta",
    }
)

_KIND_STYLES: dict[str, str] = {
    "birthday": "sb.kind.birthday",
    "work_anniversary": "sb.kind.work_anniversary",
    "custom": "sb.kind.custom",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=STAFFBOOK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for an anniversary kind."""
    return _KIND_STYLES.get(kind, "")
