"""Operation-specific Rich renderers for CommandResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer. User data is
always wrapped in ``Text`` so tag brackets are never read as markup.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from staffbook.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from staffbook.services.result import CommandResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: CommandResult, *, verbose: bool = False) -> str:
    """Render a CommandResult to a styled string via Rich.

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


def render_quiet(result: CommandResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    employees = result.data.get("employees")
    if isinstance(employees, list):
        return "\n".join(str(e.get("id", "")) for e in employees)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: CommandResult) -> None:
    """Print the OK line followed by the result message."""
    console.print(Text("OK", style="sb.ok"), Text(f"  {result.op}", style="sb.op"))
    if result.message:
        console.print(Text(f"  {result.message}"), soft_wrap=True)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="sb.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="sb.id")
    elif key == "name":
        v = Text(str(value), style="sb.name")
    else:
        v = Text(str(value))
    console.print(k, v, soft_wrap=True)


def _employee_table(employees: list[dict[str, Any]], *, show_next: bool = False) -> Table:
    """Build a Rich Table for a list of employees."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="sb.id", no_wrap=True)
    table.add_column("Name", style="sb.name")
    table.add_column("Phone")
    table.add_column("Email")
    table.add_column("Job")
    table.add_column("Tags", style="sb.tag")
    if show_next:
        table.add_column("Next", style="sb.date", no_wrap=True)

    for emp in employees:
        row = [
            Text(str(emp.get("id", ""))),
            Text(str(emp.get("name", ""))),
            Text(str(emp.get("phone", ""))),
            Text(str(emp.get("email", ""))),
            Text(str(emp.get("job_position", ""))),
            Text(", ".join(emp.get("tags", []))),
        ]
        if show_next:
            row.append(Text(str(emp.get("next_upcoming") or "-")))
        table.add_row(*row)

    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: CommandResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="sb.error")
    op = Text(f"  {result.op}", style="sb.op")
    console.print(label, op, Text(" — "), Text(msg), soft_wrap=True)

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(Text(f"    {k}: {v}"), soft_wrap=True)


# ── Mutation renderers ────────────────────────────────────────────────


def _render_mutation(result: CommandResult, console: Console, *, verbose: bool = False) -> None:
    """Render add/delete/edit and anniversary add/delete results."""
    _status_line(console, result)
    employee = result.data.get("employee")
    if isinstance(employee, dict):
        _field(console, "id", employee.get("id", ""))
        _field(console, "name", employee.get("name", ""))
    if "fields_changed" in result.data:
        _field(console, "fields_changed", ", ".join(result.data["fields_changed"]))
    if verbose and isinstance(employee, dict):
        for key in ("phone", "email", "job_position", "next_upcoming"):
            _field(console, key, employee.get(key))


# ── Listing renderers ─────────────────────────────────────────────────


def _render_employee_list(
    result: CommandResult, console: Console, *, verbose: bool = False
) -> None:
    """Render list/find/upcoming results as an employee table."""
    _status_line(console, result)
    employees = result.data.get("employees", [])
    if employees:
        console.print()
        show_next = result.op == "upcoming" or verbose
        console.print(_employee_table(employees, show_next=show_next))


def _render_anniversaries(
    result: CommandResult, console: Console, *, verbose: bool = False
) -> None:
    """Render one employee's anniversaries as a table."""
    _status_line(console, result)
    items = result.data.get("anniversaries", [])
    if not items:
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right")
    table.add_column("Name", style="sb.name")
    table.add_column("Type")
    table.add_column("Date", style="sb.date", no_wrap=True)
    table.add_column("Next", style="sb.date", no_wrap=True)
    table.add_column("Description")
    for item in items:
        table.add_row(
            str(item.get("index", "")),
            Text(str(item.get("name", ""))),
            Text(str(item.get("type", "")), style=style_for_kind(str(item.get("kind", "")))),
            str(item.get("date", "")),
            str(item.get("next", "")),
            Text(str(item.get("description", ""))),
        )
    console.print()
    console.print(table)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: CommandResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Mutations
    "add": _render_mutation,
    "delete": _render_mutation,
    "edit": _render_mutation,
    "anniversary_add": _render_mutation,
    "anniversary_delete": _render_mutation,
    # Listings
    "list": _render_employee_list,
    "find": _render_employee_list,
    "upcoming": _render_employee_list,
    "anniversary_list": _render_anniversaries,
    # History and housekeeping fall through to the generic renderer
    "undo": _render_generic,
    "redo": _render_generic,
    "clear": _render_generic,
}
