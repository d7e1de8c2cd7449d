"""Commands: undo and redo the most recent changes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from staffbook.commands._base import StaffCommand

if TYPE_CHECKING:
    from staffbook.commands._context import AppContext


@click.command(
    cls=StaffCommand,
    examples="""\
  staffbook delete 3f2
  staffbook undo""",
)
@click.pass_obj
def undo(app: AppContext) -> None:
    """Restore the address book to its state before the last change."""
    app.run("undo", ())


@click.command(
    cls=StaffCommand,
    examples="""\
  staffbook undo
  staffbook redo""",
)
@click.pass_obj
def redo(app: AppContext) -> None:
    """Re-apply the most recently undone change."""
    app.run("redo", ())
