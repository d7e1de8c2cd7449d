"""Command: list employees with an anniversary coming up."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from staffbook.commands._base import StaffCommand

if TYPE_CHECKING:
    from staffbook.commands._context import AppContext


@click.command(
    cls=StaffCommand,
    raw_args=True,
    examples="""\
  staffbook upcoming
  staffbook upcoming 30
  staffbook --json upcoming 0""",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def upcoming(app: AppContext, args: tuple[str, ...]) -> None:
    """List employees whose next anniversary is within DAYS days.

    DAYS defaults to ``reminder.default_days`` from staffbook.toml.
    """
    app.run("upcoming", args)
