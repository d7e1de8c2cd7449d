"""Command group: manage an employee's anniversaries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from staffbook.commands._base import StaffGroup

if TYPE_CHECKING:
    from staffbook.commands._context import AppContext

_raw_args = click.argument("args", nargs=-1, type=click.UNPROCESSED)


@click.group(
    cls=StaffGroup,
    examples="""\
  staffbook anniversary add eid/3f2 an/Wedding d/2015-06-20 at/Wedding
  staffbook anniversary add eid/3f2 n/John Doe bd/1990-04-12
  staffbook anniversary list eid/3f2
  staffbook anniversary delete eid/3f2 ai/1""",
)
def anniversary() -> None:
    """Add, delete, and list employee anniversaries."""


@anniversary.command(
    raw_args=True,
    examples="""\
  staffbook anniversary add eid/3f2 an/Wedding d/2015-06-20 at/Wedding ad/Big day
  staffbook anniversary add eid/3f2 n/John Doe bd/1990-04-12
  staffbook anniversary add eid/3f2 n/John Doe wa/2020-01-06""",
)
@_raw_args
@click.pass_obj
def add(app: AppContext, args: tuple[str, ...]) -> None:
    """Attach an anniversary to the employee identified by eid/PREFIX."""
    app.run("anniversary add", args)


@anniversary.command(
    raw_args=True,
    examples="""\
  staffbook anniversary delete eid/3f2 ai/1""",
)
@_raw_args
@click.pass_obj
def delete(app: AppContext, args: tuple[str, ...]) -> None:
    """Remove the anniversary at index ai/INDEX from an employee."""
    app.run("anniversary delete", args)


@anniversary.command(
    "list",
    raw_args=True,
    examples="""\
  staffbook anniversary list eid/3f2
  staffbook --json anniversary list eid/3f2""",
)
@_raw_args
@click.pass_obj
def list_cmd(app: AppContext, args: tuple[str, ...]) -> None:
    """Show the anniversaries of the employee identified by eid/PREFIX."""
    app.run("anniversary list", args)
