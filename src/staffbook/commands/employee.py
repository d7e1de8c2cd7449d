"""Commands: add, delete, edit, find, list, and clear employees.

Arguments are passed through untouched and parsed by the same
prefix grammar the interactive shell uses (``n/NAME p/PHONE ...``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from staffbook.commands._base import StaffCommand

if TYPE_CHECKING:
    from staffbook.commands._context import AppContext

_raw_args = click.argument("args", nargs=-1, type=click.UNPROCESSED)


@click.command(
    cls=StaffCommand,
    raw_args=True,
    examples="""\
  staffbook add n/John Doe p/98765432 e/johnd@example.com j/Engineer
  staffbook add n/Amy Tan p/91234567 e/amy@example.com j/Designer t/remote t/lead
  staffbook add n/Amy Tan p/91234567 e/amy@example.com j/Designer bd/1995-06-01""",
)
@_raw_args
@click.pass_obj
def add(app: AppContext, args: tuple[str, ...]) -> None:
    """Add an employee: n/NAME p/PHONE e/EMAIL j/JOB [t/TAG]... [bd/DATE] [wa/DATE]."""
    app.run("add", args)


@click.command(
    cls=StaffCommand,
    raw_args=True,
    examples="""\
  staffbook delete 3f2
  staffbook delete 3f2a9c1e-0b7d-4c36-9d0e-2a1f4b5c6d7e""",
)
@_raw_args
@click.pass_obj
def delete(app: AppContext, args: tuple[str, ...]) -> None:
    """Delete the employee whose ID starts with EMPLOYEE_ID_PREFIX."""
    app.run("delete", args)


@click.command(
    cls=StaffCommand,
    raw_args=True,
    examples="""\
  staffbook edit 3f2 p/91234567 e/johndoe@example.com
  staffbook edit 3f2 j/Senior Engineer
  staffbook edit 3f2 t/""",
)
@_raw_args
@click.pass_obj
def edit(app: AppContext, args: tuple[str, ...]) -> None:
    """Edit fields of the employee whose ID starts with EMPLOYEE_ID_PREFIX."""
    app.run("edit", args)


@click.command(
    cls=StaffCommand,
    raw_args=True,
    examples="""\
  staffbook find alex
  staffbook find alex david""",
)
@_raw_args
@click.pass_obj
def find(app: AppContext, args: tuple[str, ...]) -> None:
    """Find employees whose names contain any of the KEYWORDS."""
    app.run("find", args)


@click.command(
    "list",
    cls=StaffCommand,
    examples="""\
  staffbook list
  staffbook --json list
  staffbook -q list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all employees."""
    app.run("list", ())


@click.command(
    cls=StaffCommand,
    examples="""\
  staffbook clear
  staffbook undo""",
)
@click.pass_obj
def clear(app: AppContext) -> None:
    """Remove every employee from the address book."""
    app.run("clear", ())
