"""Subcommand modules for staffbook.

Provides register_commands() which uses deferred imports to keep
``staffbook --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from staffbook.commands.anniversary import anniversary

    cli.add_command(anniversary)

    # --- Standalone commands ---
    from staffbook.commands.employee import add, clear, delete, edit, find, list_cmd
    from staffbook.commands.history import redo, undo
    from staffbook.commands.shell import shell
    from staffbook.commands.upcoming import upcoming

    cli.add_command(add)
    cli.add_command(delete)
    cli.add_command(edit)
    cli.add_command(find)
    cli.add_command(list_cmd)
    cli.add_command(clear)
    cli.add_command(undo)
    cli.add_command(redo)
    cli.add_command(upcoming)
    cli.add_command(shell)
