"""Command: interactive shell over the same command grammar."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from staffbook.commands._base import StaffCommand

if TYPE_CHECKING:
    from staffbook.commands._context import AppContext

PROMPT = "staffbook"
EXIT_WORDS = frozenset({"exit", "quit"})
MESSAGE_GOODBYE = "Goodbye!"


@click.command(
    cls=StaffCommand,
    examples="""\
  staffbook shell
  staffbook --data team.json shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Read and execute commands until exit, quit, or end of input."""
    from staffbook.parsing.parser import HELP_MESSAGE

    while True:
        try:
            line = click.prompt(PROMPT, prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            break

        word = line.strip()
        if not word:
            continue
        if word in EXIT_WORDS:
            break
        if word == "help":
            click.echo(HELP_MESSAGE)
            continue
        app.emit(app.execute_line(line), exit_on_error=False)

    click.echo(MESSAGE_GOODBYE)
