"""Top-level command-line parser.

``parse_command("delete 3f2")`` splits off the command word and
dispatches the remaining arguments to the matching parser. ``anniversary``
takes a second word (``add``, ``delete``, ``list``).
"""

from __future__ import annotations

import re
from collections.abc import Callable

from staffbook.errors import ParseError
from staffbook.messages import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_UNKNOWN_COMMAND
from staffbook.parsing import commands
from staffbook.services.base import Command
from staffbook.services.employee import ClearCommand, ListCommand
from staffbook.services.history import RedoCommand, UndoCommand

HELP_MESSAGE = """\
Commands:
  add n/NAME p/PHONE e/EMAIL j/JOB_POSITION [t/TAG]... [bd/BIRTHDAY] [wa/WORK_ANNIVERSARY]
  delete EMPLOYEE_ID_PREFIX
  edit EMPLOYEE_ID_PREFIX [n/NAME] [p/PHONE] [e/EMAIL] [j/JOB_POSITION] [t/TAG]...
  find KEYWORD [MORE_KEYWORDS]...
  list
  clear
  undo
  redo
  upcoming [DAYS]
  anniversary add eid/EMPLOYEE_ID_PREFIX an/NAME d/DATE at/TYPE [ad/DESC] [atdesc/TYPE_DESC]
  anniversary add eid/EMPLOYEE_ID_PREFIX n/NAME bd/BIRTHDAY | wa/WORK_ANNIVERSARY
  anniversary delete eid/EMPLOYEE_ID_PREFIX ai/INDEX
  anniversary list eid/EMPLOYEE_ID_PREFIX
  help
  exit"""

_COMMAND_FORMAT = re.compile(r"^\s*(?P<word>\S+)(?P<args>.*)$", re.DOTALL)

_ANNIVERSARY_PARSERS: dict[str, Callable[[str], Command]] = {
    "add": commands.parse_anniversary_add,
    "delete": commands.parse_anniversary_delete,
    "list": commands.parse_anniversary_list,
}


def _parse_anniversary_command(args: str) -> Command:
    match = _COMMAND_FORMAT.match(args)
    if match is None:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(HELP_MESSAGE))
    parser = _ANNIVERSARY_PARSERS.get(match.group("word"))
    if parser is None:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
    return parser(match.group("args"))


def parse_command(line: str, *, default_days: int = 7) -> Command:
    """Parse a full command line into a command object."""
    match = _COMMAND_FORMAT.match(line)
    if match is None:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(HELP_MESSAGE))

    word, args = match.group("word"), match.group("args")
    parsers: dict[str, Callable[[str], Command]] = {
        "add": commands.parse_add,
        "delete": commands.parse_delete,
        "edit": commands.parse_edit,
        "find": commands.parse_find,
        "list": lambda _args: ListCommand(),
        "clear": lambda _args: ClearCommand(),
        "undo": lambda _args: UndoCommand(),
        "redo": lambda _args: RedoCommand(),
        "upcoming": lambda a: commands.parse_upcoming(a, default_days=default_days),
        "anniversary": _parse_anniversary_command,
    }
    parser = parsers.get(word)
    if parser is None:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
    return parser(args)
