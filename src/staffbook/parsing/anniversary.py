"""Anniversary parsing from an argument multimap.

Three field-sets can describe an anniversary:

- standard: ``an/NAME at/TYPE d/DATE [ad/DESC] [atdesc/TYPE_DESC]``
- birthday: ``n/PERSON bd/DATE``
- work anniversary: ``n/PERSON wa/DATE``

:func:`parse_anniversary` accepts exactly one of them and rejects the
standard set mixed with either of the others. :func:`multi_add_anniversary`
is used when adding an employee and may return a birthday and a work
anniversary together.
"""

from __future__ import annotations

from staffbook.domain.anniversary import Anniversary
from staffbook.domain.fields import DATE_CONSTRAINTS
from staffbook.errors import ParseError
from staffbook.messages import MESSAGE_INVALID_COMMAND_FORMAT
from staffbook.parsing import parser_utils
from staffbook.parsing.syntax import Prefix
from staffbook.parsing.tokenizer import ArgumentMultimap

INVALID_ANNIVERSARY = (
    "Anniversary must include the following prefixes: an/NAME d/DATE at/type "
    "ad/description atdesc/typeDescription or bd/ for BIRTHDAY or wa/ for WORK_ANNIVERSARY"
)
MESSAGE_DATE_CONSTRAINTS = DATE_CONSTRAINTS


def parse_anniversary(argmap: ArgumentMultimap) -> Anniversary:
    """Parse a single anniversary, choosing the field-set by presence."""
    has_standard = argmap.are_present(Prefix.ANNIVERSARY_NAME, Prefix.ANNIVERSARY_TYPE)
    has_birthday = argmap.are_present(Prefix.BIRTHDAY, Prefix.NAME)
    has_work = argmap.has(Prefix.WORK_ANNIVERSARY)

    if has_standard and (has_birthday or has_work):
        raise ParseError(_format_error())
    if has_standard:
        return _parse_standard(argmap)
    if has_birthday:
        return _parse_birthday(argmap)
    if has_work:
        return _parse_work_anniversary(argmap)
    raise ParseError(_format_error())


def multi_add_anniversary(argmap: ArgumentMultimap) -> list[Anniversary]:
    """Collect a birthday and/or a work anniversary, in that order."""
    anniversaries: list[Anniversary] = []
    if argmap.are_present(Prefix.BIRTHDAY, Prefix.NAME):
        anniversaries.append(_parse_birthday(argmap))
    if argmap.has(Prefix.WORK_ANNIVERSARY):
        anniversaries.append(_parse_work_anniversary(argmap))
    return anniversaries


def _parse_standard(argmap: ArgumentMultimap) -> Anniversary:
    date_value = argmap.get_value(Prefix.ANNIVERSARY_DATE)
    if date_value is None:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(MESSAGE_DATE_CONSTRAINTS))
    return parser_utils.parse_anniversary(
        argmap.get_value(Prefix.ANNIVERSARY_NAME) or "",
        argmap.get_value(Prefix.ANNIVERSARY_DESC) or "",
        date_value,
        argmap.get_value(Prefix.ANNIVERSARY_TYPE) or "",
        argmap.get_value(Prefix.ANNIVERSARY_TYPE_DESC) or "",
    )


def _parse_birthday(argmap: ArgumentMultimap) -> Anniversary:
    return _parse_named(argmap, Prefix.BIRTHDAY)


def _parse_work_anniversary(argmap: ArgumentMultimap) -> Anniversary:
    return _parse_named(argmap, Prefix.WORK_ANNIVERSARY)


def _parse_named(argmap: ArgumentMultimap, prefix: Prefix) -> Anniversary:
    raw_name = argmap.get_value(Prefix.NAME)
    if raw_name is None:
        raise ParseError(_format_error())
    person_name = parser_utils.parse_name(raw_name)
    return parser_utils.parse_anniversary_with_name(
        person_name, argmap.get_value(prefix) or "", prefix
    )


def _format_error() -> str:
    return MESSAGE_INVALID_COMMAND_FORMAT.format(INVALID_ANNIVERSARY)
