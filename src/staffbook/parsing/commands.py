"""Per-command argument parsers.

Each parser receives the argument string that follows the command word
and returns a ready-to-execute command object.
"""

from __future__ import annotations

from staffbook.domain.employee import Employee
from staffbook.domain.predicates import NameContainsKeywordsPredicate
from staffbook.errors import ParseError
from staffbook.messages import MESSAGE_INVALID_COMMAND_FORMAT
from staffbook.parsing import parser_utils
from staffbook.parsing.anniversary import multi_add_anniversary, parse_anniversary
from staffbook.parsing.syntax import Prefix
from staffbook.parsing.tokenizer import ArgumentMultimap, tokenize
from staffbook.services.anniversary import (
    AddAnniversaryCommand,
    DeleteAnniversaryCommand,
    ShowAnniversaryCommand,
)
from staffbook.services.employee import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    EditEmployeeDescriptor,
    FindCommand,
)
from staffbook.services.reminder import UpcomingCommand

MESSAGE_NOT_EDITED = "At least one field to edit must be provided."

_ANNIVERSARY_PREFIXES = (
    Prefix.EMPLOYEE_ID,
    Prefix.NAME,
    Prefix.BIRTHDAY,
    Prefix.WORK_ANNIVERSARY,
    Prefix.ANNIVERSARY_NAME,
    Prefix.ANNIVERSARY_DATE,
    Prefix.ANNIVERSARY_TYPE,
    Prefix.ANNIVERSARY_DESC,
    Prefix.ANNIVERSARY_TYPE_DESC,
)


def _invalid(usage: str) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage))


def _required(argmap: ArgumentMultimap, prefix: Prefix, usage: str) -> str:
    value = argmap.get_value(prefix)
    if value is None:
        raise _invalid(usage)
    return value


def parse_add(args: str) -> AddCommand:
    argmap = tokenize(
        args,
        Prefix.NAME,
        Prefix.PHONE,
        Prefix.EMAIL,
        Prefix.JOB_POSITION,
        Prefix.TAG,
        Prefix.BIRTHDAY,
        Prefix.WORK_ANNIVERSARY,
    )
    required = (Prefix.NAME, Prefix.PHONE, Prefix.EMAIL, Prefix.JOB_POSITION)
    if not argmap.are_present(*required) or argmap.get_preamble():
        raise _invalid(AddCommand.usage)
    argmap.verify_no_duplicate_prefixes_for(*required, Prefix.BIRTHDAY, Prefix.WORK_ANNIVERSARY)

    employee = Employee(
        name=parser_utils.parse_name(_required(argmap, Prefix.NAME, AddCommand.usage)),
        phone=parser_utils.parse_phone(_required(argmap, Prefix.PHONE, AddCommand.usage)),
        email=parser_utils.parse_email(_required(argmap, Prefix.EMAIL, AddCommand.usage)),
        job_position=parser_utils.parse_job_position(
            _required(argmap, Prefix.JOB_POSITION, AddCommand.usage)
        ),
        tags=parser_utils.parse_tags(argmap.get_all_values(Prefix.TAG)),
        anniversaries=tuple(multi_add_anniversary(argmap)),
    )
    return AddCommand(employee)


def parse_delete(args: str) -> DeleteCommand:
    if not args.strip():
        raise _invalid(DeleteCommand.usage)
    try:
        return DeleteCommand(parser_utils.parse_employee_id_prefix(args))
    except ParseError as exc:
        raise _invalid(DeleteCommand.usage) from exc


def parse_edit(args: str) -> EditCommand:
    argmap = tokenize(
        args, Prefix.NAME, Prefix.PHONE, Prefix.EMAIL, Prefix.JOB_POSITION, Prefix.TAG
    )
    preamble = argmap.get_preamble()
    if not preamble:
        raise _invalid(EditCommand.usage)
    try:
        prefix = parser_utils.parse_employee_id_prefix(preamble)
    except ParseError as exc:
        raise _invalid(EditCommand.usage) from exc
    argmap.verify_no_duplicate_prefixes_for(
        Prefix.NAME, Prefix.PHONE, Prefix.EMAIL, Prefix.JOB_POSITION
    )

    name = argmap.get_value(Prefix.NAME)
    phone = argmap.get_value(Prefix.PHONE)
    email = argmap.get_value(Prefix.EMAIL)
    job_position = argmap.get_value(Prefix.JOB_POSITION)
    descriptor = EditEmployeeDescriptor(
        name=parser_utils.parse_name(name) if name is not None else None,
        phone=parser_utils.parse_phone(phone) if phone is not None else None,
        email=parser_utils.parse_email(email) if email is not None else None,
        job_position=(
            parser_utils.parse_job_position(job_position) if job_position is not None else None
        ),
        tags=_parse_tags_for_edit(argmap.get_all_values(Prefix.TAG)),
    )
    if not descriptor.is_any_field_edited():
        raise ParseError(MESSAGE_NOT_EDITED)
    return EditCommand(prefix, descriptor)


def _parse_tags_for_edit(values: list[str]) -> frozenset[str] | None:
    """``t/`` alone clears all tags; no ``t/`` at all leaves tags untouched."""
    if not values:
        return None
    if values == [""]:
        return frozenset()
    return parser_utils.parse_tags(values)


def parse_find(args: str) -> FindCommand:
    keywords = args.split()
    if not keywords:
        raise _invalid(FindCommand.usage)
    return FindCommand(NameContainsKeywordsPredicate(tuple(keywords)))


def parse_upcoming(args: str, *, default_days: int = 7) -> UpcomingCommand:
    if not args.strip():
        return UpcomingCommand(default_days)
    return UpcomingCommand(parser_utils.parse_days(args))


def parse_anniversary_add(args: str) -> AddAnniversaryCommand:
    argmap = tokenize(args, *_ANNIVERSARY_PREFIXES)
    raw_prefix = argmap.get_value(Prefix.EMPLOYEE_ID)
    if raw_prefix is None or argmap.get_preamble():
        raise _invalid(AddAnniversaryCommand.usage)
    argmap.verify_no_duplicate_prefixes_for(*_ANNIVERSARY_PREFIXES)
    prefix = parser_utils.parse_employee_id_prefix(raw_prefix)
    return AddAnniversaryCommand(prefix, parse_anniversary(argmap))


def parse_anniversary_delete(args: str) -> DeleteAnniversaryCommand:
    argmap = tokenize(args, Prefix.EMPLOYEE_ID, Prefix.ANNIVERSARY_INDEX)
    if not argmap.are_present(Prefix.EMPLOYEE_ID, Prefix.ANNIVERSARY_INDEX):
        raise _invalid(DeleteAnniversaryCommand.usage)
    argmap.verify_no_duplicate_prefixes_for(Prefix.EMPLOYEE_ID, Prefix.ANNIVERSARY_INDEX)
    return DeleteAnniversaryCommand(
        parser_utils.parse_employee_id_prefix(
            _required(argmap, Prefix.EMPLOYEE_ID, DeleteAnniversaryCommand.usage)
        ),
        parser_utils.parse_index(
            _required(argmap, Prefix.ANNIVERSARY_INDEX, DeleteAnniversaryCommand.usage)
        ),
    )


def parse_anniversary_list(args: str) -> ShowAnniversaryCommand:
    argmap = tokenize(args, Prefix.EMPLOYEE_ID)
    raw_prefix = argmap.get_value(Prefix.EMPLOYEE_ID)
    if raw_prefix is None:
        raise _invalid(ShowAnniversaryCommand.usage)
    argmap.verify_no_duplicate_prefixes_for(Prefix.EMPLOYEE_ID)
    return ShowAnniversaryCommand(parser_utils.parse_employee_id_prefix(raw_prefix))
