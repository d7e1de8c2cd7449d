"""Field-level parsers: raw strings in, validated values out.

Every function trims its input and raises ``ParseError`` with the
field's constraint message when validation fails.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable

from staffbook.domain import fields
from staffbook.domain.anniversary import (
    Anniversary,
    BirthdayType,
    CustomAnniversaryType,
    WorkAnniversaryType,
)
from staffbook.domain.ids import MESSAGE_CONSTRAINTS as EMPLOYEE_ID_CONSTRAINTS
from staffbook.domain.ids import EmployeeId, is_valid_employee_id
from staffbook.errors import ParseError
from staffbook.parsing.syntax import Prefix

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_DAYS = "Number of days must be a non-negative integer."


def parse_employee_id_prefix(value: str) -> EmployeeId:
    trimmed = value.strip()
    if not is_valid_employee_id(trimmed):
        raise ParseError(EMPLOYEE_ID_CONSTRAINTS)
    return EmployeeId.from_string(trimmed)


def parse_name(value: str) -> str:
    trimmed = value.strip()
    if not fields.is_valid_name(trimmed):
        raise ParseError(fields.NAME_CONSTRAINTS)
    return trimmed


def parse_phone(value: str) -> str:
    trimmed = value.strip()
    if not fields.is_valid_phone(trimmed):
        raise ParseError(fields.PHONE_CONSTRAINTS)
    return trimmed


def parse_email(value: str) -> str:
    trimmed = value.strip()
    if not fields.is_valid_email(trimmed):
        raise ParseError(fields.EMAIL_CONSTRAINTS)
    return trimmed


def parse_job_position(value: str) -> str:
    trimmed = value.strip()
    if not fields.is_valid_job_position(trimmed):
        raise ParseError(fields.JOB_POSITION_CONSTRAINTS)
    return trimmed


def parse_tag(value: str) -> str:
    trimmed = value.strip()
    if not fields.is_valid_tag(trimmed):
        raise ParseError(fields.TAG_CONSTRAINTS)
    return trimmed


def parse_tags(values: Iterable[str]) -> frozenset[str]:
    return frozenset(parse_tag(v) for v in values)


def parse_date(value: str) -> datetime.date:
    """Strict ``YYYY-MM-DD`` date."""
    try:
        return fields.parse_iso_date(value.strip())
    except ValueError as exc:
        raise ParseError(fields.DATE_CONSTRAINTS) from exc


def parse_index(value: str) -> int:
    """One-based index as typed by the user."""
    trimmed = value.strip()
    if not (trimmed.isascii() and trimmed.isdigit()) or int(trimmed) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return int(trimmed)


def parse_days(value: str) -> int:
    trimmed = value.strip()
    if not (trimmed.isascii() and trimmed.isdigit()):
        raise ParseError(MESSAGE_INVALID_DAYS)
    return int(trimmed)


def parse_anniversary(
    name: str,
    description: str,
    date_value: str,
    type_name: str,
    type_description: str,
) -> Anniversary:
    """Build a custom anniversary from its raw parts."""
    anniversary_name = name.strip()
    type_label = type_name.strip()
    if not anniversary_name:
        raise ParseError("Anniversary name should not be blank")
    if not type_label:
        raise ParseError("Anniversary type should not be blank")
    return Anniversary(
        date=parse_date(date_value),
        type=CustomAnniversaryType(name=type_label, description=type_description.strip()),
        name=anniversary_name,
        description=description.strip(),
    )


def parse_anniversary_with_name(person_name: str, date_value: str, prefix: Prefix) -> Anniversary:
    """Build a birthday or work anniversary for *person_name*.

    *prefix* selects the type: ``bd/`` for birthdays, ``wa/`` for work
    anniversaries.
    """
    parsed_date = parse_date(date_value)
    match prefix:
        case Prefix.BIRTHDAY:
            return Anniversary(
                date=parsed_date,
                type=BirthdayType(),
                name=f"{person_name}'s Birthday",
                description=f"Birthday of {person_name}",
            )
        case Prefix.WORK_ANNIVERSARY:
            return Anniversary(
                date=parsed_date,
                type=WorkAnniversaryType(),
                name=f"{person_name}'s Work Anniversary",
                description=f"Work anniversary of {person_name}",
            )
        case _:
            raise ValueError(f"No anniversary type for prefix {prefix!r}")
