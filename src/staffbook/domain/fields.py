"""Validation rules for employee fields.

Each field has a compiled pattern and a constraint message. The
``Annotated`` aliases plug the same rules into pydantic models, and the
parser layer reuses the ``is_valid_*`` checks to raise ``ParseError``
with the constraint message.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Annotated

from pydantic import AfterValidator

NAME_CONSTRAINTS = (
    "Names should only contain alphanumeric characters and spaces, and it should not be blank"
)
PHONE_CONSTRAINTS = (
    "Phone numbers should only contain numbers, and it should be at least 3 digits long"
)
EMAIL_CONSTRAINTS = (
    "Emails should be of the format local-part@domain. The local-part should only contain "
    "alphanumeric characters separated by one of +_.- and the domain should be made up of "
    "labels separated by periods, ending with a label at least 2 characters long"
)
JOB_POSITION_CONSTRAINTS = "Job positions can take any values, and it should not be blank"
TAG_CONSTRAINTS = "Tags names should be alphanumeric"
DATE_CONSTRAINTS = "Anniversary date must be in YYYY-MM-DD format."

_LOCAL_PART = r"[A-Za-z0-9]+(?:[+_.-][A-Za-z0-9]+)*"
_DOMAIN_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
_LAST_LABEL = r"[A-Za-z0-9][A-Za-z0-9-]*[A-Za-z0-9]"

FIELD_PATTERNS: dict[str, re.Pattern[str]] = {
    "name": re.compile(r"^[A-Za-z0-9][A-Za-z0-9 ]*$"),
    "phone": re.compile(r"^\d{3,}$"),
    "email": re.compile(rf"^{_LOCAL_PART}@(?:{_DOMAIN_LABEL}\.)*{_LAST_LABEL}$"),
    "job_position": re.compile(r"^\S.*$"),
    "tag": re.compile(r"^[A-Za-z0-9]+$"),
}

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_valid_name(value: str) -> bool:
    return FIELD_PATTERNS["name"].match(value) is not None


def is_valid_phone(value: str) -> bool:
    return FIELD_PATTERNS["phone"].match(value) is not None


def is_valid_email(value: str) -> bool:
    return FIELD_PATTERNS["email"].match(value) is not None


def is_valid_job_position(value: str) -> bool:
    return FIELD_PATTERNS["job_position"].match(value) is not None


def is_valid_tag(value: str) -> bool:
    return FIELD_PATTERNS["tag"].match(value) is not None


def parse_iso_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` calendar date.

    Raises ValueError for any other shape (``20240101``, ``2024-1-1``)
    and for impossible dates such as ``2024-13-40``.
    """
    if not _ISO_DATE.match(value):
        raise ValueError(DATE_CONSTRAINTS)
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise ValueError(DATE_CONSTRAINTS) from exc


def _rule(check, message: str):
    def _validate(value: str) -> str:
        if not check(value):
            raise ValueError(message)
        return value

    return _validate


Name = Annotated[str, AfterValidator(_rule(is_valid_name, NAME_CONSTRAINTS))]
Phone = Annotated[str, AfterValidator(_rule(is_valid_phone, PHONE_CONSTRAINTS))]
Email = Annotated[str, AfterValidator(_rule(is_valid_email, EMAIL_CONSTRAINTS))]
JobPosition = Annotated[str, AfterValidator(_rule(is_valid_job_position, JOB_POSITION_CONSTRAINTS))]
Tag = Annotated[str, AfterValidator(_rule(is_valid_tag, TAG_CONSTRAINTS))]
