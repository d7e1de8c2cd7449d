"""Anniversary model and its closed set of types.

The type is a discriminated union keyed on ``kind``:

- ``BirthdayType`` and ``WorkAnniversaryType`` carry no payload.
- ``CustomAnniversaryType`` carries a user-chosen name and description.

Anniversaries are immutable; an employee's anniversaries are replaced
wholesale when edited.
"""

from __future__ import annotations

import calendar
import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator


class BirthdayType(BaseModel):
    """Birthday of the employee."""

    model_config = {"frozen": True}

    kind: Literal["birthday"] = "birthday"

    @property
    def label(self) -> str:
        return "Birthday"


class WorkAnniversaryType(BaseModel):
    """Anniversary of the employee joining the company."""

    model_config = {"frozen": True}

    kind: Literal["work_anniversary"] = "work_anniversary"

    @property
    def label(self) -> str:
        return "Work Anniversary"


class CustomAnniversaryType(BaseModel):
    """A user-named anniversary type (e.g. "Wedding")."""

    model_config = {"frozen": True}

    kind: Literal["custom"] = "custom"
    name: str
    description: str = ""

    @property
    def label(self) -> str:
        return self.name


AnniversaryType = Annotated[
    BirthdayType | WorkAnniversaryType | CustomAnniversaryType,
    Field(discriminator="kind"),
]


def occurrence_in_year(original: datetime.date, year: int) -> datetime.date:
    """Move *original* to *year*, clamping Feb 29 to Feb 28 in non-leap years."""
    if original.month == 2 and original.day == 29 and not calendar.isleap(year):
        return datetime.date(year, 2, 28)
    return original.replace(year=year)


def next_occurrence(original: datetime.date, today: datetime.date) -> datetime.date:
    """Next occurrence of *original*'s month/day on or after *today*."""
    candidate = occurrence_in_year(original, today.year)
    if candidate < today:
        candidate = occurrence_in_year(original, today.year + 1)
    return candidate


class Anniversary(BaseModel):
    """A dated event attached to exactly one employee."""

    model_config = {"frozen": True}

    date: datetime.date
    type: AnniversaryType
    name: str
    description: str = ""

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Anniversary name should not be blank")
        return value

    @property
    def is_birthday(self) -> bool:
        match self.type:
            case BirthdayType():
                return True
            case WorkAnniversaryType() | CustomAnniversaryType():
                return False

    def next_occurrence(self, today: datetime.date | None = None) -> datetime.date:
        return next_occurrence(self.date, today or datetime.date.today())
