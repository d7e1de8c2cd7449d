"""Employee record — identity, contact details, tags, and anniversaries.

Employees are frozen pydantic models. Collections are copied on
construction (tags into a ``frozenset``, anniversaries into a ``tuple``)
so callers never alias the record's internals.

Three notions of sameness:

- ``is_same_person()``: identity, employee ID only.
- ``has_same_details()``: contact details and tags, ignoring ID and
  anniversaries. Used to catch duplicate entries with different IDs.
- ``==``: every field.
"""

from __future__ import annotations

import datetime
from typing import Any

from pydantic import BaseModel, Field, field_serializer

from staffbook.domain.anniversary import Anniversary
from staffbook.domain.fields import Email, JobPosition, Name, Phone, Tag
from staffbook.domain.ids import EmployeeId


def window_end(today: datetime.date, days: int) -> datetime.date:
    """Last day of a *days*-long window from *today*, capped at ``date.max``."""
    try:
        return today + datetime.timedelta(days=days)
    except OverflowError:
        return datetime.date.max


class Employee(BaseModel):
    """An employee in the address book.

    ``==`` also compares anniversaries, so it is stricter than an
    identity-plus-details comparison; use :meth:`has_same_details` for that.
    """

    model_config = {"frozen": True}

    employee_id: EmployeeId = Field(default_factory=EmployeeId.generate)
    name: Name
    phone: Phone
    email: Email
    job_position: JobPosition
    tags: frozenset[Tag] = frozenset()
    anniversaries: tuple[Anniversary, ...] = ()

    @field_serializer("tags")
    def _sorted_tags(self, tags: frozenset[str]) -> list[str]:
        return sorted(tags)

    # ------------------------------------------------------------------
    # Sameness
    # ------------------------------------------------------------------

    def is_same_person(self, other: Employee | None) -> bool:
        """True if both employees have the same employee ID."""
        if other is None:
            return False
        return other.employee_id == self.employee_id

    def has_same_details(self, other: Employee) -> bool:
        """True if contact details and tags match, ignoring ID and anniversaries."""
        return (
            self.name == other.name
            and self.phone == other.phone
            and self.email == other.email
            and self.job_position == other.job_position
            and self.tags == other.tags
        )

    # ------------------------------------------------------------------
    # Anniversaries
    # ------------------------------------------------------------------

    def get_next_upcoming_date(self, today: datetime.date | None = None) -> datetime.date | None:
        """Earliest next occurrence among all anniversaries, or None if there are none."""
        today = today or datetime.date.today()
        upcoming = [a.next_occurrence(today) for a in self.anniversaries if a.date is not None]
        return min(upcoming, default=None)

    def get_birthday(self) -> datetime.date | None:
        """Date of the first birthday anniversary, if any."""
        for anniversary in self.anniversaries:
            if anniversary.is_birthday:
                return anniversary.date
        return None

    def is_upcoming_within_days(self, days: int, today: datetime.date | None = None) -> bool:
        """True if the next upcoming date falls within ``[today, today + days]``."""
        today = today or datetime.date.today()
        next_date = self.get_next_upcoming_date(today)
        if next_date is None:
            return False
        return today <= next_date <= window_end(today, days)

    # ------------------------------------------------------------------
    # Copy helpers
    # ------------------------------------------------------------------

    def replace(self, **changes: Any) -> Employee:
        """Return a validated copy with *changes* applied."""
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        return type(self)(**values)
