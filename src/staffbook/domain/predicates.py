"""Predicates used to filter the displayed employee list."""

from __future__ import annotations

import datetime
from collections.abc import Callable
from dataclasses import dataclass

from staffbook.domain.employee import Employee

EmployeePredicate = Callable[[Employee], bool]


def show_all_employees(_employee: Employee) -> bool:
    return True


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Matches employees whose name contains any keyword as a whole word.

    Matching is case-insensitive.
    """

    keywords: tuple[str, ...]

    def __call__(self, employee: Employee) -> bool:
        words = {word.lower() for word in employee.name.split()}
        return any(keyword.lower() in words for keyword in self.keywords)


@dataclass(frozen=True)
class UpcomingWithinDaysPredicate:
    """Matches employees with an anniversary in the next *days* days."""

    days: int
    today: datetime.date | None = None

    def __call__(self, employee: Employee) -> bool:
        return employee.is_upcoming_within_days(self.days, self.today)
