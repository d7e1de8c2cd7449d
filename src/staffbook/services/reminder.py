"""Upcoming anniversary reminders."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from staffbook.domain.predicates import UpcomingWithinDaysPredicate
from staffbook.services._helpers import employee_data
from staffbook.services.base import Command
from staffbook.services.result import CommandResult

if TYPE_CHECKING:
    from staffbook.infrastructure.model import ModelManager


@dataclass(frozen=True)
class UpcomingCommand(Command):
    """Shows employees with an anniversary in the next *days* days, soonest first."""

    command_word: ClassVar[str] = "upcoming"
    usage: ClassVar[str] = (
        "upcoming: Lists employees with an anniversary within the given number of days.\n"
        "Parameters: [DAYS]\n"
        "Example: upcoming 14"
    )

    days: int
    today: datetime.date | None = None

    def execute(self, model: ModelManager) -> CommandResult:
        today = self.today or datetime.date.today()
        model.update_filtered_employee_list(UpcomingWithinDaysPredicate(self.days, today))
        employees = sorted(
            model.get_filtered_employee_list(),
            key=lambda e: e.get_next_upcoming_date(today) or datetime.date.max,
        )
        return CommandResult(
            op="upcoming",
            message=f"{len(employees)} employees with anniversaries in the next {self.days} days",
            data={
                "count": len(employees),
                "days": self.days,
                "employees": [employee_data(e, today) for e in employees],
            },
        )
