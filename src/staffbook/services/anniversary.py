"""Anniversary commands — add, delete, and list an employee's anniversaries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from staffbook.errors import CommandError
from staffbook.services._helpers import anniversary_data, employee_data
from staffbook.services.base import Command, resolve_employee
from staffbook.services.result import CommandResult

if TYPE_CHECKING:
    from staffbook.domain.anniversary import Anniversary
    from staffbook.domain.ids import EmployeeId
    from staffbook.infrastructure.model import ModelManager

logger = logging.getLogger(__name__)

MESSAGE_DUPLICATE_ANNIVERSARY = "This anniversary already exists for the employee."
MESSAGE_INVALID_ANNIVERSARY_INDEX = "The anniversary index provided is invalid."


@dataclass(frozen=True)
class AddAnniversaryCommand(Command):
    """Attaches an anniversary to the employee identified by an ID prefix."""

    command_word: ClassVar[str] = "anniversary add"
    usage: ClassVar[str] = (
        "anniversary add: Adds an anniversary to the employee identified by the prefix "
        "of their Employee ID.\n"
        "Parameters: eid/EMPLOYEE_ID_PREFIX an/NAME d/DATE at/TYPE [ad/DESCRIPTION] "
        "[atdesc/TYPE_DESCRIPTION]\n"
        "  or: eid/EMPLOYEE_ID_PREFIX n/NAME bd/BIRTHDAY\n"
        "  or: eid/EMPLOYEE_ID_PREFIX n/NAME wa/WORK_ANNIVERSARY\n"
        "Example: anniversary add eid/0c2 an/Wedding d/2015-06-20 at/Wedding"
    )
    mutates: ClassVar[bool] = True

    employee_id_prefix: EmployeeId
    anniversary: Anniversary

    def execute(self, model: ModelManager) -> CommandResult:
        target = resolve_employee(model, self.employee_id_prefix)
        if self.anniversary in target.anniversaries:
            raise CommandError(MESSAGE_DUPLICATE_ANNIVERSARY, code="DUPLICATE")

        edited = target.replace(anniversaries=(*target.anniversaries, self.anniversary))
        model.commit_changes()
        model.set_employee(target, edited)
        logger.info("Added anniversary %r to %s", self.anniversary.name, edited.employee_id)
        return CommandResult(
            op="anniversary_add",
            message=f"Added anniversary {self.anniversary.name} to {edited.name}",
            data={
                "employee": employee_data(edited),
                "anniversary": anniversary_data(self.anniversary, len(edited.anniversaries)),
            },
        )


@dataclass(frozen=True)
class DeleteAnniversaryCommand(Command):
    """Removes one anniversary, by one-based index, from an employee."""

    command_word: ClassVar[str] = "anniversary delete"
    usage: ClassVar[str] = (
        "anniversary delete: Deletes the anniversary at the given index from the employee "
        "identified by the prefix of their Employee ID.\n"
        "Parameters: eid/EMPLOYEE_ID_PREFIX ai/ANNIVERSARY_INDEX\n"
        "Example: anniversary delete eid/0c2 ai/1"
    )
    mutates: ClassVar[bool] = True

    employee_id_prefix: EmployeeId
    index: int

    def execute(self, model: ModelManager) -> CommandResult:
        target = resolve_employee(model, self.employee_id_prefix)
        if not 1 <= self.index <= len(target.anniversaries):
            raise CommandError(MESSAGE_INVALID_ANNIVERSARY_INDEX, code="INVALID_INDEX")

        removed = target.anniversaries[self.index - 1]
        remaining = tuple(
            a for i, a in enumerate(target.anniversaries, start=1) if i != self.index
        )
        edited = target.replace(anniversaries=remaining)
        model.commit_changes()
        model.set_employee(target, edited)
        logger.info("Deleted anniversary %r from %s", removed.name, edited.employee_id)
        return CommandResult(
            op="anniversary_delete",
            message=f"Deleted anniversary {removed.name} from {edited.name}",
            data={
                "employee": employee_data(edited),
                "anniversary": anniversary_data(removed, self.index),
            },
        )


@dataclass(frozen=True)
class ShowAnniversaryCommand(Command):
    """Lists the anniversaries of one employee."""

    command_word: ClassVar[str] = "anniversary list"
    usage: ClassVar[str] = (
        "anniversary list: Shows the anniversaries of the employee identified by the prefix "
        "of their Employee ID.\n"
        "Parameters: eid/EMPLOYEE_ID_PREFIX\n"
        "Example: anniversary list eid/0c2"
    )

    employee_id_prefix: EmployeeId

    def execute(self, model: ModelManager) -> CommandResult:
        target = resolve_employee(model, self.employee_id_prefix)
        items = [anniversary_data(a, i) for i, a in enumerate(target.anniversaries, start=1)]
        return CommandResult(
            op="anniversary_list",
            message=f"{len(items)} anniversaries for {target.name}",
            data={"employee": employee_data(target), "anniversaries": items},
        )
