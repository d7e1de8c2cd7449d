"""Command — abstract foundation for every user operation.

A command is a frozen dataclass holding its parsed arguments. Two
commands are equal when their arguments are equal. ``execute()`` either
returns a CommandResult or raises ``CommandError`` before touching the
model; mutating commands call ``model.commit_changes()`` right before
their first mutation.

Usage::

    @dataclass(frozen=True)
    class DeleteCommand(Command):
        command_word: ClassVar[str] = "delete"
        employee_id_prefix: EmployeeId

        def execute(self, model: ModelManager) -> CommandResult:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from staffbook.errors import CommandError
from staffbook.messages import (
    MESSAGE_EMPLOYEE_PREFIX_NOT_FOUND,
    MESSAGE_MULTIPLE_EMPLOYEES_FOUND_WITH_PREFIX,
)

if TYPE_CHECKING:
    from staffbook.domain.employee import Employee
    from staffbook.domain.ids import EmployeeId
    from staffbook.infrastructure.model import ModelManager
    from staffbook.services.result import CommandResult


class Command(ABC):
    """Base class for executable commands."""

    command_word: ClassVar[str]
    usage: ClassVar[str] = ""
    mutates: ClassVar[bool] = False

    @abstractmethod
    def execute(self, model: ModelManager) -> CommandResult:
        """Run the command against *model*."""


def resolve_employee(model: ModelManager, prefix: EmployeeId) -> Employee:
    """Return the single employee whose ID starts with *prefix*.

    Searches the full address book, not the filtered view. Raises
    CommandError when the prefix matches nobody or more than one employee.
    """
    matches = model.find_employees_by_id_prefix(prefix)
    if len(matches) > 1:
        raise CommandError(
            MESSAGE_MULTIPLE_EMPLOYEES_FOUND_WITH_PREFIX.format(prefix),
            code="AMBIGUOUS_PREFIX",
        )
    if not matches:
        raise CommandError(
            MESSAGE_EMPLOYEE_PREFIX_NOT_FOUND.format(prefix),
            code="NOT_FOUND",
        )
    return matches[0]
