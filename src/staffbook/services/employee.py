"""Employee commands — add, delete, edit, find, list, clear."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from staffbook.domain.predicates import NameContainsKeywordsPredicate, show_all_employees
from staffbook.errors import CommandError
from staffbook.infrastructure.address_book import AddressBook
from staffbook.messages import MESSAGE_EMPLOYEES_LISTED_OVERVIEW, format_employee
from staffbook.services._helpers import employee_data
from staffbook.services.base import Command, resolve_employee
from staffbook.services.result import CommandResult

if TYPE_CHECKING:
    from staffbook.domain.employee import Employee
    from staffbook.domain.ids import EmployeeId
    from staffbook.infrastructure.model import ModelManager

logger = logging.getLogger(__name__)

MESSAGE_DUPLICATE_EMPLOYEE = "This employee already exists in the address book."


def _listing(model: ModelManager, op: str, message: str) -> CommandResult:
    employees = model.get_filtered_employee_list()
    return CommandResult(
        op=op,
        message=message.format(len(employees)),
        data={"count": len(employees), "employees": [employee_data(e) for e in employees]},
    )


@dataclass(frozen=True)
class AddCommand(Command):
    """Adds an employee to the address book."""

    command_word: ClassVar[str] = "add"
    usage: ClassVar[str] = (
        "add: Adds an employee to the address book.\n"
        "Parameters: n/NAME p/PHONE e/EMAIL j/JOB_POSITION [t/TAG]... "
        "[bd/BIRTHDAY] [wa/WORK_ANNIVERSARY]\n"
        "Example: add n/John Doe p/98765432 e/johnd@example.com j/Engineer t/friends "
        "bd/1990-04-12 wa/2020-01-06"
    )
    mutates: ClassVar[bool] = True

    employee: Employee

    def execute(self, model: ModelManager) -> CommandResult:
        if model.has_employee(self.employee) or model.has_duplicate_details(self.employee):
            raise CommandError(MESSAGE_DUPLICATE_EMPLOYEE, code="DUPLICATE")

        model.commit_changes()
        model.add_employee(self.employee)
        logger.info("Added employee %s", self.employee.employee_id)
        return CommandResult(
            op="add",
            message=f"New employee added: {format_employee(self.employee)}",
            data={"employee": employee_data(self.employee)},
        )


@dataclass(frozen=True)
class DeleteCommand(Command):
    """Deletes the employee identified by a prefix of their employee ID."""

    command_word: ClassVar[str] = "delete"
    usage: ClassVar[str] = (
        "delete: Deletes the employee identified by the prefix of their Employee ID.\n"
        "Parameters: EMPLOYEE_ID_PREFIX (must be a prefix of exactly one employee)\n"
        "Example: delete 1"
    )
    mutates: ClassVar[bool] = True

    employee_id_prefix: EmployeeId

    def execute(self, model: ModelManager) -> CommandResult:
        employee = resolve_employee(model, self.employee_id_prefix)

        model.commit_changes()
        model.delete_employee(employee)
        logger.info("Deleted employee %s", employee.employee_id)
        return CommandResult(
            op="delete",
            message=f"Deleted Employee: {format_employee(employee)}",
            data={"employee": employee_data(employee)},
        )


@dataclass(frozen=True)
class EditEmployeeDescriptor:
    """Fields to change on an employee; ``None`` leaves a field untouched."""

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    job_position: str | None = None
    tags: frozenset[str] | None = None

    def changes(self) -> dict[str, Any]:
        values = {
            "name": self.name,
            "phone": self.phone,
            "email": self.email,
            "job_position": self.job_position,
            "tags": self.tags,
        }
        return {k: v for k, v in values.items() if v is not None}

    def is_any_field_edited(self) -> bool:
        return bool(self.changes())


@dataclass(frozen=True)
class EditCommand(Command):
    """Edits the details of the employee identified by an ID prefix."""

    command_word: ClassVar[str] = "edit"
    usage: ClassVar[str] = (
        "edit: Edits the details of the employee identified by the prefix of their "
        "Employee ID. Existing values will be overwritten by the input values.\n"
        "Parameters: EMPLOYEE_ID_PREFIX [n/NAME] [p/PHONE] [e/EMAIL] [j/JOB_POSITION] [t/TAG]...\n"
        "Example: edit 1 p/91234567 e/johndoe@example.com"
    )
    mutates: ClassVar[bool] = True

    employee_id_prefix: EmployeeId
    descriptor: EditEmployeeDescriptor = field(default_factory=EditEmployeeDescriptor)

    def execute(self, model: ModelManager) -> CommandResult:
        target = resolve_employee(model, self.employee_id_prefix)
        edited = target.replace(**self.descriptor.changes())

        if model.has_duplicate_details(edited, exclude=target):
            raise CommandError(MESSAGE_DUPLICATE_EMPLOYEE, code="DUPLICATE")

        model.commit_changes()
        model.set_employee(target, edited)
        model.update_filtered_employee_list(show_all_employees)
        logger.info("Edited employee %s", edited.employee_id)
        return CommandResult(
            op="edit",
            message=f"Edited Employee: {format_employee(edited)}",
            data={
                "employee": employee_data(edited),
                "fields_changed": sorted(self.descriptor.changes()),
            },
        )


@dataclass(frozen=True)
class FindCommand(Command):
    """Lists employees whose name contains any of the keywords."""

    command_word: ClassVar[str] = "find"
    usage: ClassVar[str] = (
        "find: Finds all employees whose names contain any of the specified keywords "
        "(case-insensitive) and displays them as a list.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find alice bob charlie"
    )

    predicate: NameContainsKeywordsPredicate

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_employee_list(self.predicate)
        return _listing(model, "find", MESSAGE_EMPLOYEES_LISTED_OVERVIEW)


@dataclass(frozen=True)
class ListCommand(Command):
    """Shows every employee."""

    command_word: ClassVar[str] = "list"
    usage: ClassVar[str] = "list: Lists all employees.\nExample: list"

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_employee_list(show_all_employees)
        return _listing(model, "list", "Listed all {} employees")


@dataclass(frozen=True)
class ClearCommand(Command):
    """Removes every employee."""

    command_word: ClassVar[str] = "clear"
    usage: ClassVar[str] = "clear: Clears the address book.\nExample: clear"
    mutates: ClassVar[bool] = True

    def execute(self, model: ModelManager) -> CommandResult:
        model.commit_changes()
        model.set_address_book(AddressBook())
        logger.info("Cleared address book")
        return CommandResult(op="clear", message="Address book has been cleared!")
