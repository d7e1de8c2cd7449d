"""User-facing message templates and employee formatting."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from staffbook.domain.employee import Employee

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_EMPLOYEES_LISTED_OVERVIEW = "{} employees listed!"
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): {}"
MESSAGE_MULTIPLE_EMPLOYEES_FOUND_WITH_PREFIX = (
    "Multiple employees found with prefix {}. Please use a longer employee ID prefix."
)
MESSAGE_EMPLOYEE_PREFIX_NOT_FOUND = "Employee prefix {} not found."


def format_employee(employee: Employee) -> str:
    """Format an employee for display in result messages."""
    parts = [
        employee.name,
        f"; Employee ID: {employee.employee_id}",
        f"; Phone: {employee.phone}",
        f"; Email: {employee.email}",
        f"; Job: {employee.job_position}",
        "; Tags: ",
    ]
    parts.extend(f"[{tag}]" for tag in sorted(employee.tags))
    return "".join(parts)
