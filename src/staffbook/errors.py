"""Exception hierarchy shared by the parser, command, and storage layers.

Every error carries a user-facing ``message`` and a short machine ``code``.
The CLI boundary converts them into failed ``CommandResult`` objects.
"""

from __future__ import annotations


class StaffbookError(Exception):
    """Base class for all recoverable staffbook errors."""

    code = "ERROR"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class ParseError(StaffbookError):
    """User input is malformed, ambiguous, or incomplete."""

    code = "PARSE_ERROR"


class CommandError(StaffbookError):
    """Input parsed fine but the command cannot be applied to the model."""

    code = "COMMAND_ERROR"


class StorageError(StaffbookError):
    """The data file cannot be read or written."""

    code = "STORAGE_ERROR"


class DuplicateEmployeeError(StaffbookError):
    """An employee with the same id is already in the address book."""

    code = "DUPLICATE_EMPLOYEE"


class EmployeeNotFoundError(StaffbookError):
    """The employee is not in the address book."""

    code = "EMPLOYEE_NOT_FOUND"
