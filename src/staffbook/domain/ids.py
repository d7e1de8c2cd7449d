"""Employee ID pattern, validation, and generation.

System-assigned IDs are UUID4 strings. Users refer to employees by any
prefix of their ID, so the same value type doubles as a lookup prefix.

INVARIANT: IDs are permanent. Once assigned, an ID never changes.
"""

from __future__ import annotations

import re
import uuid
from typing import Self

from pydantic import ConfigDict, RootModel, field_validator

ID_PATTERN: re.Pattern[str] = re.compile(r"^[0-9A-Za-z-]+$")

MESSAGE_CONSTRAINTS = (
    "Employee ID should only contain alphanumeric characters and dashes, "
    "and it should not be blank"
)


def is_valid_employee_id(value: str) -> bool:
    """Check whether *value* is a usable employee ID or ID prefix."""
    return ID_PATTERN.match(value) is not None


class EmployeeId(RootModel[str]):
    """Identifier of an employee; serializes as a plain string."""

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        if not is_valid_employee_id(value):
            raise ValueError(MESSAGE_CONSTRAINTS)
        return value

    @classmethod
    def generate(cls) -> Self:
        """Assign a fresh random ID."""
        return cls(str(uuid.uuid4()))

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value)

    def starts_with(self, prefix: EmployeeId | str) -> bool:
        """True if this ID begins with *prefix* (exact, case-sensitive)."""
        return self.root.startswith(str(prefix))

    def __str__(self) -> str:
        return self.root
