"""AddressBook — the authoritative ordered collection of employees.

INVARIANT: no two employees share an employee ID.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from staffbook.domain.employee import Employee
from staffbook.domain.ids import EmployeeId
from staffbook.errors import DuplicateEmployeeError, EmployeeNotFoundError


class AddressBook:
    """Ordered list of employees, unique by employee ID."""

    def __init__(self, employees: Iterable[Employee] = ()) -> None:
        self._employees: list[Employee] = []
        self.set_employees(employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    def __len__(self) -> int:
        return len(self._employees)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._employees == other._employees

    def __repr__(self) -> str:
        return f"AddressBook({len(self._employees)} employees)"

    @property
    def employees(self) -> tuple[Employee, ...]:
        """Immutable view of the employees, in insertion order."""
        return tuple(self._employees)

    def set_employees(self, employees: Iterable[Employee]) -> None:
        """Replace the whole collection. Raises on duplicate IDs."""
        replacement: list[Employee] = []
        for employee in employees:
            if any(employee.is_same_person(e) for e in replacement):
                raise DuplicateEmployeeError(
                    f"Duplicate employee ID: {employee.employee_id}"
                )
            replacement.append(employee)
        self._employees = replacement

    def has_employee(self, employee: Employee) -> bool:
        return any(employee.is_same_person(e) for e in self._employees)

    def has_same_details(self, employee: Employee, *, exclude: Employee | None = None) -> bool:
        """True if another employee (other than *exclude*) has the same details."""
        return any(
            employee.has_same_details(e) and not e.is_same_person(exclude)
            for e in self._employees
        )

    def add_employee(self, employee: Employee) -> None:
        if self.has_employee(employee):
            raise DuplicateEmployeeError(f"Duplicate employee ID: {employee.employee_id}")
        self._employees.append(employee)

    def set_employee(self, target: Employee, edited: Employee) -> None:
        """Replace *target* with *edited*, keeping its position."""
        index = self._index_of(target)
        if not target.is_same_person(edited) and self.has_employee(edited):
            raise DuplicateEmployeeError(f"Duplicate employee ID: {edited.employee_id}")
        self._employees[index] = edited

    def remove_employee(self, employee: Employee) -> None:
        del self._employees[self._index_of(employee)]

    def find_by_id_prefix(self, prefix: EmployeeId | str) -> list[Employee]:
        return [e for e in self._employees if e.employee_id.starts_with(prefix)]

    def _index_of(self, employee: Employee) -> int:
        for index, existing in enumerate(self._employees):
            if existing == employee:
                return index
        raise EmployeeNotFoundError(f"Employee not found: {employee.employee_id}")
