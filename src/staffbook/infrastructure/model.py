"""ModelManager — the in-memory model every command executes against.

Owns the address book, the filtered view shown to the user, and the
snapshot history. Commands must call :meth:`commit_changes` before any
destructive mutation so that :meth:`undo` can restore the exact
pre-command state.
"""

from __future__ import annotations

import logging

from staffbook.domain.employee import Employee
from staffbook.domain.ids import EmployeeId
from staffbook.domain.predicates import EmployeePredicate, show_all_employees
from staffbook.infrastructure.address_book import AddressBook
from staffbook.infrastructure.history import Snapshot, SnapshotHistory

Checkpoint = tuple[Snapshot, SnapshotHistory]

logger = logging.getLogger(__name__)


class ModelManager:
    """Address book + filtered view + undo/redo history."""

    def __init__(
        self,
        address_book: AddressBook | None = None,
        history: SnapshotHistory | None = None,
    ) -> None:
        self._address_book = AddressBook(address_book or ())
        self._history = history or SnapshotHistory()
        self._predicate: EmployeePredicate = show_all_employees

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._address_book == other._address_book
            and self.get_filtered_employee_list() == other.get_filtered_employee_list()
        )

    @property
    def history(self) -> SnapshotHistory:
        return self._history

    # ------------------------------------------------------------------
    # Address book
    # ------------------------------------------------------------------

    def get_address_book(self) -> AddressBook:
        return self._address_book

    def set_address_book(self, address_book: AddressBook) -> None:
        self._address_book.set_employees(address_book)

    def has_employee(self, employee: Employee) -> bool:
        return self._address_book.has_employee(employee)

    def has_duplicate_details(
        self, employee: Employee, *, exclude: Employee | None = None
    ) -> bool:
        return self._address_book.has_same_details(employee, exclude=exclude)

    def add_employee(self, employee: Employee) -> None:
        self._address_book.add_employee(employee)

    def set_employee(self, target: Employee, edited: Employee) -> None:
        self._address_book.set_employee(target, edited)

    def delete_employee(self, employee: Employee) -> None:
        self._address_book.remove_employee(employee)

    def find_employees_by_id_prefix(self, prefix: EmployeeId | str) -> list[Employee]:
        """All employees in the full collection whose ID starts with *prefix*.

        Ignores the filtered view.
        """
        return self._address_book.find_by_id_prefix(prefix)

    # ------------------------------------------------------------------
    # Filtered view
    # ------------------------------------------------------------------

    def get_filtered_employee_list(self) -> list[Employee]:
        return [e for e in self._address_book if self._predicate(e)]

    def update_filtered_employee_list(self, predicate: EmployeePredicate) -> None:
        self._predicate = predicate

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def commit_changes(self) -> None:
        """Snapshot the current address book for a later undo."""
        self._history.commit(self._address_book.employees)
        logger.debug("Committed snapshot of %d employees", len(self._address_book))

    def checkpoint(self) -> Checkpoint:
        """Capture the address book and history for a later :meth:`rollback`."""
        return self._address_book.employees, self._history.copy()

    def rollback(self, checkpoint: Checkpoint) -> None:
        """Return to *checkpoint*, discarding changes and commits made since."""
        employees, history = checkpoint
        self._address_book.set_employees(employees)
        self._history = history
        logger.debug("Rolled back to %d employees", len(employees))

    def can_undo(self) -> bool:
        return self._history.can_undo()

    def can_redo(self) -> bool:
        return self._history.can_redo()

    def undo(self) -> None:
        previous = self._history.undo(self._address_book.employees)
        self._address_book.set_employees(previous)
        logger.debug("Restored snapshot of %d employees", len(previous))

    def redo(self) -> None:
        following = self._history.redo(self._address_book.employees)
        self._address_book.set_employees(following)
        logger.debug("Reapplied snapshot of %d employees", len(following))
