"""Tests for undo and redo commands."""

from __future__ import annotations

import pytest

from staffbook.domain.employee import Employee
from staffbook.domain.ids import EmployeeId
from staffbook.domain.predicates import NameContainsKeywordsPredicate
from staffbook.errors import CommandError
from staffbook.infrastructure.address_book import AddressBook
from staffbook.infrastructure.model import ModelManager
from staffbook.services.employee import ClearCommand, DeleteCommand, FindCommand
from staffbook.services.history import (
    MESSAGE_NOTHING_TO_REDO,
    MESSAGE_NOTHING_TO_UNDO,
    RedoCommand,
    UndoCommand,
)


class TestUndo:
    def test_nothing_to_undo(self, model: ModelManager) -> None:
        with pytest.raises(CommandError) as exc_info:
            UndoCommand().execute(model)
        assert exc_info.value.message == MESSAGE_NOTHING_TO_UNDO

    def test_restores_exact_state(
        self, model: ModelManager, typical_employees: list[Employee]
    ) -> None:
        DeleteCommand(EmployeeId("b")).execute(model)
        result = UndoCommand().execute(model)
        assert result.message == "Undo successful!"
        assert model == ModelManager(AddressBook(typical_employees))

    def test_multiple_steps(self, model: ModelManager, typical_employees: list[Employee]) -> None:
        DeleteCommand(EmployeeId("b")).execute(model)
        ClearCommand().execute(model)
        UndoCommand().execute(model)
        assert len(model.get_address_book()) == 2
        UndoCommand().execute(model)
        assert list(model.get_address_book()) == typical_employees
        assert not model.can_undo()

    def test_resets_filter(self, model: ModelManager) -> None:
        DeleteCommand(EmployeeId("b")).execute(model)
        FindCommand(NameContainsKeywordsPredicate(("alice",))).execute(model)
        UndoCommand().execute(model)
        assert len(model.get_filtered_employee_list()) == 3


class TestRedo:
    def test_nothing_to_redo(self, model: ModelManager) -> None:
        with pytest.raises(CommandError) as exc_info:
            RedoCommand().execute(model)
        assert exc_info.value.message == MESSAGE_NOTHING_TO_REDO

    def test_reapplies(self, model: ModelManager, benson: Employee) -> None:
        DeleteCommand(EmployeeId("b")).execute(model)
        UndoCommand().execute(model)
        result = RedoCommand().execute(model)
        assert result.message == "Redo successful!"
        assert not model.has_employee(benson)
        assert model.can_undo()

    def test_new_change_clears_redo(self, model: ModelManager) -> None:
        DeleteCommand(EmployeeId("b")).execute(model)
        UndoCommand().execute(model)
        ClearCommand().execute(model)
        assert not model.can_redo()
        with pytest.raises(CommandError):
            RedoCommand().execute(model)
