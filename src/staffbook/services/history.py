"""Undo and redo of committed changes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from staffbook.domain.predicates import show_all_employees
from staffbook.errors import CommandError
from staffbook.services.base import Command
from staffbook.services.result import CommandResult

if TYPE_CHECKING:
    from staffbook.infrastructure.model import ModelManager

logger = logging.getLogger(__name__)

MESSAGE_NOTHING_TO_UNDO = "No more changes to undo."
MESSAGE_NOTHING_TO_REDO = "No more changes to redo."


@dataclass(frozen=True)
class UndoCommand(Command):
    """Restores the address book to the state before the last change."""

    command_word: ClassVar[str] = "undo"
    usage: ClassVar[str] = "undo: Reverts the most recent change.\nExample: undo"
    mutates: ClassVar[bool] = True

    def execute(self, model: ModelManager) -> CommandResult:
        if not model.can_undo():
            raise CommandError(MESSAGE_NOTHING_TO_UNDO, code="NOTHING_TO_UNDO")
        model.undo()
        model.update_filtered_employee_list(show_all_employees)
        logger.info("Undid last change")
        return CommandResult(
            op="undo",
            message="Undo successful!",
            data={"employees": len(model.get_address_book())},
        )


@dataclass(frozen=True)
class RedoCommand(Command):
    """Reapplies the most recently undone change."""

    command_word: ClassVar[str] = "redo"
    usage: ClassVar[str] = "redo: Reapplies the most recently undone change.\nExample: redo"
    mutates: ClassVar[bool] = True

    def execute(self, model: ModelManager) -> CommandResult:
        if not model.can_redo():
            raise CommandError(MESSAGE_NOTHING_TO_REDO, code="NOTHING_TO_REDO")
        model.redo()
        model.update_filtered_employee_list(show_all_employees)
        logger.info("Redid last undone change")
        return CommandResult(
            op="redo",
            message="Redo successful!",
            data={"employees": len(model.get_address_book())},
        )
