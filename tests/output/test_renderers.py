"""Tests for operation-specific Rich renderers."""

from __future__ import annotations

import datetime

from staffbook.domain.ids import EmployeeId
from staffbook.domain.predicates import NameContainsKeywordsPredicate
from staffbook.infrastructure.model import ModelManager
from staffbook.output.renderers import render_quiet, render_result
from staffbook.services.anniversary import ShowAnniversaryCommand
from staffbook.services.employee import (
    DeleteCommand,
    EditCommand,
    EditEmployeeDescriptor,
    FindCommand,
    ListCommand,
)
from staffbook.services.reminder import UpcomingCommand
from staffbook.services.result import CommandResult, ResultError
from tests.conftest import ALICE_ID, AMANDA_ID, BENSON_ID

# ── Helpers ───────────────────────────────────────────────────────────


def _err(op: str, code: str, message: str, **detail: object) -> CommandResult:
    return CommandResult(
        ok=False,
        op=op,
        error=ResultError(code=code, message=message, detail=dict(detail)),
    )


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("delete", "NOT_FOUND", "Employee prefix zz not found."))
        assert output.startswith("ERROR")
        assert "delete" in output
        assert "Employee prefix zz not found." in output

    def test_verbose_shows_code_and_detail(self) -> None:
        output = render_result(_err("add", "PARSE_ERROR", "Bad", line="add x"), verbose=True)
        assert "code: PARSE_ERROR" in output
        assert "line: add x" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(CommandResult(ok=False, op="list"))


# ── Mutation renderer ────────────────────────────────────────────────


class TestMutationRenderer:
    def test_delete(self, model: ModelManager) -> None:
        output = render_result(DeleteCommand(EmployeeId("b")).execute(model))
        assert output.startswith("OK")
        assert "Deleted Employee: Benson Meier" in output
        assert BENSON_ID in output

    def test_tags_are_not_markup(self, model: ModelManager) -> None:
        output = render_result(DeleteCommand(EmployeeId("b")).execute(model))
        assert "[friends][owesMoney]" in output

    def test_edit_shows_fields_changed(self, model: ModelManager) -> None:
        descriptor = EditEmployeeDescriptor(phone="123", email="b@example.com")
        output = render_result(EditCommand(EmployeeId("b"), descriptor).execute(model))
        assert "fields_changed: email, phone" in output

    def test_verbose_shows_contact_fields(self, model: ModelManager) -> None:
        output = render_result(DeleteCommand(EmployeeId("b")).execute(model), verbose=True)
        assert "job_position: Manager" in output


# ── Listing renderers ────────────────────────────────────────────────


class TestEmployeeListRenderer:
    def test_list_table(self, model: ModelManager) -> None:
        output = render_result(ListCommand().execute(model))
        assert "Listed all 3 employees" in output
        for employee_id in (ALICE_ID, AMANDA_ID, BENSON_ID):
            assert employee_id in output
        assert "Phone" in output
        assert "Tags" in output

    def test_empty_find_has_no_table(self, model: ModelManager) -> None:
        result = FindCommand(NameContainsKeywordsPredicate(("zed",))).execute(model)
        output = render_result(result)
        assert "0 employees listed!" in output
        assert "Phone" not in output

    def test_upcoming_shows_next_column(self, model: ModelManager) -> None:
        command = UpcomingCommand(7, today=datetime.date(2025, 3, 10))
        output = render_result(command.execute(model))
        assert "Next" in output
        assert "2025-03-15" in output


class TestAnniversaryRenderer:
    def test_table(self, model: ModelManager) -> None:
        output = render_result(ShowAnniversaryCommand(EmployeeId("a1f")).execute(model))
        assert "1 anniversaries for Amanda Lim" in output
        assert "Work Anniversary" in output
        assert "2019-07-01" in output

    def test_empty(self, model: ModelManager) -> None:
        output = render_result(ShowAnniversaryCommand(EmployeeId("b")).execute(model))
        assert "0 anniversaries for Benson Meier" in output
        assert "Date" not in output


class TestGenericRenderer:
    def test_undo_like_result(self) -> None:
        result = CommandResult(op="undo", message="Undo successful!", data={"employees": 2})
        output = render_result(result)
        assert "Undo successful!" in output
        assert "employees: 2" in output


# ── Quiet ─────────────────────────────────────────────────────────────


class TestRenderQuiet:
    def test_lists_ids(self, model: ModelManager) -> None:
        output = render_quiet(ListCommand().execute(model))
        assert output.splitlines() == [ALICE_ID, AMANDA_ID, BENSON_ID]

    def test_mutation(self, model: ModelManager) -> None:
        assert render_quiet(DeleteCommand(EmployeeId("b")).execute(model)) == "OK: delete"

    def test_error(self) -> None:
        output = render_quiet(_err("delete", "NOT_FOUND", "gone"))
        assert output == "ERROR: delete — gone"
