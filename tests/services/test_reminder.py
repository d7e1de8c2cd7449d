"""Tests for the upcoming anniversary command."""

from __future__ import annotations

import datetime

from staffbook.infrastructure.model import ModelManager
from staffbook.services.reminder import UpcomingCommand
from tests.conftest import ALICE_ID, AMANDA_ID

TODAY = datetime.date(2025, 3, 10)


class TestUpcomingCommand:
    def test_within_window(self, model: ModelManager) -> None:
        result = UpcomingCommand(7, today=TODAY).execute(model)
        assert result.op == "upcoming"
        assert result.data["count"] == 1
        assert result.data["days"] == 7
        employee = result.data["employees"][0]
        assert employee["id"] == ALICE_ID
        assert employee["next_upcoming"] == "2025-03-15"

    def test_sorted_by_next_date(self, model: ModelManager) -> None:
        result = UpcomingCommand(120, today=TODAY).execute(model)
        assert [e["id"] for e in result.data["employees"]] == [ALICE_ID, AMANDA_ID]

    def test_zero_days_means_today_only(self, model: ModelManager) -> None:
        assert UpcomingCommand(0, today=TODAY).execute(model).data["count"] == 0
        today = datetime.date(2025, 3, 15)
        assert UpcomingCommand(0, today=today).execute(model).data["count"] == 1

    def test_filters_model_view(self, model: ModelManager) -> None:
        UpcomingCommand(7, today=TODAY).execute(model)
        assert [e.name for e in model.get_filtered_employee_list()] == ["Alice Pauline"]

    def test_does_not_commit(self, model: ModelManager) -> None:
        UpcomingCommand(7, today=TODAY).execute(model)
        assert not model.can_undo()
        assert not UpcomingCommand.mutates

    def test_message(self, model: ModelManager) -> None:
        result = UpcomingCommand(7, today=TODAY).execute(model)
        assert result.message == "1 employees with anniversaries in the next 7 days"
