"""Tests for the upcoming command."""

from __future__ import annotations

import datetime
import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from staffbook.cli import cli


@pytest.mark.usefixtures("seeded_book")
class TestUpcomingCommand:
    def test_default_days(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "upcoming"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["days"] == 7

    def test_default_days_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "staffbook.toml").write_text("[reminder]\ndefault_days = 21\n")
        result = cli_runner.invoke(cli, ["--json", "upcoming"])
        assert json.loads(result.output)["data"]["days"] == 21

    def test_full_year_includes_everyone_with_anniversaries(
        self, cli_runner: CliRunner
    ) -> None:
        result = cli_runner.invoke(cli, ["--json", "upcoming", "366"])
        data = json.loads(result.output)["data"]
        assert data["count"] == 2
        dates = [e["next_upcoming"] for e in data["employees"]]
        assert dates == sorted(dates)
        assert all(
            datetime.date.fromisoformat(d) >= datetime.date.today() for d in dates
        )

    def test_negative_days(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["upcoming", "-1"])
        assert result.exit_code == 1
        assert "Number of days must be a non-negative integer." in result.output

    def test_days_beyond_calendar_range(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "upcoming", "3000000"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["count"] == 2

    def test_days_beyond_calendar_range_in_shell(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["shell"], input="upcoming 3000000\nlist\nexit\n")
        assert result.exit_code == 0, result.output
        assert "2 employees with anniversaries" in result.output
        assert "Listed all 3 employees" in result.output
