"""Tests for top-level command dispatch."""

from __future__ import annotations

import pytest

from staffbook.domain.ids import EmployeeId
from staffbook.errors import ParseError
from staffbook.messages import MESSAGE_UNKNOWN_COMMAND
from staffbook.parsing.parser import HELP_MESSAGE, parse_command
from staffbook.services.anniversary import (
    AddAnniversaryCommand,
    DeleteAnniversaryCommand,
    ShowAnniversaryCommand,
)
from staffbook.services.employee import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    FindCommand,
    ListCommand,
)
from staffbook.services.history import RedoCommand, UndoCommand
from staffbook.services.reminder import UpcomingCommand


class TestParseCommand:
    @pytest.mark.parametrize(
        "line,expected_type",
        [
            ("add n/Amy p/123 e/amy@example.com j/HR", AddCommand),
            ("delete a1", DeleteCommand),
            ("edit a1 n/Amy", EditCommand),
            ("find amy", FindCommand),
            ("list", ListCommand),
            ("clear", ClearCommand),
            ("undo", UndoCommand),
            ("redo", RedoCommand),
            ("upcoming", UpcomingCommand),
            ("anniversary add eid/a1 n/Amy bd/1995-06-01", AddAnniversaryCommand),
            ("anniversary delete eid/a1 ai/1", DeleteAnniversaryCommand),
            ("anniversary list eid/a1", ShowAnniversaryCommand),
        ],
    )
    def test_dispatch(self, line: str, expected_type: type) -> None:
        assert isinstance(parse_command(line), expected_type)

    def test_leading_whitespace(self) -> None:
        assert parse_command("   delete a1") == DeleteCommand(EmployeeId("a1"))

    def test_arguments_ignored_for_list(self) -> None:
        assert parse_command("list extra words") == ListCommand()

    def test_upcoming_default_days(self) -> None:
        assert parse_command("upcoming", default_days=3) == UpcomingCommand(3)
        assert parse_command("upcoming 10", default_days=3) == UpcomingCommand(10)

    @pytest.mark.parametrize("line", ["unknown", "Delete a1", "anniversary edit eid/a1"])
    def test_unknown_command(self, line: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_command(line)
        assert exc_info.value.message == MESSAGE_UNKNOWN_COMMAND

    @pytest.mark.parametrize("line", ["", "   ", "anniversary", "anniversary   "])
    def test_blank_line(self, line: str) -> None:
        with pytest.raises(ParseError, match="Invalid command format"):
            parse_command(line)

    def test_help_lists_every_command(self) -> None:
        for word in ("add", "delete", "edit", "find", "list", "clear", "undo", "redo"):
            assert word in HELP_MESSAGE
        assert "upcoming [DAYS]" in HELP_MESSAGE
        assert "anniversary list" in HELP_MESSAGE
