"""Tests for the Anniversary model and occurrence arithmetic."""

from __future__ import annotations

import datetime

import pytest
from pydantic import TypeAdapter, ValidationError

from staffbook.domain.anniversary import (
    Anniversary,
    AnniversaryType,
    BirthdayType,
    CustomAnniversaryType,
    WorkAnniversaryType,
    next_occurrence,
    occurrence_in_year,
)

D = datetime.date


class TestOccurrenceInYear:
    def test_regular_date(self) -> None:
        assert occurrence_in_year(D(1990, 3, 15), 2025) == D(2025, 3, 15)

    def test_leap_day_in_leap_year(self) -> None:
        assert occurrence_in_year(D(1992, 2, 29), 2024) == D(2024, 2, 29)

    def test_leap_day_in_common_year_falls_on_feb_28(self) -> None:
        assert occurrence_in_year(D(1992, 2, 29), 2025) == D(2025, 2, 28)


class TestNextOccurrence:
    def test_later_this_year(self) -> None:
        assert next_occurrence(D(1990, 6, 1), D(2025, 5, 20)) == D(2025, 6, 1)

    def test_today_counts(self) -> None:
        assert next_occurrence(D(1990, 6, 1), D(2025, 6, 1)) == D(2025, 6, 1)

    def test_already_passed_rolls_to_next_year(self) -> None:
        assert next_occurrence(D(1990, 1, 5), D(2025, 6, 1)) == D(2026, 1, 5)

    def test_year_end_wraparound(self) -> None:
        assert next_occurrence(D(2000, 1, 2), D(2025, 12, 30)) == D(2026, 1, 2)

    def test_leap_day_after_feb_28_in_common_year(self) -> None:
        # Feb 28 2025 has passed on Mar 1, and 2026 is not a leap year either.
        assert next_occurrence(D(1992, 2, 29), D(2025, 3, 1)) == D(2026, 2, 28)


class TestAnniversaryTypes:
    def test_labels(self) -> None:
        assert BirthdayType().label == "Birthday"
        assert WorkAnniversaryType().label == "Work Anniversary"
        assert CustomAnniversaryType(name="Wedding").label == "Wedding"

    def test_discriminated_by_kind(self) -> None:
        adapter = TypeAdapter(AnniversaryType)
        assert isinstance(adapter.validate_python({"kind": "birthday"}), BirthdayType)
        assert isinstance(
            adapter.validate_python({"kind": "work_anniversary"}), WorkAnniversaryType
        )
        custom = adapter.validate_python({"kind": "custom", "name": "Wedding"})
        assert custom == CustomAnniversaryType(name="Wedding")

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TypeAdapter(AnniversaryType).validate_python({"kind": "holiday"})


class TestAnniversary:
    def test_is_birthday(self) -> None:
        bd = Anniversary(date=D(1990, 3, 15), type=BirthdayType(), name="Bday")
        wa = Anniversary(date=D(2020, 1, 6), type=WorkAnniversaryType(), name="Joined")
        custom = Anniversary(
            date=D(2015, 6, 20), type=CustomAnniversaryType(name="Wedding"), name="Wedding"
        )
        assert bd.is_birthday
        assert not wa.is_birthday
        assert not custom.is_birthday

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Anniversary(date=D(1990, 3, 15), type=BirthdayType(), name="  ")

    def test_equality_by_value(self) -> None:
        a = Anniversary(date=D(1990, 3, 15), type=BirthdayType(), name="Bday")
        b = Anniversary(date=D(1990, 3, 15), type=BirthdayType(), name="Bday")
        assert a == b
        assert a != Anniversary(date=D(1990, 3, 16), type=BirthdayType(), name="Bday")

    def test_next_occurrence_uses_today(self) -> None:
        a = Anniversary(date=D(1990, 3, 15), type=BirthdayType(), name="Bday")
        assert a.next_occurrence(D(2025, 3, 16)) == D(2026, 3, 15)

    def test_json_round_trip_keeps_type(self) -> None:
        a = Anniversary(
            date=D(2015, 6, 20),
            type=CustomAnniversaryType(name="Wedding", description="Marriage"),
            name="Wedding",
            description="Big day",
        )
        restored = Anniversary.model_validate_json(a.model_dump_json())
        assert restored == a
        assert isinstance(restored.type, CustomAnniversaryType)
