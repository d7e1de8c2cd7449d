"""Shared pytest fixtures for staffbook tests."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from staffbook.config.logging import APP_LOGGER
from staffbook.domain.anniversary import Anniversary, BirthdayType, WorkAnniversaryType
from staffbook.domain.employee import Employee
from staffbook.domain.ids import EmployeeId
from staffbook.infrastructure.address_book import AddressBook
from staffbook.infrastructure.model import ModelManager
from staffbook.infrastructure.storage import JsonStorage

# ALICE and AMANDA share the "a1" prefix; BENSON is the only "b" employee.
ALICE_ID = "a1b2c3d4-0000-4000-8000-000000000001"
AMANDA_ID = "a1f0e9d8-0000-4000-8000-000000000002"
BENSON_ID = "b7c6d5e4-0000-4000-8000-000000000003"


def make_employee(
    name: str = "Alice Pauline",
    *,
    employee_id: str = ALICE_ID,
    phone: str = "94351253",
    email: str = "alice@example.com",
    job_position: str = "Engineer",
    tags: tuple[str, ...] = ("friends",),
    anniversaries: tuple[Anniversary, ...] = (),
) -> Employee:
    """Build an employee with sensible defaults."""
    return Employee(
        employee_id=EmployeeId(employee_id),
        name=name,
        phone=phone,
        email=email,
        job_position=job_position,
        tags=frozenset(tags),
        anniversaries=anniversaries,
    )


def birthday(person: str, value: str) -> Anniversary:
    return Anniversary(
        date=datetime.date.fromisoformat(value),
        type=BirthdayType(),
        name=f"{person}'s Birthday",
        description=f"Birthday of {person}",
    )


def work_anniversary(person: str, value: str) -> Anniversary:
    return Anniversary(
        date=datetime.date.fromisoformat(value),
        type=WorkAnniversaryType(),
        name=f"{person}'s Work Anniversary",
        description=f"Work anniversary of {person}",
    )


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger(APP_LOGGER)
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def alice() -> Employee:
    return make_employee(anniversaries=(birthday("Alice Pauline", "1990-03-15"),))


@pytest.fixture
def amanda() -> Employee:
    return make_employee(
        "Amanda Lim",
        employee_id=AMANDA_ID,
        phone="98765432",
        email="amanda@example.com",
        job_position="Designer",
        tags=(),
        anniversaries=(work_anniversary("Amanda Lim", "2019-07-01"),),
    )


@pytest.fixture
def benson() -> Employee:
    return make_employee(
        "Benson Meier",
        employee_id=BENSON_ID,
        phone="98765431",
        email="benson@example.com",
        job_position="Manager",
        tags=("owesMoney", "friends"),
    )


@pytest.fixture
def typical_employees(alice: Employee, amanda: Employee, benson: Employee) -> list[Employee]:
    return [alice, amanda, benson]


@pytest.fixture
def model(typical_employees: list[Employee]) -> ModelManager:
    """ModelManager holding the typical employees and empty history."""
    return ModelManager(AddressBook(typical_employees))


@pytest.fixture
def _isolated_book(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI uses an isolated data file.

    Use via ``@pytest.mark.usefixtures("_isolated_book")`` on command test
    classes.
    """
    monkeypatch.delenv("STAFFBOOK_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def seeded_book(tmp_path: Path, _isolated_book: None, model: ModelManager) -> Path:
    """Write the typical employees to the default data file and return its path."""
    path = tmp_path / "data" / "staffbook.json"
    JsonStorage(path).save(model)
    return path
