"""JSON file storage for the address book and its undo history.

The document is a pydantic model serialized with ``model_dump_json``.
Writes go to a sibling temporary file first and then replace the
target, so an interrupted save never leaves a truncated data file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from staffbook.domain.employee import Employee
from staffbook.errors import StaffbookError, StorageError
from staffbook.infrastructure.address_book import AddressBook
from staffbook.infrastructure.history import DEFAULT_MAX_SNAPSHOTS, SnapshotHistory
from staffbook.infrastructure.model import ModelManager

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


class StoredHistory(BaseModel):
    """Serialized undo/redo stacks."""

    undo: list[list[Employee]] = Field(default_factory=list)
    redo: list[list[Employee]] = Field(default_factory=list)


class StoredAddressBook(BaseModel):
    """On-disk document layout."""

    version: int = SCHEMA_VERSION
    employees: list[Employee] = Field(default_factory=list)
    history: StoredHistory = Field(default_factory=StoredHistory)


class JsonStorage:
    """Load and save a :class:`ModelManager` to a JSON file."""

    def __init__(self, path: Path, *, max_snapshots: int = DEFAULT_MAX_SNAPSHOTS) -> None:
        self.path = path
        self.max_snapshots = max_snapshots

    def load(self) -> ModelManager:
        """Read the data file. A missing file yields an empty model."""
        if not self.path.is_file():
            logger.debug("No data file at %s, starting empty", self.path)
            return ModelManager(history=SnapshotHistory(max_snapshots=self.max_snapshots))

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Could not read data file {self.path}: {exc}") from exc

        try:
            document = StoredAddressBook.model_validate_json(raw)
            address_book = AddressBook(document.employees)
        except ValidationError as exc:
            raise StorageError(
                f"Data file {self.path} is not in the correct format: "
                f"{exc.error_count()} validation error(s)"
            ) from exc
        except StaffbookError as exc:
            raise StorageError(f"Data file {self.path} is corrupted: {exc.message}") from exc

        history = SnapshotHistory(
            [tuple(s) for s in document.history.undo],
            [tuple(s) for s in document.history.redo],
            max_snapshots=self.max_snapshots,
        )
        logger.debug("Loaded %d employees from %s", len(address_book), self.path)
        return ModelManager(address_book, history)

    def save(self, model: ModelManager) -> None:
        history = model.history
        document = StoredAddressBook(
            employees=list(model.get_address_book()),
            history=StoredHistory(
                undo=[list(s) for s in history.undo_snapshots],
                redo=[list(s) for s in history.redo_snapshots],
            ),
        )
        payload = document.model_dump_json(indent=2)

        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise StorageError(f"Could not write data file {self.path}: {exc}") from exc
        logger.debug("Saved %d employees to %s", len(document.employees), self.path)
