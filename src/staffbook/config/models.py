"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, staffbook.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from staffbook.infrastructure.history import DEFAULT_MAX_SNAPSHOTS


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    path: str = "data/staffbook.json"


class HistoryConfig(BaseModel):
    """[history] section."""

    model_config = {"frozen": True}

    max_snapshots: int = Field(default=DEFAULT_MAX_SNAPSHOTS, ge=1)


class ReminderConfig(BaseModel):
    """[reminder] section."""

    model_config = {"frozen": True}

    default_days: int = Field(default=7, ge=0)
