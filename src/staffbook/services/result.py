"""CommandResult and ResultError — the universal command contract.

INVARIANT: every command returns a CommandResult on success. Failures are
raised as ``StaffbookError`` subclasses and turned into a failed
CommandResult at the CLI boundary via :meth:`CommandResult.failure`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from staffbook.errors import StaffbookError


class ResultError(BaseModel):
    """Structured error payload within a CommandResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class CommandResult(BaseModel):
    """Return type for all command executions.

    Attributes:
        ok: Whether the command succeeded.
        op: Name of the operation (e.g. ``"delete"``).
        message: Human-readable feedback for the user.
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered while executing.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool = True
    op: str
    message: str = ""
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ResultError | None = None

    @classmethod
    def failure(cls, op: str, exc: StaffbookError, **detail: Any) -> CommandResult:
        """Build a failed result from a raised staffbook error."""
        return cls(
            ok=False,
            op=op,
            error=ResultError(code=exc.code, message=exc.message, detail=detail),
        )
