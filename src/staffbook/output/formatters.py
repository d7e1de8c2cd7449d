"""Output mode dispatch for CommandResult.

The CLI renders results for humans (Rich tables and colors), for
scripts (``--quiet``: ids only), or for machines (``--json``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from staffbook.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from staffbook.services.result import CommandResult


class OutputSettings(BaseModel):
    """Output flags taken from the global CLI options."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: CommandResult, *, settings: OutputSettings | None = None) -> str:
    """Format a CommandResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
