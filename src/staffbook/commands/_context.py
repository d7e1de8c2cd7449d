"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy loading of the address book, command
execution with save-after-mutation, and centralized result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from staffbook.errors import ParseError, StaffbookError, StorageError
from staffbook.output.formatters import OutputSettings, format_result
from staffbook.services.result import CommandResult

if TYPE_CHECKING:
    from staffbook.config.settings import StaffbookSettings
    from staffbook.infrastructure.model import ModelManager
    from staffbook.infrastructure.storage import JsonStorage
    from staffbook.services.base import Command

logger = logging.getLogger(__name__)


def _op_for_line(line: str) -> str:
    """Best-effort operation name for a line that failed to parse."""
    words = line.split()
    if not words:
        return "parse"
    if words[0] == "anniversary" and len(words) > 1:
        return f"anniversary_{words[1]}"
    return words[0]


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. The data file is read
    on first use so ``--help`` and ``--version`` never touch the disk.
    """

    def __init__(self, settings: StaffbookSettings) -> None:
        self.settings = settings
        self._storage: JsonStorage | None = None
        self._model: ModelManager | None = None

        from staffbook.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def storage(self) -> JsonStorage:
        """The JSON storage backend (created lazily on first access)."""
        if self._storage is None:
            from staffbook.infrastructure.storage import JsonStorage

            self._storage = JsonStorage(
                self.settings.resolved_data_path,
                max_snapshots=self.settings.history.max_snapshots,
            )
        return self._storage

    @property
    def model(self) -> ModelManager:
        """The in-memory model, loaded from storage on first access."""
        if self._model is None:
            self._model = self.storage.load()
        return self._model

    def execute(self, command: Command) -> CommandResult:
        """Run *command* and persist the model if it changed.

        Staffbook errors become a failed CommandResult; nothing is saved
        for a failed command. If the save itself fails, the model and its
        history are rolled back so memory matches the data file.
        """
        op = command.command_word.replace(" ", "_")
        try:
            model = self.model
            checkpoint = model.checkpoint() if command.mutates else None
            result = command.execute(model)
            if checkpoint is not None and result.ok:
                try:
                    self.storage.save(model)
                except StorageError:
                    model.rollback(checkpoint)
                    raise
        except StaffbookError as exc:
            logger.debug("Command %s failed: %s", op, exc.message)
            return CommandResult.failure(op, exc)
        logger.debug("Command %s succeeded", op)
        return result

    def execute_line(self, line: str) -> CommandResult:
        """Parse a full command line and execute it."""
        from staffbook.parsing.parser import parse_command

        try:
            command = parse_command(line, default_days=self.settings.reminder.default_days)
        except ParseError as exc:
            return CommandResult.failure(_op_for_line(line), exc)
        return self.execute(command)

    def run(self, word: str, args: tuple[str, ...]) -> None:
        """Execute raw Click tokens as ``word`` followed by *args* and emit."""
        line = " ".join((word, *args))
        self.emit(self.execute_line(line))

    def emit(self, result: CommandResult, *, exit_on_error: bool = True) -> None:
        """Format and output a CommandResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1 unless
          *exit_on_error* is False (the interactive shell keeps going).
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            if exit_on_error:
                raise SystemExit(1)
