"""Root CLI group for staffbook with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from staffbook import __version__
from staffbook.commands import register_commands
from staffbook.commands._context import AppContext
from staffbook.config.settings import StaffbookSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="staffbook")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--data",
    "data_path",
    type=click.Path(dir_okay=False, resolve_path=True, path_type=Path),
    default=None,
    help="Override the data file path.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    data_path: Path | None,
) -> None:
    """staffbook — employee address book with anniversary reminders."""
    ctx.ensure_object(dict)
    settings = StaffbookSettings.from_cli(
        config_path=config_path,
        data_path=data_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
