"""Custom Click base classes with --examples support.

Provides StaffCommand and StaffGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
Commands that take raw argument tokens set ``raw_args=True`` so tokens
such as ``-5`` or ``n/Amy`` reach the staffbook parser untouched.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class StaffCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        raw_args: bool = False,
        **kwargs: Any,
    ) -> None:
        if raw_args:
            context_settings = dict(kwargs.pop("context_settings", None) or {})
            context_settings.setdefault("ignore_unknown_options", True)
            kwargs["context_settings"] = context_settings
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class StaffGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = StaffCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = StaffCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
