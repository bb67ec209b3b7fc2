"""Click base classes with ``--examples`` support.

``--help`` stays short; ``--examples`` prints worked invocations (edit
and paste take several positional-looking numbers that are easier to
show than to describe) and exits.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )


class ExamplesMixin:
    """Adds an eager ``--examples`` flag when ``examples=`` is given."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


class NfCommand(ExamplesMixin, click.Command):
    """Command accepting ``examples=``."""


class NfGroup(ExamplesMixin, click.Group):
    """Group accepting ``examples=``; subcommands default to NfCommand."""

    command_class = NfCommand
