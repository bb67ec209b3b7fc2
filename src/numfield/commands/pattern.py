"""Command: print the validation pattern for the active field policy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from numfield.commands._base import NfCommand

if TYPE_CHECKING:
    from numfield.commands._context import AppContext


@click.command(
    cls=NfCommand,
    examples="""\
  numfield pattern
  numfield --allow-negative pattern
  numfield --separator , -q pattern""",
)
@click.pass_obj
def pattern(app: AppContext) -> None:
    """Print the anchored pattern every sanitized value matches."""
    app.emit(app.service("pattern").pattern())
