"""Command: gate a separator or sign keystroke."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from numfield.commands._base import NfCommand

if TYPE_CHECKING:
    from numfield.commands._context import AppContext


@click.command(
    cls=NfCommand,
    examples="""\
  numfield key , --value 123
  numfield key . --value 1.23 --start 4
  numfield --allow-negative key - --value 12 --start 0""",
)
@click.argument("key_name", metavar="KEY")
@click.option("--value", default="", help="Field value when the key was pressed.")
@click.option(
    "--start",
    type=click.IntRange(min=0),
    default=None,
    help="Selection start (default: end of --value).",
)
@click.option(
    "--end",
    type=click.IntRange(min=0),
    default=None,
    help="Selection end (default: --start).",
)
@click.pass_obj
def key(
    app: AppContext,
    key_name: str,
    value: str,
    start: int | None,
    end: int | None,
) -> None:
    """Decide whether KEY is allowed, blocked, or rewritten to the separator."""
    if start is None:
        start = len(value)
    if end is None:
        end = start
    app.emit(app.service("key").key(key_name, value, start, end))
