"""Command: splice pasted text over a selection and sanitize it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from numfield.commands._base import NfCommand

if TYPE_CHECKING:
    from numfield.commands._context import AppContext


@click.command(
    cls=NfCommand,
    examples="""\
  numfield paste --previous 1.2 --text 5.5 --start 1 --end 2
  numfield paste --previous 12 --text "3 456,78"
  numfield --max-decimals 4 paste --text 1,234.56789""",
)
@click.option("--previous", default="", help="Field value before the paste.")
@click.option("--text", required=True, help="Clipboard text being pasted.")
@click.option(
    "--start",
    type=click.IntRange(min=0),
    default=None,
    help="Selection start (default: end of --previous).",
)
@click.option(
    "--end",
    type=click.IntRange(min=0),
    default=None,
    help="Selection end (default: --start).",
)
@click.pass_obj
def paste(
    app: AppContext,
    previous: str,
    text: str,
    start: int | None,
    end: int | None,
) -> None:
    """Sanitize a paste and place the caret after the inserted span."""
    if start is None:
        start = len(previous)
    if end is None:
        end = start
    app.emit(app.service("paste").paste(previous, text, start, end))
