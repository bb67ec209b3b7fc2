"""Command: sanitize an in-place edit and recompute the caret."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from numfield.commands._base import NfCommand

if TYPE_CHECKING:
    from numfield.commands._context import AppContext


@click.command(
    cls=NfCommand,
    examples="""\
  numfield edit --previous 1.2 --proposed 1.a2 --caret-before 2 --caret-after 3
  numfield edit --previous 1.2 --proposed 1..2 --caret-before 2 --caret-after 3
  numfield --json edit --previous 1.23 --proposed 1.234""",
)
@click.option("--previous", default="", help="Field value before the edit.")
@click.option("--proposed", required=True, help="Field value after the browser applied the edit.")
@click.option(
    "--caret-before",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Caret position before the edit.",
)
@click.option(
    "--caret-after",
    type=click.IntRange(min=0),
    default=None,
    help="Caret position after the browser edit (default: end of --proposed).",
)
@click.pass_obj
def edit(
    app: AppContext,
    previous: str,
    proposed: str,
    caret_before: int,
    caret_after: int | None,
) -> None:
    """Sanitize a keystroke-level edit and report the corrected caret."""
    if caret_after is None:
        caret_after = len(proposed)
    app.emit(app.service("edit").edit(previous, proposed, caret_before, caret_after))
