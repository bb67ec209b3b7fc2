"""Commands: sanitize and finalize standalone values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from numfield.commands._base import NfCommand

if TYPE_CHECKING:
    from numfield.commands._context import AppContext


@click.command(
    cls=NfCommand,
    examples="""\
  numfield sanitize "1 234.567"
  numfield --allow-negative sanitize -- "-12abc"
  numfield --separator , --max-decimals none sanitize "3,14159"
  numfield -q sanitize 1.2.3""",
)
@click.argument("raw")
@click.pass_obj
def sanitize(app: AppContext, raw: str) -> None:
    """Run the full pipeline on RAW, as for a programmatic assignment."""
    app.emit(app.service("sanitize").sanitize(raw))


@click.command(
    cls=NfCommand,
    examples="""\
  numfield --min-decimals 2 finalize 12
  numfield --min-decimals 2 finalize 1.5""",
)
@click.argument("raw")
@click.pass_obj
def finalize(app: AppContext, raw: str) -> None:
    """Sanitize RAW and pad it to the minimum decimals, as on blur."""
    app.emit(app.service("finalize").finalize(raw))
