"""Root CLI group for numfield with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from numfield import __version__
from numfield.commands import register_commands
from numfield.commands._base import NfGroup
from numfield.commands._context import AppContext
from numfield.config.settings import NumfieldSettings


@click.group(
    cls=NfGroup,
    invoke_without_command=True,
    examples="""\
  numfield pattern
  numfield --separator , --allow-negative sanitize -- "-1.234,5"
  numfield --json edit --previous 1.2 --proposed 1..2 --caret-before 2 --caret-after 3""",
)
@click.version_option(version=__version__, prog_name="numfield")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print the bare value only.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and telemetry spans.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--separator", "decimal_separator", default=None, help="Decimal separator.")
@click.option(
    "--allow-negative/--no-allow-negative",
    default=None,
    help="Accept a leading minus sign.",
)
@click.option(
    "--max-decimals",
    default=None,
    metavar="INT|none",
    help="Fractional digit cap, or 'none' for unbounded.",
)
@click.option(
    "--min-decimals",
    type=click.IntRange(min=0),
    default=None,
    help="Fractional digits padded in by 'finalize'.",
)
@click.option(
    "--leading-zeros/--no-leading-zeros",
    "allow_leading_zeros",
    default=None,
    help="Keep or collapse redundant leading zeros.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    decimal_separator: str | None,
    allow_negative: bool | None,
    max_decimals: str | None,
    min_decimals: int | None,
    allow_leading_zeros: bool | None,
) -> None:
    """numfield — numeric text field sanitizer."""
    ctx.ensure_object(dict)
    try:
        settings = NumfieldSettings.from_cli(
            config_path=config_path,
            field_overrides={
                "decimal_separator": decimal_separator,
                "allow_negative": allow_negative,
                "max_decimals": max_decimals,
                "min_decimals": min_decimals,
                "allow_leading_zeros": allow_leading_zeros,
            },
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        msg = f"Invalid configuration: {exc}"
        raise click.ClickException(msg) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
