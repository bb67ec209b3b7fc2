"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds the FieldService lazily (so ``--help`` and
``--version`` never validate the field policy) and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click
from pydantic import ValidationError

from numfield.config.logging import bind_field_context, configure_logging
from numfield.output.formatters import OutputSettings, format_result
from numfield.services.field import FieldService, validation_failure
from numfield.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from numfield.config.settings import NumfieldSettings
    from numfield.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: NumfieldSettings) -> None:
        self.settings = settings
        self._service: FieldService | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    def service(self, op: str) -> FieldService:
        """The field service for the configured policy.

        An invalid policy is reported as ``INVALID_CONFIG`` against *op*
        and exits with code 1.
        """
        if self._service is None:
            try:
                config = self.settings.field.to_sanitization_config()
            except ValidationError as exc:
                self.fail(validation_failure(op, "INVALID_CONFIG", exc))
            bind_field_context(config)
            self._service = FieldService(config)
        return self._service

    def _format(self, result: ServiceResult) -> str:
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        return format_result(result, settings=settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        if not result.ok:
            self.fail(result)
        click.echo(self._format(result))
        # In JSON mode, warnings are already in the serialized payload.
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Write a failed result to stderr and exit with code 1."""
        click.echo(self._format(result), err=True)
        raise SystemExit(1)
