"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides the stamp service and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from textstamp.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from textstamp.config.settings import TextstampSettings
    from textstamp.services.result import ServiceResult
    from textstamp.services.stamp import StampService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TextstampSettings) -> None:
        self.settings = settings
        self._service: StampService | None = None

        from textstamp.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from textstamp.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> StampService:
        """The stamp service (created lazily on first access)."""
        if self._service is None:
            from textstamp.services.stamp import StampService

            self._service = StampService(self.settings.stamp)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
