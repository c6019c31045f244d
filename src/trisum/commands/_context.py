"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup, the service instance, and
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from trisum.config.logging import configure_logging
from trisum.output.formatters import OutputSettings, format_result
from trisum.services.summation import SummationService

if TYPE_CHECKING:
    from trisum.config.settings import TrisumSettings
    from trisum.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TrisumSettings) -> None:
        self.settings = settings
        self._service: SummationService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> SummationService:
        """The summation service, configured from settings on first use."""
        if self._service is None:
            self._service = SummationService(
                validation=self.settings.validation,
                benchmark=self.settings.benchmark,
                recursion=self.settings.recursion,
            )
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr unless in JSON mode.
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
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
