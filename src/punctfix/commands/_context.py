"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Configures logging and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from punctfix.output.formatters import (
    OutputSettings,
    format_result,
    format_status,
    render_status,
)

if TYPE_CHECKING:
    from punctfix.config.settings import PunctfixSettings
    from punctfix.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: PunctfixSettings) -> None:
        self.settings = settings

        from punctfix.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose, quiet=settings.quiet, log_json=settings.log_json
        )

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Converted content is written verbatim; the status line and
          warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)

        click.echo(output, nl=not output.endswith("\n"))
        if settings.json_output:
            return
        if "text" in result.data:
            status = format_status(result, settings=settings)
            if status:
                click.echo(status, err=True)
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)

    def notify(self, result: ServiceResult) -> None:
        """Announce a background conversion (one line per event)."""
        if self.settings.json_output:
            click.echo(result.model_dump_json())
        elif not self.settings.quiet:
            click.echo(render_status(result, verbose=self.settings.verbose))
