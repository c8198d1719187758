"""AppContext: the object every civiltime subcommand receives.

The root group builds it once from CivilSettings; subcommands reach it via
``@click.pass_obj`` and hand their ServiceResult to :meth:`AppContext.emit`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from civiltime.config.logging import configure_logging
from civiltime.output.formatters import OutputSettings, format_result
from civiltime.services.civil import CivilService

if TYPE_CHECKING:
    from civiltime.config.settings import CivilSettings
    from civiltime.services.result import ServiceResult


class AppContext:
    """Settings, the service, and result emission for one invocation."""

    def __init__(self, settings: CivilSettings) -> None:
        self.settings = settings
        self.service = CivilService(settings)
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
            width=settings.output.width,
        )
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Successes go to stdout, with any warnings on stderr (JSON output
        already carries them). Failures go to stderr and exit with status 1.
        """
        click.echo(format_result(result, settings=self.output), err=not result.ok)
        if not result.ok:
            raise SystemExit(1)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
