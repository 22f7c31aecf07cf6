"""AppContext, the object behind ``@click.pass_obj``.

The root group builds one per invocation.  It applies the logging and
telemetry switches, hands out the CodecService, and turns a
ServiceResult into output plus an exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utf8ctl.config.logging import configure_logging
from utf8ctl.output.formatters import OutputSettings, format_result
from utf8ctl.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from utf8ctl.config.settings import Utf8Settings
    from utf8ctl.services.codec import CodecService
    from utf8ctl.services.result import ServiceResult


class AppContext:
    """Per-invocation state shared by all commands."""

    def __init__(self, settings: Utf8Settings) -> None:
        self.settings = settings
        self._codec: CodecService | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @property
    def codec(self) -> CodecService:
        if self._codec is None:
            from utf8ctl.services.codec import CodecService

            self._codec = CodecService(self.settings)
        return self._codec

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            max_rows=self.settings.output.max_rows,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; exit with status 1 if it failed.

        Successful payloads go to stdout.  Failures go to stderr, as do
        lenient-decoding warnings outside JSON mode (the JSON payload
        already lists them).
        """
        output_settings = self.output_settings
        rendered = format_result(result, settings=output_settings)
        if not result.ok:
            click.echo(rendered, err=True)
            raise SystemExit(1)

        click.echo(rendered)
        if not output_settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
