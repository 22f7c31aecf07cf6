"""The ``utf8ctl`` entry point: global flags, settings and subcommands."""

from __future__ import annotations

import click

from utf8ctl import __version__
from utf8ctl.commands import register_commands
from utf8ctl.commands._base import Utf8Group
from utf8ctl.commands._context import AppContext
from utf8ctl.config.settings import Utf8Settings


@click.group(
    cls=Utf8Group,
    invoke_without_command=True,
    examples="""\
  utf8ctl decode 0xf09f9880
  utf8ctl encode "€" --form NFC
  utf8ctl stringify U+1F600
  utf8ctl --json escape 0x0a22""",
)
@click.version_option(version=__version__, prog_name="utf8ctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the result payload.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Inspect and convert between UTF-8 bytes, codepoints and text."""
    # Unset flags stay out of the kwargs so env vars and TOML can supply them.
    flags = {
        name: value
        for name, value in (
            ("json_output", json_output),
            ("quiet", quiet),
            ("verbose", verbose),
            ("log_json", log_json),
        )
        if value
    }
    settings = Utf8Settings.from_cli(config_path=config_path, **flags)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
