"""Command: render UTF-8 bytes as an escaped string literal."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from utf8ctl.commands._base import (
    Utf8Command,
    byte_input_options,
    policy_from_flag,
    resolve_byte_input,
)

if TYPE_CHECKING:
    from utf8ctl.commands._context import AppContext


@click.command(
    cls=Utf8Command,
    examples="""\
  utf8ctl escape 0x6869
  utf8ctl escape 0x0a09225c
  utf8ctl escape 0xf09f9880
  utf8ctl -q escape --file data.bin --lenient""",
)
@byte_input_options
@click.pass_obj
def escape(
    app: AppContext,
    data: str | None,
    input_file: IO[bytes] | None,
    lenient: bool | None,
) -> None:
    """Show UTF-8 bytes as a double-quoted, escaped literal."""
    source = resolve_byte_input(data, input_file)
    app.emit(app.codec.escape(source, policy=policy_from_flag(lenient)))
