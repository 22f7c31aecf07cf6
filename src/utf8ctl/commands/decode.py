"""Command: decode UTF-8 bytes into codepoints and text."""

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
  utf8ctl decode 0x6869
  utf8ctl decode 0xf09f9880
  utf8ctl decode 0xc080 --lenient
  utf8ctl decode --file data.bin
  utf8ctl -q decode 0xe282ac
  utf8ctl --json decode 0xff""",
)
@byte_input_options
@click.pass_obj
def decode(
    app: AppContext,
    data: str | None,
    input_file: IO[bytes] | None,
    lenient: bool | None,
) -> None:
    """Decode UTF-8 bytes (0x-hex DATA or --file) into codepoints."""
    source = resolve_byte_input(data, input_file)
    app.emit(app.codec.decode(source, policy=policy_from_flag(lenient)))
