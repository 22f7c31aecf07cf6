"""Command: list the codepoints of a string."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utf8ctl.commands._base import Utf8Command, form_option, resolve_form

if TYPE_CHECKING:
    from utf8ctl.commands._context import AppContext


@click.command(
    cls=Utf8Command,
    examples="""\
  utf8ctl codepoints "héllo"
  utf8ctl codepoints "é" --form NFD
  utf8ctl -q codepoints "😀" --form NFC""",
)
@click.argument("text")
@form_option
@click.pass_obj
def codepoints(app: AppContext, text: str, form: str | None) -> None:
    """List the codepoints of TEXT after a UTF-8 round trip."""
    app.emit(app.codec.codepoints(text, form=resolve_form(form)))
