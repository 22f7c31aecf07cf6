"""Command: encode text as UTF-8 bytes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utf8ctl.commands._base import Utf8Command, form_option, resolve_form

if TYPE_CHECKING:
    from utf8ctl.commands._context import AppContext


@click.command(
    cls=Utf8Command,
    examples="""\
  utf8ctl encode hi
  utf8ctl encode "€"
  utf8ctl encode "é" --form NFD
  utf8ctl -q encode "😀" --form NFC""",
)
@click.argument("text")
@form_option
@click.pass_obj
def encode(app: AppContext, text: str, form: str | None) -> None:
    """Encode TEXT as UTF-8 and show the bytes."""
    app.emit(app.codec.encode(text, form=resolve_form(form)))
