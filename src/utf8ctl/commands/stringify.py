"""Command: build text from codepoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utf8ctl.commands._base import Utf8Command

if TYPE_CHECKING:
    from utf8ctl.commands._context import AppContext


def parse_codepoint(value: str) -> int:
    """Parse ``U+1F600``, ``0x1f600`` or ``128512``.

    Raises:
        ValueError: If *value* is not an integer in one of those forms.
    """
    text = value.strip()
    if text[:2].upper() == "U+":
        return int(text[2:], 16)
    if text[:2].lower() == "0x":
        return int(text[2:], 16)
    return int(text, 10)


def _parse_codepoints(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> list[int]:
    try:
        return [parse_codepoint(value) for value in values]
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.command(
    cls=Utf8Command,
    examples="""\
  utf8ctl stringify 104 105
  utf8ctl stringify U+1F600
  utf8ctl --json stringify 0x20ac 0x1f600""",
)
@click.argument(
    "codepoint_values",
    metavar="CODEPOINT...",
    nargs=-1,
    required=True,
    callback=_parse_codepoints,
)
@click.pass_obj
def stringify(app: AppContext, codepoint_values: list[int]) -> None:
    """Build text (and UTF-16 code units) from CODEPOINTs."""
    app.emit(app.codec.stringify(codepoint_values))
