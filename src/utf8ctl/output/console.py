"""Rich console and theme used by the renderers.

Renderers draw into an in-memory console and hand back the text, so
the caller decides where it goes (stdout, stderr, a test assertion).
Rich drops color on its own when the buffer is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

UTF8_THEME = Theme(
    {
        # status
        "utf8.ok": "bold green",
        "utf8.error": "bold red",
        "utf8.warning": "bold yellow",
        "utf8.op": "bold cyan",
        "utf8.key": "dim",
        # codec values
        "utf8.codepoint": "bold blue",
        "utf8.hex": "magenta",
        "utf8.literal": "green",
        "utf8.char": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """An in-memory console with the utf8ctl theme and no auto-highlighting."""
    return Console(
        file=StringIO(),
        theme=UTF8_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Everything printed to *console* so far."""
    buffer = console.file
    assert isinstance(buffer, StringIO)
    return buffer.getvalue()
