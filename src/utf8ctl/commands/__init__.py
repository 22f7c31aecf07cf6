"""utf8ctl subcommands.

Command modules are imported inside :func:`register_commands` so the
package itself stays cheap to import.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click

# (module, command attribute) in ``--help`` order.
COMMANDS = (
    ("decode", "decode"),
    ("encode", "encode"),
    ("codepoints", "codepoints"),
    ("stringify", "stringify"),
    ("escape", "escape"),
)


def register_commands(cli: click.Group) -> None:
    """Attach every codec command to *cli*."""
    for module_name, attr in COMMANDS:
        module = import_module(f"utf8ctl.commands.{module_name}")
        cli.add_command(getattr(module, attr))
