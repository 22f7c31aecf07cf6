"""Click command classes and the input options the codec commands share.

Commands built with :class:`Utf8Command` (and the root
:class:`Utf8Group`) take an ``examples=`` string.  It is shown by an
eager ``--examples`` flag so ``--help`` stays short.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import IO, Any, TypeVar

import click

_F = TypeVar("_F", bound=Callable[..., Any])


class _ExamplesMixin:
    """Registers ``--examples`` when the command was given an examples text."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                is_eager=True,
                expose_value=False,
                callback=self._print_examples,
                help="Show usage examples.",
            )
        )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)


class Utf8Command(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class Utf8Group(_ExamplesMixin, click.Group):
    command_class = Utf8Command

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


def byte_input_options(func: _F) -> _F:
    """Add the ``DATA`` argument, ``--file`` and ``--lenient/--strict`` options."""
    func = click.option(
        "--lenient/--strict",
        "lenient",
        default=None,
        help="Skip malformed sequences instead of failing (default: from config).",
    )(func)
    func = click.option(
        "-f",
        "--file",
        "input_file",
        type=click.File("rb"),
        default=None,
        help="Read raw bytes from a file ('-' for stdin).",
    )(func)
    func = click.argument("data", required=False)(func)
    return func


def resolve_byte_input(data: str | None, input_file: IO[bytes] | None) -> str | bytes:
    """Pick the byte source given on the command line.

    Raises:
        click.UsageError: If neither or both of DATA and --file are given.
    """
    if data is not None and input_file is not None:
        raise click.UsageError("Pass either DATA or --file, not both.")
    if input_file is not None:
        return input_file.read()
    if data is None:
        raise click.UsageError("Missing DATA (a 0x-prefixed hex string) or --file.")
    return data


def policy_from_flag(lenient: bool | None) -> str | None:
    if lenient is None:
        return None
    return "lenient" if lenient else "strict"


FORM_CHOICES = ["NFC", "NFD", "NFKC", "NFKD", "none"]


def form_option(func: _F) -> _F:
    """Add the ``--form`` normalization option."""
    return click.option(
        "--form",
        type=click.Choice(FORM_CHOICES, case_sensitive=False),
        default=None,
        help="Normalize before encoding (default: from config).",
    )(func)


def resolve_form(form: str | None) -> str | None:
    """Map a ``--form`` choice onto a NormalizationForm value."""
    if form is None:
        return None
    return "" if form.lower() == "none" else form.upper()
