"""Human-readable rendering of ServiceResult payloads.

:func:`render_result` looks up a renderer by ``result.op``; ops without
one get every data key printed as ``key: value``.  Output is drawn on
an in-memory Rich console and returned as text.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from utf8ctl.domain.encoder import encode_code_units
from utf8ctl.domain.escape import escape_codepoint
from utf8ctl.domain.stringify import codepoints_to_code_units
from utf8ctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from utf8ctl.services.result import ServiceResult

Renderer = Callable[..., None]

SLOW_SPAN_MS = 100.0

# Primary payload key printed by --quiet, per op.
_QUIET_KEYS = {
    "decode": "text",
    "stringify": "text",
    "escape": "literal",
    "encode": "hex",
}


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, max_rows: int = 64) -> str:
    """Render *result* for a terminal; plain text when not attached to one."""
    console = create_console()
    if not result.ok:
        _error_block(console, result, verbose=verbose)
    else:
        render = _OP_RENDERERS.get(result.op, _render_generic)
        render(result, console, verbose=verbose, max_rows=max_rows)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One line: the payload a script would want, or the error."""
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {message}"
    if result.op == "codepoints":
        return " ".join(result.data.get("labels", []))
    key = _QUIET_KEYS.get(result.op)
    if key is None:
        return f"OK: {result.op}"
    return str(result.data.get(key, ""))


# ── Building blocks ───────────────────────────────────────────────────


def _header(console: Console, op: str) -> None:
    console.print(Text("OK", style="utf8.ok"), Text(f"  {op}", style="utf8.op"))


def _kv(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text(f"  {key}: ", style="utf8.key"), Text(str(value), style=style), sep="")


def _skipped_lines(console: Console, warnings: list[str]) -> None:
    for warning in warnings:
        console.print(Text("  skipped ", style="utf8.warning"), Text(warning), sep="")


def _meta_block(console: Console, meta: dict[str, Any] | None) -> None:
    if not meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in meta.items():
        if key == "telemetry":
            _span_lines(console, value, depth=1)
        else:
            console.print(Text(f"    {key}: {value}"))


def _span_lines(console: Console, span: dict[str, Any], depth: int) -> None:
    """Print *span* and its children, four columns deeper per level."""
    elapsed = span.get("duration_ms", 0.0)
    line = Text("    " * depth)
    line.append(f"{elapsed:>8.2f}ms", style="yellow" if elapsed > SLOW_SPAN_MS else "dim")
    line.append(f"  {span.get('name', '?')}")
    notes = span.get("annotations") or {}
    if notes:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in notes.items()) + ")")
    console.print(line)
    for child in span.get("children", []):
        _span_lines(console, child, depth + 1)


def _verbose_tail(console: Console, result: ServiceResult, *, warnings: bool = False) -> None:
    if warnings:
        _skipped_lines(console, result.warnings)
    _meta_block(console, result.meta)


# ── Codepoint table ───────────────────────────────────────────────────


def _utf8_hex(codepoint: int) -> str:
    encoded = encode_code_units(codepoints_to_code_units([codepoint])).unwrap()
    return " ".join(f"{b:02x}" for b in encoded)


def _display_char(codepoint: int) -> str:
    """Printable characters as-is; whitespace and controls escaped."""
    char = chr(codepoint)
    if char.isprintable() and not char.isspace():
        return char
    if codepoint == 0x20:
        return "\\u0020"
    return escape_codepoint(codepoint)


def _codepoint_rows(console: Console, codepoints: list[int], *, max_rows: int) -> None:
    """Index, label, glyph and UTF-8 bytes for up to *max_rows* codepoints."""
    if not codepoints:
        return
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Codepoint", style="utf8.codepoint", no_wrap=True)
    table.add_column("Char", style="utf8.char")
    table.add_column("UTF-8", style="utf8.hex", no_wrap=True)
    for index, codepoint in enumerate(codepoints[:max_rows]):
        table.add_row(str(index), f"U+{codepoint:04X}", Text(_display_char(codepoint)), _utf8_hex(codepoint))

    console.print()
    console.print(table)
    if len(codepoints) > max_rows:
        console.print(Text(f"  … {len(codepoints) - max_rows} more", style="dim"))


# ── Failures ──────────────────────────────────────────────────────────


def _error_block(console: Console, result: ServiceResult, *, verbose: bool = False) -> None:
    error = result.error
    console.print(
        Text("ERROR", style="utf8.error"),
        Text(f"  {result.op}", style="utf8.op"),
        Text(" — "),
        Text(error.message if error else "Unknown error"),
        sep="",
    )
    if error is None:
        return
    console.print(Text(f"  code: {error.code}", style="utf8.key"))
    if verbose and error.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in error.detail.items():
            console.print(Text(f"    {key}: {value}"))


# ── Per-op renderers ──────────────────────────────────────────────────


def _render_decode(
    result: ServiceResult, console: Console, *, verbose: bool = False, max_rows: int = 64
) -> None:
    data = result.data
    codepoints = data.get("codepoints", [])
    _header(console, result.op)
    _kv(console, "bytes", data.get("byte_length", 0))
    _kv(console, "codepoints", len(codepoints))
    _kv(console, "policy", data.get("policy", ""))
    if data.get("skipped"):
        _kv(console, "skipped", data["skipped"], "utf8.warning")
    _codepoint_rows(console, codepoints, max_rows=max_rows)
    if verbose:
        _verbose_tail(console, result, warnings=True)


def _render_codepoints(
    result: ServiceResult, console: Console, *, verbose: bool = False, max_rows: int = 64
) -> None:
    data = result.data
    codepoints = data.get("codepoints", [])
    _header(console, result.op)
    _kv(console, "count", len(codepoints))
    _kv(console, "bytes", data.get("byte_length", 0))
    _kv(console, "form", data.get("form", "none"))
    _codepoint_rows(console, codepoints, max_rows=max_rows)
    if verbose:
        _verbose_tail(console, result)


def _render_encode(
    result: ServiceResult, console: Console, *, verbose: bool = False, max_rows: int = 64
) -> None:
    data = result.data
    _header(console, result.op)
    _kv(console, "hex", data.get("hex", ""), "utf8.hex")
    _kv(console, "bytes", data.get("byte_length", 0))
    _kv(console, "form", data.get("form", "none"))
    if verbose:
        _verbose_tail(console, result)


def _render_escape(
    result: ServiceResult, console: Console, *, verbose: bool = False, max_rows: int = 64
) -> None:
    data = result.data
    _header(console, result.op)
    _kv(console, "literal", data.get("literal", '""'), "utf8.literal")
    if data.get("skipped"):
        _kv(console, "skipped", data["skipped"], "utf8.warning")
    if verbose:
        _verbose_tail(console, result, warnings=True)


def _render_stringify(
    result: ServiceResult, console: Console, *, verbose: bool = False, max_rows: int = 64
) -> None:
    data = result.data
    _header(console, result.op)
    _kv(console, "text", data.get("text", ""), "utf8.char")
    _kv(console, "code_units", " ".join(data.get("labels", [])), "utf8.hex")
    if verbose:
        _verbose_tail(console, result)


def _render_generic(
    result: ServiceResult, console: Console, *, verbose: bool = False, max_rows: int = 64
) -> None:
    _header(console, result.op)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        _kv(console, key, value)
    if verbose:
        _verbose_tail(console, result)


_OP_RENDERERS: dict[str, Renderer] = {
    "decode": _render_decode,
    "codepoints": _render_codepoints,
    "encode": _render_encode,
    "escape": _render_escape,
    "stringify": _render_stringify,
}
