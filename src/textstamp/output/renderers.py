"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.

Stamp text is written with ``Console.out`` so that brackets, colons and
long rows reach the terminal untouched (no markup, emoji codes or wrapping).
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from textstamp.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from textstamp.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Operations that produce a stamp print only its text, so quiet mode
    can be piped straight into another command.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    text = result.data.get("text")
    if isinstance(text, str):
        return text

    if result.op == "info":
        return f"{result.data['width']}x{result.data['height']}"

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "stamp.ok"), (f"  {result.op}", "stamp.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    style = "stamp.dim" if key in ("height", "width", "cells") else ""
    console.print(Text.assemble((f"  {key}: ", "stamp.key"), (str(value), style)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = Text(prefix)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {name}")

    annotations = span_data.get("annotations") or {}
    if annotations:
        extras = ", ".join(f"{ak}={av}" for ak, av in annotations.items())
        line.append(f"  ({extras})")

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "stamp.error"), (f"  {result.op}", "stamp.op"), " — ", msg)
    )

    if err:
        console.print(Text.assemble(("  code: ", "stamp.key"), (err.code, "stamp.code")))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v!r}" if isinstance(v, str) else f"    {k}: {v}"))


# ── Stamp renderers ───────────────────────────────────────────────────


def _render_stamp(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render render/layer results: status, dimensions, then the stamp itself."""
    _status_line(console, result)
    for key in ("height", "width", "col", "row"):
        if key in result.data:
            _field(console, key, result.data[key])
    console.print()
    console.out(result.data.get("text", ""), highlight=False)
    if verbose:
        _render_meta(console, result)


def _render_info(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("height", "width", "cells", "padded", "strict"):
        if key in result.data:
            _field(console, key, result.data[key])

    rows = result.data.get("rows") or []
    if rows:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("#", style="stamp.key", justify="right")
        table.add_column("Row", no_wrap=True)
        for index, row in enumerate(rows):
            table.add_row(str(index), Text(row))
        console.print(table)

    if verbose:
        _render_meta(console, result)


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    width = result.data.get("width")
    height = result.data.get("height")
    console.print(Text(f"  Valid {width}x{height} rectangle.", style="stamp.ok"))
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":"), ensure_ascii=False))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "render": _render_stamp,
    "layer": _render_stamp,
    "info": _render_info,
    "check": _render_check,
}
