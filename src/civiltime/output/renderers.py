"""Human-readable rendering of ServiceResult.

A result prints as a status line followed by a two-column grid of data
fields. Each op names the fields it shows by default; ``--verbose`` shows
every field plus ``meta``. Ops without an entry show everything.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from civiltime.output.console import render_to_text

if TYPE_CHECKING:
    from rich.console import Console

    from civiltime.services.result import ServiceResult

# Fields shown without --verbose, in display order.
_COMPACT_FIELDS: dict[str, tuple[str, ...]] = {
    "parse": ("kind", "value", "valid"),
    "convert": ("instant", "zone", "utc"),
}

# The single value printed by --quiet, also emphasized in normal output.
_HEADLINE_KEYS: dict[str, str] = {
    "parse": "value",
    "convert": "instant",
    "shift": "result",
    "between": "days",
    "now": "datetime",
}


def render_result(
    result: ServiceResult, *, verbose: bool = False, width: int | None = None
) -> str:
    """Render *result* for a terminal; plain text when not on a TTY."""

    def draw(console: Console) -> None:
        if result.ok:
            _draw_success(console, result, verbose=verbose)
        else:
            _draw_error(console, result, verbose=verbose)

    return render_to_text(draw, width=width)


def render_quiet(result: ServiceResult) -> str:
    """The headline value only, for ``--quiet``."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    key = _HEADLINE_KEYS.get(result.op)
    if key and key in result.data:
        return _display(result.data[key])
    return f"OK: {result.op}"


def _display(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _grid(rows: list[tuple[str, Any, str]], *, indent: int) -> Padding:
    grid = Table.grid(padding=(0, 1))
    grid.add_column(style="civil.key", no_wrap=True)
    grid.add_column()
    for key, value, style in rows:
        grid.add_row(f"{key}:", Text(_display(value), style=style))
    return Padding(grid, (0, 0, 0, indent), expand=False)


def _style(result: ServiceResult, key: str, value: Any) -> str:
    if key == _HEADLINE_KEYS.get(result.op):
        return "civil.value"
    if key == "valid" and value is False:
        return "civil.invalid"
    return ""


def _draw_success(console: Console, result: ServiceResult, *, verbose: bool) -> None:
    console.print(Text("OK", style="civil.ok"), Text(f" {result.op}", style="civil.op"))

    keys = list(result.data)
    if not verbose and result.op in _COMPACT_FIELDS:
        keys = [k for k in _COMPACT_FIELDS[result.op] if k in result.data]
    rows = [(k, result.data[k], _style(result, k, result.data[k])) for k in keys]
    if rows:
        console.print(_grid(rows, indent=2))

    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        console.print(_grid([(k, v, "") for k, v in result.meta.items()], indent=4))


def _draw_error(console: Console, result: ServiceResult, *, verbose: bool) -> None:
    err = result.error
    console.print(
        Text("ERROR", style="civil.error"),
        Text(f" {result.op}:", style="civil.op"),
        Text(err.message if err else "Unknown error"),
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        console.print(_grid([(k, v, "") for k, v in err.detail.items()], indent=4))
