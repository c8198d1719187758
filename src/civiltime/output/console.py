"""Rich console plumbing for civiltime output.

Rendering goes to an in-memory buffer so the formatters can return plain
strings; Rich drops color codes when the buffer is not a terminal.
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

CIVIL_THEME = Theme(
    {
        "civil.ok": "bold green",
        "civil.error": "bold red",
        "civil.warning": "bold yellow",
        "civil.op": "bold cyan",
        "civil.key": "dim",
        "civil.value": "bold",
        "civil.invalid": "yellow",
    }
)


def render_to_text(draw: Callable[[Console], None], *, width: int | None = None) -> str:
    """Run *draw* against a buffered console and return what it printed.

    Trailing newlines are stripped so callers can ``click.echo`` the result.
    """
    buffer = StringIO()
    console = Console(
        file=buffer,
        theme=CIVIL_THEME,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )
    draw(console)
    return buffer.getvalue().rstrip("\n")
