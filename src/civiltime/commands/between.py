"""Command: day count between two dates."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from civiltime.commands._base import CivilCommand

if TYPE_CHECKING:
    from civiltime.commands._context import AppContext


@click.command(
    cls=CivilCommand,
    examples="""\
  civiltime between 1969-12-30 1969-12-31
  civiltime -q between 2024-03-01 2024-02-01""",
)
@click.argument("start")
@click.argument("end")
@click.pass_obj
def between(app: AppContext, start: str, end: str) -> None:
    """Count days from START to END, not including END."""
    app.emit(app.service.between(start, end))
