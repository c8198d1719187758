"""Command: parse and validate civil text."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from civiltime.commands._base import CivilCommand

if TYPE_CHECKING:
    from civiltime.commands._context import AppContext


@click.command(
    cls=CivilCommand,
    examples="""\
  civiltime parse date 2014-03-21
  civiltime parse time 09:05:00.5
  civiltime parse datetime 2014-03-21t09:05:00
  civiltime --json parse date 0000-00-00""",
)
@click.argument("kind", type=click.Choice(["date", "time", "datetime"]))
@click.argument("text")
@click.pass_obj
def parse(app: AppContext, kind: str, text: str) -> None:
    """Parse TEXT as a civil KIND and print its canonical form."""
    app.emit(app.service.parse(kind, text))
