"""Command: bind a civil date or date-time to a time zone."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from civiltime.commands._base import CivilCommand

if TYPE_CHECKING:
    from civiltime.commands._context import AppContext


@click.command(
    cls=CivilCommand,
    examples="""\
  civiltime convert 2014-03-21
  civiltime convert 2014-03-21T09:05:00 --zone Europe/Paris
  civiltime --json convert 1955-05-01 --zone America/Indiana/Vincennes""",
)
@click.argument("text")
@click.option("-z", "--zone", default=None, help="IANA zone name (default from config).")
@click.pass_obj
def convert(app: AppContext, text: str, zone: str | None) -> None:
    """Show the instant a civil TEXT denotes in a zone."""
    app.emit(app.service.convert(text, zone=zone))
