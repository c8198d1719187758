"""Command: the current civil date and time in a zone."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from civiltime.commands._base import CivilCommand

if TYPE_CHECKING:
    from civiltime.commands._context import AppContext


@click.command(
    cls=CivilCommand,
    examples="""\
  civiltime now
  civiltime now --zone Asia/Kathmandu""",
)
@click.option("-z", "--zone", default=None, help="IANA zone name (default from config).")
@click.pass_obj
def now(app: AppContext, zone: str | None) -> None:
    """Print the current civil date and time."""
    app.emit(app.service.now(zone=zone))
