"""Command: calendar arithmetic on a date."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from civiltime.commands._base import CivilCommand

if TYPE_CHECKING:
    from civiltime.commands._context import AppContext


@click.command(
    cls=CivilCommand,
    examples="""\
  civiltime shift 2014-03-21 --days 10
  civiltime shift 2014-01-31 --months 1
  civiltime shift 2024-02-29 --years -1""",
)
@click.argument("date")
@click.option("-y", "--years", type=int, default=0, help="Years to add (may be negative).")
@click.option("-m", "--months", type=int, default=0, help="Months to add (may be negative).")
@click.option("-d", "--days", type=int, default=0, help="Days to add (may be negative).")
@click.pass_obj
def shift(app: AppContext, date: str, years: int, months: int, days: int) -> None:
    """Move DATE by years, then months, then days."""
    app.emit(app.service.shift(date, years=years, months=months, days=days))
