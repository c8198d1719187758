"""Subcommand modules for civiltime.

Provides register_commands() which uses deferred imports to keep
``civiltime --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from civiltime.commands.between import between
    from civiltime.commands.convert import convert
    from civiltime.commands.now import now
    from civiltime.commands.parse import parse
    from civiltime.commands.shift import shift

    cli.add_command(parse)
    cli.add_command(convert)
    cli.add_command(shift)
    cli.add_command(between)
    cli.add_command(now)
