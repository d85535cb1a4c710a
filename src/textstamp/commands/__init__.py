"""Subcommand modules for textstamp.

Provides register_commands() which uses deferred imports to keep
``textstamp --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from textstamp.commands.check import check
    from textstamp.commands.info import info
    from textstamp.commands.layer import layer
    from textstamp.commands.render import render

    cli.add_command(render)
    cli.add_command(info)
    cli.add_command(check)
    cli.add_command(layer)
