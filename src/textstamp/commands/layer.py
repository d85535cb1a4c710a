"""Command: paint one stamp over another."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from textstamp.commands._base import StampCommand, strict_option
from textstamp.commands._input import SOURCE, read_source

if TYPE_CHECKING:
    from textstamp.commands._context import AppContext


@click.command(
    cls=StampCommand,
    examples="""\
  textstamp layer background.txt logo.txt
  textstamp layer background.txt logo.txt --col 3 --row 1
  textstamp -q layer background.txt - --col 8 < badge.txt""",
)
@click.argument("base", type=SOURCE)
@click.argument("overlay", type=SOURCE)
@click.option(
    "--col",
    type=click.IntRange(min=0),
    default=None,
    help="Zero-based column of the overlay's top-left cell (default from config).",
)
@click.option(
    "--row",
    type=click.IntRange(min=0),
    default=None,
    help="Zero-based row of the overlay's top-left cell (default from config).",
)
@strict_option
@click.pass_obj
def layer(
    app: AppContext,
    base: IO[str],
    overlay: IO[str],
    col: int | None,
    row: int | None,
    strict: bool | None,
) -> None:
    """Paint OVERLAY onto BASE; whatever falls past BASE's edges is clipped."""
    defaults = app.settings.layer
    app.emit(
        app.service.layer(
            read_source(base),
            read_source(overlay),
            col=defaults.col if col is None else col,
            row=defaults.row if row is None else row,
            strict=strict,
        )
    )
