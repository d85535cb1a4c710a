"""Command: report stamp dimensions."""

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
  textstamp info banner.txt
  textstamp --json info banner.txt
  textstamp -q info banner.txt""",
)
@click.argument("source", type=SOURCE)
@strict_option
@click.pass_obj
def info(app: AppContext, source: IO[str], strict: bool | None) -> None:
    """Show the height, width and rows of the stamp in SOURCE."""
    app.emit(app.service.info(read_source(source), strict=strict))
