"""Command: print a stamp parsed from text."""

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
  textstamp render banner.txt
  textstamp render --strict banner.txt
  printf 'ab\\nc' | textstamp -q render -""",
)
@click.argument("source", type=SOURCE)
@strict_option
@click.pass_obj
def render(app: AppContext, source: IO[str], strict: bool | None) -> None:
    """Parse SOURCE into a stamp and print it (short lines padded with spaces)."""
    app.emit(app.service.render(read_source(source), strict=strict))
