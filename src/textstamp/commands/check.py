"""Command: strict rectangle validation."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from textstamp.commands._base import StampCommand
from textstamp.commands._input import SOURCE, read_source

if TYPE_CHECKING:
    from textstamp.commands._context import AppContext


@click.command(
    cls=StampCommand,
    examples="""\
  textstamp check banner.txt
  textstamp --json check banner.txt""",
)
@click.argument("source", type=SOURCE)
@click.pass_obj
def check(app: AppContext, source: IO[str]) -> None:
    """Check that SOURCE is already a rectangle of single-column characters."""
    app.emit(app.service.check(read_source(source)))
