"""Reading stamp text from files or stdin."""

from __future__ import annotations

from typing import IO

import click

#: Shared argument type: a UTF-8 text file path, or ``-`` for stdin.
SOURCE = click.File("r", encoding="utf-8")


def read_source(stream: IO[str]) -> str:
    """Read a whole stamp source, dropping the file's final newline.

    Only one newline is dropped; further blank lines are part of the stamp.
    Undecodable input is reported as a CLI error naming the source.
    """
    try:
        text = stream.read()
    except UnicodeDecodeError as exc:
        name = click.format_filename(getattr(stream, "name", "-"))
        msg = f"{name} is not valid UTF-8 ({exc.reason} at byte {exc.start})"
        raise click.ClickException(msg) from exc
    if text.endswith("\n"):
        text = text[:-1]
    return text
