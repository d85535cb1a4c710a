"""Stamp — an immutable rectangular grid of width-1 cells.

Two constructors:

- ``Stamp.from_text()``: pads ragged lines with spaces (see
  :func:`to_rectangle`), then validates strictly.
- ``Stamp.from_rectangle()``: strict; the text must already be a
  rectangle of display-width-1 grapheme clusters.

Widths are always display widths, never code-point or byte counts. Two
rows can have the same display width but a different number of clusters
(``"a\\u0305"`` vs ``"bc"``), so every cluster is validated as a
:class:`Cell` as well.

INVARIANT: ``layer()`` never mutates either input; it returns a new Stamp.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from textstamp.domain.cell import Cell
from textstamp.domain.errors import (
    AnchorOutOfBoundsError,
    EmptyInputError,
    InvalidCellWidthError,
    NoRowsError,
    RowWidthMismatchError,
    ZeroWidthError,
)
from textstamp.domain.unicode import display_width, graphemes

ROW_SEPARATOR = "\n"
PAD = " "


def to_rectangle(text: str) -> str:
    """Right-pad every line of *text* with spaces to the widest line.

    A leading or trailing newline yields an empty line, which is padded
    like any other: ``to_rectangle("a\\n") == "a\\n "``.
    """
    if not text:
        raise EmptyInputError()

    lines = text.split(ROW_SEPARATOR)
    widths = [display_width(line) for line in lines]
    max_width = max(widths)

    return ROW_SEPARATOR.join(
        line + PAD * max(0, max_width - width) for line, width in zip(lines, widths, strict=True)
    )


def _parse_row(row_text: str, row: int) -> tuple[Cell, ...]:
    cells: list[Cell] = []
    for col, cluster in enumerate(graphemes(row_text)):
        try:
            cells.append(Cell(cluster))
        except InvalidCellWidthError as exc:
            raise InvalidCellWidthError(exc.text, exc.width, row=row, col=col) from exc
    return tuple(cells)


@dataclass(frozen=True, slots=True)
class Stamp:
    """Row-major grid of :class:`Cell` with ``height >= 1`` and ``width >= 1``.

    Direct construction from rows of cells is validated the same way as
    parsing, so an invalid Stamp cannot exist.
    """

    grid: tuple[tuple[Cell, ...], ...]

    def __post_init__(self) -> None:
        grid = tuple(tuple(row) for row in self.grid)
        if not grid:
            raise NoRowsError()

        width = len(grid[0])
        if width == 0:
            raise ZeroWidthError()

        for index, row in enumerate(grid):
            if len(row) != width:
                raise RowWidthMismatchError(row=index, expected=width, actual=len(row))
            for cell in row:
                if not isinstance(cell, Cell):
                    msg = f"Stamp rows must contain Cell instances, got {type(cell).__name__}"
                    raise TypeError(msg)

        object.__setattr__(self, "grid", grid)

    # --- Construction ---

    @classmethod
    def from_text(cls, text: str) -> Stamp:
        """Build a stamp from ragged text, padding short lines with spaces."""
        return cls.from_rectangle(to_rectangle(text))

    @classmethod
    def from_rectangle(cls, text: str) -> Stamp:
        """Build a stamp from text whose lines already share one display width."""
        rows = text.split(ROW_SEPARATOR)
        if not rows:
            raise NoRowsError()

        width = display_width(rows[0])
        if width == 0:
            raise ZeroWidthError()

        for index, row_text in enumerate(rows):
            row_width = display_width(row_text)
            if row_width != width:
                raise RowWidthMismatchError(row=index, expected=width, actual=row_width)

        return cls(tuple(_parse_row(row_text, index) for index, row_text in enumerate(rows)))

    # --- Queries ---

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0])

    def rows(self) -> list[str]:
        """Return each row's cells concatenated, top to bottom."""
        return ["".join(cell.render() for cell in row) for row in self.grid]

    def render(self) -> str:
        return ROW_SEPARATOR.join(self.rows())

    def __str__(self) -> str:
        return self.render()

    # --- Derivation ---

    def copy(self) -> Stamp:
        """Return a deep copy; every cell is copied, none are shared."""
        return Stamp(_copy_rows(self.grid))

    def layer(self, overlay: Stamp, col: int, row: int) -> Stamp:
        """Paint *overlay* over a copy of this stamp with its top-left at (*col*, *row*).

        The anchor cell must exist in this stamp. Any part of *overlay*
        that extends past the right or bottom edge is discarded.
        """
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise AnchorOutOfBoundsError(col=col, row=row, width=self.width, height=self.height)

        grid = _copy_rows(self.grid)
        max_row = min(row + overlay.height, self.height)
        max_col = min(col + overlay.width, self.width)

        for r in range(row, max_row):
            source = overlay.grid[r - row]
            for c in range(col, max_col):
                grid[r][c] = source[c - col].copy()

        return Stamp(grid)


def _copy_rows(grid: Iterable[Iterable[Cell]]) -> list[list[Cell]]:
    return [[cell.copy() for cell in row] for row in grid]
