"""Cell — one grapheme cluster that renders exactly one column wide."""

from __future__ import annotations

from dataclasses import dataclass

from textstamp.domain.errors import InvalidCellWidthError
from textstamp.domain.unicode import cluster_width


@dataclass(frozen=True, slots=True)
class Cell:
    """The text equivalent of a pixel.

    *text* is a single grapheme cluster, possibly several code points
    (a base letter plus combining marks). Construction fails unless its
    display width is exactly 1.
    """

    text: str

    def __post_init__(self) -> None:
        width = cluster_width(self.text)
        if width != 1:
            raise InvalidCellWidthError(self.text, width)

    def render(self) -> str:
        return self.text

    def copy(self) -> Cell:
        return Cell(self.text)

    def __str__(self) -> str:
        return self.text
