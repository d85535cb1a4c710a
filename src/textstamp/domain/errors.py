"""Stamp construction and layering errors.

Every failure carries a stable ``code`` (used as ``ServiceError.code`` by
the service layer) and a ``detail`` dict describing where it happened.

INVARIANT: No error is recovered inside the domain layer. Construction
either yields a fully valid value or raises one of these.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar


class ErrorCode(StrEnum):
    """Machine-readable failure kinds."""

    EMPTY_INPUT = "EMPTY_INPUT"
    NO_ROWS = "NO_ROWS"
    ZERO_WIDTH = "ZERO_WIDTH"
    ROW_WIDTH_MISMATCH = "ROW_WIDTH_MISMATCH"
    INVALID_CELL_WIDTH = "INVALID_CELL_WIDTH"
    ANCHOR_OUT_OF_BOUNDS = "ANCHOR_OUT_OF_BOUNDS"


class StampError(ValueError):
    """Base class for all stamp failures."""

    code: ClassVar[ErrorCode]

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail


class EmptyInputError(StampError):
    code = ErrorCode.EMPTY_INPUT

    def __init__(self) -> None:
        super().__init__("Input text is empty")


class NoRowsError(StampError):
    code = ErrorCode.NO_ROWS

    def __init__(self) -> None:
        super().__init__("Stamp has no rows")


class ZeroWidthError(StampError):
    code = ErrorCode.ZERO_WIDTH

    def __init__(self) -> None:
        super().__init__("First row has zero display width")


class RowWidthMismatchError(StampError):
    """A row's display width differs from the first row's."""

    code = ErrorCode.ROW_WIDTH_MISMATCH

    def __init__(self, *, row: int, expected: int, actual: int) -> None:
        super().__init__(
            f"Row {row} has display width {actual}, expected {expected}",
            row=row,
            expected=expected,
            actual=actual,
        )
        self.row = row
        self.expected = expected
        self.actual = actual


class InvalidCellWidthError(StampError):
    """A grapheme cluster does not occupy exactly one column.

    *row* and *col* are filled in when the cluster was found while parsing
    a stamp; a bare ``Cell`` construction leaves them as None.
    """

    code = ErrorCode.INVALID_CELL_WIDTH

    def __init__(
        self,
        text: str,
        width: int,
        *,
        row: int | None = None,
        col: int | None = None,
    ) -> None:
        where = f" at row {row}, column {col}" if row is not None else ""
        detail: dict[str, Any] = {"text": text, "width": width}
        if row is not None:
            detail["row"] = row
            detail["col"] = col
        super().__init__(
            f"Cluster {text!r}{where} has display width {width}, expected 1",
            **detail,
        )
        self.text = text
        self.width = width
        self.row = row
        self.col = col


class AnchorOutOfBoundsError(StampError):
    code = ErrorCode.ANCHOR_OUT_OF_BOUNDS

    def __init__(self, *, col: int, row: int, width: int, height: int) -> None:
        super().__init__(
            f"Anchor ({col}, {row}) lies outside a {width}x{height} stamp",
            col=col,
            row=row,
            width=width,
            height=height,
        )
