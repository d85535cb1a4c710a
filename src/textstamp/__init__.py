"""textstamp — fixed-grid text stamps built from width-1 Unicode cells."""

from textstamp.domain.cell import Cell
from textstamp.domain.errors import (
    AnchorOutOfBoundsError,
    EmptyInputError,
    ErrorCode,
    InvalidCellWidthError,
    NoRowsError,
    RowWidthMismatchError,
    StampError,
    ZeroWidthError,
)
from textstamp.domain.stamp import Stamp, to_rectangle

__version__ = "0.1.0"

__all__ = [
    "AnchorOutOfBoundsError",
    "Cell",
    "EmptyInputError",
    "ErrorCode",
    "InvalidCellWidthError",
    "NoRowsError",
    "RowWidthMismatchError",
    "Stamp",
    "StampError",
    "ZeroWidthError",
    "__version__",
    "to_rectangle",
]
