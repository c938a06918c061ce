"""
Exceptions raised by the grid engine.

All of them derive from ValueError, so callers that only care about
"bad input" can catch that.
"""


class GridError(ValueError):
    """Base class for grid engine failures."""


class InvalidDimensionsError(GridError):
    """Grid dimensions are not positive."""


class InvalidCoordinateError(GridError):
    """A (row, col) position lies outside the grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside a {rows}x{cols} grid"
        )
        self.row = row
        self.col = col


class MineCountError(GridError):
    """Mine count is negative or exceeds the eligible cells."""


class MalformedGridError(GridError):
    """A grid snapshot failed structural validation."""
