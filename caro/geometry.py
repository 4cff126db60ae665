"""Screen coordinates and board indices."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A position on the console, in columns (x) and rows (y)."""

    x: int = 0
    y: int = 0

    def moved(self, dx: int, dy: int) -> Point:
        """Return this point shifted by the given offsets."""
        return Point(self.x + dx, self.y + dy)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class PairIndex:
    """A (row, column) cell index on the board.

    The plain constructor keeps any value, negative ones included, so that
    win scanning can walk off the board; ``clamped`` builds an index whose
    negative parts are raised to zero.
    """

    row: int = 0
    col: int = 0

    @classmethod
    def clamped(cls, row: int, col: int) -> PairIndex:
        """Build an index with negative parts replaced by zero."""
        return cls(max(row, 0), max(col, 0))

    def moved(self, d_row: int, d_col: int) -> PairIndex:
        """Return this index shifted by the given offsets, unclamped."""
        return PairIndex(self.row + d_row, self.col + d_col)

    def is_valid(self, max_row: int, max_col: int) -> bool:
        """Tell whether the index lies inside a ``max_row`` x ``max_col`` grid."""
        return 0 <= self.row < max_row and 0 <= self.col < max_col

    def __add__(self, other: PairIndex) -> PairIndex:
        return PairIndex.clamped(self.row + other.row, self.col + other.col)