"""aoc2024.types
=================

Foundational value types shared by the daily solutions: grid coordinates,
signed offsets, grid extents and the answer record printed by the CLI.

The module stays definitions-only apart from the small arithmetic methods on
the coordinate types, so importing it never triggers runtime side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

# ---------------------------------------------------------------------------
# Coordinates
# ---------------------------------------------------------------------------
@dataclass(frozen=True, order=True)
class Offset:
    """Signed ``(row, column)`` delta applied to a :class:`Position`."""

    row_offset: int
    col_offset: int

    UP: ClassVar["Offset"]
    DOWN: ClassVar["Offset"]
    LEFT: ClassVar["Offset"]
    RIGHT: ClassVar["Offset"]

    def __add__(self, other: "Offset") -> "Offset":
        return Offset(self.row_offset + other.row_offset, self.col_offset + other.col_offset)

    def __neg__(self) -> "Offset":
        return Offset(-self.row_offset, -self.col_offset)

    def scale(self, factor: int) -> "Offset":
        return Offset(self.row_offset * factor, self.col_offset * factor)

    def dot(self, other: "Offset") -> int:
        return self.row_offset * other.row_offset + self.col_offset * other.col_offset

    def rotate_clockwise(self) -> "Offset":
        """Quarter turn to the right: ``UP -> RIGHT -> DOWN -> LEFT -> UP``."""

        return Offset(self.col_offset, -self.row_offset)


Offset.UP = Offset(-1, 0)
Offset.DOWN = Offset(1, 0)
Offset.LEFT = Offset(0, -1)
Offset.RIGHT = Offset(0, 1)

CARDINALS: Tuple[Offset, ...] = (Offset.UP, Offset.DOWN, Offset.LEFT, Offset.RIGHT)
"""The four axis-aligned unit offsets, in the order every search expands them."""

DIAGONALS: Tuple[Offset, ...] = (
    Offset.UP + Offset.LEFT,
    Offset.UP + Offset.RIGHT,
    Offset.DOWN + Offset.LEFT,
    Offset.DOWN + Offset.RIGHT,
)


@dataclass(frozen=True)
class GridSize:
    """Extent of a rectangular grid as ``(rows, cols)``."""

    rows: int
    cols: int

    def contains(self, position: "Position") -> bool:
        return 0 <= position.row_index < self.rows and 0 <= position.col_index < self.cols


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based ``(row, column)`` coordinate into a grid."""

    row_index: int
    col_index: int

    def checked_add_offset(self, offset: Offset, bounds: GridSize) -> Optional["Position"]:
        """Return ``self + offset`` or ``None`` when it leaves ``bounds``.

        Parameters
        ----------
        offset:
            Signed delta to apply.
        bounds:
            The row range ``[0, bounds.rows)`` and column range
            ``[0, bounds.cols)`` the result must fall into.

        Returns
        -------
        Position | None
            The elementwise sum, or ``None`` if either coordinate would be
            negative or past the end. Results never wrap around.
        """

        row_index = self.row_index + offset.row_offset
        if not 0 <= row_index < bounds.rows:
            return None
        col_index = self.col_index + offset.col_offset
        if not 0 <= col_index < bounds.cols:
            return None
        return Position(row_index, col_index)

    def offset_to(self, other: "Position") -> Offset:
        """Signed delta that moves ``self`` onto ``other``."""

        return Offset(other.row_index - self.row_index, other.col_index - self.col_index)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
@dataclass
class Answer:
    """Numeric answers for one day.

    Parameters
    ----------
    part_1:
        Answer to the first half of the puzzle.
    part_2:
        Answer to the second half, or ``None`` for days that only solve the
        first half.
    """

    part_1: int
    part_2: Optional[int] = None


__all__ = [
    "Offset",
    "CARDINALS",
    "DIAGONALS",
    "GridSize",
    "Position",
    "Answer",
]
