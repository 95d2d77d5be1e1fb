"""aoc2024.grid_utils
=====================

Rectangular grid container shared by the grid-based days. Cells live in one
flat list indexed by ``row * cols + col`` so a grid can never become ragged
after construction; ragged input is rejected when the grid is built.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

from .errors import ParseError
from .types import GridSize, Offset, Position

T = TypeVar("T")


class Grid(Generic[T]):
    """Row-major grid of ``T`` addressed by :class:`Position`.

    Access through ``grid[position]`` requires the position to be in bounds;
    an out-of-range position is a programming error and raises
    :class:`IndexError` instead of wrapping into a neighbouring row.
    """

    __slots__ = ("_size", "_cells")

    def __init__(self, size: GridSize, cells: List[T]) -> None:
        if len(cells) != size.rows * size.cols:
            raise ValueError(f"{len(cells)} cells cannot fill a {size.rows}x{size.cols} grid")
        self._size = size
        self._cells = cells

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def fill_with(cls, value: T, size: GridSize) -> "Grid[T]":
        """Grid of ``size`` where every cell holds ``value``."""

        return cls(size, [value] * (size.rows * size.cols))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> "Grid[T]":
        """Build a grid from nested rows.

        Raises
        ------
        ParseError
            If the rows do not all share the same length.
        """

        cols = len(rows[0]) if rows else 0
        cells: List[T] = []
        for row in rows:
            if len(row) != cols:
                raise ParseError("ambiguous column length")
            cells.extend(row)
        return cls(GridSize(len(rows), cols), cells)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def size(self) -> GridSize:
        return self._size

    def _index(self, position: Position) -> int:
        if not self._size.contains(position):
            raise IndexError(f"{position} outside grid of size {self._size}")
        return position.row_index * self._size.cols + position.col_index

    def __getitem__(self, position: Position) -> T:
        return self._cells[self._index(position)]

    def __setitem__(self, position: Position, value: T) -> None:
        self._cells[self._index(position)] = value

    def positions(self) -> Iterator[Position]:
        """Every position in row-major order. Each call starts a fresh pass."""

        rows, cols = self._size.rows, self._size.cols
        for row_index in range(rows):
            for col_index in range(cols):
                yield Position(row_index, col_index)

    def neighbor(self, position: Position, offset: Offset) -> Optional[Position]:
        return position.checked_add_offset(offset, self._size)

    def find_all(self, predicate: Callable[[T], bool]) -> List[Position]:
        return [position for position, cell in zip(self.positions(), self._cells) if predicate(cell)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid(rows={self._size.rows}, cols={self._size.cols})"

    # Grids are picklable so they can cross process-pool boundaries.
    def __getstate__(self) -> Tuple[GridSize, List[T]]:
        return self._size, self._cells

    def __setstate__(self, state: Tuple[GridSize, List[T]]) -> None:
        self._size, self._cells = state


__all__ = ["Grid"]
