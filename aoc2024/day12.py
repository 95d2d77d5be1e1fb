"""aoc2024.day12
================

Garden groups: price every region of same-letter plots. The flood fill
collects a region's cells with an explicit stack; the perimeter counts edges
facing another region (or the map border) and the number of sides equals the
number of corners of the region outline.

Corner rule, checked for each cell over the clockwise perpendicular pairs
``(LEFT, UP)``, ``(UP, RIGHT)``, ``(RIGHT, DOWN)``, ``(DOWN, LEFT)``:

* convex corner: both neighbours are outside the region;
* concave corner: the first neighbour is outside while the second neighbour
  and the diagonal between the two directions are inside.

Because the pairs are walked in one rotational order, each concave corner is
attributed to exactly one of the cells around it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List, Set, Tuple

from .config import SolveConfig
from .errors import ParseError
from .grid_utils import Grid
from .parsing import parse_char_grid
from .types import CARDINALS, Answer, Offset, Position

CORNER_PAIRS: Tuple[Tuple[Offset, Offset], ...] = (
    (Offset.LEFT, Offset.UP),
    (Offset.UP, Offset.RIGHT),
    (Offset.RIGHT, Offset.DOWN),
    (Offset.DOWN, Offset.LEFT),
)


def _plant(char: str) -> str:
    if not char.isalpha():
        raise ParseError(f"invalid plant {char!r}")
    return char


def parse_input(text: str) -> Grid[str]:
    return parse_char_grid(text, _plant)


@dataclass(frozen=True)
class Region:
    plant: str
    cells: FrozenSet[Position]
    perimeter: int

    @property
    def area(self) -> int:
        return len(self.cells)


def _flood_fill(grid: Grid[str], start: Position, visited: Grid[bool]) -> Region:
    plant = grid[start]
    cells: Set[Position] = set()
    perimeter = 0
    stack = [start]
    while stack:
        position = stack.pop()
        if visited[position]:
            continue
        visited[position] = True
        cells.add(position)
        neighbors = [
            step
            for step in (grid.neighbor(position, offset) for offset in CARDINALS)
            if step is not None and grid[step] == plant
        ]
        perimeter += len(CARDINALS) - len(neighbors)
        stack.extend(neighbors)
    return Region(plant=plant, cells=frozenset(cells), perimeter=perimeter)


def find_regions(grid: Grid[str]) -> List[Region]:
    visited = Grid.fill_with(False, grid.size())
    return [_flood_fill(grid, position, visited) for position in grid.positions() if not visited[position]]


def _outside(region: Region, position: Position, offset: Offset) -> bool:
    neighbor = Position(position.row_index + offset.row_offset, position.col_index + offset.col_offset)
    return neighbor not in region.cells


def is_corner(region: Region, position: Position, first: Offset, second: Offset) -> bool:
    return _outside(region, position, first) and (
        _outside(region, position, second) or not _outside(region, position, first + second)
    )


def number_of_corners(region: Region) -> int:
    return sum(
        1
        for position in region.cells
        for first, second in CORNER_PAIRS
        if is_corner(region, position, first, second)
    )


def calculate_total_price(grid: Grid[str]) -> Tuple[int, int]:
    """Return ``(area * perimeter, area * corners)`` summed over all regions."""

    by_perimeter = 0
    by_sides = 0
    for region in find_regions(grid):
        by_perimeter += region.area * region.perimeter
        by_sides += region.area * number_of_corners(region)
    return by_perimeter, by_sides


def solution(text: str, config: SolveConfig | None = None) -> Answer:
    part_1, part_2 = calculate_total_price(parse_input(text))
    return Answer(part_1=part_1, part_2=part_2)


__all__ = [
    "Region",
    "parse_input",
    "find_regions",
    "is_corner",
    "number_of_corners",
    "calculate_total_price",
    "solution",
]
