"""aoc2024.day10
================

Hoof it: hiking trails climb a topographic map one height unit per step from
a trailhead (height 0) to a summit (height 9). A trailhead's score counts the
distinct summits it reaches; its rating counts the distinct trails.
"""

from __future__ import annotations

from typing import List

from .config import SolveConfig
from .errors import ParseError
from .grid_utils import Grid
from .parsing import parse_char_grid
from .types import CARDINALS, Answer, Position

TRAILHEAD = 0
SUMMIT = 9


def _height(char: str) -> int:
    if not ("0" <= char <= "9"):
        raise ParseError(f"invalid height {char!r}")
    return int(char)


def parse_input(text: str) -> Grid[int]:
    return parse_char_grid(text, _height)


class HeightMap:
    """Trail search over a grid of heights."""

    def __init__(self, grid: Grid[int]) -> None:
        self.grid = grid

    def discover_trailheads(self) -> List[Position]:
        return self.grid.find_all(lambda height: height == TRAILHEAD)

    def score_of_trailhead(self, trailhead: Position, distinct_trails: bool = False) -> int:
        """Summits reached from ``trailhead``.

        With ``distinct_trails`` every path to a summit is counted separately;
        otherwise a visited mask makes each reachable cell count once.
        """

        visited = Grid.fill_with(False, self.grid.size())
        score = 0
        stack = [trailhead]
        while stack:
            position = stack.pop()
            if not distinct_trails and visited[position]:
                continue
            visited[position] = True
            height = self.grid[position]
            if height == SUMMIT:
                score += 1
                continue
            for offset in CARDINALS:
                step = self.grid.neighbor(position, offset)
                if step is not None and self.grid[step] == height + 1:
                    stack.append(step)
        return score

    def total_score(self, distinct_trails: bool = False) -> int:
        return sum(self.score_of_trailhead(head, distinct_trails) for head in self.discover_trailheads())


def total_score_of_topographic_map(grid: Grid[int]) -> int:
    return HeightMap(grid).total_score()


def total_rating_of_topographic_map(grid: Grid[int]) -> int:
    return HeightMap(grid).total_score(distinct_trails=True)


def solution(text: str, config: SolveConfig | None = None) -> Answer:
    grid = parse_input(text)
    return Answer(
        part_1=total_score_of_topographic_map(grid),
        part_2=total_rating_of_topographic_map(grid),
    )


__all__ = [
    "HeightMap",
    "parse_input",
    "total_score_of_topographic_map",
    "total_rating_of_topographic_map",
    "solution",
]
