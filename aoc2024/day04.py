"""aoc2024.day04
================

Ceres search: count ``XMAS`` in a letter grid in all eight directions, then
count ``MAS`` crosses centred on an ``A``.
"""

from __future__ import annotations

from typing import Iterator, Optional

from .config import SolveConfig
from .grid_utils import Grid
from .parsing import char_in, parse_char_grid
from .types import CARDINALS, DIAGONALS, Answer, Offset, Position

WORD = "XMAS"
ALL_DIRECTIONS = CARDINALS + DIAGONALS


def parse_input(text: str) -> Grid[str]:
    return parse_char_grid(text, char_in(WORD))


def _spells(grid: Grid[str], start: Position, direction: Offset, word: str) -> bool:
    position: Optional[Position] = start
    for letter in word:
        if position is None or grid[position] != letter:
            return False
        position = grid.neighbor(position, direction)
    return True


def count_word(grid: Grid[str], word: str = WORD) -> int:
    return sum(
        1
        for start in grid.positions()
        for direction in ALL_DIRECTIONS
        if _spells(grid, start, direction, word)
    )


def _diagonal_letters(grid: Grid[str], centre: Position) -> Iterator[str]:
    for first, second in ((Offset.UP + Offset.LEFT, Offset.DOWN + Offset.RIGHT),
                          (Offset.UP + Offset.RIGHT, Offset.DOWN + Offset.LEFT)):
        ends = (grid.neighbor(centre, first), grid.neighbor(centre, second))
        if None in ends:
            yield ""
            continue
        yield grid[ends[0]] + grid[ends[1]]


def count_crossed_mas(grid: Grid[str]) -> int:
    """Number of ``A`` cells whose two diagonals each read ``MAS`` or ``SAM``."""

    return sum(
        1
        for centre in grid.find_all(lambda cell: cell == "A")
        if all(pair in ("MS", "SM") for pair in _diagonal_letters(grid, centre))
    )


def solution(text: str, config: SolveConfig | None = None) -> Answer:
    grid = parse_input(text)
    return Answer(part_1=count_word(grid), part_2=count_crossed_mas(grid))


__all__ = ["parse_input", "count_word", "count_crossed_mas", "solution"]
