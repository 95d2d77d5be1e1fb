"""aoc2024.day08
================

Resonant collinearity: antennas of the same frequency create antinodes. In
part 1 an antinode sits beyond each antenna of a pair at the pair's distance,
unless an antenna of the same frequency already stands there. In part 2 every
grid point at an integer multiple of the pair offset from an antenna counts,
the antennas themselves included.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import permutations
from typing import Dict, List, Set, Tuple

from .config import SolveConfig
from .errors import ParseError
from .parsing import split_lines
from .types import Answer, GridSize, Offset, Position

EMPTY = "."


@dataclass(frozen=True)
class AntennaMap:
    grid_size: GridSize
    antennas_for_frequencies: Dict[str, Tuple[Position, ...]]


def parse_input(text: str) -> AntennaMap:
    lines = split_lines(text)
    cols = len(lines[0])
    antennas: Dict[str, List[Position]] = {}
    for row_index, line in enumerate(lines):
        if len(line) != cols:
            raise ParseError("ambiguous col size")
        for col_index, char in enumerate(line):
            if char == EMPTY:
                continue
            if not char.isalnum():
                raise ParseError(f"invalid character on map: {char!r}")
            antennas.setdefault(char, []).append(Position(row_index, col_index))
    return AntennaMap(
        grid_size=GridSize(len(lines), cols),
        antennas_for_frequencies={freq: tuple(sorted(found)) for freq, found in sorted(antennas.items())},
    )


def antinodes_of_frequency(grid_size: GridSize, antennas: Tuple[Position, ...]) -> Set[Position]:
    """Points beyond each antenna of a pair, excluding this frequency's own antennas."""

    found: Set[Position] = set()
    for first, second in permutations(antennas, 2):
        antinode = first.checked_add_offset(second.offset_to(first), grid_size)
        if antinode is not None:
            found.add(antinode)
    return found.difference(antennas)


def resonant_antinodes_of_frequency(grid_size: GridSize, antennas: Tuple[Position, ...]) -> Set[Position]:
    """All in-bounds points on each antenna line, spaced by the pair offset."""

    found: Set[Position] = set()
    for first, second in permutations(antennas, 2):
        step = second.offset_to(first)
        multiple = 0
        while True:
            point = first.checked_add_offset(step.scale(multiple), grid_size)
            if point is None:
                break
            found.add(point)
            multiple += 1
    return found


def count_antinodes(antenna_map: AntennaMap, resonant: bool = False) -> int:
    discover = resonant_antinodes_of_frequency if resonant else antinodes_of_frequency
    found: Set[Position] = set()
    for antennas in antenna_map.antennas_for_frequencies.values():
        found |= discover(antenna_map.grid_size, antennas)
    return len(found)


def solution(text: str, config: SolveConfig | None = None) -> Answer:
    antenna_map = parse_input(text)
    return Answer(
        part_1=count_antinodes(antenna_map),
        part_2=count_antinodes(antenna_map, resonant=True),
    )


__all__ = [
    "AntennaMap",
    "parse_input",
    "antinodes_of_frequency",
    "resonant_antinodes_of_frequency",
    "count_antinodes",
    "solution",
]
