"""aoc2024.day16
================

Reindeer maze: find the lowest score from ``S`` to ``E``. Moving one cell
forward costs 1, turning 90 degrees costs 1000 and reversing costs 2000 before
the move. The reindeer may start facing any direction.

The search is a label-correcting relaxation over ``(position, facing)`` states
driven by a plain stack rather than a priority queue. A state is expanded
again whenever a cheaper cost for it arrives, so states may be revisited
several times; with non-negative costs the labels still converge to the
optimum.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .config import SolveConfig
from .constants import REVERSE_COST, STEP_COST, TURN_COST
from .errors import InvariantError, ParseError, UnreachableError
from .grid_utils import Grid
from .parsing import exactly_one, locate_markers, split_lines
from .types import CARDINALS, Answer, Offset, Position

START = "S"
END = "E"
WALL = "#"
AIR = "."

State = Tuple[Position, Offset]


@dataclass(frozen=True)
class Maze:
    starting_position: Position
    ending_position: Position
    walls: Grid[bool]


def parse_input(text: str) -> Maze:
    rows = split_lines(text)
    for row in rows:
        bad = set(row) - {START, END, WALL, AIR}
        if bad:
            raise ParseError(f"invalid character on map: {sorted(bad)[0]!r}")
    starting_position = exactly_one(locate_markers(rows, START), "starting position")
    ending_position = exactly_one(locate_markers(rows, END), "ending position")
    walls = Grid.from_rows([[char == WALL for char in row] for row in rows])
    return Maze(starting_position=starting_position, ending_position=ending_position, walls=walls)


def turning_penalty(current: Offset, following: Offset) -> int:
    alignment = current.dot(following)
    if alignment == 1:
        return 0
    if alignment == 0:
        return TURN_COST
    if alignment == -1:
        return REVERSE_COST
    raise InvariantError(f"not a unit direction pair: {current}, {following}")


def lowest_scores(maze: Maze) -> Dict[State, int]:
    """Cheapest known cost of every reachable ``(position, facing)`` state."""

    best: Dict[State, int] = {}
    stack: List[Tuple[Position, Offset, int]] = []
    for facing in CARDINALS:
        best[(maze.starting_position, facing)] = 0
        stack.append((maze.starting_position, facing, 0))

    while stack:
        position, facing, score = stack.pop()
        if score > best[(position, facing)]:
            continue
        for heading in CARDINALS:
            step = maze.walls.neighbor(position, heading)
            if step is None or maze.walls[step]:
                continue
            cost = score + STEP_COST + turning_penalty(facing, heading)
            if cost < best.get((step, heading), cost + 1):
                best[(step, heading)] = cost
                stack.append((step, heading, cost))
    return best


def calculate_lowest_score(maze: Maze) -> Optional[int]:
    """Lowest score at the end over any entry direction; ``None`` if unreachable."""

    best = lowest_scores(maze)
    reached = [best[(maze.ending_position, facing)] for facing in CARDINALS if (maze.ending_position, facing) in best]
    return min(reached) if reached else None


def solution(text: str, config: SolveConfig | None = None) -> Answer:
    lowest = calculate_lowest_score(parse_input(text))
    if lowest is None:
        raise UnreachableError("unable to reach the ending cell")
    return Answer(part_1=lowest)


__all__ = ["Maze", "parse_input", "turning_penalty", "lowest_scores", "calculate_lowest_score", "solution"]
