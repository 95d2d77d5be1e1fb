"""aoc2024.day06
================

Guard gallivant: a guard walks a lab map, stepping forward while the cell
ahead is free and turning right in place when it is obstructed. The walk ends
when the guard steps off the map.

Part 2 places one extra obstruction on a cell of the original route and checks
whether the guard then loops forever, detected by revisiting an identical
``(position, facing)`` state. Candidates are independent, so they are checked
through :func:`aoc2024.parallel.count_matching`.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Dict, List, Optional, Set, Tuple

from .config import SolveConfig
from .errors import ParseError
from .grid_utils import Grid
from .parallel import count_matching
from .parsing import exactly_one, split_lines
from .types import Answer, Offset, Position

EMPTY = "."
OBSTRUCTION = "#"
GUARD_FACINGS: Dict[str, Offset] = {
    "^": Offset.UP,
    ">": Offset.RIGHT,
    "v": Offset.DOWN,
    "<": Offset.LEFT,
}

GuardState = Tuple[Position, Offset]


@dataclass(frozen=True)
class LabMap:
    """Obstruction mask plus the guard's starting state."""

    obstructions: Grid[bool]
    guard_position: Position
    guard_facing: Offset


def parse_input(text: str) -> LabMap:
    rows: List[List[bool]] = []
    guards: List[GuardState] = []
    for row_index, line in enumerate(split_lines(text)):
        row: List[bool] = []
        for col_index, char in enumerate(line):
            if char in GUARD_FACINGS:
                guards.append((Position(row_index, col_index), GUARD_FACINGS[char]))
            elif char not in (EMPTY, OBSTRUCTION):
                raise ParseError(f"invalid character on map: {char!r}")
            row.append(char == OBSTRUCTION)
        rows.append(row)
    position, facing = exactly_one(guards, "guard")
    return LabMap(obstructions=Grid.from_rows(rows), guard_position=position, guard_facing=facing)


def advance(lab: LabMap, state: GuardState, extra_obstruction: Optional[Position] = None) -> Optional[GuardState]:
    """One transition of the guard state machine; ``None`` once off the map."""

    position, facing = state
    ahead = lab.obstructions.neighbor(position, facing)
    if ahead is None:
        return None
    if lab.obstructions[ahead] or ahead == extra_obstruction:
        return position, facing.rotate_clockwise()
    return ahead, facing


def walk_until_out_of_bounds(lab: LabMap) -> List[GuardState]:
    """Every state of the guard's route, starting state included."""

    states: List[GuardState] = []
    state: Optional[GuardState] = (lab.guard_position, lab.guard_facing)
    while state is not None:
        states.append(state)
        state = advance(lab, state)
    return states


def walk_loops(lab: LabMap, extra_obstruction: Optional[Position] = None) -> bool:
    """``True`` if the guard revisits a state instead of leaving the map."""

    seen: Set[GuardState] = set()
    state: Optional[GuardState] = (lab.guard_position, lab.guard_facing)
    while state is not None:
        if state in seen:
            return True
        seen.add(state)
        state = advance(lab, state, extra_obstruction)
    return False


def count_visited_positions(lab: LabMap) -> int:
    return len({position for position, _ in walk_until_out_of_bounds(lab)})


def obstruction_candidates(lab: LabMap) -> List[Position]:
    """Cells on the original route where a new obstruction could matter."""

    route = {position for position, _ in walk_until_out_of_bounds(lab)}
    route.discard(lab.guard_position)
    return sorted(route)


def count_looping_obstructions(lab: LabMap, max_workers: int = 1) -> int:
    return count_matching(partial(walk_loops, lab), obstruction_candidates(lab), max_workers)


def solution(text: str, config: SolveConfig | None = None) -> Answer:
    config = config or SolveConfig()
    lab = parse_input(text)
    return Answer(
        part_1=count_visited_positions(lab),
        part_2=count_looping_obstructions(lab, config.max_workers),
    )


__all__ = [
    "LabMap",
    "parse_input",
    "advance",
    "walk_until_out_of_bounds",
    "walk_loops",
    "count_visited_positions",
    "obstruction_candidates",
    "count_looping_obstructions",
    "solution",
]
