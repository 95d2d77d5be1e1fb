"""aoc2024.solver
==================

Registry of the implemented days and thin helpers to run one of them on a
string or a file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional, Union

from . import day01, day02, day03, day04, day05, day06, day07, day08, day09, day10, day11, day12, day13, day14, day16
from .config import SolveConfig
from .types import Answer

Solution = Callable[..., Answer]

DAY_REGISTRY: Dict[int, Solution] = {
    1: day01.solution,
    2: day02.solution,
    3: day03.solution,
    4: day04.solution,
    5: day05.solution,
    6: day06.solution,
    7: day07.solution,
    8: day08.solution,
    9: day09.solution,
    10: day10.solution,
    11: day11.solution,
    12: day12.solution,
    13: day13.solution,
    14: day14.solution,
    16: day16.solution,
}


def get_solution(day: int) -> Solution:
    """Lookup ``day`` in :data:`DAY_REGISTRY` with a helpful error."""

    try:
        return DAY_REGISTRY[day]
    except KeyError as exc:
        raise KeyError(f"Unknown day {day!r}. Implemented days: {sorted(DAY_REGISTRY)}") from exc


def solve_day(day: int, text: str, config: Optional[SolveConfig] = None) -> Answer:
    return get_solution(day)(text, config or SolveConfig())


def solve_file(day: int, path: Union[str, Path], config: Optional[SolveConfig] = None) -> Answer:
    """Read ``path`` as UTF-8 and solve it as ``day``.

    I/O errors propagate as ``OSError`` and undecodable bytes as
    ``UnicodeDecodeError``.
    """

    return solve_day(day, Path(path).read_text(encoding="utf-8"), config)


__all__ = ["DAY_REGISTRY", "get_solution", "solve_day", "solve_file"]
