"""aoc2024.day02
================

Red-nosed reports: a report is safe when its levels move monotonically in one
direction by 1 to 3 at every step. The problem dampener tolerates one bad
level.
"""

from __future__ import annotations

from typing import List, Sequence

from .config import SolveConfig
from .parsing import parse_ints, split_lines
from .types import Answer

MIN_STEP = 1
MAX_STEP = 3


def parse_input(text: str) -> List[List[int]]:
    return [parse_ints(line) for line in split_lines(text)]


def _is_monotonic(report: Sequence[int]) -> bool:
    pairs = list(zip(report, report[1:]))
    return all(a <= b for a, b in pairs) or all(a >= b for a, b in pairs)


def is_safe(report: Sequence[int]) -> bool:
    return _is_monotonic(report) and all(
        MIN_STEP <= abs(a - b) <= MAX_STEP for a, b in zip(report, report[1:])
    )


def is_safe_with_dampener(report: Sequence[int]) -> bool:
    """``True`` when removing at most one level makes ``report`` safe."""

    if is_safe(report):
        return True
    return any(is_safe(list(report[:idx]) + list(report[idx + 1:])) for idx in range(len(report)))


def count_safe_reports(reports: Sequence[Sequence[int]], dampened: bool = False) -> int:
    check = is_safe_with_dampener if dampened else is_safe
    return sum(1 for report in reports if check(report))


def solution(text: str, config: SolveConfig | None = None) -> Answer:
    reports = parse_input(text)
    return Answer(
        part_1=count_safe_reports(reports),
        part_2=count_safe_reports(reports, dampened=True),
    )


__all__ = ["parse_input", "is_safe", "is_safe_with_dampener", "count_safe_reports", "solution"]
