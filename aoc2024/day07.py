"""aoc2024.day07
================

Bridge repair: decide whether inserting ``+``, ``*`` (and, in part 2, the
digit concatenation ``||``) between the numbers of an equation, evaluated
strictly left to right, can produce its target.
"""

from __future__ import annotations

from functools import partial
from typing import List, Optional, Sequence, Tuple

from .config import SolveConfig
from .errors import ParseError
from .parallel import sum_mapped
from .parsing import parse_int, parse_ints, split_lines
from .types import Answer

Equation = Tuple[int, Tuple[int, ...]]


def parse_input(text: str) -> List[Equation]:
    equations: List[Equation] = []
    for line in split_lines(text):
        target, sep, operands = line.partition(":")
        if not sep or not operands.startswith(" "):
            raise ParseError(f"malformed equation {line!r}")
        equations.append((parse_int(target), tuple(parse_ints(operands))))
    return equations


def concat(left: int, right: int) -> int:
    """Append the decimal digits of ``right`` to ``left``."""

    exp = 1
    while right // 10 ** exp > 0:
        exp += 1
    return left * 10 ** exp + right


def all_expr_results(nums: Sequence[int], allow_concat: bool = False) -> List[int]:
    """Every value reachable by left-to-right evaluation of ``nums``."""

    results: List[int] = []
    stack: List[Tuple[int, Optional[int]]] = [(0, None)]
    while stack:
        index, current = stack.pop()
        if index == len(nums):
            if current is not None:
                results.append(current)
            continue
        value = nums[index]
        if current is None:
            stack.append((index + 1, value))
            continue
        stack.append((index + 1, current + value))
        stack.append((index + 1, current * value))
        if allow_concat:
            stack.append((index + 1, concat(current, value)))
    return results


def is_equation_possible(target: int, nums: Sequence[int], allow_concat: bool = False) -> bool:
    return any(result == target for result in all_expr_results(nums, allow_concat))


def _calibration_value(equation: Equation, allow_concat: bool) -> int:
    target, nums = equation
    return target if is_equation_possible(target, nums, allow_concat) else 0


def total_calibration_result(equations: Sequence[Equation], allow_concat: bool = False, max_workers: int = 1) -> int:
    """Sum of the targets of all solvable equations."""

    return sum_mapped(partial(_calibration_value, allow_concat=allow_concat), equations, max_workers)


def solution(text: str, config: SolveConfig | None = None) -> Answer:
    config = config or SolveConfig()
    equations = parse_input(text)
    return Answer(
        part_1=total_calibration_result(equations, max_workers=config.max_workers),
        part_2=total_calibration_result(equations, allow_concat=True, max_workers=config.max_workers),
    )


__all__ = [
    "parse_input",
    "concat",
    "all_expr_results",
    "is_equation_possible",
    "total_calibration_result",
    "solution",
]
