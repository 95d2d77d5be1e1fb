"""aoc2024.day13
================

Claw contraption: each machine has two buttons moving the claw by fixed
offsets; the prize is won by pressing A ``a`` times and B ``b`` times so the
claw lands exactly on the prize. That is a 2x2 linear system, solved with
Cramer's rule over :class:`fractions.Fraction` so a non-integer (and therefore
infeasible) press count is detected exactly, without floating-point error.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from fractions import Fraction
from typing import List, Optional, Sequence, Tuple

from .config import SolveConfig
from .constants import PRESS_LIMIT, PRIZE_OFFSET, TOKENS_PER_A_PRESS, TOKENS_PER_B_PRESS
from .errors import ParseError
from .parsing import match_fields, split_sections
from .types import Answer

_BUTTON_A = re.compile(r"Button A: X\+([+-]?\d+), Y\+([+-]?\d+)")
_BUTTON_B = re.compile(r"Button B: X\+([+-]?\d+), Y\+([+-]?\d+)")
_PRIZE = re.compile(r"Prize: X=([+-]?\d+), Y=([+-]?\d+)")


@dataclass(frozen=True)
class Button:
    x_offset: int
    y_offset: int


@dataclass(frozen=True)
class Prize:
    x: int
    y: int


@dataclass(frozen=True)
class ClawMachine:
    button_a: Button
    button_b: Button
    prize: Prize


def _parse_machine(block: str) -> ClawMachine:
    lines = block.splitlines()
    if len(lines) != 3:
        raise ParseError(f"expected three lines per claw machine, found {len(lines)}")
    return ClawMachine(
        button_a=Button(*match_fields(_BUTTON_A, lines[0])),
        button_b=Button(*match_fields(_BUTTON_B, lines[1])),
        prize=Prize(*match_fields(_PRIZE, lines[2])),
    )


def parse_input(text: str) -> List[ClawMachine]:
    return [_parse_machine(block) for block in split_sections(text)]


def full_div(numerator: int, denominator: int) -> Optional[int]:
    """Exact quotient, or ``None`` when it is not an integer (or undefined)."""

    if denominator == 0:
        return None
    quotient = Fraction(numerator, denominator)
    return quotient.numerator if quotient.denominator == 1 else None


def press_buttons(machine: ClawMachine, limit: Optional[int] = PRESS_LIMIT) -> Optional[Tuple[int, int]]:
    """Press counts ``(a, b)`` reaching the prize, if a valid pair exists.

    Parameters
    ----------
    machine:
        The machine to solve.
    limit:
        Inclusive cap on each press count; ``None`` means unbounded.

    Returns
    -------
    tuple[int, int] | None
        ``None`` when the system has no unique non-negative integer solution
        within ``limit``.
    """

    a_btn, b_btn, prize = machine.button_a, machine.button_b, machine.prize
    # b = (Y_A * T_X - X_A * T_Y) / (Y_A * X_B - X_A * Y_B)
    b = full_div(
        a_btn.y_offset * prize.x - a_btn.x_offset * prize.y,
        a_btn.y_offset * b_btn.x_offset - a_btn.x_offset * b_btn.y_offset,
    )
    if b is None:
        return None
    # a = (T_X - X_B * b) / X_A
    a = full_div(prize.x - b_btn.x_offset * b, a_btn.x_offset)
    if a is None:
        return None
    for presses in (a, b):
        if presses < 0 or (limit is not None and presses > limit):
            return None
    return a, b


def tokens_needed(machine: ClawMachine, limit: Optional[int] = PRESS_LIMIT) -> Optional[int]:
    presses = press_buttons(machine, limit)
    if presses is None:
        return None
    a, b = presses
    return a * TOKENS_PER_A_PRESS + b * TOKENS_PER_B_PRESS


def total_tokens_needed(machines: Sequence[ClawMachine], limit: Optional[int] = PRESS_LIMIT) -> int:
    """Fewest tokens to win every winnable prize."""

    total = 0
    for machine in machines:
        tokens = tokens_needed(machine, limit)
        if tokens is not None:
            total += tokens
    return total


def shift_prizes(machines: Sequence[ClawMachine], offset: int = PRIZE_OFFSET) -> List[ClawMachine]:
    return [
        replace(machine, prize=Prize(machine.prize.x + offset, machine.prize.y + offset))
        for machine in machines
    ]


def solution(text: str, config: SolveConfig | None = None) -> Answer:
    config = config or SolveConfig()
    machines = parse_input(text)
    return Answer(
        part_1=total_tokens_needed(machines, config.press_limit),
        part_2=total_tokens_needed(shift_prizes(machines, config.prize_offset), limit=None),
    )


__all__ = [
    "Button",
    "Prize",
    "ClawMachine",
    "parse_input",
    "full_div",
    "press_buttons",
    "tokens_needed",
    "total_tokens_needed",
    "shift_prizes",
    "solution",
]
