"""aoc2024.day03
================

Mull it over: recover ``mul(a,b)`` instructions from corrupted memory. The
second half also honours ``do()`` / ``don't()`` toggles. Anything that is not
one of the three instructions is noise and is skipped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Sequence, Union

from .config import SolveConfig
from .errors import ParseError
from .types import Answer

_INSTRUCTION = re.compile(r"mul\(([+-]?\d+),([+-]?\d+)\)|(do\(\))|(don't\(\))")


@dataclass(frozen=True)
class Mul:
    left: int
    right: int


@dataclass(frozen=True)
class Do:
    pass


@dataclass(frozen=True)
class Dont:
    pass


Instruction = Union[Mul, Do, Dont]


def parse_input(text: str) -> List[Instruction]:
    if not text:
        raise ParseError("empty input")
    instructions: List[Instruction] = []
    for found in _INSTRUCTION.finditer(text):
        left, right, enable, disable = found.groups()
        if enable:
            instructions.append(Do())
        elif disable:
            instructions.append(Dont())
        else:
            instructions.append(Mul(int(left), int(right)))
    return instructions


def sum_of_products(instructions: Sequence[Instruction]) -> int:
    """Sum every multiplication, ignoring the enable toggles."""

    return sum(op.left * op.right for op in instructions if isinstance(op, Mul))


def sum_of_enabled_products(instructions: Sequence[Instruction]) -> int:
    """Sum multiplications issued while enabled (the initial state)."""

    enabled = True
    total = 0
    for op in instructions:
        if isinstance(op, Do):
            enabled = True
        elif isinstance(op, Dont):
            enabled = False
        elif enabled:
            total += op.left * op.right
    return total


def solution(text: str, config: SolveConfig | None = None) -> Answer:
    instructions = parse_input(text)
    return Answer(
        part_1=sum_of_products(instructions),
        part_2=sum_of_enabled_products(instructions),
    )


__all__ = [
    "Mul",
    "Do",
    "Dont",
    "Instruction",
    "parse_input",
    "sum_of_products",
    "sum_of_enabled_products",
    "solution",
]
