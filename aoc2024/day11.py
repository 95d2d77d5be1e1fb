"""aoc2024.day11
================

Plutonian pebbles: every blink each stone turns into one or two stones. The
number of stones after ``n`` blinks depends only on ``(stone, n)``, so counts
are memoized on that pair instead of materialising the exponentially growing
row.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .config import SolveConfig
from .errors import ParseError
from .parsing import parse_ints, split_lines
from .types import Answer

Memo = Dict[Tuple[int, int], int]


def parse_input(text: str) -> List[int]:
    stones = parse_ints(" ".join(split_lines(text)))
    if any(stone < 0 for stone in stones):
        raise ParseError("stones must be non-negative")
    return stones


def next_stones(stone: int) -> List[int]:
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        divisor = 10 ** (len(digits) // 2)
        return [stone // divisor, stone % divisor]
    return [stone * 2024]


def blink_count(stone: int, rounds: int, memo: Memo) -> int:
    """Stones produced by ``stone`` after ``rounds`` blinks."""

    if rounds == 0:
        return 1
    key = (stone, rounds)
    cached = memo.get(key)
    if cached is not None:
        return cached
    count = sum(blink_count(successor, rounds - 1, memo) for successor in next_stones(stone))
    memo[key] = count
    return count


def blink_n_times(stones: Sequence[int], rounds: int, memo: Optional[Memo] = None) -> int:
    memo = {} if memo is None else memo
    return sum(blink_count(stone, rounds, memo) for stone in stones)


def solution(text: str, config: SolveConfig | None = None) -> Answer:
    config = config or SolveConfig()
    stones = parse_input(text)
    memo: Memo = {}
    first, second = config.blink_rounds
    return Answer(part_1=blink_n_times(stones, first, memo), part_2=blink_n_times(stones, second, memo))


__all__ = ["Memo", "parse_input", "next_stones", "blink_count", "blink_n_times", "solution"]
