"""aoc2024.day01
================

Historian hysteria: reconcile two location-id lists, either by pairing them in
sorted order or by weighting each left id with its frequency on the right.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Sequence, Tuple

import numpy as np

from .config import SolveConfig
from .errors import ParseError
from .parsing import parse_ints, split_lines
from .types import Answer


def parse_input(text: str) -> Tuple[List[int], List[int]]:
    left: List[int] = []
    right: List[int] = []
    for line in split_lines(text):
        values = parse_ints(line)
        if len(values) != 2:
            raise ParseError(f"expected two ids per line, found {line!r}")
        left.append(values[0])
        right.append(values[1])
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of distances between the lists paired smallest-to-smallest."""

    if len(left) != len(right):
        raise ValueError("lists must have the same length")
    if not left:
        return 0
    paired = np.sort(np.asarray(left, dtype=np.int64)) - np.sort(np.asarray(right, dtype=np.int64))
    return int(np.abs(paired).sum())


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    frequencies = Counter(right)
    return sum(value * frequencies[value] for value in left)


def solution(text: str, config: SolveConfig | None = None) -> Answer:
    left, right = parse_input(text)
    return Answer(part_1=total_distance(left, right), part_2=similarity_score(left, right))


__all__ = ["parse_input", "total_distance", "similarity_score", "solution"]
