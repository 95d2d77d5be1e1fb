"""aoc2024.day14
================

Restroom redoubt: robots move with constant velocity on a torus-shaped area,
wrapping around at the edges. The safety factor multiplies the robot counts in
the four quadrants after a fixed number of seconds; robots exactly on the
middle row or column belong to no quadrant.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from .config import SolveConfig
from .parsing import match_fields, split_lines
from .types import Answer

_ROBOT = re.compile(r"p=(\d+),(\d+)\s+v=([+-]?\d+),([+-]?\d+)")


@dataclass(frozen=True)
class Robot:
    """Robot position ``(x, y)`` and velocity ``(dx, dy)`` per second."""

    position: Tuple[int, int]
    velocity: Tuple[int, int]


def parse_input(text: str) -> List[Robot]:
    robots: List[Robot] = []
    for line in split_lines(text):
        x, y, dx, dy = match_fields(_ROBOT, line)
        robots.append(Robot(position=(x, y), velocity=(dx, dy)))
    return robots


def positions_after(robots: Sequence[Robot], area: Tuple[int, int], seconds: int) -> np.ndarray:
    """``(n, 2)`` array of ``(x, y)`` positions after ``seconds``, wrapped into ``area``."""

    if not robots:
        return np.zeros((0, 2), dtype=np.int64)
    positions = np.array([robot.position for robot in robots], dtype=np.int64)
    velocities = np.array([robot.velocity for robot in robots], dtype=np.int64)
    # numpy's modulo takes the sign of the divisor, so results stay in [0, size).
    return (positions + velocities * seconds) % np.array(area, dtype=np.int64)


def quadrant_counts(positions: np.ndarray, area: Tuple[int, int]) -> List[int]:
    """Robot counts for the upper-left, upper-right, lower-left and lower-right quadrants."""

    mid_x, mid_y = area[0] // 2, area[1] // 2
    xs, ys = positions[:, 0], positions[:, 1]
    left, right = xs < mid_x, xs > mid_x
    upper, lower = ys < mid_y, ys > mid_y
    return [int(np.count_nonzero(vertical & horizontal)) for vertical in (upper, lower) for horizontal in (left, right)]


def calculate_safety_factor(robots: Sequence[Robot], area: Tuple[int, int], seconds: int) -> int:
    product = 1
    for count in quadrant_counts(positions_after(robots, area, seconds), area):
        product *= count
    return product


def solution(text: str, config: SolveConfig | None = None) -> Answer:
    config = config or SolveConfig()
    robots = parse_input(text)
    return Answer(part_1=calculate_safety_factor(robots, config.robot_area, config.robot_seconds))


__all__ = ["Robot", "parse_input", "positions_after", "quadrant_counts", "calculate_safety_factor", "solution"]
