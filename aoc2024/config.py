"""aoc2024.config
==================

Run-time knobs for the solutions. Defaults reproduce the real puzzles; tests
override individual fields (for instance the smaller robot area used by the
day 14 example).
"""

from __future__ import annotations

import multiprocessing
from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import BLINK_ROUNDS, PRESS_LIMIT, PRIZE_OFFSET, ROBOT_AREA, ROBOT_SECONDS


@dataclass
class SolveConfig:
    """Configuration shared by every day's ``solution`` entry point."""

    max_workers: int = 1
    blink_rounds: Tuple[int, int] = BLINK_ROUNDS
    press_limit: Optional[int] = PRESS_LIMIT
    prize_offset: int = PRIZE_OFFSET
    robot_area: Tuple[int, int] = ROBOT_AREA
    robot_seconds: int = ROBOT_SECONDS

    def __post_init__(self) -> None:
        if self.max_workers <= 0:
            self.max_workers = multiprocessing.cpu_count()
        width, height = self.robot_area
        if width <= 0 or height <= 0:
            raise ValueError(f"robot area must be positive, got {self.robot_area}")


__all__ = ["SolveConfig"]
