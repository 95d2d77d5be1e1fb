"""aoc2024.constants
=====================

Global constants used across the daily solutions. Keeping them here avoids
import cycles between the day modules and the CLI and makes the puzzle
parameters easy to discover.
"""

from __future__ import annotations

DEFAULT_INPUT_PATH = "puzzle_input.txt"
FAIL_LOG = "failed_runs.jsonl"

# Day 11: blink rounds for part 1 and part 2.
BLINK_ROUNDS = (25, 75)

# Day 13: per-button press cap in part 1 and the prize shift in part 2.
PRESS_LIMIT = 100
PRIZE_OFFSET = 10_000_000_000_000
TOKENS_PER_A_PRESS = 3
TOKENS_PER_B_PRESS = 1

# Day 14: bathroom area as (width, height) and the simulated duration.
ROBOT_AREA = (101, 103)
ROBOT_SECONDS = 100

# Day 16: scoring for the reindeer maze.
STEP_COST = 1
TURN_COST = 1000
REVERSE_COST = 2000

__all__ = [
    "DEFAULT_INPUT_PATH",
    "FAIL_LOG",
    "BLINK_ROUNDS",
    "PRESS_LIMIT",
    "PRIZE_OFFSET",
    "TOKENS_PER_A_PRESS",
    "TOKENS_PER_B_PRESS",
    "ROBOT_AREA",
    "ROBOT_SECONDS",
    "STEP_COST",
    "TURN_COST",
    "REVERSE_COST",
]
