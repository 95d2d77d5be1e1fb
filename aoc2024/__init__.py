"""Advent of Code 2024 solutions, one module per day."""

from .cli import main
from .config import SolveConfig
from .solver import solve_day
from .types import Answer

__all__ = ["main", "solve_day", "SolveConfig", "Answer"]
