"""aoc2024.errors
=================

Exception taxonomy for the daily solutions. Every failure aborts the run of
that day; nothing is retried or partially reported.
"""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for failures raised while solving a day."""


class ParseError(PuzzleError, ValueError):
    """The input text does not match the day's grammar."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"failed to parse input: {reason}")
        self.reason = reason


class InvariantError(PuzzleError, RuntimeError):
    """Structure discovered mid-algorithm is inconsistent (e.g. cyclic rules)."""


class UnreachableError(PuzzleError):
    """A path search finished without reaching its goal."""


__all__ = ["PuzzleError", "ParseError", "InvariantError", "UnreachableError"]
