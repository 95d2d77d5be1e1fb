"""aoc2024.cli
===============

Command-line entry point: ``aoc2024 [options] dayN [-i PATH]``.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import SolveConfig
from .constants import DEFAULT_INPUT_PATH, FAIL_LOG
from .errors import PuzzleError
from .logging_utils import log_failure
from .solver import DAY_REGISTRY, solve_file


def _input_parent() -> argparse.ArgumentParser:
    # SUPPRESS keeps a value given before the subcommand from being reset.
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "-i",
        "--puzzle-input-path",
        default=argparse.SUPPRESS,
        help=f"Puzzle input file (default: {DEFAULT_INPUT_PATH})",
    )
    return parent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("aoc2024", description="Advent of Code 2024 solutions")
    parser.add_argument(
        "-i",
        "--puzzle-input-path",
        default=DEFAULT_INPUT_PATH,
        help=f"Puzzle input file (default: {DEFAULT_INPUT_PATH})",
    )
    parser.add_argument("--max-workers", type=int, default=1, help="Worker processes for days 6 and 7 (<=0: all cores)")
    parser.add_argument(
        "--fail-log",
        nargs="?",
        const=FAIL_LOG,
        default=None,
        help=f"Append failed runs as JSON lines to this file (bare flag: {FAIL_LOG})",
    )
    subparsers = parser.add_subparsers(dest="day", metavar="DAY", required=True)
    parent = _input_parent()
    for day in sorted(DAY_REGISTRY):
        subparsers.add_parser(f"day{day}", parents=[parent], help=f"Solve day {day}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse CLI arguments, solve the requested day and print the answer."""

    args = build_parser().parse_args(argv)
    day = int(args.day[len("day"):])
    try:
        answer = solve_file(day, args.puzzle_input_path, SolveConfig(max_workers=args.max_workers))
    except (PuzzleError, OSError, UnicodeDecodeError) as exc:
        print(f"error: day {day}: {exc}", file=sys.stderr)
        if args.fail_log:
            log_failure(day, args.puzzle_input_path, exc, args.fail_log)
        return 1
    print(repr(answer))
    return 0


if __name__ == "__main__":
    sys.exit(main())
