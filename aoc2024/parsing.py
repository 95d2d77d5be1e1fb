"""aoc2024.parsing
==================

Small text helpers shared by the per-day parsers. Each day's grammar is a
fixed line-oriented format, so the helpers here only deal with splitting
lines, reading integer lists and turning character blocks into grids. All
failures surface as :class:`~aoc2024.errors.ParseError`.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, List, Sequence, Tuple, TypeVar

from .errors import ParseError
from .grid_utils import Grid
from .types import Position

T = TypeVar("T")

_BLANK_LINES = re.compile(r"\n[ \t]*(?:\r?\n[ \t]*)+")


def split_lines(text: str) -> List[str]:
    """Non-empty input lines with surrounding blank lines removed.

    Raises
    ------
    ParseError
        When the input holds no content at all.
    """

    lines = text.strip().splitlines()
    if not lines:
        raise ParseError("empty input")
    return lines


def split_sections(text: str) -> List[str]:
    """Split ``text`` on runs of blank lines."""

    stripped = text.replace("\r\n", "\n").strip()
    if not stripped:
        raise ParseError("empty input")
    return _BLANK_LINES.split(stripped)


def parse_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ParseError(f"expected an integer, found {token!r}") from None


def parse_ints(line: str, sep: str | None = None) -> List[int]:
    """Parse a ``sep``-delimited list of integers (whitespace when ``None``)."""

    tokens = line.split(sep)
    if not tokens or any(token == "" for token in tokens):
        raise ParseError(f"malformed integer list {line!r}")
    return [parse_int(token.strip()) for token in tokens]


def parse_char_grid(text: str, cell: Callable[[str], T]) -> Grid[T]:
    """Turn a block of text into a :class:`Grid`, one character per cell.

    Parameters
    ----------
    text:
        Input lines; trailing blank lines are ignored.
    cell:
        Converter applied to every character. It should raise
        :class:`ParseError` for characters outside the day's alphabet.
    """

    return Grid.from_rows([[cell(char) for char in line] for line in split_lines(text)])


def char_in(alphabet: str) -> Callable[[str], str]:
    """Cell converter accepting only characters from ``alphabet``."""

    def convert(char: str) -> str:
        if char not in alphabet:
            raise ParseError(f"invalid character on map: {char!r}")
        return char

    return convert


def exactly_one(found: Iterable[T], what: str) -> T:
    """Return the single element of ``found`` or raise a :class:`ParseError`."""

    items = list(found)
    if len(items) != 1:
        raise ParseError(f"expected exactly one {what}, found {len(items)}")
    return items[0]


def locate_markers(rows: Sequence[str], marker: str) -> List[Position]:
    """Positions of ``marker`` in raw text rows."""

    return [
        Position(row_index, col_index)
        for row_index, row in enumerate(rows)
        for col_index, char in enumerate(row)
        if char == marker
    ]


def match_fields(pattern: "re.Pattern[str]", line: str) -> Tuple[int, ...]:
    """Full-match ``line`` against ``pattern`` and return its groups as ints."""

    found = pattern.fullmatch(line.strip())
    if found is None:
        raise ParseError(f"line does not match {pattern.pattern!r}: {line!r}")
    return tuple(int(group) for group in found.groups())


__all__ = [
    "split_lines",
    "split_sections",
    "parse_int",
    "parse_ints",
    "parse_char_grid",
    "char_in",
    "exactly_one",
    "locate_markers",
    "match_fields",
]
