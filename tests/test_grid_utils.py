from __future__ import annotations

import pickle
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aoc2024.errors import ParseError
from aoc2024.grid_utils import Grid
from aoc2024.parsing import exactly_one, match_fields, parse_ints, split_lines, split_sections
from aoc2024.types import CARDINALS, GridSize, Offset, Position


@pytest.mark.parametrize(
    "position, offset, expected",
    [
        (Position(0, 0), Offset.RIGHT, Position(0, 1)),
        (Position(0, 0), Offset.UP, None),
        (Position(0, 0), Offset.LEFT, None),
        (Position(2, 3), Offset.DOWN, None),
        (Position(2, 3), Offset.RIGHT, None),
        (Position(1, 1), Offset(1, 2), Position(2, 3)),
        (Position(1, 1), Offset(-1, -1), Position(0, 0)),
    ],
)
def test_checked_add_offset_stays_in_bounds(position, offset, expected):
    assert position.checked_add_offset(offset, GridSize(3, 4)) == expected


def test_checked_add_offset_matches_plain_addition_when_present():
    bounds = GridSize(4, 5)
    for row in range(bounds.rows):
        for col in range(bounds.cols):
            for dr in range(-5, 6):
                for dc in range(-5, 6):
                    result = Position(row, col).checked_add_offset(Offset(dr, dc), bounds)
                    inside = 0 <= row + dr < bounds.rows and 0 <= col + dc < bounds.cols
                    assert (result is not None) == inside
                    if result is not None:
                        assert result == Position(row + dr, col + dc)


def test_rotate_clockwise_cycles_through_cardinals():
    assert Offset.UP.rotate_clockwise() == Offset.RIGHT
    assert Offset.RIGHT.rotate_clockwise() == Offset.DOWN
    assert Offset.DOWN.rotate_clockwise() == Offset.LEFT
    assert Offset.LEFT.rotate_clockwise() == Offset.UP


def test_offset_arithmetic():
    assert -Offset.UP == Offset.DOWN
    assert Offset(1, -2).scale(3) == Offset(3, -6)
    assert Offset.UP.dot(Offset.DOWN) == -1
    assert Offset.UP.dot(Offset.LEFT) == 0
    assert Position(1, 1).offset_to(Position(3, 0)) == Offset(2, -1)
    assert len(set(CARDINALS)) == 4


def test_positions_are_row_major_and_restartable():
    grid = Grid.fill_with(0, GridSize(2, 3))
    expected = [Position(r, c) for r in range(2) for c in range(3)]
    assert list(grid.positions()) == expected
    assert list(grid.positions()) == expected


def test_grid_access_and_mutation():
    grid = Grid.from_rows([list("ab"), list("cd")])
    assert grid.size() == GridSize(2, 2)
    assert grid[Position(1, 0)] == "c"
    before = Grid.from_rows([list("ab"), list("cd")])
    grid[Position(1, 0)] = "z"
    assert grid[Position(1, 0)] == "z"
    assert grid != before
    assert grid.find_all(lambda cell: cell in "az") == [Position(0, 0), Position(1, 0)]


def test_out_of_bounds_access_raises_instead_of_wrapping():
    grid = Grid.fill_with(0, GridSize(2, 2))
    with pytest.raises(IndexError):
        grid[Position(0, 2)]
    with pytest.raises(IndexError):
        grid[Position(-1, 0)] = 1


def test_ragged_rows_are_rejected():
    with pytest.raises(ParseError, match="ambiguous column length"):
        Grid.from_rows([[1, 2], [3]])


def test_neighbor_respects_grid_size():
    grid = Grid.fill_with(False, GridSize(1, 2))
    assert grid.neighbor(Position(0, 0), Offset.RIGHT) == Position(0, 1)
    assert grid.neighbor(Position(0, 1), Offset.RIGHT) is None


def test_grid_pickles():
    grid = Grid.from_rows([[1, 2], [3, 4]])
    assert pickle.loads(pickle.dumps(grid)) == grid


def test_parsing_helpers():
    assert split_lines("a\nb\n\n") == ["a", "b"]
    assert split_sections("1\n2\n\n3\n") == ["1\n2", "3"]
    assert parse_ints("75,47,61", ",") == [75, 47, 61]
    with pytest.raises(ParseError):
        split_lines("  \n")
    with pytest.raises(ParseError):
        parse_ints("1,,2", ",")
    with pytest.raises(ParseError, match="exactly one guard"):
        exactly_one([], "guard")


def test_match_fields_requires_full_match():
    import re

    pattern = re.compile(r"(\d+)-(\d+)")
    assert match_fields(pattern, "3-4") == (3, 4)
    with pytest.raises(ParseError):
        match_fields(pattern, "3-4x")
