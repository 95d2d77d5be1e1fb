from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aoc2024 import day04, day06, day08, day10, day12, day16
from aoc2024.config import SolveConfig
from aoc2024.errors import ParseError, UnreachableError
from aoc2024.types import Answer, Offset, Position


def lines(*rows: str) -> str:
    return "\n".join(rows) + "\n"


DAY04 = lines(
    "MMMSXXMASM",
    "MSAMXMSMSA",
    "AMXSXMAAMM",
    "MSAMASMSMX",
    "XMASAMXAMM",
    "XXAMMXXAMA",
    "SMSMSASXSS",
    "SAXAMASAAA",
    "MAMMMXMMMM",
    "MXMXAXMASX",
)

DAY06 = lines(
    "....#.....",
    ".........#",
    "..........",
    "..#.......",
    ".......#..",
    "..........",
    ".#..^.....",
    "........#.",
    "#.........",
    "......#...",
)

DAY08 = lines(
    "............",
    "........0...",
    ".....0......",
    ".......0....",
    "....0.......",
    "......A.....",
    "............",
    "............",
    "........A...",
    ".........A..",
    "............",
    "............",
)

DAY10 = lines(
    "89010123",
    "78121874",
    "87430965",
    "96549874",
    "45678903",
    "32019012",
    "01329801",
    "10456732",
)

DAY12_SMALL = lines("AAAA", "BBCD", "BBCC", "EEEC")
DAY12_NESTED = lines("OOOOO", "OXOXO", "OOOOO", "OXOXO", "OOOOO")
DAY12_LARGE = lines(
    "RRRRIICCFF",
    "RRRRIICCCF",
    "VVRRRCCFFF",
    "VVRCCCJFFF",
    "VVVVCJJCFE",
    "VVIVCCJJEE",
    "VVIIICJJEE",
    "MIIIIIJJEE",
    "MIIISIJEEE",
    "MMMISSJEEE",
)

DAY16_SMALL = lines(
    "###############",
    "#.......#....E#",
    "#.#.###.#.###.#",
    "#.....#.#...#.#",
    "#.###.#####.#.#",
    "#.#.#.......#.#",
    "#.#.#####.###.#",
    "#...........#.#",
    "###.#.#####.#.#",
    "#...#.....#.#.#",
    "#.#.#.###.#.#.#",
    "#.....#...#.#.#",
    "#.###.#.#.#.#.#",
    "#S..#.....#...#",
    "###############",
)

DAY16_LARGE = lines(
    "#################",
    "#...#...#...#..E#",
    "#.#.#.#.#.#.#.#.#",
    "#.#.#.#...#...#.#",
    "#.#.#.#.###.#.#.#",
    "#...#.#.#.....#.#",
    "#.#.#.#.#.#####.#",
    "#.#...#.#.#.....#",
    "#.#.#####.#.###.#",
    "#.#.#.......#...#",
    "#.#.###.#####.###",
    "#.#.#...#.....#.#",
    "#.#.#.#####.###.#",
    "#.#.#.........#.#",
    "#.#.#.#########.#",
    "#S#.............#",
    "#################",
)


def test_day04_example():
    assert day04.solution(DAY04) == Answer(part_1=18, part_2=9)


def test_day04_rejects_foreign_letters():
    with pytest.raises(ParseError):
        day04.parse_input("XMAS\nXMAB\n")


def test_day04_word_in_every_direction():
    grid = day04.parse_input(lines("SAMX", "AAAA", "MAMA", "XAAS"))
    # backwards along the top row and upwards along the first column
    assert day04.count_word(grid) == 2


def test_day06_example():
    assert day06.solution(DAY06) == Answer(part_1=41, part_2=6)


def test_day06_guard_turns_right_in_place():
    lab = day06.parse_input(lines("#.", "^."))
    assert day06.advance(lab, (lab.guard_position, lab.guard_facing)) == (Position(1, 0), Offset.RIGHT)
    assert day06.count_visited_positions(lab) == 2


def test_day06_start_is_never_an_obstruction_candidate():
    lab = day06.parse_input(DAY06)
    assert lab.guard_position not in day06.obstruction_candidates(lab)


def test_day06_start_excluded_even_when_guard_turns_first():
    """The puzzle forbids an obstruction on the guard's starting cell, even when
    the first move is a turn and the start reappears on the route."""

    lab = day06.parse_input(lines("#...", "^..#", "....", "..#."))
    route = day06.walk_until_out_of_bounds(lab)
    assert route[1] == (lab.guard_position, Offset.RIGHT)
    assert lab.guard_position not in day06.obstruction_candidates(lab)


def test_day06_requires_exactly_one_guard():
    with pytest.raises(ParseError, match="guard"):
        day06.parse_input(lines("..", ".."))
    with pytest.raises(ParseError, match="guard"):
        day06.parse_input(lines("^.", ".v"))
    with pytest.raises(ParseError):
        day06.parse_input(lines("^.", ".x"))


def test_day06_parallel_matches_serial():
    assert day06.solution(DAY06, SolveConfig(max_workers=2)) == Answer(part_1=41, part_2=6)


def test_day08_example():
    assert day08.solution(DAY08) == Answer(part_1=14, part_2=34)


def test_day08_single_pair():
    antenna_map = day08.parse_input(lines(*[".........."] * 3, "....a.....", "..........", ".....a....", *[".........."] * 4))
    antennas = antenna_map.antennas_for_frequencies["a"]
    assert day08.antinodes_of_frequency(antenna_map.grid_size, antennas) == {Position(1, 3), Position(7, 6)}


def test_day08_antinodes_on_same_frequency_antennas_are_dropped():
    assert day08.solution("aaa\n") == Answer(part_1=0, part_2=3)


def test_day08_other_frequencies_do_not_block_antinodes():
    antenna_map = day08.parse_input(lines("b....", ".a...", "..a.."))
    assert day08.count_antinodes(antenna_map) == 1


def test_day08_ragged_map():
    with pytest.raises(ParseError, match="ambiguous col size"):
        day08.parse_input(lines("...", ".."))


def test_day10_example():
    assert day10.solution(DAY10) == Answer(part_1=36, part_2=81)


def test_day10_single_trail():
    grid = day10.parse_input(lines("0123", "1234", "8765", "9876"))
    assert day10.total_score_of_topographic_map(grid) == 1
    assert day10.total_rating_of_topographic_map(grid) == 16


@pytest.mark.parametrize(
    "garden, expected",
    [
        (DAY12_SMALL, Answer(part_1=140, part_2=80)),
        (DAY12_NESTED, Answer(part_1=772, part_2=436)),
        (DAY12_LARGE, Answer(part_1=1930, part_2=1206)),
    ],
)
def test_day12_examples(garden, expected):
    assert day12.solution(garden) == expected


def test_day12_rectangle_has_four_corners():
    rows, cols = 3, 4
    grid = day12.parse_input(lines(*["A" * cols] * rows))
    (region,) = day12.find_regions(grid)
    assert region.area == rows * cols
    assert region.perimeter == 2 * (rows + cols)
    assert day12.number_of_corners(region) == 4


def test_day12_every_cell_in_exactly_one_region():
    grid = day12.parse_input(DAY12_LARGE)
    regions = day12.find_regions(grid)
    cells = [cell for region in regions for cell in region.cells]
    assert len(cells) == len(set(cells)) == 100


def test_day16_examples():
    assert day16.solution(DAY16_SMALL) == Answer(part_1=6036)
    assert day16.solution(DAY16_LARGE) == Answer(part_1=10048)


def test_day16_score_is_symmetric():
    swapped = DAY16_SMALL.replace("S", "?").replace("E", "S").replace("?", "E")
    assert day16.calculate_lowest_score(day16.parse_input(swapped)) == 6036


@pytest.mark.parametrize(
    "current, following, penalty",
    [
        (Offset.UP, Offset.UP, 0),
        (Offset.UP, Offset.RIGHT, 1000),
        (Offset.LEFT, Offset.DOWN, 1000),
        (Offset.UP, Offset.DOWN, 2000),
    ],
)
def test_day16_turning_penalty(current, following, penalty):
    assert day16.turning_penalty(current, following) == penalty


def test_day16_small_mazes():
    assert day16.solution("SE\n") == Answer(part_1=1)
    assert day16.solution(lines("S.", "#E")) == Answer(part_1=1002)
    with pytest.raises(UnreachableError):
        day16.solution("S#E\n")


def test_day16_requires_single_start_and_end():
    with pytest.raises(ParseError, match="starting position"):
        day16.parse_input("..E\n")
    with pytest.raises(ParseError, match="ending position"):
        day16.parse_input("S.EE\n")
