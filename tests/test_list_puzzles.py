from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aoc2024 import day01, day02, day03, day07, day11
from aoc2024.config import SolveConfig
from aoc2024.errors import ParseError
from aoc2024.types import Answer

DAY01 = "\n".join(["3   4", "4   3", "2   5", "1   3", "3   9", "3   3"]) + "\n"

DAY02 = "\n".join(
    [
        "7 6 4 2 1",
        "1 2 7 8 9",
        "9 7 6 2 1",
        "1 3 2 4 5",
        "8 6 4 4 1",
        "1 3 6 7 9",
    ]
)

DAY03_PART1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
DAY03_PART2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"

DAY07 = "\n".join(
    [
        "190: 10 19",
        "3267: 81 40 27",
        "83: 17 5",
        "156: 15 6",
        "7290: 6 8 6 15",
        "161011: 16 10 13",
        "192: 17 8 14",
        "21037: 9 7 18 13",
        "292: 11 6 16 20",
    ]
)


def test_day01_example():
    assert day01.solution(DAY01) == Answer(part_1=11, part_2=31)


def test_day01_rejects_malformed_lines():
    with pytest.raises(ParseError):
        day01.parse_input("3 4 5\n")
    with pytest.raises(ParseError):
        day01.parse_input("3 x\n")


def test_day02_example():
    assert day02.solution(DAY02) == Answer(part_1=2, part_2=4)


@pytest.mark.parametrize(
    "report, safe, dampened",
    [
        ([7, 6, 4, 2, 1], True, True),
        ([1, 2, 7, 8, 9], False, False),
        ([1, 3, 2, 4, 5], False, True),
        ([8, 6, 4, 4, 1], False, True),
        ([5], True, True),
    ],
)
def test_day02_report_safety(report, safe, dampened):
    assert day02.is_safe(report) is safe
    assert day02.is_safe_with_dampener(report) is dampened


def test_day03_examples():
    assert day03.sum_of_products(day03.parse_input(DAY03_PART1)) == 161
    assert day03.solution(DAY03_PART2) == Answer(part_1=161, part_2=48)


def test_day03_toggles_and_noise():
    instructions = day03.parse_input("mul(1,2)don't()mul(3,4)do()mul(5,6)mul(7,8")
    assert instructions == [day03.Mul(1, 2), day03.Dont(), day03.Mul(3, 4), day03.Do(), day03.Mul(5, 6)]
    assert day03.sum_of_enabled_products(instructions) == 2 + 30
    with pytest.raises(ParseError):
        day03.parse_input("")


def test_day07_example():
    assert day07.solution(DAY07) == Answer(part_1=3749, part_2=11387)


@pytest.mark.parametrize(
    "left, right, expected",
    [(12, 345, 12345), (15, 6, 156), (1, 0, 10), (7, 10, 710), (0, 5, 5)],
)
def test_day07_concat(left, right, expected):
    assert day07.concat(left, right) == expected


def test_day07_single_operand_equation():
    assert day07.is_equation_possible(5, [5])
    assert not day07.is_equation_possible(6, [5], allow_concat=True)
    assert sorted(day07.all_expr_results([2, 3], allow_concat=True)) == [5, 6, 23]


def test_day07_parallel_matches_serial():
    assert day07.solution(DAY07, SolveConfig(max_workers=2)) == day07.solution(DAY07)


def test_day11_rules():
    assert day11.next_stones(0) == [1]
    assert day11.next_stones(1000) == [10, 0]
    assert day11.next_stones(1) == [2024]


def test_day11_example():
    stones = day11.parse_input("125 17\n")
    assert day11.blink_n_times(stones, 6) == 22
    assert day11.blink_n_times(stones, 25) == 55312
    assert day11.solution("125 17", SolveConfig(blink_rounds=(6, 25))) == Answer(part_1=22, part_2=55312)


def test_day11_prepopulated_memo_does_not_change_counts():
    memo = {}
    day11.blink_n_times([0, 1, 2024], 30, memo)
    assert day11.blink_n_times([125, 17], 25, memo) == day11.blink_n_times([125, 17], 25)
