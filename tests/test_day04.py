import pytest

from aoc24.day04 import part1, part2

TEST = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX"""


def test_part_one():
    assert part1(TEST) == 18


def test_part_two():
    assert part2(TEST) == 9


def test_both_directions_on_one_row():
    assert part1("XMASAMX") == 2


def test_single_cross():
    assert part2("MAS\nAAA\nMAS") == 1


def test_trailing_newline_accepted():
    assert part1(TEST + "\n") == 18


def test_invalid_letter_raises():
    with pytest.raises(ValueError):
        part1("XMAZ")


def test_ragged_rows_raise():
    with pytest.raises(ValueError):
        part2("XMAS\nXM")