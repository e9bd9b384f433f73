import pytest

from aoc24.day09 import part1, part2

EXAMPLE = "2333133121414131402"


def test_part_one():
    assert part1(EXAMPLE) == 1928


def test_part_two():
    assert part2(EXAMPLE) == 2858


def test_trailing_newline_is_accepted():
    assert part1(EXAMPLE + "\n") == 1928
    assert part2(EXAMPLE + "\r\n") == 2858


def test_small_example_part_one():
    assert part1("12345") == 60


def test_single_file_checksum_is_zero():
    assert part1("3") == 0
    assert part2("3") == 0


def test_non_digit_raises():
    with pytest.raises(ValueError):
        part1("12a4")


def test_empty_input_raises():
    with pytest.raises(ValueError):
        part2("")