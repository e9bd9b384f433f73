import pytest

from aoc24.day01 import part1, part2

TEST = """\
3   4
4   3
2   5
1   3
3   9
3   3"""


def test_part_one():
    assert part1(TEST) == 11


def test_part_two():
    assert part2(TEST) == 31


def test_single_line():
    assert part1("1   2") == 1
    assert part2("1   2") == 0


def test_crlf_line_endings():
    assert part1(TEST.replace("\n", "\r\n")) == 11


def test_malformed_input_raises():
    with pytest.raises(ValueError):
        part1("1   x")


def test_trailing_newline_rejected():
    with pytest.raises(ValueError):
        part2(TEST + "\n")