import pytest

from aoc24.day19 import part1, part2

TEST = """r, wr, b, g, bwu, rb, gb, br

brwrr
bggr
gbbr
rrbgbr
ubwu
bwurrg
brgr
bbrgwb"""


def test_part_one():
    assert part1(TEST) == 6


def test_part_two():
    assert part2(TEST) == 16


def test_single_pattern_repeated():
    text = "r\n\nrrr"
    assert part1(text) == 1
    assert part2(text) == 1


def test_counts_all_arrangements():
    assert part2("r, rr\n\nrrr") == 3


def test_impossible_design():
    text = "r, b\n\nrug"
    assert part1(text) == 0
    assert part2(text) == 0


def test_trailing_newline_rejected():
    with pytest.raises(ValueError):
        part1(TEST + "\n")


def test_unknown_stripe_rejected():
    with pytest.raises(ValueError):
        part2("r, x\n\nrr")