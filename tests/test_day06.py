import pytest

from aoc24.day06 import part1, part2

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#..."""


def test_part_one():
    assert part1(EXAMPLE) == 41


def test_part_two():
    assert part2(EXAMPLE) == 6


def test_trailing_newline_is_accepted():
    assert part1(EXAMPLE + "\n") == 41


def test_guard_alone_visits_one_cell():
    assert part1("^") == 1


def test_guard_walks_up_a_column():
    assert part1(".\n.\n^") == 3


def test_malformed_cell_raises():
    with pytest.raises(ValueError):
        part1("..X\n.^.")


def test_missing_guard_raises():
    with pytest.raises(ValueError):
        part1("...\n.#.")


def test_ragged_rows_raise():
    with pytest.raises(ValueError):
        part2("...\n.^")