import itertools

import pytest

from aoc24.day17 import _search, part1, part2

EXAMPLE = """Register A: 729
Register B: 0
Register C: 0

Program: 0,1,5,4,3,0"""


def test_part_one():
    assert part1(EXAMPLE) == "4,6,3,5,6,3,5,2,1,0"


def test_part_one_other_start():
    text = "Register A: 2024\nRegister B: 0\nRegister C: 0\n\nProgram: 0,1,5,4,3,0"
    assert part1(text) == "4,2,5,6,7,7,7,7,3,1,0"


def test_quine_search_from_zero():
    assert _search([0, 3, 5, 4, 3, 0], 0, 0, itertools.count()) == 117440


def test_quine_search_exhausted_raises():
    with pytest.raises(ValueError):
        _search([0, 3, 5, 4, 3, 0], 0, 0, range(100))


def test_bxl_and_bxc_output_register_b():
    text = "Register A: 0\nRegister B: 29\nRegister C: 43690\n\nProgram: 1,7,4,0,5,5"
    assert part1(text) == str(((29 ^ 7) ^ 43690) % 8)


def test_combo_zero_raises():
    text = "Register A: 10\nRegister B: 0\nRegister C: 0\n\nProgram: 5,0,5,1,5,4"
    with pytest.raises(ValueError):
        part1(text)


def test_invalid_opcode_raises():
    text = "Register A: 1\nRegister B: 0\nRegister C: 0\n\nProgram: 8,1"
    with pytest.raises(ValueError):
        part1(text)


def test_trailing_newline_rejected():
    with pytest.raises(ValueError):
        part1(EXAMPLE + "\n")


def test_part_two_malformed_raises():
    with pytest.raises(ValueError):
        part2("Program: 0,3,5,4,3,0")