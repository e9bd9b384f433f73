import pytest

from aoc24.day03 import part1, part2

TEST = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
TEST2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part_one():
    assert part1(TEST) == 161


def test_part_two():
    assert part2(TEST2) == 48


def test_four_digit_operand_is_ignored():
    assert part1("mul(1234,5)mul(123,4)") == 492


def test_disabled_then_reenabled():
    assert part2("don't()mul(2,2)do()mul(3,3)") == 9


def test_no_instruction_raises():
    with pytest.raises(ValueError):
        part1("nothing here")


def test_part_two_without_instruction_raises():
    with pytest.raises(ValueError):
        part2("")