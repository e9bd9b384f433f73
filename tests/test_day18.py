import pytest

from aoc24.day18 import (
    BytePos,
    parse,
    part1,
    part1_steps_req,
    part2,
    part2_blocking_byte,
)

TEST = """5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0"""


def test_part_one():
    assert part1_steps_req((7, 7), parse(TEST)[:12]) == 22


def test_part_two():
    assert part2_blocking_byte((7, 7), parse(TEST)) == BytePos(6, 1)


def test_blocking_byte_prints_as_coordinates():
    assert str(part2_blocking_byte((7, 7), iter(parse(TEST)))) == "6,1"


def test_parse_reads_positions_in_order():
    positions = parse(TEST)
    assert len(positions) == 25
    assert positions[0] == BytePos(5, 4)
    assert positions[-1] == BytePos(2, 0)


def test_parse_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse("1,2\n3;4")


def test_parse_rejects_trailing_newline():
    with pytest.raises(ValueError):
        parse("1,2\n")


def test_no_path_raises():
    with pytest.raises(ValueError):
        part1_steps_req((2, 2), [BytePos(0, 1), BytePos(1, 0)])


def test_out_of_range_bytes_are_ignored():
    assert part1_steps_req((3, 3), [BytePos(10, 10)]) == 4


def test_no_blocking_byte_raises():
    with pytest.raises(ValueError):
        part2_blocking_byte((7, 7), parse(TEST)[:12])


def test_part2_full_grid_never_blocked_by_sample():
    with pytest.raises(ValueError):
        part2(TEST)