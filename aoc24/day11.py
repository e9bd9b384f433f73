"""Plutonian Pebbles: count stones after repeated blinks."""

import re

_STONES = re.compile(r"\d+(?: \d+)*")


def parse(text):
    """Return the engraved numbers on the stones."""
    if _STONES.fullmatch(text) is None:
        raise ValueError("stones must be numbers separated by single spaces")
    return [int(value) for value in text.split(" ")]


def count_rocks(rocks, max_age):
    """Count the stones that the given stones become after max_age blinks."""
    cache = {}

    def count(rock, depth):
        key = (rock, depth)
        if key in cache:
            return cache[key]
        if depth == 0:
            result = 1
        elif rock == 0:
            result = count(1, depth - 1)
        else:
            digits = str(rock)
            if len(digits) % 2 == 0:
                half = len(digits) // 2
                result = count(int(digits[:half]), depth - 1) + count(
                    int(digits[half:]), depth - 1
                )
            else:
                result = count(rock * 2024, depth - 1)
        cache[key] = result
        return result

    return sum(count(rock, max_age) for rock in rocks)


def part1(text):
    """Count the stones after 25 blinks."""
    return count_rocks(parse(text), 25)


def part2(text):
    """Count the stones after 75 blinks."""
    return count_rocks(parse(text), 75)