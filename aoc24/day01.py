"""Historian Hysteria: compare two location-id lists."""

from collections import Counter
import re

_LINE = re.compile(r"(\d+)[ \t]+(\d+)")


def _parse(text):
    """Return the left and right columns of the puzzle input."""
    left, right = [], []
    for line in re.split(r"\r?\n", text):
        match = _LINE.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed line: {line!r}")
        left.append(int(match.group(1)))
        right.append(int(match.group(2)))
    return left, right


def part1(text):
    """Sum the distances between the sorted columns."""
    left, right = _parse(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text):
    """Sum each left value times its count in the right column."""
    left, right = _parse(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)