"""Resonant Collinearity: count antinodes of same-frequency antennas."""

from collections import defaultdict
from itertools import combinations
import re


def _is_cell(char):
    return char == "." or (char.isascii() and char.isalnum())


def _parse(text):
    """Return the map size and the antenna positions grouped by frequency."""
    lines = re.split(r"\r?\n", text)
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    for line in lines:
        if not line or not all(_is_cell(char) for char in line):
            raise ValueError(f"malformed map row: {line!r}")
    if len({len(line) for line in lines}) != 1:
        raise ValueError("map rows differ in length")

    antennas = defaultdict(list)
    for r, line in enumerate(lines):
        for c, char in enumerate(line):
            if char != ".":
                antennas[char].append((r, c))
    return (len(lines), len(lines[0])), antennas


def _inside(size, position):
    rows, cols = size
    row, col = position
    return 0 <= row < rows and 0 <= col < cols


def part1(text):
    """Count antinodes at twice the distance of each antenna pair."""
    size, antennas = _parse(text)
    antinodes = set()
    for positions in antennas.values():
        for (r1, c1), (r2, c2) in combinations(positions, 2):
            for candidate in ((2 * r1 - r2, 2 * c1 - c2), (2 * r2 - r1, 2 * c2 - c1)):
                if _inside(size, candidate):
                    antinodes.add(candidate)
    return len(antinodes)


def _ray(size, start, delta):
    row, col = start
    d_row, d_col = delta
    while _inside(size, (row, col)):
        yield row, col
        row, col = row + d_row, col + d_col


def part2(text):
    """Count every grid point in line with an antenna pair."""
    size, antennas = _parse(text)
    antinodes = set()
    for positions in antennas.values():
        for (r1, c1), (r2, c2) in combinations(positions, 2):
            antinodes.update(_ray(size, (r1, c1), (r1 - r2, c1 - c2)))
            antinodes.update(_ray(size, (r2, c2), (r2 - r1, c2 - c1)))
    return len(antinodes)