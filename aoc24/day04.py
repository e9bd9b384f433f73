"""Ceres Search: find XMAS in a word search."""

import re

_ROW = re.compile(r"[XMAS]+")

_DIRECTIONS = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)
_DIAGONALS = ((1, -1), (1, 1), (-1, 1), (-1, -1))


def _parse(text):
    """Return the word search as a mapping of (row, col) to letter."""
    rows = re.split(r"\r?\n", text)
    if len(rows) > 1 and rows[-1] == "":
        rows.pop()
    for row in rows:
        if _ROW.fullmatch(row) is None:
            raise ValueError(f"malformed row: {row!r}")
    if len({len(row) for row in rows}) != 1:
        raise ValueError("rows differ in length")
    return {
        (r, c): letter
        for r, row in enumerate(rows)
        for c, letter in enumerate(row)
    }


def part1(text):
    """Count XMAS in all eight directions."""
    grid = _parse(text)
    count = 0
    for (r, c), letter in grid.items():
        if letter != "X":
            continue
        for dr, dc in _DIRECTIONS:
            if all(
                grid.get((r + dr * step, c + dc * step)) == target
                for step, target in enumerate("MAS", start=1)
            ):
                count += 1
    return count


def part2(text):
    """Count A cells crossed by two diagonal MAS words."""
    grid = _parse(text)
    count = 0
    for (r, c), letter in grid.items():
        if letter != "A":
            continue
        found = sum(
            1
            for dr, dc in _DIAGONALS
            if grid.get((r + dr, c + dc)) == "M" and grid.get((r - dr, c - dc)) == "S"
        )
        if found == 2:
            count += 1
    return count