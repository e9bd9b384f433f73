"""Hoof It: score and rate hiking trails on a topographic map."""

import re

_ROW = re.compile(r"[0-9]+")
_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _parse(text):
    """Return the map as a mapping of (row, col) to height."""
    lines = re.split(r"\r?\n", text)
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    for line in lines:
        if _ROW.fullmatch(line) is None:
            raise ValueError(f"malformed map row: {line!r}")
    if len({len(line) for line in lines}) != 1:
        raise ValueError("map rows differ in length")
    return {
        (r, c): int(height)
        for r, line in enumerate(lines)
        for c, height in enumerate(line)
    }


def _neighbours(position):
    row, col = position
    for d_row, d_col in _STEPS:
        yield row + d_row, col + d_col


def part1(text):
    """Sum, over every trailhead, the number of peaks it can reach."""
    heights = _parse(text)
    scores = dict.fromkeys(heights, 0)
    for peak, height in heights.items():
        if height != 9:
            continue
        reached = {peak}
        pending = [peak]
        while pending:
            position = pending.pop()
            current = heights[position]
            if current == 0:
                continue
            for neighbour in _neighbours(position):
                if neighbour not in reached and heights.get(neighbour) == current - 1:
                    reached.add(neighbour)
                    pending.append(neighbour)
        for position in reached:
            scores[position] += 1
    return sum(scores[pos] for pos, height in heights.items() if height == 0)


def part2(text):
    """Sum, over every trailhead, the number of distinct trails to a peak."""
    heights = _parse(text)
    ratings = {}

    def rating(position):
        if position in ratings:
            return ratings[position]
        height = heights[position]
        if height == 9:
            result = 1
        else:
            result = sum(
                rating(neighbour)
                for neighbour in _neighbours(position)
                if heights.get(neighbour) == height + 1
            )
        ratings[position] = result
        return result

    return sum(rating(pos) for pos, height in heights.items() if height == 0)