"""Linen Layout: build towel designs from available patterns."""

import re

_INPUT = re.compile(
    r"([wubrg]+(?:, [wubrg]+)*)(?:\r?\n)+([wubrg]+(?:\r?\n[wubrg]+)*)"
)


def _parse(text):
    """Return the available patterns and the goal designs."""
    match = _INPUT.fullmatch(text)
    if match is None:
        raise ValueError("malformed towel input")
    patterns = match.group(1).split(", ")
    goals = re.split(r"\r?\n", match.group(2))
    return patterns, goals


def part1(text):
    """Count the designs that can be built from the patterns."""
    patterns, goals = _parse(text)
    solved = dict.fromkeys(patterns, True)

    def possible(towel):
        if towel not in solved:
            solved[towel] = any(
                possible(towel[:split]) and possible(towel[split:])
                for split in range(1, len(towel))
            )
        return solved[towel]

    return sum(1 for goal in goals if possible(goal))


def part2(text):
    """Sum the number of ways each design can be built."""
    patterns, goals = _parse(text)
    patterns = sorted(patterns, key=len)
    ways_cache = {}

    def ways(towel):
        if towel not in ways_cache:
            total = 0
            for base in patterns:
                if base == towel:
                    total += 1
                elif len(base) < len(towel) and towel.startswith(base):
                    total += ways(towel[len(base):])
            ways_cache[towel] = total
        return ways_cache[towel]

    return sum(ways(goal) for goal in goals)