"""Garden Groups: price fences around garden regions."""

import re

_ROW = re.compile(r"[A-Za-z]+")
_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _parse(text):
    """Return the garden as a mapping of (row, col) to plant."""
    lines = re.split(r"\r?\n", text)
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    for line in lines:
        if _ROW.fullmatch(line) is None:
            raise ValueError(f"malformed garden row: {line!r}")
    if len({len(line) for line in lines}) != 1:
        raise ValueError("garden rows differ in length")
    return {
        (r, c): plant for r, line in enumerate(lines) for c, plant in enumerate(line)
    }


def _step(position, delta):
    return position[0] + delta[0], position[1] + delta[1]


def _regions(garden):
    """Yield each connected region of like plants as a set of positions."""
    assigned = set()
    for start, plant in garden.items():
        if start in assigned:
            continue
        region = {start}
        pending = [start]
        while pending:
            position = pending.pop()
            for delta in _STEPS:
                neighbour = _step(position, delta)
                if neighbour not in region and garden.get(neighbour) == plant:
                    region.add(neighbour)
                    pending.append(neighbour)
        assigned |= region
        yield region


def _perimeter(region):
    return sum(
        1 for position in region for delta in _STEPS if _step(position, delta) not in region
    )


def _sides(region):
    """Count maximal straight runs of fence along the region's boundary."""
    sides = 0
    for position in region:
        for delta in _STEPS:
            if _step(position, delta) in region:
                continue
            along = (delta[1], -delta[0])
            previous = _step(position, along)
            if previous in region and _step(previous, delta) not in region:
                continue
            sides += 1
    return sides


def part1(text):
    """Total price using area times perimeter."""
    garden = _parse(text)
    return sum(len(region) * _perimeter(region) for region in _regions(garden))


def part2(text):
    """Total price using area times number of sides."""
    garden = _parse(text)
    return sum(len(region) * _sides(region) for region in _regions(garden))