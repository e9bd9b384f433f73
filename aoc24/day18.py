"""RAM Run: escape a memory grid as bytes fall into it."""

from collections import deque
from dataclasses import dataclass
from itertools import islice
import re

_POSITION = re.compile(r"(\d+),(\d+)")
_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_GRID_SIZE = (71, 71)
_FALLEN_BYTES = 1024


@dataclass(frozen=True)
class BytePos:
    """Position of a falling byte on the memory grid."""

    row: int
    col: int

    def __str__(self):
        return f"{self.row},{self.col}"


def parse(text):
    """Return the byte positions in the order they fall."""
    positions = []
    for line in re.split(r"\r?\n", text):
        match = _POSITION.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed byte position: {line!r}")
        positions.append(BytePos(int(match.group(1)), int(match.group(2))))
    return positions


def _inside(size, position):
    rows, cols = size
    row, col = position
    return 0 <= row < rows and 0 <= col < cols


def _shortest_path(size, corrupted):
    """Return the fewest steps from the top-left to the bottom-right, or None."""
    rows, cols = size
    end = (rows - 1, cols - 1)
    start = (0, 0)
    distances = {start: 0}
    queue = deque([start])
    while queue:
        position = queue.popleft()
        if position == end:
            return distances[position]
        row, col = position
        for d_row, d_col in _STEPS:
            neighbour = (row + d_row, col + d_col)
            if (
                neighbour not in distances
                and _inside(size, neighbour)
                and neighbour not in corrupted
            ):
                distances[neighbour] = distances[position] + 1
                queue.append(neighbour)
    return None


def _corrupt(size, corrupted, byte):
    position = (byte.row, byte.col)
    if _inside(size, position):
        corrupted.add(position)


def part1_steps_req(size, positions):
    """Fewest steps to the exit once the given bytes have fallen."""
    corrupted = set()
    for byte in positions:
        _corrupt(size, corrupted, byte)
    steps = _shortest_path(size, corrupted)
    if steps is None:
        raise ValueError("no path to the exit")
    return steps


def part2_blocking_byte(size, positions):
    """Return the first byte after whose fall the exit cannot be reached."""
    corrupted = set()
    for byte in positions:
        _corrupt(size, corrupted, byte)
        if _shortest_path(size, corrupted) is None:
            return byte
    raise ValueError("no byte blocks the path to the exit")


def part1(text):
    """Fewest steps to the exit after the first kilobyte has fallen."""
    return part1_steps_req(_GRID_SIZE, islice(parse(text), _FALLEN_BYTES))


def part2(text):
    """The first byte that cuts off the exit."""
    return part2_blocking_byte(_GRID_SIZE, parse(text))