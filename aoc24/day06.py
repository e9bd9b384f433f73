"""Guard Gallivant: follow a patrolling guard around a lab."""

from dataclasses import dataclass
import enum
import re


class _Direction(enum.Enum):
    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    def rotate(self):
        """Return the direction after a right turn."""
        members = list(_Direction)
        return members[(members.index(self) + 1) % len(members)]

    def step(self, position):
        row, col = position
        d_row, d_col = self.value
        return row + d_row, col + d_col


_GUARDS = {
    "^": _Direction.NORTH,
    ">": _Direction.EAST,
    "v": _Direction.SOUTH,
    "<": _Direction.WEST,
}
_ROW = re.compile(r"[.#^>v<]+")


@dataclass(frozen=True)
class _Lab:
    rows: int
    cols: int
    obstacles: frozenset
    guard: tuple
    facing: _Direction

    def __contains__(self, position):
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols


def _parse(text):
    lines = re.split(r"\r?\n", text)
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    for line in lines:
        if _ROW.fullmatch(line) is None:
            raise ValueError(f"malformed map row: {line!r}")
    if len({len(line) for line in lines}) != 1:
        raise ValueError("map rows differ in length")

    obstacles = set()
    guard = None
    for r, line in enumerate(lines):
        for c, cell in enumerate(line):
            if cell == "#":
                obstacles.add((r, c))
            elif cell in _GUARDS and guard is None:
                guard = ((r, c), _GUARDS[cell])
    if guard is None:
        raise ValueError("no guard on the map")
    return _Lab(len(lines), len(lines[0]), frozenset(obstacles), guard[0], guard[1])


def part1(text):
    """Count the distinct positions the guard visits before leaving."""
    lab = _parse(text)
    position, facing = lab.guard, lab.facing
    visited = {position}
    while (ahead := facing.step(position)) in lab:
        if ahead in lab.obstacles:
            facing = facing.rotate()
        else:
            position = ahead
            visited.add(position)
    return len(visited)


def _loops(lab, position, facing, states, extra):
    """Tell whether the guard loops once an obstacle sits at extra."""
    states.add((position, facing))
    while (ahead := facing.step(position)) in lab:
        if ahead in lab.obstacles or ahead == extra:
            facing = facing.rotate()
        else:
            position = ahead
        state = (position, facing)
        if state in states:
            return True
        states.add(state)
    return False


def part2(text):
    """Count positions where one new obstacle traps the guard in a loop."""
    lab = _parse(text)
    position, facing = lab.guard, lab.facing
    states = {(position, facing)}
    tried = set()
    looping = 0
    while (ahead := facing.step(position)) in lab:
        if ahead in lab.obstacles:
            facing = facing.rotate()
        else:
            if ahead not in tried and ahead != lab.guard:
                tried.add(ahead)
                if _loops(lab, position, facing, set(states), ahead):
                    looping += 1
            position = ahead
        states.add((position, facing))
    return looping