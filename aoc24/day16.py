"""Reindeer Maze: find the cheapest paths through a maze with costly turns."""

import enum
import heapq
import itertools
import math
import re

_ROW = re.compile(r"[SE#.]+")
_STEP_COST = 1
_TURN_COST = 1000


class _Direction(enum.Enum):
    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    def step(self, position):
        row, col = position
        d_row, d_col = self.value
        return row + d_row, col + d_col

    def perpendicular(self):
        """Return the two directions reachable by a quarter turn."""
        if self in (_Direction.NORTH, _Direction.SOUTH):
            return _Direction.EAST, _Direction.WEST
        return _Direction.NORTH, _Direction.SOUTH


class _Maze:
    """The maze cells with the start and end tiles."""

    def __init__(self, cells):
        self.cells = cells
        self.start = self._find("S")
        self.end = self._find("E")

    def _find(self, marker):
        for position, cell in self.cells.items():
            if cell == marker:
                return position
        raise ValueError(f"maze has no {marker!r} tile")

    def cell(self, position):
        try:
            return self.cells[position]
        except KeyError:
            raise ValueError(f"path leaves the maze at {position}") from None

    def distance_to_end(self, position):
        return abs(position[0] - self.end[0]) + abs(position[1] - self.end[1])

    def moves(self, position, facing, cost):
        """Yield the states reachable in one move and their total costs."""
        ahead = facing.step(position)
        if self.cell(ahead) != "#":
            yield (ahead, facing), cost + _STEP_COST
        for turned in facing.perpendicular():
            yield (position, turned), cost + _TURN_COST


def _parse(text):
    lines = re.split(r"\r?\n", text)
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    for line in lines:
        if _ROW.fullmatch(line) is None:
            raise ValueError(f"malformed maze row: {line!r}")
    if len({len(line) for line in lines}) != 1:
        raise ValueError("maze rows differ in length")
    return _Maze(
        {(r, c): cell for r, line in enumerate(lines) for c, cell in enumerate(line)}
    )


def part1(text):
    """Lowest score a reindeer can reach the end tile with."""
    maze = _parse(text)
    order = itertools.count()
    start = (maze.start, _Direction.EAST)
    weights = {start: 0}
    queue = [(maze.distance_to_end(maze.start), next(order), 0, maze.start, _Direction.EAST)]

    while queue:
        _, _, cost, position, facing = heapq.heappop(queue)
        if position == maze.end:
            return cost
        if cost > weights.get((position, facing), math.inf):
            continue
        for state, next_cost in maze.moves(position, facing, cost):
            if next_cost < weights.get(state, math.inf):
                weights[state] = next_cost
                next_position, next_facing = state
                heapq.heappush(
                    queue,
                    (
                        next_cost + maze.distance_to_end(next_position),
                        next(order),
                        next_cost,
                        next_position,
                        next_facing,
                    ),
                )
    raise ValueError("no path found through the maze")


def part2(text):
    """Number of tiles that lie on at least one cheapest path."""
    maze = _parse(text)
    order = itertools.count()
    start = (maze.start, _Direction.EAST)
    weights = {start: 0}
    queue = [
        (
            maze.distance_to_end(maze.start),
            next(order),
            0,
            maze.start,
            _Direction.EAST,
            frozenset({maze.start}),
        )
    ]
    min_cost = None
    tiles = set()

    while queue:
        _, _, cost, position, facing, path = heapq.heappop(queue)
        if min_cost is not None and min_cost < cost:
            break
        if position == maze.end:
            min_cost = cost
            tiles |= path
        if cost > weights.get((position, facing), math.inf):
            continue
        for state, next_cost in maze.moves(position, facing, cost):
            if next_cost <= weights.get(state, math.inf):
                weights[state] = next_cost
                next_position, next_facing = state
                heapq.heappush(
                    queue,
                    (
                        next_cost + maze.distance_to_end(next_position),
                        next(order),
                        next_cost,
                        next_position,
                        next_facing,
                        path | {next_position},
                    ),
                )
    return len(tiles)