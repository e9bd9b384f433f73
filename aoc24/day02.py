"""Red-Nosed Reports: count safe reactor reports."""

import enum
import re

_LINE = re.compile(r"\d+(?:[ \t]+\d+)*")


class _Direction(enum.Enum):
    INCREASING = enum.auto()
    DECREASING = enum.auto()
    UNCHANGED = enum.auto()
    UNKNOWN = enum.auto()


class _Status(enum.Enum):
    SAFE = enum.auto()
    TOLERABLE = enum.auto()
    UNSAFE = enum.auto()


def _parse(text):
    reports = []
    for line in re.split(r"\r?\n", text):
        if _LINE.fullmatch(line) is None:
            raise ValueError(f"malformed report: {line!r}")
        reports.append(tuple(int(value) for value in line.split()))
    return reports


def _step(previous, level):
    """Return the direction and absolute size of a change of level."""
    if level < previous:
        return _Direction.DECREASING, previous - level
    if level > previous:
        return _Direction.INCREASING, level - previous
    return _Direction.UNCHANGED, 0


def _is_strictly_safe(report):
    direction = _Direction.UNKNOWN
    for previous, level in zip(report, report[1:]):
        new_direction, delta = _step(previous, level)
        if delta > 3 or new_direction is _Direction.UNCHANGED:
            return False
        if direction is not _Direction.UNKNOWN and new_direction is not direction:
            return False
        direction = new_direction
    return True


def _evaluate(previous, direction, report, start, status):
    """Classify the report from index start, allowing one skipped level."""
    if status is _Status.UNSAFE or direction is _Direction.UNCHANGED:
        return _Status.UNSAFE
    if start == len(report):
        return status

    level = report[start]
    rest = start + 1
    if previous is None:
        outcome = _evaluate(level, direction, report, rest, status)
    else:
        new_direction, delta = _step(previous, level)
        if direction is not _Direction.UNKNOWN:
            if new_direction is not direction or delta > 3:
                outcome = _Status.UNSAFE
            else:
                outcome = _evaluate(level, new_direction, report, rest, status)
        elif delta == 0 or delta > 3:
            outcome = _Status.UNSAFE
        else:
            outcome = _evaluate(level, new_direction, report, rest, status)

    if status is _Status.SAFE and outcome is _Status.UNSAFE:
        # Use the dampener: skip this level and carry on.
        return _evaluate(previous, direction, report, rest, _Status.TOLERABLE)
    return outcome


def part1(text):
    """Count reports that are safe as they stand."""
    return sum(1 for report in _parse(text) if _is_strictly_safe(report))


def part2(text):
    """Count reports that are safe with at most one level removed."""
    return sum(
        1
        for report in _parse(text)
        if _evaluate(None, _Direction.UNKNOWN, report, 0, _Status.SAFE)
        is not _Status.UNSAFE
    )