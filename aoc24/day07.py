"""Bridge Repair: find operators that make calibration equations true."""

from itertools import product
import operator
import re

_LINE = re.compile(r"(\d+): (\d+(?: \d+)*)")


def _parse(text):
    """Return (test value, numbers) pairs."""
    lines = re.split(r"\r?\n", text)
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    equations = []
    for line in lines:
        match = _LINE.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed equation: {line!r}")
        numbers = tuple(int(value) for value in match.group(2).split(" "))
        equations.append((int(match.group(1)), numbers))
    return equations


def _evaluate(first, operators, rest):
    total = first
    for apply, value in zip(operators, rest, strict=True):
        total = apply(total, value)
    return total


def part1(text):
    """Sum test values reachable with + and * evaluated left to right."""
    result = 0
    for target, (first, *rest) in _parse(text):
        choices = product((operator.add, operator.mul), repeat=len(rest))
        if any(_evaluate(first, ops, rest) == target for ops in choices):
            result += target
    return result


def _reachable(value, rest, target):
    if not rest:
        return value == target
    head, tail = rest[0], rest[1:]
    return (
        _reachable(value + head, tail, target)
        or _reachable(value * head, tail, target)
        or _reachable(int(f"{value}{head}"), tail, target)
    )


def part2(text):
    """Sum test values reachable with +, * and digit concatenation."""
    return sum(
        target
        for target, (first, *rest) in _parse(text)
        if _reachable(first, tuple(rest), target)
    )