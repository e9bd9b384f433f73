"""Mull It Over: sum the valid multiply instructions in corrupted memory."""

import re

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
_INSTRUCTION = re.compile(r"do\(\)|don't\(\)|mul\((\d{1,3}),(\d{1,3})\)")


def _matches(pattern, text):
    found = list(pattern.finditer(text))
    if not found:
        raise ValueError("no instruction found in input")
    return found


def part1(text):
    """Sum the products of every mul(a,b) instruction."""
    return sum(
        int(match.group(1)) * int(match.group(2)) for match in _matches(_MUL, text)
    )


def part2(text):
    """Sum the products of mul instructions while enabled by do()/don't()."""
    total = 0
    enabled = True
    for match in _matches(_INSTRUCTION, text):
        token = match.group(0)
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total