"""Disk Fragmenter: compact a disk map and compute its checksum."""

import re

_DISK = re.compile(r"(\d+)(?:\r?\n)?")


def _parse(text):
    match = _DISK.fullmatch(text)
    if match is None:
        raise ValueError("disk map must be a run of digits")
    return [int(digit) for digit in match.group(1)]


def part1(text):
    """Move single blocks from the end into the leftmost free space."""
    blocks = []
    for index, length in enumerate(_parse(text)):
        content = index // 2 if index % 2 == 0 else None
        blocks.extend([content] * length)

    left, right = 0, len(blocks) - 1
    while True:
        while left < len(blocks) and blocks[left] is not None:
            left += 1
        while right >= 0 and blocks[right] is None:
            right -= 1
        if left >= right:
            break
        blocks[left], blocks[right] = blocks[right], None

    return sum(position * file_id for position, file_id in enumerate(blocks) if file_id is not None)


def part2(text):
    """Move whole files, highest id first, into the leftmost gap that fits."""
    files = []
    free = []
    start = 0
    for index, length in enumerate(_parse(text)):
        if index % 2 == 0:
            files.append([start, length])
        else:
            free.append([start, length])
        start += length

    for file in reversed(files):
        file_start, file_length = file
        slot = next(
            (i for i, (_, length) in enumerate(free) if length >= file_length), None
        )
        if slot is None:
            continue
        free_start, free_length = free[slot]
        if free_start < file_start:
            file[0] = free_start
            remaining = free_length - file_length
            if remaining > 0:
                free[slot] = [free_start + file_length, remaining]
            else:
                del free[slot]

    return sum(
        file_id * sum(range(file_start, file_start + length))
        for file_id, (file_start, length) in enumerate(files)
    )