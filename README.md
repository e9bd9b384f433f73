# aoc24

Solutions to Advent of Code 2024 puzzles. Each solved day has its own module:

`aoc24.day01`, `aoc24.day02`, `aoc24.day03`, `aoc24.day04`, `aoc24.day06`,
`aoc24.day07`, `aoc24.day08`, `aoc24.day09`, `aoc24.day10`, `aoc24.day11`,
`aoc24.day12`, `aoc24.day16`, `aoc24.day17`, `aoc24.day18` and `aoc24.day19`.

Every one of these modules has two functions, `part1(text)` and `part2(text)`.
Each takes the puzzle input as a string and returns that part's answer. Most
answers are integers. `day17.part1` returns the program output as a
comma-separated string. `day18.part2` returns a `BytePos`.

Malformed input raises `ValueError`. So does a puzzle with no answer, such as a
maze with no path through it.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Usage

```python
from aoc24 import day01

text = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3"
print(day01.part1(text))  # 11
print(day01.part2(text))  # 31
```

To solve your own input, read the file yourself and pass its contents in:

```python
from pathlib import Path
from aoc24 import day07

text = Path("input/07.txt").read_text().rstrip("\n")
print(day07.part1(text), day07.part2(text))
```

Some days also have helpers for puzzle sizes other than the defaults:

- `aoc24.day11.count_rocks(rocks, max_age)` counts the stones after a given
  number of blinks. Use it with `aoc24.day11.parse(text)`.
- `aoc24.day18.part1_steps_req(size, positions)` and
  `aoc24.day18.part2_blocking_byte(size, positions)` work on a memory space of
  any `(rows, cols)` size. Use them with `aoc24.day18.parse(text)`, which
  returns a list of `BytePos`. A `BytePos` prints as `row,col`.

## What the package does not do

- It has no command-line program. It does not read input files for you.
  Call the functions from Python as shown above.
- It has no solutions for days 5, 13, 14 and 15.