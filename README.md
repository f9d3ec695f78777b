# adventsolver

Solvers for Advent of Code puzzles: days 1–2 of 2023, days 1–12 of 2024
and days 1–6 of 2025. Each day lives in its own module
(`adventsolver.y2024_day07`, `adventsolver.y2025_day03`, ...) and can be
used as a library or run from the command line. There are no third-party
dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

Every day has a command named `advent-<year>-day<NN>`. Give it the path to
your puzzle input (default: `input.txt` in the current directory) and it
prints the answers:

```
advent-2023-day01 input.txt
advent-2024-day07 input.txt
advent-2025-day05 input.txt
```

The available commands are:

- `advent-2023-day01`, `advent-2023-day02`
- `advent-2024-day01` through `advent-2024-day12`
- `advent-2025-day01` through `advent-2025-day06`

A few commands take extra options or expect a particular input layout:

- The 2025 commands accept `-p 1` or `-p 2` (`--part`) to solve only one
  part; without it both parts are printed.
- `advent-2024-day09` prints the whole-file compaction answer twice, once
  from each of its two methods (`part2` and `part2_v2`).
- `advent-2024-day11` accepts `--blinks N [N ...]` (default `250 750`) and
  prints the stone count for each, by both counting methods, with timings.
- `advent-2024-day10` and `advent-2024-day12` read one or more maps
  separated by blank lines and print the answers for each. For day 12 every
  map is preceded by two lines holding the expected answers for part 1 and
  part 2, which are printed next to the computed ones.

## Library use

Most solvers take the puzzle input already split into lines and return the
answer as an integer.

```python
from adventsolver import y2024_day07, y2025_day03

lines = ["190: 10 19", "3267: 81 40 27", "292: 11 6 16 20"]
y2024_day07.part1(lines)   # sum of test values reachable with + and *
y2024_day07.part2(lines)   # the same, also allowing concatenation

banks = ["987654321111111", "811111111111119"]
y2025_day03.solve_part1(banks)   # best two-battery joltage per bank, summed
y2025_day03.solve_part2(banks)   # best twelve-battery joltage per bank, summed
```

Some days take their input in another form:

- `y2024_day01.part1` and `part2` take the two sorted lists returned by
  `parse_lists(lines)`.
- `y2024_day03.part1` and `part2`, and `y2024_day09.part1`, `part2` and
  `part2_v2`, take the whole input as one string.
- `y2024_day05.part1` and `part2` take the `RuleSet` and the updates
  returned by `parse(text)`.
- `y2024_day10.part1` and `part2` take the height grid returned by
  `parse_grid(lines)`.
- `y2024_day11.count_stones` and `count_stones_by_tally` take a list of
  stone numbers and a number of blinks; `simulate` returns the row of
  stones itself.
- `y2025_day02.solve_part1` and `solve_part2` take a list of `"low-high"`
  id ranges.
- `y2025_day01.solve_part1` and `solve_part2` return a `DialResult` with
  the final `dial` position and the password count `pwd`.

Every 2025 module also offers `solve(path, part1, part2)`, which reads an
input file and returns a pair of answers, with `None` for a part that was
not requested.

Some days come with helpers of their own, for example
`y2024_day05.RuleSet` for page-ordering rules, `y2024_day06.LabMap` for the
guard's patrol, `y2024_day07.Equation` and `y2024_day08.FrequencyMap`.

## What it does not do

Only the days listed above are solved. There is no interactive menu, and
nothing here creates starter files for new days or runs a day's tests for
you; use `pytest` directly for that.