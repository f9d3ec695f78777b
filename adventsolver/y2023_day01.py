"""Trebuchet calibration values (2023, day 1)."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from pathlib import Path

SPELLED_DIGITS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def line_value(line: str) -> int:
    """Combine the first and last digit of a line into a two-digit number."""
    digits = [int(ch) for ch in line if _is_digit(ch)]
    if not digits:
        return 0
    return digits[0] * 10 + digits[-1]


def _first_spelled(line: str) -> int:
    # Words starting in the last three positions are never looked at.
    limit = len(line) - 3
    for i, ch in enumerate(line):
        if _is_digit(ch):
            return int(ch)
        if i >= limit:
            continue
        for word, value in SPELLED_DIGITS.items():
            if line.startswith(word, i):
                return value
    return 0


def _last_spelled(line: str) -> int:
    # Words ending in the first four positions are never looked at.
    for i in reversed(range(len(line))):
        ch = line[i]
        if _is_digit(ch):
            return int(ch)
        if i <= 3:
            continue
        for word, value in SPELLED_DIGITS.items():
            if line.endswith(word, 0, i + 1):
                return value
    return 0


def spelled_line_value(line: str) -> int:
    """Like line_value, but spelled-out digits count as digits too."""
    return _first_spelled(line) * 10 + _last_spelled(line)


def part1(lines: Iterable[str]) -> int:
    """Sum of the calibration values using numeric digits only."""
    return sum(line_value(line) for line in lines)


def part2(lines: Iterable[str]) -> int:
    """Sum of the calibration values counting spelled-out digits."""
    return sum(spelled_line_value(line) for line in lines)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Trebuchet calibration values")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    lines = args.input.read_text().splitlines()
    print(f"Part1 Total sum = {part1(lines)}")
    print(f"Part2 Total sum = {part2(lines)}")


if __name__ == "__main__":
    main()