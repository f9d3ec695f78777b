"""Historian location lists (2024, day 1)."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path

SEPARATOR = "   "


def parse_lists(lines: Iterable[str]) -> tuple[list[int], list[int]]:
    """Parse the two columns into two sorted lists."""
    left: list[int] = []
    right: list[int] = []
    for line in lines:
        parts = line.split(SEPARATOR)
        if len(parts) != 2:
            raise ValueError(f"expected two columns in {line!r}")
        left.append(int(parts[0]))
        right.append(int(parts[1]))
    return sorted(left), sorted(right)


def part1(list1: Sequence[int], list2: Sequence[int]) -> int:
    """Total distance between the paired sorted lists."""
    return sum(abs(a - b) for a, b in zip(list1, list2))


def part2(list1: Sequence[int], list2: Sequence[int]) -> int:
    """Sum of every entry of the second list that also occurs in the first."""
    present = set(list1)
    return sum(value for value in list2 if value in present)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Historian location lists")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    list1, list2 = parse_lists(args.input.read_text().splitlines())
    print(f"Part1: {part1(list1, list2)}")
    print(f"Part2: {part2(list1, list2)}")


if __name__ == "__main__":
    main()