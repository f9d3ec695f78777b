"""Cafeteria fresh ingredient ranges (2025, day 5)."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from pathlib import Path


def _split_sections(lines: Iterable[str]) -> tuple[list[tuple[int, int]], list[str]]:
    rows = list(lines)
    try:
        blank = rows.index("")
    except ValueError:
        raise ValueError("input needs a blank line after the ranges") from None
    ranges = []
    for line in rows[:blank]:
        first, dash, second = line.partition("-")
        if not dash:
            raise ValueError(f"malformed range: {line!r}")
        ranges.append((int(first), int(second)))
    return ranges, rows[blank + 1 :]


def solve_part1(lines: Iterable[str]) -> int:
    """Number of available ingredient ids that fall inside any fresh range."""
    ranges, ids = _split_sections(lines)
    return sum(
        any(low <= ingredient <= high for low, high in ranges)
        for ingredient in (int(line) for line in ids if line.strip())
    )


def solve_part2(lines: Iterable[str]) -> int:
    """Number of distinct ids covered by the fresh ranges."""
    ranges, _ = _split_sections(lines)
    merged: list[list[int]] = []
    for low, high in sorted(ranges):
        if merged and low <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], high)
        else:
            merged.append([low, high])
    return sum(high - low + 1 for low, high in merged)


def solve(
    path: str | Path = "input.txt", part1: bool = True, part2: bool = True
) -> tuple[int | None, int | None]:
    """Solve the requested parts for the puzzle input at path."""
    lines = Path(path).read_text().splitlines()
    first = solve_part1(lines) if part1 else None
    second = solve_part2(lines) if part2 else None
    return first, second


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Cafeteria fresh ingredient ranges")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("-p", "--part", type=int, choices=(1, 2))
    args = parser.parse_args(argv)
    first, second = solve(args.input, args.part in (None, 1), args.part in (None, 2))
    if first is not None:
        print(f"Part 1 Answer: {first}")
    if second is not None:
        print(f"Part 2 Answer: {second}")


if __name__ == "__main__":
    main()