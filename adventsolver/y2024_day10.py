"""Hoof It trailhead scores and ratings (2024, day 10)."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from functools import cache
from pathlib import Path

HEAD = 0
PEAK = 9
_STEPS = ((-1, 0), (0, -1), (0, 1), (1, 0))

Grid = Sequence[Sequence[int]]


def parse_grid(lines: Iterable[str]) -> list[list[int]]:
    """Turn map lines into heights; non-digits become values that never link."""
    return [[ord(ch) - ord("0") for ch in line] for line in lines]


def _uphill(grid: Grid, row: int, col: int) -> Iterator[tuple[int, int]]:
    height = grid[row][col]
    for dr, dc in _STEPS:
        r, c = row + dr, col + dc
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]) and grid[r][c] - height == 1:
            yield r, c


def _heads(grid: Grid) -> Iterator[tuple[int, int]]:
    for r, line in enumerate(grid):
        for c, height in enumerate(line):
            if height == HEAD:
                yield r, c


def _score(grid: Grid, head: tuple[int, int]) -> int:
    seen = {head}
    stack = [head]
    peaks = 0
    while stack:
        for nxt in _uphill(grid, *stack.pop()):
            if nxt in seen:
                continue
            seen.add(nxt)
            if grid[nxt[0]][nxt[1]] == PEAK:
                peaks += 1
            else:
                stack.append(nxt)
    return peaks


def part1(grid: Grid) -> int:
    """Sum over trailheads of the number of distinct peaks each can reach."""
    return sum(_score(grid, head) for head in _heads(grid))


def part2(grid: Grid) -> int:
    """Sum over trailheads of the number of distinct hiking trails from each."""

    @cache
    def rating(row: int, col: int) -> int:
        if grid[row][col] == PEAK:
            return 1
        return sum(rating(r, c) for r, c in _uphill(grid, row, col))

    return sum(rating(r, c) for r, c in _heads(grid))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Trailhead scores and ratings")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text().replace("\r\n", "\n").strip("\n")
    for index, block in enumerate(text.split("\n\n"), start=1):
        grid = parse_grid(block.splitlines())
        print(f"[TEST] {index}")
        print(f"Part1: {part1(grid)}")
        print(f"Part2: {part2(grid)}")
        print()


if __name__ == "__main__":
    main()