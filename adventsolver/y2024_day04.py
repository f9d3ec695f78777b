"""Ceres word search (2024, day 4)."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path

WORD = "XMAS"
_DIRECTIONS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if dr or dc
)
_CROSS_LETTERS = {"M", "S"}


def _in_bounds(grid: Sequence[str], row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def _spells_word(grid: Sequence[str], row: int, col: int, dr: int, dc: int) -> bool:
    return all(
        _in_bounds(grid, row + dr * k, col + dc * k)
        and grid[row + dr * k][col + dc * k] == letter
        for k, letter in enumerate(WORD)
    )


def part1(grid: Iterable[str]) -> int:
    """Number of times XMAS appears in any of the eight directions."""
    rows = list(grid)
    return sum(
        _spells_word(rows, r, c, dr, dc)
        for r, line in enumerate(rows)
        for c, ch in enumerate(line)
        if ch == WORD[0]
        for dr, dc in _DIRECTIONS
    )


def part2(grid: Iterable[str]) -> int:
    """Number of A's at the centre of two crossing MAS diagonals."""
    rows = list(grid)
    count = 0
    for r in range(1, len(rows) - 1):
        for c in range(1, len(rows[r]) - 1):
            if rows[r][c] != "A":
                continue
            back = {rows[r - 1][c - 1], rows[r + 1][c + 1]}
            forward = {rows[r + 1][c - 1], rows[r - 1][c + 1]}
            if back == _CROSS_LETTERS and forward == _CROSS_LETTERS:
                count += 1
    return count


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Ceres word search")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    grid = args.input.read_text().splitlines()
    print(f"Part1: {part1(grid)}")
    print(f"Part2: {part2(grid)}")


if __name__ == "__main__":
    main()