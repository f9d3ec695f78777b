"""Printing department paper rolls (2025, day 4)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from adventsolver.y2025_day01 import DEFAULT_INPUT, _cli, _read_lines, _solve_parts

PAPER = "@"
EMPTY_SPACE = "."
FORKLIFT_MAXIMUM = 4
_NEIGHBOURS = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if dr or dc)


def _paper_neighbours(grid: Sequence[Sequence[str]], row: int, col: int) -> int:
    count = 0
    for dr, dc in _NEIGHBOURS:
        r, c = row + dr, col + dc
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]) and grid[r][c] == PAPER:
            count += 1
    return count


def _accessible(grid: Sequence[Sequence[str]], row: int, col: int) -> bool:
    return grid[row][col] == PAPER and _paper_neighbours(grid, row, col) < FORKLIFT_MAXIMUM


def solve_part1(lines: Iterable[str]) -> int:
    """Number of paper rolls with fewer than four neighbouring rolls."""
    grid = list(lines)
    return sum(
        _accessible(grid, r, c) for r, line in enumerate(grid) for c in range(len(line))
    )


def solve_part2(lines: Iterable[str]) -> int:
    """Number of rolls removed by repeatedly taking every accessible roll."""
    grid = [list(line) for line in lines]
    removed = 0
    changed = True
    while changed:
        changed = False
        for r, line in enumerate(grid):
            for c in range(len(line)):
                if _accessible(grid, r, c):
                    line[c] = EMPTY_SPACE
                    removed += 1
                    changed = True
    return removed


def solve(path=DEFAULT_INPUT, part1=True, part2=True) -> tuple[int | None, int | None]:
    """Solve the requested parts for the paper roll grid at path."""
    return _solve_parts(_read_lines(path), part1, part2, (solve_part1, solve_part2))


def main(argv: list[str] | None = None) -> None:
    _cli(argv, "Printing department paper rolls", solve)


if __name__ == "__main__":
    main()