"""Trash compactor cephalopod math (2025, day 6)."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Sequence
from pathlib import Path

MUL = "*"
ADD = "+"
EMPTY = " "


def _apply(op: str, operands: Sequence[int]) -> int:
    if op == MUL:
        return math.prod(operands)
    if op == ADD:
        return sum(operands)
    return 0


def _rows(lines: Iterable[str]) -> list[str]:
    rows = list(lines)
    if len(rows) < 2:
        raise ValueError("worksheet needs number rows and an operator row")
    return rows


def solve_part1(lines: Iterable[str]) -> int:
    """Grand total reading each problem's numbers row by row."""
    rows = _rows(lines)
    *number_rows, op_row = rows
    columns = [row.split() for row in number_rows]
    ops = op_row.split()
    if any(len(tokens) != len(ops) for tokens in columns):
        raise ValueError("every row needs one entry per problem")
    return sum(
        _apply(op[0], [int(tokens[k]) for tokens in columns]) for k, op in enumerate(ops)
    )


def solve_part2(lines: Iterable[str]) -> int:
    """Grand total reading numbers column by column from right to left."""
    rows = _rows(lines)
    width = max(len(row) for row in rows)
    padded = [row.ljust(width, EMPTY) for row in rows]
    columns = ["".join(chars) for chars in zip(*padded)]
    total = 0
    operands: list[int] = []
    remaining = iter(reversed(columns))
    for column in remaining:
        digits = column[:-1].replace(EMPTY, "")
        operands.append(int(digits) if digits else 0)
        op = column[-1]
        if op != EMPTY:
            total += _apply(op, operands)
            operands = []
            next(remaining, None)
    if operands:
        raise ValueError("numbers without an operator at the left edge")
    return total


def solve(
    path: str | Path = "input.txt", part1: bool = True, part2: bool = True
) -> tuple[int | None, int | None]:
    """Solve the requested parts for the puzzle input at path."""
    lines = Path(path).read_text().splitlines()
    first = solve_part1(lines) if part1 else None
    second = solve_part2(lines) if part2 else None
    return first, second


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Trash compactor cephalopod math")
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