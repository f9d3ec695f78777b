"""Secret entrance dial password (2025, day 1)."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter
from pathlib import Path
from typing import Any

INITIAL_POSITION = 50
FULL_ROTATION = 100
LEFT_TURN = "L"
DEFAULT_INPUT = "input.txt"


@dataclass
class DialResult:
    """Final dial position and the password counted along the way."""

    dial: int = INITIAL_POSITION
    pwd: int = 0


def _read_lines(path: str | Path) -> list[str]:
    return Path(path).read_text().splitlines()


def _solve_parts(
    items: Sequence[Any],
    part1: bool,
    part2: bool,
    solvers: tuple[Callable[[Sequence[Any]], Any], Callable[[Sequence[Any]], Any]],
) -> tuple[Any, Any]:
    """Run each solver whose part is wanted; the others give None."""
    first, second = (
        solver(items) if wanted else None for solver, wanted in zip(solvers, (part1, part2))
    )
    return first, second


def _cli(
    argv: list[str] | None,
    description: str,
    solver: Callable[[Path, bool, bool], tuple[Any, Any]],
    render: Callable[[Any], Any] = str,
) -> None:
    """Parse the common command line, solve, and print each answer."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT, type=Path)
    parser.add_argument("-p", "--part", type=int, choices=(1, 2))
    args = parser.parse_args(argv)
    answers = solver(args.input, args.part in (None, 1), args.part in (None, 2))
    for number, answer in enumerate(answers, start=1):
        if answer is not None:
            print(f"Part {number} Answer: {render(answer)}")


def _truncated_mod(value: int, modulus: int) -> int:
    # Remainder that keeps the sign of the dividend.
    remainder = abs(value) % modulus
    return remainder if value >= 0 else -remainder


def _parse(line: str) -> tuple[str, int]:
    if not line:
        raise ValueError("empty rotation instruction")
    return line[0], int(line[1:])


def solve_part1(lines: Iterable[str]) -> DialResult:
    """Count how many rotations leave the dial pointing at zero."""
    result = DialResult()
    for line in lines:
        op, rotation = _parse(line)
        if op == LEFT_TURN:
            result.dial = _truncated_mod(result.dial - rotation + FULL_ROTATION, FULL_ROTATION)
        else:
            result.dial = _truncated_mod(result.dial + rotation, FULL_ROTATION)
        if result.dial == 0:
            result.pwd += 1
    return result


def solve_part2(lines: Iterable[str]) -> DialResult:
    """Count every time the dial passes or lands on zero."""
    result = DialResult()
    for line in lines:
        op, rotation = _parse(line)
        partial = rotation % FULL_ROTATION
        if op == LEFT_TURN:
            moved = result.dial - partial
            if result.dial != 0 and moved <= 0:
                result.pwd += 1
            result.dial = (moved + FULL_ROTATION) % FULL_ROTATION
        else:
            moved = result.dial + partial
            if moved >= FULL_ROTATION:
                result.pwd += 1
            result.dial = moved % FULL_ROTATION
        result.pwd += rotation // FULL_ROTATION
    return result


def solve(path=DEFAULT_INPUT, part1=True, part2=True) -> tuple[DialResult | None, DialResult | None]:
    """Solve the requested parts for the puzzle input at path."""
    return _solve_parts(_read_lines(path), part1, part2, (solve_part1, solve_part2))


def main(argv: list[str] | None = None) -> None:
    _cli(argv, "Secret entrance dial password", solve, attrgetter("pwd"))


if __name__ == "__main__":
    main()