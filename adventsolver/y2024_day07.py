"""Bridge repair calibration equations (2024, day 7)."""

from __future__ import annotations

import argparse
import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

_Operator = Callable[[int, int], int]


def concat(left: int, right: int) -> int:
    """Join the decimal digits of two numbers."""
    return int(f"{left}{right}")


@dataclass(frozen=True)
class Equation:
    """A test value and the operands that may combine to produce it."""

    test_value: int
    operands: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.operands:
            raise ValueError("an equation needs at least one operand")

    @classmethod
    def from_line(cls, line: str) -> Equation:
        target, separator, rest = line.partition(": ")
        if not separator:
            raise ValueError(f"malformed equation: {line!r}")
        return cls(int(target), tuple(int(op) for op in rest.split(" ")))

    def _reachable(self, operators: tuple[_Operator, ...]) -> bool:
        def search(acc: int, index: int) -> bool:
            if index == len(self.operands):
                return acc == self.test_value
            operand = self.operands[index]
            return any(search(apply(acc, operand), index + 1) for apply in operators)

        return search(self.operands[0], 1)

    def validate(self) -> bool:
        """Whether + and * evaluated left to right can reach the test value."""
        return self._reachable((operator.mul, operator.add))

    def validate_with_concat(self) -> bool:
        """Like validate, with digit concatenation as a third operator."""
        return self._reachable((operator.mul, operator.add, concat))


def part1(lines: Iterable[str]) -> int:
    """Sum of the test values reachable with + and *."""
    equations = (Equation.from_line(line) for line in lines)
    return sum(eq.test_value for eq in equations if eq.validate())


def part2(lines: Iterable[str]) -> int:
    """Sum of the test values reachable with +, * and concatenation."""
    equations = (Equation.from_line(line) for line in lines)
    return sum(eq.test_value for eq in equations if eq.validate_with_concat())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Bridge repair calibration equations")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    lines = args.input.read_text().splitlines()
    print(f"Part1: {part1(lines)}")
    print(f"Part2: {part2(lines)}")


if __name__ == "__main__":
    main()