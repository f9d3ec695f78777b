"""Lobby battery bank joltage (2025, day 3)."""

from __future__ import annotations

from collections.abc import Iterable

from adventsolver.y2025_day01 import DEFAULT_INPUT, _cli, _read_lines, _solve_parts

BATTERIES_PART2 = 12


def _digits(bank: str) -> list[int]:
    if not bank:
        raise ValueError("empty battery bank")
    if not all("0" <= ch <= "9" for ch in bank):
        raise ValueError(f"battery bank must hold digits only: {bank!r}")
    return [int(ch) for ch in bank]


def solve_part1(banks: Iterable[str]) -> int:
    """Sum over banks of the largest two-battery joltage."""
    jolts = 0
    for bank in banks:
        digits = _digits(bank)
        left, right = digits[0], 0
        for n in digits[1:-1]:
            if n > left:
                left, right = n, 0
            elif n > right:
                right = n
        right = max(right, digits[-1])
        jolts += left * 10 + right
    return jolts


def solve_part2(banks: Iterable[str]) -> int:
    """Sum over banks of the largest twelve-battery joltage."""
    jolts = 0
    for bank in banks:
        digits = _digits(bank)
        chosen = [0] * BATTERIES_PART2
        for i, n in enumerate(digits):
            remaining = len(digits) - i
            first = max(0, BATTERIES_PART2 - remaining)
            for j in range(first, BATTERIES_PART2):
                if n > chosen[j]:
                    chosen[j] = n
                    chosen[j + 1 :] = [0] * (BATTERIES_PART2 - j - 1)
                    break
        jolts += int("".join(map(str, chosen)))
    return jolts


def solve(path=DEFAULT_INPUT, part1=True, part2=True) -> tuple[int | None, int | None]:
    """Solve the requested parts for the battery banks at path."""
    return _solve_parts(_read_lines(path), part1, part2, (solve_part1, solve_part2))


def main(argv: list[str] | None = None) -> None:
    _cli(argv, "Lobby battery bank joltage", solve)


if __name__ == "__main__":
    main()