"""Gift shop invalid product ids (2025, day 2)."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from adventsolver.y2025_day01 import DEFAULT_INPUT, _cli, _solve_parts

RANGE_SEPARATOR = ","


def _number(digits: str) -> int:
    # An empty half counts as zero.
    return int(digits) if digits else 0


def _split_range(text: str) -> tuple[str, str]:
    first, dash, second = text.strip().partition("-")
    if not dash:
        raise ValueError(f"malformed id range: {text!r}")
    return first, second


def _doubled(value: int) -> int:
    return value * 10 ** len(str(value)) + value


def solve_part1(ranges: Iterable[str]) -> int:
    """Sum of ids in the ranges made of one digit sequence repeated twice."""
    invalids = 0
    for text in ranges:
        first, second = _split_range(text)
        if len(first) == len(second) and len(first) % 2 == 1:
            continue
        upper1 = _number(first[: len(first) // 2])
        upper2 = _number(second[: (len(second) + 1) // 2])
        low, high = _number(first), _number(second)

        if upper1 == upper2:
            bottom1 = _number(first[len(first) // 2 :])
            bottom2 = _number(second[len(second) // 2 :])
            if bottom1 <= upper1 <= bottom2:
                invalids += _doubled(upper1)
            continue

        invalids += sum(
            candidate
            for candidate in map(_doubled, range(upper1, upper2 + 1))
            if low <= candidate <= high
        )
    return invalids


def solve_part2(ranges: Iterable[str]) -> int:
    """Sum of ids in the ranges made of one digit sequence repeated."""
    invalids = 0
    for text in ranges:
        first, second = _split_range(text)
        upper1 = _number(first[: len(first) // 2])
        upper2 = _number(second[: (len(second) + 1) // 2])
        low, high = _number(first), _number(second)

        lengths = [len(first)]
        if len(first) != len(second):
            lengths.append(len(second))

        seen: set[str] = set()
        for start in map(str, range(upper1, upper2 + 1)):
            for j in range(1, len(start) + 1):
                seq = start[:j]
                for length in lengths:
                    if length % len(seq) != 0:
                        continue
                    candidate = seq * (length // len(seq))
                    value = int(candidate)
                    if candidate not in seen and low <= value <= high:
                        invalids += value
                        seen.add(candidate)
    return invalids


def _read_ranges(path: str | Path) -> list[str]:
    text = Path(path).read_text()
    return [item for item in text.split(RANGE_SEPARATOR) if item.strip()]


def solve(path=DEFAULT_INPUT, part1=True, part2=True) -> tuple[int | None, int | None]:
    """Solve the requested parts for the comma separated ranges at path."""
    return _solve_parts(_read_ranges(path), part1, part2, (solve_part1, solve_part2))


def main(argv: list[str] | None = None) -> None:
    _cli(argv, "Gift shop invalid product ids", solve)


if __name__ == "__main__":
    main()