"""Plutonian pebbles (2024, day 11)."""

from __future__ import annotations

import argparse
import time
from collections import Counter
from collections.abc import Iterable
from functools import cache
from pathlib import Path

_MULTIPLIER = 2024


def _blink(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * _MULTIPLIER,)


def _check_blinks(blinks: int) -> None:
    if blinks < 0:
        raise ValueError("blinks must not be negative")


def simulate(stones: Iterable[int], blinks: int) -> list[int]:
    """The row of stones, in order, after the given number of blinks."""
    _check_blinks(blinks)
    row = list(stones)
    for _ in range(blinks):
        row = [new for stone in row for new in _blink(stone)]
    return row


@cache
def _count(stone: int, remaining: int) -> int:
    if remaining == 0:
        return 1
    total = 0
    for new in _blink(stone):
        total += _count(new, remaining - 1)
    return total


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """Number of stones after the blinks, by memoised recursion per stone."""
    _check_blinks(blinks)
    return sum(_count(stone, blinks) for stone in stones)


def count_stones_by_tally(stones: Iterable[int], blinks: int) -> int:
    """Number of stones after the blinks, tracking how many of each value exist."""
    _check_blinks(blinks)
    tally = Counter(stones)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, amount in tally.items():
            for new in _blink(stone):
                following[new] += amount
        tally = following
    return sum(tally.values())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Plutonian pebbles")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--blinks", type=int, nargs="+", default=[250, 750])
    args = parser.parse_args(argv)
    stones = [int(token) for token in args.input.read_text().split()]
    for blinks in args.blinks:
        started = time.perf_counter()
        total = count_stones(stones, blinks)
        elapsed = time.perf_counter() - started
        print(f"Part2: {total} stones; iterations {blinks}; Time taken [{elapsed:.6f}s]")
    for blinks in args.blinks:
        started = time.perf_counter()
        total = count_stones_by_tally(stones, blinks)
        elapsed = time.perf_counter() - started
        print(f"Part2v2: {total} stones; iterations {blinks}; Time taken [{elapsed:.6f}s]")


if __name__ == "__main__":
    main()