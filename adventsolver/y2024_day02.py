"""Reactor safety reports (2024, day 2)."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from itertools import pairwise
from pathlib import Path

MAX_DIFF = 3
MIN_DIFF = 1
TOLERANCE = 1


def is_safe_distance(first: int, second: int, increasing: bool) -> bool:
    """Whether two adjacent levels differ by 1..3 in the expected direction."""
    diff = second - first
    if not MIN_DIFF <= abs(diff) <= MAX_DIFF:
        return False
    return diff > 0 if increasing else diff < 0


def is_report_safe(report: Sequence[int], allowed_failures: int = 0) -> bool:
    """Whether a report is safe, tolerating up to allowed_failures bad pairs."""
    levels = list(report)
    if len(levels) < 2:
        raise ValueError("a report needs at least two levels")
    increasing = levels[1] > levels[0]
    for first, second in pairwise(levels):
        if is_safe_distance(first, second, increasing):
            continue
        if allowed_failures > 0:
            allowed_failures -= 1
            continue
        return False
    return True


def _levels(report: str) -> list[int]:
    return [int(level) for level in report.split()]


def part1(reports: Iterable[str]) -> int:
    """Number of strictly safe reports."""
    return sum(is_report_safe(_levels(report), 0) for report in reports)


def part2(reports: Iterable[str]) -> int:
    """Number of reports safe when one bad pair is tolerated."""
    return sum(is_report_safe(_levels(report), TOLERANCE) for report in reports)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Reactor safety reports")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    reports = args.input.read_text().splitlines()
    print(f"Part1: {part1(reports)}")
    print(f"Part2: {part2(reports)}")


if __name__ == "__main__":
    main()