"""Corrupted multiplication instructions (2024, day 3)."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_MUL = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")
_MUL_OR_SWITCH = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)|do\(\)|don't\(\)")

ENABLE = "do()"
DISABLE = "don't()"


def part1(instructions: str) -> int:
    """Sum of the products of every well-formed mul instruction."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(instructions))


def part2(instructions: str) -> int:
    """Like part1, but don't() disables and do() re-enables multiplication."""
    enabled = True
    result = 0
    for match in _MUL_OR_SWITCH.finditer(instructions):
        token = match.group(0)
        if token == ENABLE:
            enabled = True
        elif token == DISABLE:
            enabled = False
        elif enabled:
            result += int(match.group(1)) * int(match.group(2))
    return result


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Corrupted multiplication instructions")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    instructions = args.input.read_text()
    print(f"Part1: {part1(instructions)}")
    print(f"Part2: {part2(instructions)}")


if __name__ == "__main__":
    main()