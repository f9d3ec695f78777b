"""Garden plot fencing prices (2024, day 12)."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

Position = tuple[int, int]
_STEPS = ((-1, 0), (0, -1), (0, 1), (1, 0))


def _plant_at(rows: Sequence[str], x: int, y: int) -> str | None:
    if 0 <= x < len(rows) and 0 <= y < len(rows[x]):
        return rows[x][y]
    return None


def _regions(lines: Iterable[str]) -> Iterator[set[Position]]:
    rows = list(lines)
    assigned: set[Position] = set()
    for x, line in enumerate(rows):
        for y, plant in enumerate(line):
            if (x, y) in assigned:
                continue
            region = {(x, y)}
            stack = [(x, y)]
            while stack:
                cx, cy = stack.pop()
                for dx, dy in _STEPS:
                    nxt = (cx + dx, cy + dy)
                    if nxt not in region and _plant_at(rows, *nxt) == plant:
                        region.add(nxt)
                        stack.append(nxt)
            assigned |= region
            yield region


def _perimeter(region: set[Position]) -> int:
    return sum((x + dx, y + dy) not in region for x, y in region for dx, dy in _STEPS)


def count_corners(region: set[Position]) -> int:
    """Number of corners of a region, which equals its number of straight sides."""
    corners = 0
    for x, y in region:
        top = (x - 1, y) in region
        right = (x, y + 1) in region
        left = (x, y - 1) in region
        bottom = (x + 1, y) in region
        top_left = (x - 1, y - 1) in region
        top_right = (x - 1, y + 1) in region
        bottom_left = (x + 1, y - 1) in region
        bottom_right = (x + 1, y + 1) in region
        # outer corners
        corners += (not top and not left) + (not top and not right)
        corners += (not bottom and not left) + (not bottom and not right)
        # inner corners
        corners += (bottom and right and not bottom_right) + (bottom and left and not bottom_left)
        corners += (top and right and not top_right) + (top and left and not top_left)
    return corners


def part1(lines: Iterable[str]) -> int:
    """Total fencing price as area times perimeter per region."""
    return sum(len(region) * _perimeter(region) for region in _regions(lines))


def part2(lines: Iterable[str]) -> int:
    """Total fencing price as area times number of sides per region."""
    return sum(len(region) * count_corners(region) for region in _regions(lines))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Garden plot fencing prices")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text().replace("\r\n", "\n").strip("\n")
    for index, block in enumerate(text.split("\n\n"), start=1):
        lines = block.splitlines()
        if len(lines) < 2:
            raise ValueError(f"test {index} needs two expected answers before its map")
        grid = lines[2:]
        print(f"[TEST] {index}")
        print(f"Part1 E: {lines[0]}\tA: {part1(grid)}")
        print(f"Part2 E: {lines[1]}\tA: {part2(grid)}")
        print()


if __name__ == "__main__":
    main()