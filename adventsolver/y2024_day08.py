"""Resonant collinearity antinodes (2024, day 8)."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from pathlib import Path

EMPTY = "."

Position = tuple[int, int]


class FrequencyMap:
    """Antenna positions grouped by frequency on a bounded map."""

    def __init__(self, lines: Iterable[str]) -> None:
        rows = list(lines)
        if not rows:
            raise ValueError("the map is empty")
        self.height = len(rows)
        self.width = len(rows[0])
        self.antennas: dict[str, list[Position]] = {}
        for r, line in enumerate(rows):
            for c, ch in enumerate(line):
                if ch != EMPTY:
                    self.antennas.setdefault(ch, []).append((r, c))

    def _in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.height and 0 <= col < self.width

    def _pairs(self) -> Iterator[tuple[Position, Position]]:
        for nodes in self.antennas.values():
            if len(nodes) < 2:
                continue
            # Only antennas in the first half (plus one) start a pair.
            for i, first in enumerate(nodes[: len(nodes) // 2 + 1]):
                for second in nodes[i + 1 :]:
                    yield first, second

    def _ray(self, start: Position, dx: int, dy: int) -> Iterator[Position]:
        position = (start[0] + dx, start[1] + dy)
        while self._in_bounds(position):
            yield position
            position = (position[0] + dx, position[1] + dy)

    def antinode_count(self) -> int:
        """Distinct in-bounds antinodes one pair distance beyond each antenna."""
        found: set[Position] = set()
        for (ax, ay), (bx, by) in self._pairs():
            dx, dy = bx - ax, by - ay
            for candidate in ((ax - dx, ay - dy), (bx + dx, by + dy)):
                if self._in_bounds(candidate):
                    found.add(candidate)
        return len(found)

    def harmonic_antinode_count(self) -> int:
        """Distinct in-bounds positions on any line through an antenna pair."""
        found: set[Position] = set()
        for first, second in self._pairs():
            dx, dy = second[0] - first[0], second[1] - first[1]
            found.update(self._ray(first, dx, dy))
            found.update(self._ray(second, -dx, -dy))
        return len(found)


def part1(lines: Iterable[str]) -> int:
    """Number of antinodes."""
    return FrequencyMap(lines).antinode_count()


def part2(lines: Iterable[str]) -> int:
    """Number of antinodes including resonant harmonics."""
    return FrequencyMap(lines).harmonic_antinode_count()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Resonant collinearity antinodes")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    lines = args.input.read_text().splitlines()
    print(f"Part1: {part1(lines)}")
    print(f"Part2: {part2(lines)}")


if __name__ == "__main__":
    main()