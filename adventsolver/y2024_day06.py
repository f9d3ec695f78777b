"""Guard patrol on the lab map (2024, day 6)."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

OBSTACLE = "#"
PATH = "."
GUARD = "^"


class Direction(Enum):
    """A facing with its row and column step."""

    UP = (-1, 0, "⮝")
    RIGHT = (0, 1, "⮞")
    DOWN = (1, 0, "⮟")
    LEFT = (0, -1, "⮜")

    def __init__(self, dx: int, dy: int, face: str) -> None:
        self.dx = dx
        self.dy = dy
        self.face = face


_RIGHT_TURNS = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}

_State = tuple[int, int, Direction]


def turn_right(direction: Direction) -> Direction:
    """The direction after a 90 degree right turn."""
    return _RIGHT_TURNS[direction]


class LabMap:
    """The lab floor and the guard's starting position."""

    def __init__(self, lines: Iterable[str]) -> None:
        rows: list[str] = []
        guard: tuple[int, int] | None = None
        for r, line in enumerate(lines):
            if guard is None and (c := line.find(GUARD)) != -1:
                guard = (r, c)
                line = line[:c] + PATH + line[c + 1 :]
            rows.append(line)
        self.rows = tuple(rows)
        self.guard = guard

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row])

    def _is_obstacle(self, row: int, col: int) -> bool:
        return self._in_bounds(row, col) and self.rows[row][col] == OBSTACLE

    def _step(self, state: _State, extra: tuple[int, int] | None = None) -> tuple[_State, bool]:
        row, col, direction = state
        ahead = (row + direction.dx, col + direction.dy)
        if self._is_obstacle(*ahead) or ahead == extra:
            nxt = (row, col, turn_right(direction))
        else:
            nxt = (ahead[0], ahead[1], direction)
        return nxt, self._in_bounds(nxt[0], nxt[1])

    def _is_loop(self, state: _State, extra: tuple[int, int]) -> bool:
        seen: set[_State] = set()
        while state not in seen:
            seen.add(state)
            state, inside = self._step(state, extra)
            if not inside:
                return False
        return True

    def count_visited(self) -> int:
        """Number of distinct cells the guard walks before leaving the map."""
        if self.guard is None:
            return 0
        state: _State = (self.guard[0], self.guard[1], Direction.UP)
        visited = {self.guard}
        seen = {state}
        while True:
            state, inside = self._step(state)
            if not inside:
                return len(visited)
            if state in seen:
                raise ValueError("the guard never leaves the map")
            seen.add(state)
            visited.add((state[0], state[1]))

    def count_loop_obstacles(self) -> int:
        """Number of single obstacle placements that trap the guard in a loop."""
        if self.guard is None:
            return 0
        state: _State = (self.guard[0], self.guard[1], Direction.UP)
        walked: set[tuple[int, int]] = set()
        loops = 0
        inside = True
        while inside:
            row, col, direction = state
            candidate = (row + direction.dx, col + direction.dy)
            if (
                candidate not in walked
                and self._in_bounds(*candidate)
                and not self._is_obstacle(*candidate)
                and self._is_loop(state, candidate)
            ):
                loops += 1
            walked.add((row, col))
            state, inside = self._step(state)
        return loops


def part1(lines: Iterable[str]) -> int:
    """Cells visited by the guard."""
    return LabMap(lines).count_visited()


def part2(lines: Iterable[str]) -> int:
    """Obstacle positions that would make the guard loop."""
    return LabMap(lines).count_loop_obstacles()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Guard patrol on the lab map")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    lines = args.input.read_text().splitlines()
    print(f"Part1: {part1(lines)}")
    print(f"Part2: {part2(lines)}")


if __name__ == "__main__":
    main()