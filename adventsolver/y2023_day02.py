"""Cube conundrum games (2023, day 2)."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

RED, GREEN, BLUE = "red", "green", "blue"
DEFAULT_CONFIG = {RED: 12, GREEN: 13, BLUE: 14}


def _cubes(game: str) -> Iterator[tuple[str, int]]:
    """Yield (colour, count) for every cube group revealed in a game record."""
    start = game.find(": ")
    for subset in game[start + 2 :].split("; "):
        for cube in subset.split(", "):
            parts = cube.split(" ")
            if len(parts) < 2:
                raise ValueError(f"malformed cube group: {cube!r}")
            yield parts[1], int(parts[0])


def is_game_possible(game: str, config: Mapping[str, int]) -> bool:
    """Whether every reveal in the game fits within the bag's configuration."""
    return all(config.get(color, 0) >= count for color, count in _cubes(game))


def game_power(game: str) -> int:
    """Product of the fewest cubes of each colour that make the game possible."""
    minimum = dict.fromkeys((RED, GREEN, BLUE), 0)
    for color, count in _cubes(game):
        minimum[color] = max(minimum.get(color, 0), count)
    return math.prod(minimum.values())


def _possible_ids(games: Iterable[str], config: Mapping[str, int]) -> list[int]:
    return [
        game_id
        for game_id, game in enumerate(games, start=1)
        if is_game_possible(game.rstrip("\r"), config)
    ]


def part1(games: Iterable[str], config: Mapping[str, int] | None = None) -> int:
    """Sum of the ids of the games possible with the given configuration."""
    return sum(_possible_ids(games, DEFAULT_CONFIG if config is None else config))


def part2(games: Iterable[str]) -> int:
    """Sum of the powers of each game's minimal cube set."""
    return sum(game_power(game.rstrip("\r")) for game in games)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Cube conundrum games")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    games = args.input.read_text().splitlines()
    for game in games:
        print(f"\nReading {game}")

    config = DEFAULT_CONFIG
    possible = _possible_ids(games, config)
    print(f"\nFor config {config[RED]} red, {config[GREEN]} green, {config[BLUE]} blue cubes")
    print(f"\nSum of game ids: {sum(possible)} ")
    print(f"\nThere are {len(possible)} possible games")
    listed = ", ".join(str(game_id) for game_id in possible)
    print(f'\nPossible games are ["{listed}"]')
    print(f"\nSum of the power of the sets: {part2(games)}")


if __name__ == "__main__":
    main()