import pytest

from adventsolver.y2024_day10 import parse_grid, part1, part2

LARGE = [
    "89010123",
    "78121874",
    "87430965",
    "96549874",
    "45678903",
    "32019012",
    "01329801",
    "10456732",
]

FORK = [
    "...0...",
    "...1...",
    "...2...",
    "6543456",
    "7.....7",
    "8.....8",
    "9.....9",
]

FOUR_PEAKS = [
    "..90..9",
    "...1.98",
    "...2..7",
    "6543456",
    "765.987",
    "876....",
    "987....",
]

STAIRCASE = [
    "012345",
    "123456",
    "234567",
    "345678",
    "4.6789",
    "56789.",
]


def test_parse_grid_digits():
    assert parse_grid(["0123", "4567"]) == [[0, 1, 2, 3], [4, 5, 6, 7]]


def test_part1_large():
    assert part1(parse_grid(LARGE)) == 36


def test_part2_large():
    assert part2(parse_grid(LARGE)) == 81


def test_fork():
    grid = parse_grid(FORK)
    assert part1(grid) == 2
    assert part2(grid) == 2


def test_four_peaks():
    grid = parse_grid(FOUR_PEAKS)
    assert part1(grid) == 4
    assert part2(grid) == 13


def test_staircase():
    grid = parse_grid(STAIRCASE)
    assert part1(grid) == 2
    assert part2(grid) == 227


@pytest.mark.parametrize("lines", [LARGE, FORK, FOUR_PEAKS, STAIRCASE])
def test_rating_is_at_least_score(lines):
    grid = parse_grid(lines)
    assert part2(grid) >= part1(grid)


def test_no_trailheads():
    grid = parse_grid(["9876", "5432"])
    assert part1(grid) == part2(grid) == 0