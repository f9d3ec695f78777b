import pytest

from adventsolver.y2024_day11 import count_stones, count_stones_by_tally, simulate

EXAMPLE = [125, 17]


def test_single_blink_rules():
    assert simulate([0, 1, 10, 99, 999], 1) == [1, 2024, 1, 0, 9, 9, 2021976]


def test_split_drops_leading_zeros():
    assert simulate([1000], 1) == [10, 0]


def test_example_after_25_blinks():
    assert count_stones(EXAMPLE, 25) == 55312


def test_tally_matches_recursion_on_example():
    assert count_stones_by_tally(EXAMPLE, 25) == count_stones(EXAMPLE, 25)


@pytest.mark.parametrize("blinks", range(0, 11))
def test_count_matches_simulation(blinks):
    assert count_stones(EXAMPLE, blinks) == len(simulate(EXAMPLE, blinks))


@pytest.mark.parametrize("blinks", [0, 5, 30, 45])
def test_both_counters_agree(blinks):
    stones = [0, 7, 2024, 98765]
    assert count_stones(stones, blinks) == count_stones_by_tally(stones, blinks)


def test_zero_blinks_keeps_stones():
    stones = [3, 14, 159]
    assert simulate(stones, 0) == stones
    assert count_stones(stones, 0) == len(stones)


def test_simulation_is_composable():
    assert simulate(simulate(EXAMPLE, 3), 4) == simulate(EXAMPLE, 7)


@pytest.mark.parametrize("func", [simulate, count_stones, count_stones_by_tally])
def test_negative_blinks_rejected(func):
    with pytest.raises(ValueError):
        func(EXAMPLE, -1)