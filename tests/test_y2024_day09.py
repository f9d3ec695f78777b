import pytest

from adventsolver.y2024_day09 import checksum_run, part1, part2, part2_v2

EXAMPLE = "2333133121414131402"


def test_part1_example():
    assert part1(EXAMPLE) == 1928


def test_part2_example():
    assert part2(EXAMPLE) == 2858


def test_part2_v2_matches_part2_on_example():
    assert part2_v2(EXAMPLE) == part2(EXAMPLE)


@pytest.mark.parametrize("disk_map", ["12345", "10203", "90909", "2333133121414131402"])
def test_both_whole_file_strategies_agree(disk_map):
    assert part2_v2(disk_map) == part2(disk_map)


@pytest.mark.parametrize("disk_map", ["10203", "50607", "9"])
def test_without_free_space_all_strategies_agree(disk_map):
    assert part1(disk_map) == part2(disk_map) == part2_v2(disk_map)


def test_trailing_newline_is_ignored():
    assert part1(EXAMPLE + "\n") == part1(EXAMPLE)
    assert part2(EXAMPLE + "\r\n") == part2(EXAMPLE)


@pytest.mark.parametrize("file_id,start,first,second", [(3, 0, 2, 5), (7, 11, 1, 1), (12, 40, 4, 9)])
def test_checksum_run_is_additive(file_id, start, first, second):
    whole = checksum_run(file_id, start, first + second)
    assert whole == checksum_run(file_id, start, first) + checksum_run(file_id, start + first, second)


def test_checksum_run_of_empty_run():
    assert checksum_run(9, 123, 0) == 0


def test_file_zero_contributes_nothing():
    assert checksum_run(0, 50, 9) == checksum_run(0, 0, 1)


def test_rejects_non_digits():
    with pytest.raises(ValueError):
        part1("12a3")
    with pytest.raises(ValueError):
        part2_v2("1-2")


def test_part2_rejects_map_ending_in_space():
    with pytest.raises(ValueError):
        part2("1234")