import pytest

from adventsolver.y2025_day05 import main, solve, solve_part1, solve_part2

EXAMPLE = [
    "3-5",
    "10-14",
    "16-20",
    "12-18",
    "",
    "1",
    "5",
    "8",
    "11",
    "17",
    "32",
]


def test_part1_example():
    assert solve_part1(EXAMPLE) == 3


def test_part2_example():
    assert solve_part2(EXAMPLE) == 14


@pytest.mark.parametrize(
    "ranges, expected",
    [
        (["1-3", "3-5"], 5),
        (["1-3", "4-5"], 5),
        (["1-10", "2-3"], 10),
        (["5-5"], 1),
        (["1-2", "10-11"], 4),
    ],
)
def test_part2_merging(ranges, expected):
    assert solve_part2([*ranges, ""]) == expected


def test_part1_boundaries_inclusive():
    assert solve_part1(["3-5", "", "2", "3", "5", "6"]) == 2


def test_missing_blank_line_raises():
    with pytest.raises(ValueError):
        solve_part1(["3-5", "4"])
    with pytest.raises(ValueError):
        solve_part2(["3-5"])


def test_malformed_range_raises():
    with pytest.raises(ValueError):
        solve_part2(["35", ""])


def test_solve_reads_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert solve(path, True, True) == (3, 14)
    assert solve(path, False, True) == (None, 14)


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE))
    main([str(path), "-p", "2"])
    out = capsys.readouterr().out
    assert "Part 2 Answer: 14" in out
    assert "Part 1" not in out