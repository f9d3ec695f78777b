import pytest

from adventsolver.y2025_day03 import main, solve, solve_part1, solve_part2

BANKS = [
    "987654321111111",
    "811111111111119",
    "234234234234278",
    "818181911112111",
]


@pytest.mark.parametrize(
    "solver, banks, expected",
    [
        (solve_part1, BANKS, 357),
        (solve_part2, BANKS, 3121910778619),
        (solve_part1, [BANKS[0]], 98),
        (solve_part1, [BANKS[1]], 89),
        (solve_part1, [BANKS[2]], 78),
        (solve_part2, [BANKS[0]], 987654321111),
        (solve_part2, [BANKS[1]], 811111111119),
    ],
)
def test_joltage(solver, banks, expected):
    assert solver(banks) == expected


@pytest.mark.parametrize("solver, bank", [(solve_part1, ""), (solve_part2, "12a4")])
def test_bad_bank_raises(solver, bank):
    with pytest.raises(ValueError):
        solver([bank])


@pytest.mark.parametrize(
    "separator, wanted, expected",
    [("\r\n", (True, True), (357, 3121910778619)), ("\n", (False, True), (None, 3121910778619))],
)
def test_solve_reads_file(tmp_path, separator, wanted, expected):
    banks_file = tmp_path / "banks.txt"
    banks_file.write_text(separator.join(BANKS))
    assert solve(banks_file, *wanted) == expected


def test_main_prints_both_answers(tmp_path, capsys):
    banks_file = tmp_path / "banks.txt"
    banks_file.write_text("\n".join(BANKS))
    main([str(banks_file)])
    assert capsys.readouterr().out == "Part 1 Answer: 357\nPart 2 Answer: 3121910778619\n"