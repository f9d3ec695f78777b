import pytest

from adventsolver.y2024_day06 import Direction, LabMap, main, part1, part2, turn_right

LAB = [
    "....#.....",
    ".........#",
    "..........",
    "..#.......",
    ".......#..",
    "..........",
    ".#..^.....",
    "........#.",
    "#.........",
    "......#...",
]

LOOPING = [".#...", "....#", ".^...", "#....", "...#."]


@pytest.mark.parametrize("solver, expected", [(part1, 41), (part2, 6)])
def test_sample_lab(solver, expected):
    assert solver(LAB) == expected


@pytest.mark.parametrize(
    "start, expected",
    [(Direction.UP, Direction.RIGHT), (Direction.LEFT, Direction.UP)],
)
def test_turn_right_order(start, expected):
    assert turn_right(start) is expected


def test_four_turns_return_to_start():
    for direction in Direction:
        result = direction
        for _ in range(4):
            result = turn_right(result)
        assert result is direction


def test_turning_from_left_faces_up():
    up = turn_right(Direction.LEFT)
    assert (up.dx, up.dy, up.face) == (-1, 0, "⮝")


def test_guard_is_located_and_cleared():
    lab = LabMap([".", ".", "^"])
    assert lab.guard == (2, 0)
    assert lab.rows[2] == "."


def test_straight_walk_visits_column():
    column = [".", ".", "^"]
    assert (part1(column), part2(column)) == (3, 0)


def test_no_guard_visits_nothing():
    assert LabMap(["...."]).count_visited() == 0


def test_looping_guard_raises():
    with pytest.raises(ValueError):
        LabMap(LOOPING).count_visited()


def test_main_prints_walk_results(tmp_path, capsys):
    lab_file = tmp_path / "lab.txt"
    lab_file.write_text("\n".join(LAB))
    main([str(lab_file)])
    shown = capsys.readouterr().out
    assert "Part1: 41" in shown
    assert "Part2: 6" in shown