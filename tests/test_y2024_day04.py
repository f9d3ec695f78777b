from adventsolver.y2024_day04 import main, part1, part2

EXAMPLE = [
    "MMMSXXMASM",
    "MSAMXMSMSA",
    "AMXSXMAAMM",
    "MSAMASMSMX",
    "XMASAMXAMM",
    "XXAMMXXAMA",
    "SMSMSASXSS",
    "SAXAMASAAA",
    "MAMMMXMMMM",
    "MXMXAXMASX",
]


def _transpose(grid):
    return ["".join(column) for column in zip(*grid)]


def test_example_part1():
    assert part1(EXAMPLE) == 18


def test_example_part2():
    assert part2(EXAMPLE) == 9


def test_part1_unchanged_by_mirroring_rows():
    assert part1([row[::-1] for row in EXAMPLE]) == part1(EXAMPLE)


def test_transpose_preserves_both_counts():
    transposed = _transpose(EXAMPLE)
    assert part1(transposed) == part1(EXAMPLE)
    assert part2(transposed) == part2(EXAMPLE)


def test_vertical_flip_preserves_both_counts():
    flipped = EXAMPLE[::-1]
    assert part1(flipped) == part1(EXAMPLE)
    assert part2(flipped) == part2(EXAMPLE)


def test_backwards_word_counts_like_forwards():
    assert part1(["SAMX"]) == part1(["XMAS"])
    assert part1(["XMAS"]) > part1(["XMA"])


def test_repeated_word_counts_each_occurrence():
    assert part1(["XMASXMAS"]) == 2 * part1(["XMAS"])


def test_incomplete_word_is_not_counted():
    assert not part1(["XMA", "MAS"])


def test_cross_needs_centre_a():
    cross = ["M.S", ".A.", "M.S"]
    broken = ["M.S", "...", "M.S"]
    assert part2(broken) < part2(cross)
    assert part2(_transpose(cross)) == part2(cross)


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE))
    main([str(path)])
    out = capsys.readouterr().out
    assert f"Part1: {part1(EXAMPLE)}" in out
    assert f"Part2: {part2(EXAMPLE)}" in out