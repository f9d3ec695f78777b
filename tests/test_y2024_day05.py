import pytest

from adventsolver.y2024_day05 import RuleSet, main, parse, part1, part2

CHAIN = [(1, 2), (2, 3), (1, 3)]


def test_single_rule_is_directional():
    rules = RuleSet([(47, 53)])
    assert (rules.has(47, 53), rules.has(53, 47)) == (True, False)
    assert (rules.is_page_valid([47, 53]), rules.is_page_valid([53, 47])) == (True, False)
    assert rules.sort_page([53, 47]) == ([47, 53], True)


def test_sort_page_leaves_valid_page_alone():
    assert RuleSet(CHAIN).sort_page([1, 2, 3]) == ([1, 2, 3], False)


def test_sort_page_orders_without_mutating():
    rules = RuleSet(CHAIN)
    page = [3, 2, 1]
    ordered, moved = rules.sort_page(page)
    assert moved and rules.is_page_valid(ordered)
    assert sorted(ordered) == [1, 2, 3]
    assert page == [3, 2, 1]


@pytest.mark.parametrize("text", ["1|2\n2|3\n\n1,2,3\n3,2\n", "1|2\r\n2|3\r\n\r\n1,2,3\r\n3,2"])
def test_parse_reads_rules_and_pages(text):
    rules, pages = parse(text)
    assert rules.has(1, 2) and rules.has(2, 3)
    assert pages == [[1, 2, 3], [3, 2]]


@pytest.mark.parametrize("text", ["1|2\n2|3", "12\n\n1,2"])
def test_parse_rejects_malformed_input(text):
    with pytest.raises(ValueError):
        parse(text)


def test_parts_sum_middles():
    rules = RuleSet(CHAIN)
    pages = [[1, 2, 3], [3, 2, 1]]
    assert (part1(rules, pages), part2(rules, pages)) == (2, 2)
    assert part2(rules, [[1, 2, 3]]) == 0


def test_main_prints_middle_sums(tmp_path, capsys):
    manual = tmp_path / "manual.txt"
    manual.write_text("1|2\n2|3\n1|3\n\n1,2,3\n3,2,1\n")
    main([str(manual)])
    captured = capsys.readouterr().out
    assert "Part1: 2" in captured and "Part2: 2" in captured