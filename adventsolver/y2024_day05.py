"""Print queue ordering rules (2024, day 5)."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from itertools import combinations
from pathlib import Path


class RuleSet:
    """Page ordering rules: each key must be printed before its values."""

    def __init__(self, rules: Iterable[tuple[int, int]] = ()) -> None:
        self._after: dict[int, set[int]] = {}
        for before, after in rules:
            self.add_rule(before, after)

    def add_rule(self, before: int, after: int) -> None:
        self._after.setdefault(before, set()).add(after)

    def has(self, key: int, value: int) -> bool:
        """Whether a rule requires key to come before value."""
        return value in self._after.get(key, ())

    def is_page_valid(self, page: Sequence[int]) -> bool:
        """Whether no later number in the update must precede an earlier one."""
        return not any(self.has(later, earlier) for earlier, later in combinations(page, 2))

    def sort_page(self, page: Sequence[int]) -> tuple[list[int], bool]:
        """Reorder an update by swapping rule violations; report whether any swap happened."""
        ordered = list(page)
        moved = False
        for i in range(len(ordered) - 1, 0, -1):
            for j in range(i - 1, -1, -1):
                if self.has(ordered[i], ordered[j]):
                    ordered[i], ordered[j] = ordered[j], ordered[i]
                    moved = True
        return ordered, moved


def parse(text: str) -> tuple[RuleSet, list[list[int]]]:
    """Split the input into its rule set and its list of updates."""
    rule_text, separator, page_text = text.replace("\r\n", "\n").partition("\n\n")
    if not separator:
        raise ValueError("input needs a blank line between rules and updates")
    rules = RuleSet()
    for line in rule_text.splitlines():
        before, bar, after = line.partition("|")
        if not bar:
            raise ValueError(f"malformed rule: {line!r}")
        rules.add_rule(int(before), int(after))
    pages = [[int(number) for number in line.split(",")] for line in page_text.splitlines() if line]
    return rules, pages


def part1(rules: RuleSet, pages: Iterable[Sequence[int]]) -> int:
    """Sum of the middle numbers of the correctly ordered updates."""
    return sum(page[len(page) // 2] for page in pages if rules.is_page_valid(page))


def part2(rules: RuleSet, pages: Iterable[Sequence[int]]) -> int:
    """Sum of the middle numbers of the updates that had to be reordered."""
    result = 0
    for page in pages:
        ordered, moved = rules.sort_page(page)
        if moved:
            result += ordered[len(ordered) // 2]
    return result


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print queue ordering rules")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    rules, pages = parse(args.input.read_text())
    print(f"Part1: {part1(rules, pages)}")
    print(f"Part2: {part2(rules, pages)}")


if __name__ == "__main__":
    main()