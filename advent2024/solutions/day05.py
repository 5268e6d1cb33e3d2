"""Day 5: checking and fixing the order of printed pages."""

from __future__ import annotations

import re
from functools import cmp_to_key
from itertools import pairwise
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

_U32_MAX = 2**32 - 1
_RULE = re.compile(r"([0-9]+)\|([0-9]+)\r?\n")
_BLANK = re.compile(r"\r?\n")
_UPDATE = re.compile(r"([0-9]+(?:,[0-9]+)*)\r?\n")

Rule = tuple[int, int]


def _number(text: str) -> int:
    value = int(text)
    if value > _U32_MAX:
        raise ValueError(f"number out of range: {text}")
    return value


def _parse_input(text: str) -> tuple[set[Rule], list[list[int]]]:
    rules: set[Rule] = set()
    position = 0
    while (match := _RULE.match(text, position)) is not None:
        rules.add((_number(match.group(1)), _number(match.group(2))))
        position = match.end()
    if not rules:
        raise ValueError("expected at least one ordering rule")

    blank = _BLANK.match(text, position)
    if blank is None:
        raise ValueError("expected a blank line after the ordering rules")
    position = blank.end()

    updates: list[list[int]] = []
    while (match := _UPDATE.match(text, position)) is not None:
        updates.append([_number(page) for page in match.group(1).split(",")])
        position = match.end()
    if not updates:
        raise ValueError("expected at least one update")
    return rules, updates


def _in_order(update: list[int], rules: set[Rule]) -> bool:
    return all((b, a) not in rules for a, b in pairwise(update))


def part_one(puzzle_input: str) -> int:
    """Sum the middle pages of updates already in the right order."""
    rules, updates = _parse_input(puzzle_input)
    return sum(
        update[len(update) // 2] for update in updates if _in_order(update, rules)
    )


def part_two(puzzle_input: str) -> int:
    """Sum the middle pages of misordered updates once they are sorted."""
    rules, updates = _parse_input(puzzle_input)

    def compare(x: int, y: int) -> int:
        if (y, x) in rules:
            return 1
        if (x, y) in rules:
            return -1
        return 0

    key = cmp_to_key(compare)
    total = 0
    for update in updates:
        if not _in_order(update, rules):
            fixed = sorted(update, key=key)
            total += fixed[len(fixed) // 2]
    return total


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(5), part_one, part_two, argv)


if __name__ == "__main__":
    main()