"""Day 1: distance and similarity between two location lists."""

from __future__ import annotations

import re
from collections import Counter
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

_LINE = re.compile(r"([0-9]+)[ \t]+([0-9]+)\n")


def _parse(text: str) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    position = 0
    while (match := _LINE.match(text, position)) is not None:
        left.append(int(match.group(1)))
        right.append(int(match.group(2)))
        position = match.end()
    if not left:
        raise ValueError("expected at least one line of two numbers")
    return left, right


def part_one(puzzle_input: str) -> int:
    left, right = _parse(puzzle_input)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part_two(puzzle_input: str) -> int:
    left, right = _parse(puzzle_input)
    counts = Counter(right)
    return sum(number * counts[number] for number in left)


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(1), part_one, part_two, argv)


if __name__ == "__main__":
    main()