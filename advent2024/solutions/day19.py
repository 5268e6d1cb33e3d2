"""Day 19: arranging towels into striped patterns."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day


def _parse_input(text: str) -> tuple[list[str], list[str]]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("expected a line of towels")
    return lines[0].split(", "), lines[2:]


def has_valid_match(towels: Sequence[str], pattern: str) -> bool:
    """Whether ``pattern`` can be built from the towels."""
    towels = tuple(towels)

    @lru_cache(maxsize=None)
    def possible(rest: str) -> bool:
        return any(
            rest == towel or possible(rest[len(towel) :])
            for towel in towels
            if rest.startswith(towel)
        )

    return possible(pattern)


def count_valid_match(towels: Sequence[str], pattern: str) -> int:
    """Number of ways to build ``pattern`` from the towels."""
    towels = tuple(towels)

    @lru_cache(maxsize=None)
    def ways(rest: str) -> int:
        if not rest:
            return 1
        return sum(
            ways(rest[len(towel) :]) for towel in towels if rest.startswith(towel)
        )

    return ways(pattern)


def part_one(puzzle_input: str) -> int:
    towels, patterns = _parse_input(puzzle_input)
    return sum(1 for pattern in patterns if has_valid_match(towels, pattern))


def part_two(puzzle_input: str) -> int:
    towels, patterns = _parse_input(puzzle_input)
    return sum(count_valid_match(towels, pattern) for pattern in patterns)


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(19), part_one, part_two, argv)


if __name__ == "__main__":
    main()