"""Day 2: safety of reactor level reports."""

from __future__ import annotations

import re
from itertools import pairwise
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

_NUMBERS = re.compile(r"[0-9]+(?:[ \t]+[0-9]+)*")


def parse_line(line: str) -> list[int]:
    """Parse the space-separated numbers at the start of ``line``."""
    match = _NUMBERS.match(line)
    if match is None:
        raise ValueError(f"expected a list of numbers: {line!r}")
    return [int(number) for number in match.group().split()]


def _parse_input(text: str) -> list[list[int]]:
    reports: list[list[int]] = []
    position = 0
    while (match := _NUMBERS.match(text, position)) is not None:
        reports.append([int(number) for number in match.group().split()])
        position = match.end()
        if text.startswith("\n", position):
            position += 1
    if not reports:
        raise ValueError("expected at least one report")
    return reports


def _is_monotonic(levels: Sequence[int]) -> bool:
    return all(a < b for a, b in pairwise(levels)) or all(
        a > b for a, b in pairwise(levels)
    )


def _steps_in_range(levels: Sequence[int]) -> bool:
    return all(0 < abs(a - b) < 4 for a, b in pairwise(levels))


def is_safe(levels: Sequence[int]) -> bool:
    """Strictly increasing or decreasing, by steps of 1 to 3."""
    return _is_monotonic(levels) and _steps_in_range(levels)


def is_safe_with_dampening(levels: Sequence[int]) -> bool:
    """Safe, or safe once any single level is removed."""
    levels = list(levels)
    return is_safe(levels) or any(
        is_safe(levels[:index] + levels[index + 1 :]) for index in range(len(levels))
    )


def part_one(puzzle_input: str) -> int:
    return sum(1 for report in _parse_input(puzzle_input) if is_safe(report))


def part_two(puzzle_input: str) -> int:
    return sum(
        1 for report in _parse_input(puzzle_input) if is_safe_with_dampening(report)
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(2), part_one, part_two, argv)


if __name__ == "__main__":
    main()