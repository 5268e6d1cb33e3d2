"""Day 7: finding operators that make calibration equations true."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

_LINE = re.compile(r"([0-9]+): ([0-9]+(?: [0-9]+)*)")
_SPACE = re.compile(r"[ \t\r\n]*")

Equation = tuple[int, list[int]]


def _parse_lines(text: str) -> list[Equation]:
    equations: list[Equation] = []
    position = 0
    while (match := _LINE.match(text, position)) is not None:
        numbers = [int(number) for number in match.group(2).split(" ")]
        equations.append((int(match.group(1)), numbers))
        position = _SPACE.match(text, match.end()).end()
    if not equations:
        raise ValueError("expected at least one equation")
    return equations


def concatenate(a: int, b: int) -> int:
    """Join the digits of ``a`` and ``b``: 123 and 456 give 123456."""
    if b <= 0:
        raise ValueError("can only concatenate a positive number")
    return a * 10 ** len(str(b)) + b


def _solvable(target: int, numbers: Sequence[int], with_concat: bool) -> bool:
    if len(numbers) == 1:
        return numbers[0] == target

    first, second, *rest = numbers
    candidates = [first * second, first + second]
    if with_concat:
        candidates.append(concatenate(first, second))

    for value in candidates:
        if value == target and not rest:
            return True
        if value <= target and _solvable(target, [value, *rest], with_concat):
            return True
    return False


def _calibration(text: str, with_concat: bool) -> int:
    return sum(
        target
        for target, numbers in _parse_lines(text)
        if _solvable(target, numbers, with_concat)
    )


def part_one(puzzle_input: str) -> int:
    return _calibration(puzzle_input, with_concat=False)


def part_two(puzzle_input: str) -> int:
    return _calibration(puzzle_input, with_concat=True)


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(7), part_one, part_two, argv)


if __name__ == "__main__":
    main()