"""Day 13: the cheapest button presses that win claw-machine prizes."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

PART_2_OFFSET = 10_000_000_000_000

Coord = tuple[int, int]
Machine = tuple[Coord, Coord, Coord]

_NUM = r"([+-]?[0-9]+)"
_MACHINE = re.compile(
    rf"Button A: X\+{_NUM}, Y\+{_NUM}"
    rf"\nButton B: X\+{_NUM}, Y\+{_NUM}"
    rf"\nPrize: X={_NUM}, Y={_NUM}"
)
_SEPARATOR = "\n\n"


def parse_input(text: str) -> list[Machine]:
    """Every machine as (button A, button B, prize)."""
    machines: list[Machine] = []
    position = 0
    while True:
        match = _MACHINE.match(text, position)
        if match is None:
            break
        ax, ay, bx, by, px, py = (int(value) for value in match.groups())
        machines.append(((ax, ay), (bx, by), (px, py)))
        position = match.end()
        if not text.startswith(_SEPARATOR, position):
            break
        position += len(_SEPARATOR)
    if not machines:
        raise ValueError("expected at least one claw machine")
    return machines


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def solve_machine(a: Coord, b: Coord, prize: Coord) -> Optional[int]:
    """Tokens to win the prize (A costs 3, B costs 1), or None if impossible."""
    ax, ay = a
    bx, by = b
    px, py = prize

    denominator = bx * ay - ax * by
    if denominator == 0:
        return None

    numerator = bx * py - by * px
    if numerator % denominator != 0:
        return None

    x = _trunc_div(numerator, denominator)
    y = _trunc_div(px - ax * x, bx)
    if ay * x + by * y != py:
        return None
    return x * 3 + y


def _total(machines: list[Machine]) -> int:
    return sum(
        tokens
        for a, b, prize in machines
        if (tokens := solve_machine(a, b, prize)) is not None
    )


def part_one(puzzle_input: str) -> int:
    return _total(parse_input(puzzle_input))


def part_two(puzzle_input: str) -> int:
    machines = [
        (a, b, (px + PART_2_OFFSET, py + PART_2_OFFSET))
        for a, b, (px, py) in parse_input(puzzle_input)
    ]
    return _total(machines)


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(13), part_one, part_two, argv)


if __name__ == "__main__":
    main()