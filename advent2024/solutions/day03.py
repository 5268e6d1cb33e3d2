"""Day 3: summing multiplication instructions in corrupted memory."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

_U32_MAX = 2**32 - 1
_MUL = r"mul\(([0-9]+),([0-9]+)\)"
_MUL_ONLY = re.compile(_MUL)
_WITH_TOGGLES = re.compile(rf"{_MUL}|(do\(\))|(don't\(\))")


def _process(text: str, with_toggles: bool) -> int:
    pattern = _WITH_TOGGLES if with_toggles else _MUL_ONLY
    enabled = True
    total = 0
    for match in pattern.finditer(text):
        if with_toggles and match.group(3):
            enabled = True
        elif with_toggles and match.group(4):
            enabled = False
        elif enabled:
            a, b = int(match.group(1)), int(match.group(2))
            if a <= _U32_MAX and b <= _U32_MAX:
                total += a * b
    return total


def part_one(puzzle_input: str) -> int:
    return _process(puzzle_input, with_toggles=False)


def part_two(puzzle_input: str) -> int:
    return _process(puzzle_input, with_toggles=True)


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(3), part_one, part_two, argv)


if __name__ == "__main__":
    main()