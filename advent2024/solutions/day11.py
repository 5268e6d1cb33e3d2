"""Day 11: counting stones that change every blink."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

_U64_MAX = 2**64 - 1
_STONE = re.compile(r"\+?[0-9]+")


def split_stone(stone: int) -> tuple[int, int]:
    """Split a stone's digits into a left and a right half."""
    digits = str(stone)
    half = len(digits) // 2
    return int(digits[:half]), int(digits[half:])


def is_even(stone: int) -> bool:
    """Whether the stone's number has an even count of digits."""
    return len(str(stone)) % 2 == 0


def process_stone(stone: int) -> tuple[int, Optional[int]]:
    """One blink: the stone's new number and the split-off stone, if any."""
    if stone == 0:
        return 1, None
    if is_even(stone):
        return split_stone(stone)
    return stone * 2024, None


@lru_cache(maxsize=None)
def count_stones(stone: int, count: int) -> int:
    """Stones that ``stone`` becomes after ``count`` blinks."""
    found = 1
    current = stone
    for remaining in reversed(range(count)):
        current, split_off = process_stone(current)
        if split_off is not None:
            found += count_stones(split_off, remaining)
    return found


def parse_stones(text: str) -> list[int]:
    """The stone numbers on the line; unparseable entries are skipped."""
    return [
        int(word)
        for word in text.rstrip().split(" ")
        if _STONE.fullmatch(word) and int(word) <= _U64_MAX
    ]


def part_one(puzzle_input: str) -> int:
    return sum(count_stones(stone, 25) for stone in parse_stones(puzzle_input))


def part_two(puzzle_input: str) -> int:
    return sum(count_stones(stone, 75) for stone in parse_stones(puzzle_input))


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(11), part_one, part_two, argv)


if __name__ == "__main__":
    main()