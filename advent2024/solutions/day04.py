"""Day 4: word search for XMAS and crossed MAS."""

from __future__ import annotations

from itertools import product
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

_WORD = "XMAS"
_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0), (1, 1), (1, -1), (-1, 1), (-1, -1))
_DIAGONAL_PAIRS = (
    ((-1, -1), (1, -1)),
    ((-1, -1), (-1, 1)),
    ((1, 1), (-1, 1)),
    ((1, 1), (1, -1)),
)


def _grid(text: str) -> list[str]:
    grid = text.splitlines()
    if not grid:
        raise ValueError("expected a non-empty grid")
    return grid


def _word_at(grid: list[str], r: int, c: int, dr: int, dc: int) -> bool:
    reach = len(_WORD) - 1
    end_r, end_c = r + reach * dr, c + reach * dc
    if not (0 <= end_r < len(grid) and 0 <= end_c < len(grid[0])):
        return False
    return all(
        grid[r + step * dr][c + step * dc] == letter
        for step, letter in enumerate(_WORD[1:], start=1)
    )


def _mas_at(grid: list[str], r: int, c: int, dr: int, dc: int) -> bool:
    rows, cols = len(grid), len(grid[0])
    r1, c1 = r + dr, c + dc
    r2, c2 = r - dr, c - dc
    if 0 <= r1 < rows and 0 <= c1 < cols and 0 <= r2 < rows and 0 <= c2 < cols:
        return grid[r1][c1] == "M" and grid[r2][c2] == "S"
    return False


def part_one(puzzle_input: str) -> int:
    """Count every XMAS in any of the eight directions."""
    grid = _grid(puzzle_input)
    return sum(
        sum(1 for dr, dc in _DIRECTIONS if _word_at(grid, r, c, dr, dc))
        for r, c in product(range(len(grid)), range(len(grid[0])))
        if grid[r][c] == "X"
    )


def part_two(puzzle_input: str) -> int:
    """Count every A that is the centre of two diagonal MAS words."""
    grid = _grid(puzzle_input)
    return sum(
        1
        for r, c in product(range(len(grid)), range(len(grid[0])))
        if grid[r][c] == "A"
        and any(
            _mas_at(grid, r, c, *first) and _mas_at(grid, r, c, *second)
            for first, second in _DIAGONAL_PAIRS
        )
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(4), part_one, part_two, argv)


if __name__ == "__main__":
    main()