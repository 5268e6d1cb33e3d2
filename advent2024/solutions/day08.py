"""Day 8: antinodes of resonant antennas."""

from __future__ import annotations

from collections import defaultdict
from itertools import permutations
from typing import Callable, Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

Position = tuple[int, int]


def points_are_linear(points: Sequence[Position]) -> bool:
    """Whether all points lie on one straight line."""
    if len(points) < 3:
        return True
    (x1, y1), (x2, y2) = points[0], points[1]
    ref_dx, ref_dy = x2 - x1, y2 - y1
    return all(ref_dx * (y - y1) == ref_dy * (x - x1) for x, y in points[2:])


def _parse_antennas(text: str) -> tuple[int, int, list[list[Position]]]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("expected a non-empty map")
    groups: dict[str, list[Position]] = defaultdict(list)
    for y, row in enumerate(lines):
        for x, symbol in enumerate(row):
            if symbol.isalnum():
                groups[symbol].append((x, y))
    return len(lines[0]), len(lines), list(groups.values())


def _is_double_distance(point: Position, a: Position, b: Position) -> bool:
    dx1, dy1 = abs(point[0] - a[0]), abs(point[1] - a[1])
    dx2, dy2 = abs(point[0] - b[0]), abs(point[1] - b[1])
    return (
        points_are_linear([point, a, b])
        and (dx1 == 2 * dx2 or dx2 == 2 * dx1)
        and (dy1 == 2 * dy2 or dy2 == 2 * dy1)
    )


def _on_line(point: Position, a: Position, b: Position) -> bool:
    return points_are_linear([point, a, b])


def _count_antinodes(
    text: str, condition: Callable[[Position, Position, Position], bool]
) -> int:
    width, height, groups = _parse_antennas(text)
    pairs = [pair for group in groups for pair in permutations(group, 2)]
    return sum(
        1
        for x in range(width)
        for y in range(height)
        if any(condition((x, y), a, b) for a, b in pairs)
    )


def part_one(puzzle_input: str) -> int:
    return _count_antinodes(puzzle_input, _is_double_distance)


def part_two(puzzle_input: str) -> int:
    return _count_antinodes(puzzle_input, _on_line)


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(8), part_one, part_two, argv)


if __name__ == "__main__":
    main()