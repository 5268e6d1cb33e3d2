"""Day 10: hiking trails on a topographic map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.grid import Point
from advent2024.runner import run_day

_IMPASSABLE = 11
_PEAK = 9


@dataclass
class TopoMap:
    """Heights 0-9; anything else is impassable."""

    grid: list[list[int]]
    width: int
    height: int

    @classmethod
    def from_text(cls, text: str) -> TopoMap:
        grid = [
            [int(ch) if ch in "0123456789" else _IMPASSABLE for ch in line]
            for line in text.splitlines()
        ]
        if not grid:
            raise ValueError("expected a non-empty map")
        return cls(grid=grid, width=len(grid[0]), height=len(grid))

    def _height_at(self, point: Point) -> int:
        return self.grid[point.y][point.x]

    def possible_trailheads(self) -> list[Point]:
        """Every point of height 0, row by row."""
        return [
            Point(x, y)
            for y, row in enumerate(self.grid)
            for x, value in enumerate(row)
            if value == 0
        ]

    def find_paths_from_coord(self, coord: Point, next_val: int) -> list[Point]:
        """Neighbours of ``coord`` whose height is ``next_val``."""
        return [
            point
            for point in coord.udlr([0, self.height, 0, self.width])
            if self._height_at(point) == next_val
        ]

    def follow_trail(self, coord: Point, next_val: int) -> int:
        """Number of distinct trails from ``coord`` up to a peak."""
        return sum(
            1 if next_val == _PEAK else self.follow_trail(point, next_val + 1)
            for point in self.find_paths_from_coord(coord, next_val)
        )

    def count_trailheads(self) -> int:
        """Sum of the ratings of every trailhead."""
        return sum(self.follow_trail(head, 1) for head in self.possible_trailheads())

    def trail_ends(self, coord: Point, next_val: int) -> set[Point]:
        """Peaks reachable from ``coord``."""
        ends: set[Point] = set()
        for point in self.find_paths_from_coord(coord, next_val):
            if next_val == _PEAK:
                ends.add(point)
            else:
                ends |= self.trail_ends(point, next_val + 1)
        return ends

    def count_reachable_peaks(self) -> int:
        """Sum of the scores of every trailhead."""
        return sum(len(self.trail_ends(head, 1)) for head in self.possible_trailheads())


def part_one(puzzle_input: str) -> int:
    return TopoMap.from_text(puzzle_input).count_reachable_peaks()


def part_two(puzzle_input: str) -> int:
    return TopoMap.from_text(puzzle_input).count_trailheads()


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(10), part_one, part_two, argv)


if __name__ == "__main__":
    main()