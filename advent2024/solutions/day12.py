"""Day 12: fencing the regions of a garden."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Optional, Sequence

from advent2024.day import Day
from advent2024.grid import Point
from advent2024.runner import run_day


def _contains(region: AbstractSet[Point], point: Optional[Point]) -> bool:
    return point is not None and point in region


def count_corners(region: AbstractSet[Point]) -> int:
    """Corners of a region, which equals its number of straight sides."""
    corners = 0
    for pt in region:
        up = _contains(region, pt.up())
        down = _contains(region, pt.down())
        left = _contains(region, pt.left())
        right = _contains(region, pt.right())
        up_right = _contains(region, pt.up_right())
        up_left = _contains(region, pt.up_left())
        down_right = _contains(region, pt.down_right())
        down_left = _contains(region, pt.down_left())

        for vertical, horizontal, diagonal in (
            (up, right, up_right),
            (up, left, up_left),
            (down, right, down_right),
            (down, left, down_left),
        ):
            if (not vertical and not horizontal) or (
                vertical and horizontal and not diagonal
            ):
                corners += 1
    return corners


@dataclass
class Garden:
    """A grid of plots, each labelled with its plant."""

    grid: list[str]
    height: int
    width: int

    @classmethod
    def parse(cls, text: str) -> Garden:
        grid = text.splitlines()
        if not grid:
            raise ValueError("expected a non-empty garden")
        return cls(grid=grid, height=len(grid), width=len(grid[0]))

    def _plant_at(self, point: Point) -> str:
        return self.grid[point.y][point.x]

    def udlr(self, point: Point) -> list[Point]:
        """Neighbours of ``point`` inside the garden."""
        return point.udlr([0, self.height, 0, self.width])

    def find_neighbor_count(self, point: Point, ch: str) -> int:
        """Sides of ``point`` that need a fence: edges or other plants."""
        neighbors = self.udlr(point)
        return (4 - len(neighbors)) + sum(
            1 for neighbor in neighbors if self._plant_at(neighbor) != ch
        )

    def find_neighbors(self, point: Point, ch: str, visited: set[Point]) -> set[Point]:
        """The region of ``ch`` plants around ``point``, marking it visited."""
        region: set[Point] = set()
        stack = [point]
        visited.add(point)
        while stack:
            current = stack.pop()
            region.add(current)
            for neighbor in self.udlr(current):
                if self._plant_at(neighbor) == ch and neighbor not in visited:
                    stack.append(neighbor)
                    visited.add(neighbor)
        return region

    def find_areas(self, is_part_2: bool) -> list[tuple[int, int, str]]:
        """(area, perimeter or side count, plant) for every region."""
        regions: list[tuple[int, int, str]] = []
        visited: set[Point] = set()
        for y, row in enumerate(self.grid):
            for x, ch in enumerate(row):
                point = Point(x, y)
                if point in visited:
                    continue
                region = self.find_neighbors(point, ch, visited)
                if is_part_2:
                    perimeter = count_corners(region)
                else:
                    perimeter = sum(self.find_neighbor_count(pt, ch) for pt in region)
                regions.append((len(region), perimeter, ch))
        return regions

    def fence_pricing(self, is_part_2: bool) -> int:
        return sum(area * perimeter for area, perimeter, _ in self.find_areas(is_part_2))


def part_one(puzzle_input: str) -> int:
    return Garden.parse(puzzle_input).fence_pricing(False)


def part_two(puzzle_input: str) -> int:
    return Garden.parse(puzzle_input).fence_pricing(True)


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(12), part_one, part_two, argv)


if __name__ == "__main__":
    main()