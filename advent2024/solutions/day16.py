"""Day 16: the cheapest routes through a reindeer maze."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Callable, Hashable, Iterable, Optional, Sequence, TypeVar

from advent2024.day import Day
from advent2024.grid import CardinalDirection, Point
from advent2024.runner import run_day

N = TypeVar("N", bound=Hashable)

Node = tuple[Point, CardinalDirection]

_TURNS = {
    CardinalDirection.NORTH: (CardinalDirection.WEST, CardinalDirection.EAST),
    CardinalDirection.SOUTH: (CardinalDirection.EAST, CardinalDirection.WEST),
    CardinalDirection.EAST: (CardinalDirection.NORTH, CardinalDirection.SOUTH),
    CardinalDirection.WEST: (CardinalDirection.SOUTH, CardinalDirection.NORTH),
}


def _search(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, int]]],
    success: Callable[[N], bool],
) -> Optional[tuple[N, int, dict[N, list[N]]]]:
    """Run the search; give the goal reached, its cost and every node's cheapest parents."""
    dist: dict[N, int] = {start: 0}
    parents: dict[N, list[N]] = {}
    order = count(1)
    heap: list = [(0, 0, start)]

    while heap:
        cost, _, node = heapq.heappop(heap)
        if cost > dist.get(node, 0):
            continue
        if success(node):
            return node, cost, parents
        for neighbor, step in successors(node):
            new_cost = cost + step
            known = dist.get(neighbor)
            if known is None or new_cost < known:
                dist[neighbor] = new_cost
                parents[neighbor] = [node]
                heapq.heappush(heap, (new_cost, next(order), neighbor))
            elif new_cost == known:
                parents.setdefault(neighbor, []).append(node)
    return None


def _all_paths(goal: N, parents: dict[N, list[N]]) -> list[list[N]]:
    paths: list[list[N]] = []
    stack: list[tuple[N, list[N]]] = [(goal, [goal])]
    while stack:
        node, backwards = stack.pop()
        preds = parents.get(node)
        if preds is None:
            paths.append(backwards[::-1])
            continue
        for parent in reversed(preds):
            stack.append((parent, backwards + [parent]))
    return paths


def dijkstra(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, int]]],
    success: Callable[[N], bool],
) -> Optional[tuple[list[list[N]], int]]:
    """Every cheapest path from ``start`` to the first goal reached, and its cost."""
    found = _search(start, successors, success)
    if found is None:
        return None
    goal, cost, parents = found
    return _all_paths(goal, parents), cost


@dataclass
class Maze:
    """Walls, bounds, the goal and where the reindeer starts."""

    walls: set[Point]
    width: int
    height: int
    goal: Point
    position: Point
    facing: CardinalDirection = CardinalDirection.EAST

    @classmethod
    def parse_input(cls, text: str) -> Maze:
        lines = text[:-1].splitlines()
        if not lines:
            raise ValueError("expected a non-empty maze")
        walls: set[Point] = set()
        start: Optional[Point] = None
        goal: Optional[Point] = None
        for y, line in enumerate(lines):
            for x, ch in enumerate(line):
                if ch == "S":
                    start = Point(x, y)
                elif ch == "E":
                    goal = Point(x, y)
                elif ch == "#":
                    walls.add(Point(x, y))
        if start is None or goal is None:
            raise ValueError("the maze needs a start and an end")
        return cls(
            walls=walls,
            width=len(lines[0]),
            height=len(lines),
            goal=goal,
            position=start,
        )

    def _ahead(self, position: Point, facing: CardinalDirection) -> Optional[Point]:
        if facing is CardinalDirection.NORTH:
            return None if position.y == 0 else Point(position.x, position.y - 1)
        if facing is CardinalDirection.SOUTH:
            if position.y == self.height - 1:
                return None
            return Point(position.x, position.y + 1)
        if facing is CardinalDirection.EAST:
            if position.x == self.width - 1:
                return None
            return Point(position.x + 1, position.y)
        return None if position.x == 0 else Point(position.x - 1, position.y)

    def successors(
        self, position: Point, facing: CardinalDirection
    ) -> list[tuple[Node, int]]:
        """Turning left or right costs 1000; stepping forward costs 1."""
        left, right = _TURNS[facing]
        options: list[tuple[Node, int]] = [
            ((position, left), 1000),
            ((position, right), 1000),
        ]
        ahead = self._ahead(position, facing)
        if ahead is not None and ahead not in self.walls:
            options.append(((ahead, facing), 1))
        return options

    def _search(self) -> tuple[Node, int, dict[Node, list[Node]]]:
        found = _search(
            (self.position, self.facing),
            lambda node: self.successors(*node),
            lambda node: node[0] == self.goal,
        )
        if found is None:
            raise ValueError("no route reaches the end of the maze")
        return found


def part_one(puzzle_input: str) -> int:
    """The lowest score that reaches the end."""
    _, cost, _ = Maze.parse_input(puzzle_input)._search()
    return cost


def part_two(puzzle_input: str) -> int:
    """Tiles that lie on at least one of the cheapest routes."""
    goal, _, parents = Maze.parse_input(puzzle_input)._search()
    seen = {goal}
    stack = [goal]
    while stack:
        for parent in parents.get(stack.pop(), ()):
            if parent not in seen:
                seen.add(parent)
                stack.append(parent)
    return len({point for point, _ in seen})


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(16), part_one, part_two, argv)


if __name__ == "__main__":
    main()