"""Day 6: following a patrolling guard around a lab."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

MAX_ITERS = 6000

Coord = tuple[int, int]


class SquareType(Enum):
    OBSTACLE = "#"
    CLEAR = "."


class Heading(Enum):
    """The way the guard faces; each turn is ninety degrees to the right."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def turned_right(self) -> Heading:
        order = list(Heading)
        return order[(order.index(self) + 1) % len(order)]


@dataclass
class State:
    """The lab map and the guard's progress through it."""

    grid: dict[Coord, SquareType]
    guard_pos: Coord
    guard_facing: Heading = Heading.UP
    visited: set[Coord] = field(default_factory=set)
    steps: int = 0

    @classmethod
    def from_input(cls, text: str) -> State:
        grid: dict[Coord, SquareType] = {}
        guard: Optional[Coord] = None
        for y, line in enumerate(text.splitlines()):
            for x, symbol in enumerate(line):
                if symbol == "^":
                    guard = (x, y)
                    square = SquareType.CLEAR
                else:
                    try:
                        square = SquareType(symbol)
                    except ValueError:
                        raise ValueError(f"unknown symbol {symbol!r}") from None
                grid.setdefault((x, y), square)
        if guard is None:
            raise ValueError("no guard found on the map")
        return cls(grid, guard)

    def _next_block(self) -> Optional[Coord]:
        dx, dy = self.guard_facing.value
        x, y = self.guard_pos[0] + dx, self.guard_pos[1] + dy
        if x < 0 or y < 0:
            return None
        return (x, y)

    def _advance(self) -> bool:
        self.steps += 1
        if self.steps > MAX_ITERS:
            return False
        self.visited.add(self.guard_pos)
        next_block = self._next_block()
        if next_block is None:
            return False
        square = self.grid.get(next_block)
        if square is None:
            return False
        if square is SquareType.CLEAR:
            self.guard_pos = next_block
        else:
            self.guard_facing = self.guard_facing.turned_right
        return True

    def step(self) -> bool:
        """Move or turn once; False once the guard leaves or the limit is hit."""
        return self._advance()

    def step2(self) -> bool:
        """Same as :meth:`step`, used when probing for loops."""
        return self._advance()

    def count_visited(self) -> int:
        return len(self.visited)

    def _copy(self) -> State:
        return State(
            dict(self.grid),
            self.guard_pos,
            self.guard_facing,
            set(self.visited),
            self.steps,
        )


def part_one(puzzle_input: str) -> int:
    state = State.from_input(puzzle_input)
    while state.step():
        pass
    return state.count_visited()


def part_two(puzzle_input: str) -> int:
    """Count the squares where one new obstacle traps the guard in a loop."""
    base = State.from_input(puzzle_input)
    probe = base._copy()
    while probe.step():
        pass

    loops = 0
    for coord in probe.visited:
        candidate = base._copy()
        candidate.grid[coord] = SquareType.OBSTACLE
        while candidate.step2():
            pass
        if candidate.steps > MAX_ITERS:
            loops += 1
    return loops


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(6), part_one, part_two, argv)


if __name__ == "__main__":
    main()