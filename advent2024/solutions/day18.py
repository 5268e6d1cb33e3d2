"""Day 18: escaping a memory grid as bytes fall into it."""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

Position = tuple[int, int]

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _parse_input(text: str) -> list[Position]:
    positions = []
    for line in text.splitlines():
        x, y = line.split(",")[:2]
        positions.append((int(x), int(y)))
    return positions


def start_offset_test_vs_prod(input_length: int) -> int:
    """Bytes already fallen: 1024 for a real input, 12 for the example."""
    return 1024 if input_length > 100 else 12


def find_shortest_path(byte_positions: Sequence[Position], blocks: int) -> Optional[int]:
    """Steps from the top-left to the bottom-right corner after ``blocks`` bytes fall."""
    grid_size = 71 if len(byte_positions) > 100 else 7
    corrupted = set(byte_positions[:blocks])
    goal = (grid_size - 1, grid_size - 1)

    queue = deque([((0, 0), 0)])
    visited = {(0, 0)}
    while queue:
        (x, y), steps = queue.popleft()
        if (x, y) == goal:
            return steps
        for dx, dy in _DIRECTIONS:
            nxt = (x + dx, y + dy)
            if (
                0 <= nxt[0] < grid_size
                and 0 <= nxt[1] < grid_size
                and nxt not in corrupted
                and nxt not in visited
            ):
                visited.add(nxt)
                queue.append((nxt, steps + 1))
    return None


def part_one(puzzle_input: str) -> Optional[int]:
    positions = _parse_input(puzzle_input)
    return find_shortest_path(positions, start_offset_test_vs_prod(len(positions)))


def part_two(puzzle_input: str) -> str:
    """The first byte that cuts off the exit, as ``"x,y"``."""
    positions = _parse_input(puzzle_input)
    start = start_offset_test_vs_prod(len(positions))
    candidates = range(start, len(positions))

    index = bisect_left(
        candidates,
        True,
        key=lambda blocks: find_shortest_path(positions, blocks) is None,
    )
    if index == len(candidates):
        raise ValueError("no falling byte blocks the exit")
    blocks = candidates[index]
    if find_shortest_path(positions, blocks - 1) is None:
        raise ValueError("the exit is blocked before the search starts")

    x, y = positions[blocks - 1]
    return f"{x},{y}"


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(18), part_one, part_two, argv)


if __name__ == "__main__":
    main()