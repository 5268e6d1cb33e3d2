"""Day 20: cheating through walls on a race track."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

Distances = list[Optional[int]]


def _distances(walls: Sequence[bool], width: int, start: int, end: int) -> Distances:
    """Breadth-first distances from ``start``; the search stops once ``end`` is reached."""
    distances: Distances = [None] * len(walls)
    queue = deque([(start, 0)])
    while queue:
        position, distance = queue.popleft()
        if not walls[position] and distances[position] is None:
            distances[position] = distance
            for neighbor in (
                position + 1,
                position - 1,
                position + width,
                position - width,
            ):
                if not 0 <= neighbor < len(walls):
                    raise ValueError("the track is not enclosed by walls")
                queue.append((neighbor, distance + 1))
        if position == end:
            break
    return distances


@dataclass
class RaceMap:
    """The track with every tile's distance from the start and from the end."""

    walls: list[bool]
    from_start: Distances
    from_end: Distances
    width: int
    height: int
    original_distance: int

    @classmethod
    def parse_input(cls, text: str) -> RaceMap:
        lines = text.splitlines()
        if not lines:
            raise ValueError("expected a non-empty map")
        width = len(lines[0])
        walls: list[bool] = []
        start: Optional[int] = None
        end: Optional[int] = None
        for index, ch in enumerate(c for c in text if c != "\n"):
            if ch == "#":
                walls.append(True)
                continue
            if ch == "S":
                start = index
            elif ch == "E":
                end = index
            elif ch != ".":
                raise ValueError(f"Unrecognized character: {ch}")
            walls.append(False)

        if start is None:
            raise ValueError("No start value found")
        if end is None:
            raise ValueError("No end value found")

        from_start = _distances(walls, width, start, end)
        from_end = _distances(walls, width, end, start)
        best = from_start[end]
        if best is None:
            raise ValueError("No path reached the goal")

        return cls(
            walls=walls,
            from_start=from_start,
            from_end=from_end,
            width=width,
            height=len(lines),
            original_distance=best,
        )

    def _open_from_start(self, position: int) -> Optional[int]:
        return None if self.walls[position] else self.from_start[position]

    def _open_from_end(self, position: int) -> Optional[int]:
        return None if self.walls[position] else self.from_end[position]

    def _check_for_cheats(self, x: int, y: int, save_distance: int) -> Optional[int]:
        position = self.width * y + x
        if not self.walls[position]:
            return None
        neighbors = (
            position + 1,
            position - 1,
            position + self.width,
            position - self.width,
        )
        limit = self.original_distance - save_distance
        count = 0
        for a in neighbors:
            start_distance = self._open_from_start(a)
            if start_distance is None:
                continue
            for b in neighbors:
                end_distance = self._open_from_end(b)
                if end_distance is not None and start_distance + end_distance + 2 <= limit:
                    count += 1
        return count

    def cheat_count(self) -> int:
        """Two-step cheats through a single wall that save enough time."""
        minimum_saving = 100 if self.width > 20 else 2
        last_row = len(self.walls) // self.width - 1
        return sum(
            found
            for y in range(1, last_row)
            for x in range(1, self.width - 1)
            if (found := self._check_for_cheats(x, y, minimum_saving)) is not None
        )

    def find_cheats_from_position(
        self, x: int, y: int, cheat_distance: int, save_distance: int
    ) -> Optional[int]:
        """Cheats of up to ``cheat_distance`` starting at (x, y) that save enough.

        None when (x, y) is a wall or was never reached from the start.
        """
        distance_from_start = self._open_from_start(y * self.width + x)
        if distance_from_start is None:
            return None

        limit = self.original_distance - save_distance
        count = 0
        x_start = max(x, cheat_distance + 1) - cheat_distance
        x_end = min(x + cheat_distance, self.width - 2)
        for x_offset in range(x_start, x_end + 1):
            x_distance = abs(x - x_offset)
            max_y_distance = cheat_distance - x_distance
            y_start = max(y, max_y_distance + 1) - max_y_distance
            y_end = min(y + max_y_distance, self.height - 2)
            for y_offset in range(y_start, y_end + 1):
                distance_from_end = self._open_from_end(y_offset * self.width + x_offset)
                if (
                    distance_from_end is not None
                    and distance_from_start
                    + distance_from_end
                    + x_distance
                    + abs(y - y_offset)
                    <= limit
                ):
                    count += 1
        return count


def part_one(puzzle_input: str) -> int:
    return RaceMap.parse_input(puzzle_input).cheat_count()


def part_two(puzzle_input: str) -> int:
    race = RaceMap.parse_input(puzzle_input)
    save_distance = 50 if race.width < 20 else 100
    max_cheat = 20
    return sum(
        found
        for y in range(1, race.height - 1)
        for x in range(1, race.width - 1)
        if (found := race.find_cheats_from_position(x, y, max_cheat, save_distance))
        is not None
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(20), part_one, part_two, argv)


if __name__ == "__main__":
    main()