"""Day 15: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.grid import Direction
from advent2024.runner import run_day

Position = tuple[int, int]


class BlockType(Enum):
    WALL = "wall"
    BOX = "box"
    BOX_LEFT = "box_left"
    BOX_RIGHT = "box_right"
    OPEN = "open"
    ROBOT = "robot"


_NARROW = {
    "#": BlockType.WALL,
    "@": BlockType.ROBOT,
    ".": BlockType.OPEN,
    "O": BlockType.BOX,
}
_WIDE_RIGHT = {
    "#": BlockType.WALL,
    "@": BlockType.OPEN,
    ".": BlockType.OPEN,
    "O": BlockType.BOX_RIGHT,
}
_MOVES = {
    "^": Direction.UP,
    "v": Direction.DOWN,
    ">": Direction.RIGHT,
    "<": Direction.LEFT,
}


def _block(table: dict[str, BlockType], ch: str) -> BlockType:
    try:
        return table[ch]
    except KeyError:
        raise ValueError(f"Should not have received {ch}") from None


@dataclass
class Warehouse:
    """The warehouse floor, the robot and the moves it will attempt."""

    grid: dict[Position, BlockType]
    robot_position: Position
    width: int
    height: int
    directions: list[Direction] = field(default_factory=list)

    @classmethod
    def parse_input(cls, text: str, part_2: bool) -> Warehouse:
        """Parse the map and moves; ``part_2`` doubles the map's width."""
        graph, separator, moves = text.partition("\n\n")
        if not separator:
            raise ValueError("expected a blank line between map and moves")
        lines = text.splitlines()
        if not lines:
            raise ValueError("expected a non-empty warehouse")
        width = len(lines[0]) * (2 if part_2 else 1)
        rows = graph.splitlines()

        grid: dict[Position, BlockType] = {}
        robot: Optional[Position] = None
        for y, line in enumerate(rows):
            for x, ch in enumerate(line):
                block = _block(_NARROW, ch)
                if part_2:
                    right = _block(_WIDE_RIGHT, ch)
                    if block is BlockType.ROBOT:
                        robot = (x * 2, y)
                        block = BlockType.OPEN
                    grid[(x * 2, y)] = block
                    grid[(x * 2 + 1, y)] = right
                else:
                    if block is BlockType.ROBOT:
                        robot = (x, y)
                        block = BlockType.OPEN
                    grid[(x, y)] = block

        directions = []
        for ch in moves.replace("\n", ""):
            if ch not in _MOVES:
                raise ValueError(f"Invalid character in directions: {ch}")
            directions.append(_MOVES[ch])

        if robot is None:
            raise ValueError("no robot found in the warehouse")
        return cls(
            grid=grid,
            robot_position=robot,
            width=width,
            height=len(rows),
            directions=directions,
        )

    def _next_position(self, position: Position, direction: Direction) -> Optional[Position]:
        x, y = position
        if direction is Direction.UP:
            return None if y == 0 else (x, y - 1)
        if direction is Direction.DOWN:
            return None if y >= self.height - 1 else (x, y + 1)
        if direction is Direction.LEFT:
            return None if x == 0 else (x - 1, y)
        return None if x >= self.width - 1 else (x + 1, y)

    def move_unchecked(self, old_position: Position, new_position: Position) -> None:
        """Move whatever is at ``old_position`` to ``new_position``."""
        contents = self.grid[old_position]
        self.grid[old_position] = BlockType.OPEN
        self.grid[new_position] = contents

    def attempt_move(self, position: Position, direction: Direction, is_robot: bool) -> bool:
        """Push the block at ``position`` one step, pushing boxes ahead of it."""
        nxt = self._next_position(position, direction)
        if nxt is None:
            return False
        block = self.grid[nxt]
        if block is BlockType.OPEN:
            can_move = True
        elif block is BlockType.WALL:
            can_move = False
        elif block is BlockType.BOX:
            can_move = self.attempt_move(nxt, direction, False)
        else:
            raise ValueError(f"unexpected block {block}")

        if can_move:
            self.move_unchecked(position, nxt)
            if is_robot:
                self.robot_position = nxt
        return can_move

    def attempt_move_part2(
        self,
        position: Position,
        direction: Direction,
        is_robot: bool,
        skip_moving: bool,
    ) -> bool:
        """Push on the wide map; ``skip_moving`` only checks that the push is possible."""
        nxt = self._next_position(position, direction)
        if nxt is None:
            return False
        block = self.grid[nxt]
        if block is BlockType.OPEN:
            can_move = True
        elif block is BlockType.WALL:
            can_move = False
        elif block in (BlockType.BOX, BlockType.BOX_RIGHT):
            if direction in (Direction.UP, Direction.DOWN):
                x, y = nxt
                other = (x + 1, y) if block is BlockType.BOX else (x - 1, y)
                can_move = (
                    self.attempt_move_part2(nxt, direction, False, True)
                    and self.attempt_move_part2(other, direction, False, True)
                    and self.attempt_move_part2(nxt, direction, False, skip_moving)
                    and self.attempt_move_part2(other, direction, False, skip_moving)
                )
            else:
                can_move = self.attempt_move_part2(nxt, direction, False, skip_moving)
        else:
            raise ValueError(f"unexpected block {block}")

        if can_move and not skip_moving:
            self.move_unchecked(position, nxt)
            if is_robot:
                self.robot_position = nxt
        return can_move

    def follow_robot_directions(self) -> None:
        for direction in list(self.directions):
            self.attempt_move(self.robot_position, direction, True)

    def follow_robot_directions_part2(self) -> None:
        for direction in list(self.directions):
            self.attempt_move_part2(self.robot_position, direction, True, False)

    def coordinate_summation(self) -> int:
        """Sum of 100 * y + x over every box (the left half of wide boxes)."""
        return sum(
            y * 100 + x
            for (x, y), block in self.grid.items()
            if block is BlockType.BOX
        )

    def render(self, part_2: bool) -> str:
        """The warehouse drawn as text, one line per row."""
        symbols = {
            BlockType.BOX: "[" if part_2 else "O",
            BlockType.BOX_RIGHT: "]",
            BlockType.WALL: "#",
            BlockType.OPEN: ".",
        }
        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                if (x, y) == self.robot_position:
                    row.append("@")
                    continue
                block = self.grid.get((x, y), BlockType.OPEN)
                if block not in symbols:
                    raise ValueError(f"unexpected block {block}")
                row.append(symbols[block])
            lines.append("".join(row))
        return "\n".join(lines)


def part_one(puzzle_input: str) -> int:
    warehouse = Warehouse.parse_input(puzzle_input, False)
    warehouse.follow_robot_directions()
    return warehouse.coordinate_summation()


def part_two(puzzle_input: str) -> int:
    warehouse = Warehouse.parse_input(puzzle_input, True)
    warehouse.follow_robot_directions_part2()
    return warehouse.coordinate_summation()


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(15), part_one, part_two, argv)


if __name__ == "__main__":
    main()