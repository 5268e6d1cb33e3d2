"""Day 14: security robots wrapping around a bathroom."""

from __future__ import annotations

import math
import re
from collections import Counter
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

RobotPosition = tuple[int, int]
RobotVelocity = tuple[int, int]
Robot = tuple[RobotPosition, RobotVelocity]

_STEPS = 100
_MAX_SEARCH = 10_000
_LINE_LENGTH = 10
_LINE = re.compile(
    r"p=\+?([0-9]+),\+?([0-9]+)[ \t\r\n]+v=([+-]?[0-9]+),([+-]?[0-9]+)"
)
_SPACE = re.compile(r"[ \t\r\n]*")


def parse_input(text: str) -> list[Robot]:
    """Every robot as ((px, py), (vx, vy))."""
    robots: list[Robot] = []
    position = 0
    while (match := _LINE.match(text, position)) is not None:
        px, py, vx, vy = (int(value) for value in match.groups())
        robots.append(((px, py), (vx, vy)))
        position = _SPACE.match(text, match.end()).end()
    if not robots:
        raise ValueError("expected at least one robot")
    return robots


def _room_size(text: str) -> tuple[int, int]:
    return (11, 7) if len(text) < 200 else (101, 103)


def step_robot(robot: Robot, steps: int, width: int, height: int) -> RobotPosition:
    """Where the robot is after ``steps`` seconds, wrapping at the edges."""
    (px, py), (vx, vy) = robot
    return (px + vx * steps) % width, (py + vy * steps) % height


def find_lines(points: Sequence[RobotPosition]) -> bool:
    """Whether the middle half of the sorted points holds a vertical run of ten."""
    ordered = sorted(points)
    quarter = len(ordered) // 4
    last: Optional[RobotPosition] = None
    count = 0
    for x, y in ordered[quarter : quarter * 3]:
        if last is not None and x == last[0] and y == last[1] + 1:
            count += 1
            if count >= _LINE_LENGTH:
                return True
        else:
            count = 1
        last = (x, y)
    return False


def part_one(puzzle_input: str) -> int:
    """Safety factor: product of the robot counts in each quadrant."""
    width, height = _room_size(puzzle_input)
    half_x, half_y = width // 2, height // 2
    quadrants: Counter[int] = Counter()
    for robot in parse_input(puzzle_input):
        px, py = step_robot(robot, _STEPS, width, height)
        if px == half_x or py == half_y:
            continue
        quadrants[(px > half_x) + 2 * (py > half_y)] += 1
    return math.prod(quadrants.values())


def part_two(puzzle_input: str) -> int:
    """Seconds until the robots first draw a line; 0 if they never do."""
    width, height = _room_size(puzzle_input)
    robots = parse_input(puzzle_input)
    for steps in range(_MAX_SEARCH + 1):
        positions = [step_robot(robot, steps, width, height) for robot in robots]
        if find_lines(positions):
            return steps
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(14), part_one, part_two, argv)


if __name__ == "__main__":
    main()