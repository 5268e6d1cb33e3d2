"""Day 21: chained robots typing door codes on keypads."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

Key = tuple[int, int]

_NUMBER_PAD: dict[str, Key] = {
    "7": (0, 0),
    "8": (1, 0),
    "9": (2, 0),
    "4": (0, 1),
    "5": (1, 1),
    "6": (2, 1),
    "1": (0, 2),
    "2": (1, 2),
    "3": (2, 2),
    "0": (1, 3),
    "A": (2, 3),
}

_DIRECTIONAL_PAD: dict[str, Key] = {
    "^": (1, 0),
    "A": (2, 0),
    "<": (0, 1),
    "v": (1, 1),
    ">": (2, 1),
}


def _lookup(pad: dict[str, Key], key: str) -> Key:
    try:
        return pad[key]
    except KeyError:
        raise ValueError(f"Invalid character {key}") from None


@lru_cache(maxsize=None)
def find_arrow_sequence(
    x: int, y: int, recursion_depth: int, check_horizontal_first: bool
) -> int:
    """Presses needed to move by (-x, -y) and press A, ``recursion_depth`` robots up."""
    horizontal = ("<" if x > 0 else ">") * abs(x)
    vertical = ("^" if y > 0 else "v") * abs(y)
    moves = horizontal + vertical
    if not check_horizontal_first:
        moves = moves[::-1]
    moves += "A"

    if recursion_depth == 0:
        return len(moves)

    depth = recursion_depth - 1
    current = _DIRECTIONAL_PAD["A"]
    total = 0
    for key in moves:
        needed = _DIRECTIONAL_PAD[key]
        point, current = current, needed
        dx, dy = point[0] - needed[0], point[1] - needed[1]
        if dx == 0 or dy == 0 or (needed == (0, 1) and point[1] == 0):
            total += find_arrow_sequence(dx, dy, depth, False)
        elif point == (0, 1) and needed[1] == 0:
            total += find_arrow_sequence(dx, dy, depth, True)
        else:
            total += min(
                find_arrow_sequence(dx, dy, depth, False),
                find_arrow_sequence(dx, dy, depth, True),
            )
    return total


def solve_passcode(passcode: str, recursion_depth: int) -> int:
    """Complexity of a code: its numeric part times the presses it takes."""
    number = int(passcode[0:3])
    current = _NUMBER_PAD["A"]
    presses = 0
    for ch in passcode:
        needed = _lookup(_NUMBER_PAD, ch)
        point = current
        dx, dy = current[0] - needed[0], current[1] - needed[1]
        current = needed
        if point[1] == 3 and needed[0] == 0:
            presses += find_arrow_sequence(dx, dy, recursion_depth, False)
        elif point[1] == 0 and needed[0] == 3:
            presses += find_arrow_sequence(dx, dy, recursion_depth, True)
        else:
            presses += min(
                find_arrow_sequence(dx, dy, recursion_depth, True),
                find_arrow_sequence(dx, dy, recursion_depth, False),
            )
    return number * presses


def part_one(puzzle_input: str) -> int:
    return sum(solve_passcode(code, 2) for code in puzzle_input.splitlines())


def part_two(puzzle_input: str) -> int:
    return sum(solve_passcode(code, 25) for code in puzzle_input.splitlines())


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(21), part_one, part_two, argv)


if __name__ == "__main__":
    main()