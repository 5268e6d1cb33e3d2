"""Grid coordinates and compass directions shared by the puzzle solutions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

_COORD_MAX = 2**32 - 1


class CardinalDirection(Enum):
    """A compass heading."""

    NORTH = "north"
    SOUTH = "south"
    WEST = "west"
    EAST = "east"


class Direction(Enum):
    """A screen-relative movement."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, order=True)
class Point:
    """A non-negative grid coordinate.

    Every move takes an optional bound. For moves towards zero the bound is
    the smallest allowed coordinate; for moves away from zero it is the
    exclusive upper limit. A move that leaves the allowed range gives None.
    """

    x: int
    y: int

    def up(self, bound: Optional[int] = None) -> Optional[Point]:
        return self.up_n(1, bound)

    def down(self, bound: Optional[int] = None) -> Optional[Point]:
        return self.down_n(1, bound)

    def left(self, bound: Optional[int] = None) -> Optional[Point]:
        return self.left_n(1, bound)

    def right(self, bound: Optional[int] = None) -> Optional[Point]:
        return self.right_n(1, bound)

    def udlr(self, bounds: Sequence[int]) -> list[Point]:
        """Neighbours up, down, left and right that stay within ``bounds``."""
        return [point for point in self.udlr_unfiltered(bounds) if point is not None]

    def udlr_unfiltered(
        self, bounds: Sequence[int]
    ) -> tuple[Optional[Point], Optional[Point], Optional[Point], Optional[Point]]:
        """Neighbours up, down, left and right, None where out of bounds.

        ``bounds`` holds the lower y, upper y, lower x and upper x limits.
        """
        up_bound, down_bound, left_bound, right_bound = bounds
        return (
            self.up(up_bound),
            self.down(down_bound),
            self.left(left_bound),
            self.right(right_bound),
        )

    def up_n(self, offset: int, bound: Optional[int] = None) -> Optional[Point]:
        lower = 0 if bound is None else bound
        if self.y >= offset and self.y - offset >= lower:
            return Point(self.x, self.y - offset)
        return None

    def down_n(self, offset: int, bound: Optional[int] = None) -> Optional[Point]:
        upper = _COORD_MAX if bound is None else bound
        if self.y + offset < upper:
            return Point(self.x, self.y + offset)
        return None

    def left_n(self, offset: int, bound: Optional[int] = None) -> Optional[Point]:
        lower = 0 if bound is None else bound
        if self.x >= offset and self.x - offset >= lower:
            return Point(self.x - offset, self.y)
        return None

    def right_n(self, offset: int, bound: Optional[int] = None) -> Optional[Point]:
        upper = _COORD_MAX if bound is None else bound
        if self.x + offset < upper:
            return Point(self.x + offset, self.y)
        return None

    def up_right(
        self, bound_x: Optional[int] = None, bound_y: Optional[int] = None
    ) -> Optional[Point]:
        step = self.up(bound_y)
        return None if step is None else step.right(bound_x)

    def down_right(
        self, bound_x: Optional[int] = None, bound_y: Optional[int] = None
    ) -> Optional[Point]:
        step = self.down(bound_y)
        return None if step is None else step.right(bound_x)

    def up_left(
        self, bound_x: Optional[int] = None, bound_y: Optional[int] = None
    ) -> Optional[Point]:
        step = self.up(bound_y)
        return None if step is None else step.left(bound_x)

    def down_left(
        self, bound_x: Optional[int] = None, bound_y: Optional[int] = None
    ) -> Optional[Point]:
        step = self.down(bound_y)
        return None if step is None else step.left(bound_x)