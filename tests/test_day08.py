import pytest

from advent2024.solutions.day08 import part_one, part_two, points_are_linear

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""


def test_part_one():
    assert part_one(EXAMPLE) == 14


def test_part_two():
    assert part_two(EXAMPLE) == 34


@pytest.mark.parametrize(
    "points, expected",
    [
        ([], True),
        ([(3, 4), (7, 1)], True),
        ([(0, 0), (1, 1), (2, 2)], True),
        ([(0, 0), (1, 1), (2, 3)], False),
        ([(5, 0), (5, 3), (5, 9)], True),
        ([(1, 1), (1, 1), (4, 2)], True),
    ],
)
def test_points_are_linear(points, expected):
    assert points_are_linear(points) is expected


def test_different_frequencies_do_not_resonate():
    assert part_one("a.....\n......\n.B....\n") == 0


def test_empty_map_rejected():
    with pytest.raises(ValueError):
        part_one("")