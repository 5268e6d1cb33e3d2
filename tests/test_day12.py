import pytest

from advent2024.grid import Point
from advent2024.solutions.day12 import Garden, count_corners, part_one, part_two

EXAMPLE = """\
RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE
"""

EXAMPLE_2 = """\
AAAAAA
AAABBA
AAABBA
ABBAAA
ABBAAA
AAAAAA
"""


def test_count_corners():
    points = {
        Point(0, 0),
        Point(0, 1),
        Point(0, 2),
        Point(2, 0),
        Point(2, 1),
        Point(2, 2),
        Point(1, 0),
        Point(1, 2),
    }
    assert count_corners(points) == 8


def test_count_corners_square():
    assert count_corners({Point(0, 0)}) == 4


def test_part_one():
    assert part_one(EXAMPLE) == 1930


def test_part_two():
    assert part_two(EXAMPLE) == 1206


def test_part_two_2():
    assert part_two(EXAMPLE_2) == 368


def test_region_count():
    assert len(Garden.parse(EXAMPLE).find_areas(False)) == 11


def test_single_plot_region():
    garden = Garden.parse("AB\nAA\n")
    areas = sorted(garden.find_areas(False), key=lambda item: item[2])
    assert areas == [(3, 8, "A"), (1, 4, "B")]


def test_find_neighbor_count_corner():
    garden = Garden.parse("AB\nAA\n")
    assert garden.find_neighbor_count(Point(0, 0), "A") == 3


def test_empty_garden_raises():
    with pytest.raises(ValueError):
        Garden.parse("")