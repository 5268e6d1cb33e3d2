import pytest

from advent2024.grid import Point
from advent2024.solutions.day10 import TopoMap, part_one, part_two

EXAMPLE_1 = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""

EXAMPLE_2 = """\
...0...
...1...
...2...
6543456
7.....7
8.....8
9.....9
"""

EXAMPLE_3 = """\
10..9..
2...8..
3...7..
4567654
...8..3
...9..2
.....01
"""


def test_part_one():
    assert part_one(EXAMPLE_1) == 36


def test_part_one_two():
    assert part_one(EXAMPLE_2) == 2


def test_part_one_three():
    assert part_one(EXAMPLE_3) == 3


def test_part_two_2():
    assert part_two(EXAMPLE_2) == 2


def test_part_two():
    assert part_two(EXAMPLE_1) == 81


def test_trailhead_count():
    assert len(TopoMap.from_text(EXAMPLE_1).possible_trailheads()) == 9


def test_trail_ends_of_single_head():
    topo = TopoMap.from_text(EXAMPLE_2)
    assert topo.trail_ends(Point(3, 0), 1) == {Point(0, 6), Point(6, 6)}


def test_find_paths_from_coord():
    topo = TopoMap.from_text(EXAMPLE_2)
    assert topo.find_paths_from_coord(Point(3, 0), 1) == [Point(3, 1)]


def test_empty_map_raises():
    with pytest.raises(ValueError):
        TopoMap.from_text("")