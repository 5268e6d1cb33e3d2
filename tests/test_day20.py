import pytest

from advent2024.solutions.day20 import RaceMap, part_one, part_two

EXAMPLE = """###############
#...#...#.....#
#.#.#.#.#.###.#
#S#...#.#.#...#
#######.#.#.###
#######.#.#...#
#######.#.###.#
###..E#...#...#
###.#######.###
#...###...#...#
#.#####.#.###.#
#.#...#.#.#...#
#.#.#.#.#.#.###
#...#...#...###
###############
"""


def test_part_one():
    assert part_one(EXAMPLE) == 44


def test_part_two():
    assert part_two(EXAMPLE) == 285


def test_parse_original_distance():
    race = RaceMap.parse_input(EXAMPLE)
    assert race.original_distance == 84
    assert race.width == 15
    assert race.height == 15


def test_cheat_count_matches_part_one():
    assert RaceMap.parse_input(EXAMPLE).cheat_count() == 44


def test_start_distances_are_zero():
    race = RaceMap.parse_input(EXAMPLE)
    start = 3 * race.width + 1
    end = 7 * race.width + 5
    assert race.from_start[start] == 0
    assert race.from_end[end] == 0


def test_cheats_from_wall_is_none():
    race = RaceMap.parse_input(EXAMPLE)
    assert race.find_cheats_from_position(2, 2, 20, 50) is None


def test_missing_start_raises():
    with pytest.raises(ValueError):
        RaceMap.parse_input(EXAMPLE.replace("S", "."))


def test_unknown_character_raises():
    with pytest.raises(ValueError):
        RaceMap.parse_input(EXAMPLE.replace("E", "X"))