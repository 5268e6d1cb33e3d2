import pytest

from advent2024.solutions.day04 import part_one, part_two

EXAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


def test_part_one():
    assert part_one(EXAMPLE) == 18


def test_part_two():
    assert part_two(EXAMPLE) == 9


@pytest.mark.parametrize("text", ["XMAS\n", "SAMX\n", "X\nM\nA\nS\n"])
def test_single_word(text):
    assert part_one(text) == 1


def test_single_cross():
    assert part_two("M.S\n.A.\nM.S\n") == 1


def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        part_one("")