import pytest

from advent2024.solutions.day19 import (
    count_valid_match,
    has_valid_match,
    part_one,
    part_two,
)

EXAMPLE = """\
r, wr, b, g, bwu, rb, gb, br

brwrr
bggr
gbbr
rrbgbr
ubwu
bwurrg
brgr
bbrgwb
"""

TOWELS = ["r", "wr", "b", "g", "bwu", "rb", "gb", "br"]


def test_part_one():
    assert part_one(EXAMPLE) == 6


def test_part_two():
    assert part_two(EXAMPLE) == 16


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [("brwrr", True), ("ubwu", False), ("bbrgwb", False), ("bwurrg", True)],
)
def test_has_valid_match(pattern, expected):
    assert has_valid_match(TOWELS, pattern) is expected


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [("brwrr", 2), ("gbbr", 4), ("ubwu", 0), ("", 1)],
)
def test_count_valid_match(pattern, expected):
    assert count_valid_match(TOWELS, pattern) == expected


def test_empty_input_raises():
    with pytest.raises(ValueError):
        part_one("")