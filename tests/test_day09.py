import pytest

from advent2024.solutions.day09 import part_one, part_two

EXAMPLE = "2333133121414131402\n"


def test_part_one():
    assert part_one(EXAMPLE) == 1928


def test_part_two():
    assert part_two(EXAMPLE) == 2858


def test_trailing_whitespace_is_ignored():
    assert part_one(EXAMPLE.rstrip() + "  \n\n") == 1928


def test_non_digit_raises():
    with pytest.raises(ValueError):
        part_one("23x3\n")


def test_empty_raises():
    with pytest.raises(ValueError):
        part_two("\n")