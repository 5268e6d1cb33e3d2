import pytest

from advent2024.solutions.day02 import (
    is_safe,
    is_safe_with_dampening,
    parse_line,
    part_one,
    part_two,
)

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_part_one():
    assert part_one(EXAMPLE) == 2


def test_part_two():
    assert part_two(EXAMPLE) == 4


def test_parse_line():
    assert parse_line("7 6 4 2 1") == [7, 6, 4, 2, 1]


def test_parse_line_rejects_text():
    with pytest.raises(ValueError):
        parse_line("abc")


@pytest.mark.parametrize(
    ("levels", "expected"),
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
    ],
)
def test_is_safe(levels, expected):
    assert is_safe(levels) is expected


@pytest.mark.parametrize(
    ("levels", "expected"),
    [
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], True),
        ([8, 6, 4, 4, 1], True),
    ],
)
def test_is_safe_with_dampening(levels, expected):
    assert is_safe_with_dampening(levels) is expected


def test_empty_input_raises():
    with pytest.raises(ValueError):
        part_one("")