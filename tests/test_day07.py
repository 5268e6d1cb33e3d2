import pytest

from advent2024.solutions.day07 import concatenate, part_one, part_two

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_part_one():
    assert part_one(EXAMPLE) == 3749


def test_part_two():
    assert part_two(EXAMPLE) == 11387


@pytest.mark.parametrize(
    "a, b, expected", [(123, 456, 123456), (12, 345, 12345), (15, 6, 156)]
)
def test_concatenate(a, b, expected):
    assert concatenate(a, b) == expected


def test_concatenate_zero_rejected():
    with pytest.raises(ValueError):
        concatenate(5, 0)


def test_single_number_equation():
    assert part_one("7: 7\n8: 7\n") == 7


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        part_one("")