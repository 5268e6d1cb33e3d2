import pytest

from advent2024.solutions.day21 import (
    find_arrow_sequence,
    part_one,
    part_two,
    solve_passcode,
)

EXAMPLE = """029A
980A
179A
456A
379A
"""


def test_part_one():
    assert part_one(EXAMPLE) == 126384


def test_part_two():
    assert part_two(EXAMPLE) == 154115708116294


@pytest.mark.parametrize(
    "code, expected",
    [
        ("029A", 68 * 29),
        ("980A", 60 * 980),
        ("179A", 68 * 179),
        ("456A", 64 * 456),
        ("379A", 64 * 379),
    ],
)
def test_solve_passcode_examples(code, expected):
    assert solve_passcode(code, 2) == expected


def test_arrow_sequence_depth_zero():
    assert find_arrow_sequence(2, 0, 0, True) == 3
    assert find_arrow_sequence(0, 0, 0, False) == 1
    assert find_arrow_sequence(1, -2, 0, True) == 4


def test_arrow_sequence_grows_with_depth():
    assert find_arrow_sequence(2, 0, 1, True) > find_arrow_sequence(2, 0, 0, True)


def test_invalid_key_raises():
    with pytest.raises(ValueError):
        solve_passcode("02BA", 2)