import pytest

from advent2024.solutions.day05 import part_one, part_two

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


def test_part_one():
    assert part_one(EXAMPLE) == 143


def test_part_two():
    assert part_two(EXAMPLE) == 123


def test_windows_line_endings():
    assert part_one(EXAMPLE.replace("\n", "\r\n")) == 143


def test_missing_blank_line_rejected():
    with pytest.raises(ValueError):
        part_one("1|2\n1,2\n")


def test_missing_updates_rejected():
    with pytest.raises(ValueError):
        part_two("1|2\n\n")