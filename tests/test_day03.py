from advent2024.solutions.day03 import part_one, part_two

EXAMPLE_1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))\n"
EXAMPLE_2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))\n"


def test_part_one():
    assert part_one(EXAMPLE_1) == 161


def test_part_two():
    assert part_two(EXAMPLE_2) == 48


def test_part_one_ignores_toggles():
    assert part_one("don't()mul(2,3)") == 6


def test_spaces_break_instruction():
    assert part_one("mul(2,3)mul ( 2 , 4 )mul(4*") == 6


def test_reenabled_after_do():
    assert part_two("don't()mul(1,1)do()mul(3,3)") == 9


def test_no_instructions():
    assert part_two("") == 0