import pytest

from advent2024.solutions.day13 import parse_input, part_one, part_two, solve_machine

EXAMPLE = """\
Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450

Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279
"""


def test_part_one():
    assert part_one(EXAMPLE) == 480


def test_part_two():
    assert part_two(EXAMPLE) == 875318608908


def test_parse_input():
    machines = parse_input(EXAMPLE)
    assert len(machines) == 4
    assert machines[0] == ((94, 34), (22, 67), (8400, 5400))


def test_solve_first_machine():
    assert solve_machine((94, 34), (22, 67), (8400, 5400)) == 280


def test_second_machine_has_no_solution():
    assert solve_machine((26, 66), (67, 21), (12748, 12176)) is None


def test_parallel_buttons_have_no_solution():
    assert solve_machine((1, 1), (2, 2), (10, 10)) is None


def test_garbage_raises():
    with pytest.raises(ValueError):
        parse_input("no machines here")