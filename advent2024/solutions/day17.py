"""Day 17: a three-bit computer and the register value that makes it quine."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

_U8_MAX = 2**8 - 1
_U64_MAX = 2**64 - 1
_DEFAULT_STOP_LENGTH = 9
_MAX_STEPS = 100

_LEADING_SPACE = re.compile(r"\s*")
_REGISTER = re.compile(r"Register ([ABC]): ([0-9]+)\n")
_PROGRAM = re.compile(r"Program: (\s*[0-9]+(?:,\s*[0-9]+)*)")


@dataclass
class Registers:
    a: int
    b: int
    c: int


def _combo(operand: int, a: int, b: int, c: int) -> int:
    if 0 <= operand <= 3:
        return operand
    if operand == 4:
        return a
    if operand == 5:
        return b
    if operand == 6:
        return c
    raise ValueError(f"Invalid operand {operand}")


@dataclass
class OpCodeProgram:
    """A program with its registers, instruction pointer and output."""

    registers: Registers
    program: list[int]
    output: list[int] = field(default_factory=list)
    position: int = 0
    halt: bool = False

    def run(self, stop_length: Optional[int] = None) -> None:
        """Run until halting, more than ``stop_length`` outputs, or 100 steps."""
        limit = _DEFAULT_STOP_LENGTH if stop_length is None else stop_length
        steps = 0
        while not self.halt and len(self.output) <= limit and steps < _MAX_STEPS:
            self.compute()
            steps += 1

    def output_text(self) -> str:
        return ",".join(str(value) for value in self.output)

    def compute(self) -> None:
        """Execute the instruction at the instruction pointer."""
        if self.position + 1 >= len(self.program):
            self.halt = True
            return

        opcode = self.program[self.position]
        literal = self.program[self.position + 1]
        regs = self.registers
        operand = _combo(literal, regs.a, regs.b, regs.c)
        advance = True

        if opcode == 0:
            regs.a >>= operand
        elif opcode == 1:
            regs.b ^= literal & 0b111
        elif opcode == 2:
            regs.b = operand % 8
        elif opcode == 3:
            if regs.a != 0:
                self.position = literal
                advance = False
        elif opcode == 4:
            regs.b ^= regs.c
        elif opcode == 5:
            self.output.append(operand % 8)
        elif opcode == 6:
            regs.b = regs.a >> operand
        elif opcode == 7:
            regs.c = regs.a >> operand
        else:
            raise ValueError(f"{opcode} is invalid opcode")

        if advance:
            self.position += 2


def matches_output(program: Sequence[int], inst_position: int, reg_a: int) -> bool:
    """Whether starting with ``reg_a`` reproduces the program from ``inst_position`` on.

    Each jump restarts the single pass with only register A carried over and
    the next program value as the expected output.
    """
    while True:
        a, b, c = reg_a, 0, 0
        jumped = False
        for index in range(len(program) // 2):
            opcode = program[index * 2]
            literal = program[index * 2 + 1]
            operand = _combo(literal, a, b, c)
            if opcode == 0:
                a >>= operand
            elif opcode == 1:
                b ^= literal & 0b111
            elif opcode == 2:
                b = operand % 8
            elif opcode == 3:
                if a != 0:
                    inst_position += 1
                    reg_a = a
                    jumped = True
                    break
            elif opcode == 4:
                b ^= c
            elif opcode == 5:
                if operand % 8 != program[inst_position]:
                    return False
                if inst_position == len(program) - 1:
                    return True
            elif opcode == 6:
                b = a >> operand
            elif opcode == 7:
                c = a >> operand
            else:
                raise ValueError(f"{opcode} is invalid opcode")
        if not jumped:
            return False


def parse_input(text: str) -> OpCodeProgram:
    """Read the three registers and the program."""
    position = _LEADING_SPACE.match(text).end()
    values: list[int] = []
    for expected in "ABC":
        match = _REGISTER.match(text, position)
        if match is None:
            raise ValueError(f"expected register {expected}")
        if match.group(1) != expected:
            raise ValueError(f"expected register {expected}, found {match.group(1)}")
        value = int(match.group(2))
        if value > _U64_MAX:
            raise ValueError(f"register {expected} out of range")
        values.append(value)
        position = match.end()

    if not text.startswith("\n", position):
        raise ValueError("expected a blank line before the program")
    position += 1

    match = _PROGRAM.match(text, position)
    if match is None:
        raise ValueError("expected a program")
    program = [int(item.strip()) for item in match.group(1).split(",")]
    if any(item > _U8_MAX for item in program):
        raise ValueError("program value out of range")

    return OpCodeProgram(Registers(*values), program)


def part_one(puzzle_input: str) -> str:
    program = parse_input(puzzle_input)
    program.run()
    return program.output_text()


def part_two(puzzle_input: str) -> Optional[int]:
    """The lowest register A found that makes the program print itself."""
    program = parse_input(puzzle_input).program
    search = [0]
    for target in reversed(range(len(program))):
        next_search: list[int] = []
        for base in search:
            for low_bits in range(8):
                a = base + low_bits
                if matches_output(program, target, a):
                    if target == 0:
                        return a
                    next_search.append(a << 3)
        search = next_search
    return None


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(17), part_one, part_two, argv)


if __name__ == "__main__":
    main()