"""Chronospatial computer: running 3-bit programs and finding self-replicating inputs."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import IntEnum

_TEXT = re.compile(
    r"Register A: (\d+)\n"
    r"Register B: (\d+)\n"
    r"Register C: (\d+)\n"
    r"\n"
    r"Program: ([0-7](?:,[0-7])*)\n?"
)


class Opcode(IntEnum):
    """The eight instructions of the computer."""

    ADV = 0
    BXL = 1
    BST = 2
    JNZ = 3
    BXC = 4
    OUT = 5
    BDV = 6
    CDV = 7


@dataclass
class Computer:
    """Three registers and an instruction pointer."""

    a: int = 0
    b: int = 0
    c: int = 0
    pc: int = 0

    def combo(self, operand: int) -> int:
        """Value of a combo operand: 0-3 literally, 4-6 registers A, B and C."""
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError(f"invalid combo operand {operand}")

    def execute(self, program: Sequence[int]) -> Iterator[int]:
        """Run the program from the current state, yielding each output value."""
        while self.pc < len(program):
            if self.pc + 1 >= len(program):
                raise ValueError(f"instruction at {self.pc} has no operand")
            opcode = Opcode(program[self.pc])
            operand = program[self.pc + 1]
            self.pc += 2
            if opcode is Opcode.ADV:
                self.a = self.a >> self.combo(operand)
            elif opcode is Opcode.BDV:
                self.b = self.a >> self.combo(operand)
            elif opcode is Opcode.CDV:
                self.c = self.a >> self.combo(operand)
            elif opcode is Opcode.BXL:
                self.b ^= operand
            elif opcode is Opcode.BST:
                self.b = self.combo(operand) & 7
            elif opcode is Opcode.JNZ:
                if self.a:
                    self.pc = operand
            elif opcode is Opcode.BXC:
                self.b ^= self.c
            else:
                yield self.combo(operand) & 7


def parse_program(text: str) -> tuple[int, int, int, list[int]]:
    """Read the three registers and the program; returns (a, b, c, program)."""
    match = _TEXT.fullmatch(text)
    if match is None:
        raise ValueError("malformed computer description")
    a, b, c = (int(group) for group in match.groups()[:3])
    program = [int(value) for value in match.group(4).split(",")]
    return a, b, c, program


def run_program(program: Sequence[int], a: int, b: int = 0, c: int = 0) -> list[int]:
    """Everything the program outputs when started with these registers."""
    return list(Computer(a, b, c).execute(program))


def format_output(values: Iterable[int]) -> str:
    """Join output values with commas."""
    return ",".join(str(value) for value in values)


def reproduces_program(program: Sequence[int], a: int) -> bool:
    """Whether starting with register A set to `a` outputs the program itself."""
    count = 0
    for value in Computer(a).execute(program):
        if count == len(program) or value != program[count]:
            return False
        count += 1
    return count == len(program)


def find_self_replicating(program: Sequence[int]) -> list[int]:
    """Every value of register A, in ascending order, for which the program
    outputs itself.

    Assumes the usual shape of such programs: each loop outputs one value
    and shifts A right by three bits, so A is built three bits at a time
    from the last output backwards.
    """
    solutions: set[int] = set()
    stack: list[tuple[int, int]] = [(0, len(program))]
    while stack:
        prefix, start = stack.pop()
        if start == 0:
            if reproduces_program(program, prefix):
                solutions.add(prefix)
            continue
        target = list(program[start - 1:])
        for digit in range(8):
            candidate = prefix * 8 + digit
            if candidate == 0 and start != len(program):
                continue
            if run_program(program, candidate) == target:
                stack.append((candidate, start - 1))
    return sorted(solutions)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Expected filename to be given")
        return 1
    try:
        with open(args[0], encoding="ascii") as handle:
            text = handle.read()
    except OSError:
        print("Failed to open file")
        return 1
    a, b, c, program = parse_program(text)
    print(format_output(run_program(program, a, b, c)))
    for solution in find_self_replicating(program):
        print(solution)
    return 0


if __name__ == "__main__":
    sys.exit(main())