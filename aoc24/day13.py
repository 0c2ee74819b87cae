"""Claw machines: fewest tokens needed to win every reachable prize."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

A_COST = 3
B_COST = 1
PART_TWO_OFFSET = 10000000000000

_BLOCK = re.compile(
    r"Button A: X\+(\d{2}), Y\+(\d{2})\n"
    r"Button B: X\+(\d{2}), Y\+(\d{2})\n"
    r"Prize: X=(\d{1,5}), Y=(\d{1,5})"
)


@dataclass(frozen=True)
class Machine:
    """A claw machine: how far each button moves the claw, and where the prize is."""

    ax: int
    ay: int
    bx: int
    by: int
    prize_x: int
    prize_y: int

    def cost(self, a_presses: int, b_presses: int) -> int:
        """Tokens spent for the given numbers of presses."""
        return A_COST * a_presses + B_COST * b_presses

    def reaches_prize(self, a_presses: int, b_presses: int) -> bool:
        """Whether these presses put the claw exactly over the prize."""
        return (
            self.ax * a_presses + self.bx * b_presses == self.prize_x
            and self.ay * a_presses + self.by * b_presses == self.prize_y
        )


def parse_machines(text: str, offset: int = 0) -> list[Machine]:
    """Read blank-line separated machine descriptions, moving each prize by `offset`."""
    body = text.rstrip("\n")
    if not body:
        raise ValueError("no machines given")
    machines = []
    for number, block in enumerate(body.split("\n\n"), start=1):
        match = _BLOCK.fullmatch(block)
        if match is None:
            raise ValueError(f"machine {number}: malformed description {block!r}")
        ax, ay, bx, by, px, py = (int(group) for group in match.groups())
        machines.append(Machine(ax, ay, bx, by, px + offset, py + offset))
    return machines


def cheapest_by_search(machine: Machine, max_presses: int = 100) -> int | None:
    """Fewest tokens that win the prize pressing each button at most `max_presses`
    times, found by trying every combination; None if the prize cannot be won."""
    best: int | None = None
    for a in range(max_presses + 1):
        if machine.ax * a > machine.prize_x or machine.ay * a > machine.prize_y:
            break
        for b in range(max_presses + 1):
            x = machine.ax * a + machine.bx * b
            if x > machine.prize_x:
                break
            if x < machine.prize_x:
                continue
            y = machine.ay * a + machine.by * b
            if y > machine.prize_y:
                break
            if y == machine.prize_y:
                cost = machine.cost(a, b)
                if best is None or cost < best:
                    best = cost
    return best


def cheapest_by_solving(machine: Machine) -> int | None:
    """Tokens needed to win the prize, found by solving the two linear equations;
    None if no whole, non-negative numbers of presses reach it."""
    determinant = machine.ax * machine.by - machine.bx * machine.ay
    if determinant == 0:
        raise ValueError("button movements are parallel; the solution is not unique")
    numerator = machine.prize_x * machine.by - machine.prize_y * machine.bx
    if numerator % determinant:
        return None
    a = numerator // determinant

    remaining = machine.prize_x + machine.prize_y - a * (machine.ax + machine.ay)
    b_step = machine.bx + machine.by
    if remaining % b_step:
        return None
    b = remaining // b_step

    if a < 0 or b < 0 or not machine.reaches_prize(a, b):
        return None
    return machine.cost(a, b)


def total_tokens_search(machines: Iterable[Machine]) -> int:
    """Tokens needed to win every winnable prize, by exhaustive search."""
    return sum(cost for cost in map(cheapest_by_search, machines) if cost is not None)


def total_tokens_solving(machines: Iterable[Machine]) -> int:
    """Tokens needed to win every winnable prize, by solving the equations."""
    return sum(cost for cost in map(cheapest_by_solving, machines) if cost is not None)


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
    print(total_tokens_search(parse_machines(text)))
    print(total_tokens_solving(parse_machines(text, PART_TWO_OFFSET)))
    return 0


if __name__ == "__main__":
    sys.exit(main())