"""Restroom robots: quadrant safety factor and searching for a picture."""

from __future__ import annotations

import re
import sys
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

WIDTH = 101
HEIGHT = 103

_LINE = re.compile(r"p=(\d{1,3}),(\d{1,3}) v=(-?\d{1,3}),(-?\d{1,3})")

Position = tuple[int, int]


@dataclass(frozen=True)
class Robot:
    """A robot with a starting position and a velocity per second."""

    x: int
    y: int
    vx: int
    vy: int

    def position_after(
        self, seconds: int, width: int = WIDTH, height: int = HEIGHT
    ) -> Position:
        """Where the robot is after the given seconds, wrapping around the room."""
        return (self.x + self.vx * seconds) % width, (self.y + self.vy * seconds) % height


def parse_robots(text: str) -> list[Robot]:
    """Read lines of the form 'p=x,y v=dx,dy'."""
    robots = []
    for number, line in enumerate(text.splitlines(), start=1):
        match = _LINE.fullmatch(line)
        if match is None:
            raise ValueError(f"line {number}: not a robot: {line!r}")
        robots.append(Robot(*(int(group) for group in match.groups())))
    if not robots:
        raise ValueError("no robots given")
    return robots


def safety_factor(
    robots: Iterable[Robot], seconds: int = 100, width: int = WIDTH, height: int = HEIGHT
) -> int:
    """Product of the robot counts in the four quadrants after the given seconds."""
    if width <= 0 or height <= 0 or width % 2 == 0 or height % 2 == 0:
        raise ValueError("room dimensions must be odd and positive")
    mid_x, mid_y = width // 2, height // 2
    quadrants: Counter[tuple[bool, bool]] = Counter()
    for robot in robots:
        x, y = robot.position_after(seconds, width, height)
        if x == mid_x or y == mid_y:
            continue
        quadrants[x < mid_x, y < mid_y] += 1
    product = 1
    for key in ((True, True), (False, True), (True, False), (False, False)):
        product *= quadrants[key]
    return product


def render(positions: Iterable[Position], width: int = WIDTH, height: int = HEIGHT) -> str:
    """Draw the room with '#' where a robot stands and '.' elsewhere."""
    occupied = set(positions)
    return "\n".join(
        "".join("#" if (x, y) in occupied else "." for x in range(width))
        for y in range(height)
    )


def has_long_run(
    positions: Iterable[Position],
    width: int = WIDTH,
    height: int = HEIGHT,
    length: int = 10,
) -> bool:
    """Whether, reading the room row by row, at least `length` robots stand
    side by side and are followed by an empty tile."""
    total = width * height
    cells = sorted({y * width + x for x, y in positions})
    run = 0
    for index, following in zip(cells, [*cells[1:], None]):
        run += 1
        if following == index + 1:
            continue
        if run >= length and index + 1 < total:
            return True
        run = 0
    return False


def tree_candidates(
    robots: Sequence[Robot],
    limit: int = 10000,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> Iterator[tuple[int, list[Position]]]:
    """Seconds (below `limit`) at which the robots may draw a picture, with their positions."""
    for seconds in range(limit):
        positions = [robot.position_after(seconds, width, height) for robot in robots]
        if has_long_run(positions, width, height):
            yield seconds, positions


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
    robots = parse_robots(text)
    print(safety_factor(robots))
    for seconds, positions in tree_candidates(robots):
        print(seconds)
        print(render(positions))
    return 0


if __name__ == "__main__":
    sys.exit(main())