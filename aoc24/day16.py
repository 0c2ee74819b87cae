"""Reindeer maze: lowest score from start to end and tiles on the best paths."""

from __future__ import annotations

import heapq
import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

STEP_COST = 1
TURN_COST = 1000

Position = tuple[int, int]


class Direction(Enum):
    """A heading in the maze, as a (dx, dy) step."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def horizontal(self) -> bool:
        return self.dy == 0

    @property
    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))


_ORDER: tuple[Direction, ...] = tuple(Direction)
_INDEX = {direction: index for index, direction in enumerate(_ORDER)}


@dataclass(frozen=True)
class Maze:
    """Wall layout of a maze; the start is bottom left, the end top right."""

    walls: tuple[tuple[bool, ...], ...]

    @property
    def width(self) -> int:
        return len(self.walls[0])

    @property
    def height(self) -> int:
        return len(self.walls)

    @property
    def start(self) -> Position:
        return 1, self.height - 2

    @property
    def end(self) -> Position:
        return self.width - 2, 1

    def is_open(self, x: int, y: int) -> bool:
        """Whether (x, y) lies inside the maze and is not a wall."""
        return 0 <= y < self.height and 0 <= x < self.width and not self.walls[y][x]


def parse_maze(text: str) -> Maze:
    """Read a rectangular maze of '#', '.', 'S' and 'E' tiles."""
    lines = text.splitlines()
    if len(lines) < 3 or len(lines[0]) < 3:
        raise ValueError("maze must be at least 3 by 3 tiles")
    if set(lines[0]) != {"#"}:
        raise ValueError("first line must be all walls")
    width = len(lines[0])
    rows = []
    for number, line in enumerate(lines, start=1):
        if len(line) != width:
            raise ValueError(f"line {number}: expected {width} tiles, got {len(line)}")
        unknown = set(line) - set("#.SE")
        if unknown:
            raise ValueError(f"line {number}: unknown tile {min(unknown)!r}")
        rows.append(tuple(ch == "#" for ch in line))
    maze = Maze(tuple(rows))
    if not maze.is_open(*maze.start):
        raise ValueError(f"start {maze.start} is a wall")
    if not maze.is_open(*maze.end):
        raise ValueError(f"end {maze.end} is a wall")
    return maze


def cost_table(maze: Maze) -> dict[tuple[Position, Direction], int]:
    """Lowest cost to reach the end from each tile when leaving it in each direction.

    States from which the end cannot be reached are absent.
    """
    costs: dict[tuple[Position, Direction], int] = {}
    ex, ey = maze.end
    heap = [(0, ex, ey, index) for index in range(len(_ORDER))]
    heapq.heapify(heap)
    while heap:
        cost, x, y, index = heapq.heappop(heap)
        leaving = _ORDER[index]
        if ((x, y), leaving) in costs:
            continue
        costs[(x, y), leaving] = cost
        for direction in _ORDER:
            if direction is leaving.opposite:
                continue
            px, py = x - direction.dx, y - direction.dy
            if not maze.is_open(px, py) or ((px, py), direction) in costs:
                continue
            step = STEP_COST + (0 if direction is leaving else TURN_COST)
            heapq.heappush(heap, (cost + step, px, py, _INDEX[direction]))
    return costs


def _start_costs(
    table: dict[tuple[Position, Direction], int], maze: Maze
) -> tuple[float, float]:
    up = table.get((maze.start, Direction.UP), math.inf) + TURN_COST
    right = table.get((maze.start, Direction.RIGHT), math.inf)
    if math.isinf(up) and math.isinf(right):
        raise ValueError("the end cannot be reached from the start")
    return up, right


def lowest_score(maze: Maze) -> int:
    """Lowest score of a path from the start, facing east, to the end."""
    up, right = _start_costs(cost_table(maze), maze)
    return int(min(up, right))


def best_path_tiles(maze: Maze) -> int:
    """Number of tiles lying on at least one lowest-score path."""
    table = cost_table(maze)
    up, right = _start_costs(table, maze)
    sx, sy = maze.start
    stack: list[tuple[Position, Direction]] = []
    if up <= right:
        stack.append(((sx, sy - 1), Direction.UP))
    if up >= right:
        stack.append(((sx + 1, sy), Direction.RIGHT))

    best = {maze.start}
    while stack:
        position, heading = stack.pop()
        if position in best:
            continue
        best.add(position)
        if position == maze.end:
            continue
        scores = {
            direction: table.get((position, direction), math.inf)
            + (0 if direction.horizontal == heading.horizontal else TURN_COST)
            for direction in _ORDER
        }
        cheapest = min(scores.values())
        if math.isinf(cheapest):
            raise ValueError(f"tile {position} cannot reach the end")
        x, y = position
        stack.extend(
            ((x + direction.dx, y + direction.dy), direction)
            for direction in _ORDER
            if scores[direction] == cheapest
        )
    return len(best)


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
    maze = parse_maze(text)
    print(lowest_score(maze))
    print(best_path_tiles(maze))
    return 0


if __name__ == "__main__":
    sys.exit(main())