"""Warehouse robot: pushing boxes around, in normal and double-width layouts."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum


class Tile(Enum):
    """What occupies one warehouse cell, keyed by its map symbol."""

    WALL = "#"
    BOX = "O"
    BOX_LEFT = "["
    BOX_RIGHT = "]"
    EMPTY = "."


class Direction(Enum):
    """A robot move, as a (dx, dy) step."""

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

    @classmethod
    def from_symbol(cls, symbol: str) -> Direction:
        """The direction written as '^', 'v', '<' or '>'."""
        try:
            return _MOVE_SYMBOLS[symbol]
        except KeyError:
            raise ValueError(f"not a move: {symbol!r}") from None


_MOVE_SYMBOLS = {
    "^": Direction.UP,
    "v": Direction.DOWN,
    "<": Direction.LEFT,
    ">": Direction.RIGHT,
}

_WIDE_TILES = {
    "#": (Tile.WALL, Tile.WALL),
    ".": (Tile.EMPTY, Tile.EMPTY),
    "@": (Tile.EMPTY, Tile.EMPTY),
    "O": (Tile.BOX_LEFT, Tile.BOX_RIGHT),
}

_NARROW_TILES = {
    "#": Tile.WALL,
    ".": Tile.EMPTY,
    "@": Tile.EMPTY,
    "O": Tile.BOX,
}


@dataclass
class Warehouse:
    """A grid of tiles and the robot's position within it."""

    grid: list[list[Tile]]
    robot: tuple[int, int]

    def __post_init__(self) -> None:
        x, y = self.robot
        if self._tile(x, y) is not Tile.EMPTY:
            raise ValueError(f"robot at ({x}, {y}) is not on an empty tile")

    def _tile(self, x: int, y: int) -> Tile:
        if 0 <= y < len(self.grid) and 0 <= x < len(self.grid[y]):
            return self.grid[y][x]
        return Tile.WALL

    def can_move(self, x: int, y: int, direction: Direction) -> bool:
        """Whether whatever stands at (x, y) can move one step in `direction`,
        pushing any boxes in its way."""
        tx, ty = x + direction.dx, y + direction.dy
        target = self._tile(tx, ty)
        if target is Tile.EMPTY:
            return True
        if target is Tile.WALL:
            return False
        if target is Tile.BOX or direction.horizontal:
            return self.can_move(tx, ty, direction)
        partner = tx + 1 if target is Tile.BOX_LEFT else tx - 1
        return self.can_move(tx, ty, direction) and self.can_move(partner, ty, direction)

    def _shove(self, x: int, y: int, direction: Direction) -> None:
        tx, ty = x + direction.dx, y + direction.dy
        if self.grid[ty][tx] is not Tile.EMPTY:
            self._shove(tx, ty, direction)
        here = self.grid[y][x]
        if not direction.horizontal and here in (Tile.BOX_LEFT, Tile.BOX_RIGHT):
            px = x + 1 if here is Tile.BOX_LEFT else x - 1
            if self.grid[ty][px] is not Tile.EMPTY:
                self._shove(px, ty, direction)
            self.grid[ty][px] = self.grid[y][px]
            self.grid[y][px] = Tile.EMPTY
        self.grid[ty][tx] = self.grid[y][x]
        self.grid[y][x] = Tile.EMPTY

    def step(self, direction: Direction) -> bool:
        """Move the robot one step if it can; return whether it moved."""
        x, y = self.robot
        if not self.can_move(x, y, direction):
            return False
        self._shove(x, y, direction)
        self.robot = (x + direction.dx, y + direction.dy)
        return True

    def run(self, moves: Iterable[Direction]) -> int:
        """Attempt every move in order; return how many actually moved the robot."""
        return sum(1 for direction in moves if self.step(direction))

    def gps_sum(self) -> int:
        """Sum of 100 * row + column over every box (its left edge when wide)."""
        return sum(
            100 * y + x
            for y, row in enumerate(self.grid)
            for x, tile in enumerate(row)
            if tile in (Tile.BOX, Tile.BOX_LEFT)
        )

    def __str__(self) -> str:
        rx, ry = self.robot
        return "\n".join(
            "".join(
                "@" if (x, y) == (rx, ry) else tile.value for x, tile in enumerate(row)
            )
            for y, row in enumerate(self.grid)
        )


def parse_warehouse(text: str, wide: bool = False) -> tuple[Warehouse, list[Direction]]:
    """Read a map, a blank line and the moves; with `wide`, every tile is doubled."""
    parts = text.split("\n\n", 1)
    if len(parts) != 2:
        raise ValueError("expected a map and moves separated by a blank line")
    map_text, moves_text = parts
    lines = map_text.splitlines()
    if not lines or not lines[0]:
        raise ValueError("map is empty")
    width = len(lines[0])
    grid: list[list[Tile]] = []
    robot: tuple[int, int] | None = None
    scale = 2 if wide else 1
    for y, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(f"line {y + 1}: expected {width} tiles, got {len(line)}")
        row: list[Tile] = []
        for x, symbol in enumerate(line):
            if symbol not in _NARROW_TILES:
                raise ValueError(f"line {y + 1}: unknown tile {symbol!r}")
            if symbol == "@":
                if robot is not None:
                    raise ValueError("more than one robot on the map")
                robot = (x * scale, y)
            if wide:
                row.extend(_WIDE_TILES[symbol])
            else:
                row.append(_NARROW_TILES[symbol])
        grid.append(row)
    if robot is None:
        raise ValueError("no robot on the map")
    moves = [Direction.from_symbol(ch) for ch in moves_text if ch != "\n"]
    return Warehouse(grid, robot), moves


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
    for wide in (False, True):
        warehouse, moves = parse_warehouse(text, wide)
        warehouse.run(moves)
        print(warehouse.gps_sum())
    return 0


if __name__ == "__main__":
    sys.exit(main())