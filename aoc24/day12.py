"""Garden plots: fencing prices by perimeter and by number of sides."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

Cell = tuple[int, int]
Region = frozenset[Cell]

_DIRECTIONS: tuple[Cell, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))

# Each fence direction paired with the direction that runs along it.
_SIDES: tuple[tuple[Cell, Cell], ...] = (
    ((0, -1), (1, 0)),
    ((0, 1), (1, 0)),
    ((-1, 0), (0, 1)),
    ((1, 0), (0, 1)),
)


def parse_garden(text: str) -> tuple[str, ...]:
    """Read a rectangular grid of plant letters."""
    lines = text.splitlines()
    if not lines or not lines[0]:
        raise ValueError("garden is empty")
    width = len(lines[0])
    for number, line in enumerate(lines, start=1):
        if len(line) != width:
            raise ValueError(f"line {number}: expected {width} plots, got {len(line)}")
        if not (line.isascii() and line.isalpha()):
            raise ValueError(f"line {number}: non-letter plot in {line!r}")
    return tuple(lines)


def _adjacent(x: int, y: int) -> Iterator[Cell]:
    for dx, dy in _DIRECTIONS:
        yield x + dx, y + dy


def find_regions(grid: Sequence[str]) -> list[Region]:
    """Connected regions of equal plants, in the order their first plot is met."""
    seen: set[Cell] = set()
    regions: list[Region] = []
    for y, row in enumerate(grid):
        for x, plant in enumerate(row):
            if (x, y) in seen:
                continue
            region = {(x, y)}
            stack = [(x, y)]
            while stack:
                for nx, ny in _adjacent(*stack.pop()):
                    if (nx, ny) in region:
                        continue
                    if 0 <= ny < len(grid) and 0 <= nx < len(grid[ny]) and grid[ny][nx] == plant:
                        region.add((nx, ny))
                        stack.append((nx, ny))
            seen |= region
            regions.append(frozenset(region))
    return regions


def perimeter(region: Iterable[Cell]) -> int:
    """Number of unit fence segments around a region."""
    cells = set(region)
    return sum(
        1 for x, y in cells for neighbour in _adjacent(x, y) if neighbour not in cells
    )


def side_count(region: Iterable[Cell]) -> int:
    """Number of straight fence sides around a region."""
    cells = set(region)
    sides = 0
    for (dx, dy), (ax, ay) in _SIDES:
        for x, y in cells:
            if (x + dx, y + dy) in cells:
                continue
            px, py = x - ax, y - ay
            if (px, py) in cells and (px + dx, py + dy) not in cells:
                continue  # the same side already started at the previous plot
            sides += 1
    return sides


def fencing_price(grid: Sequence[str]) -> int:
    """Sum of area times perimeter over every region."""
    return sum(len(region) * perimeter(region) for region in find_regions(grid))


def discounted_price(grid: Sequence[str]) -> int:
    """Sum of area times number of sides over every region."""
    return sum(len(region) * side_count(region) for region in find_regions(grid))


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
    grid = parse_garden(text)
    print(fencing_price(grid))
    print(discounted_price(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())