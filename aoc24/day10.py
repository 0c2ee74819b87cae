"""Topographic map trails: trailhead scores and ratings."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

Grid = Sequence[Sequence[int]]


def parse_map(text: str) -> tuple[tuple[int, ...], ...]:
    """Read a rectangular grid of height digits."""
    lines = text.splitlines()
    if not lines or not lines[0]:
        raise ValueError("map is empty")
    width = len(lines[0])
    rows = []
    for number, line in enumerate(lines, start=1):
        if len(line) != width:
            raise ValueError(f"line {number}: expected {width} tiles, got {len(line)}")
        if not all(ch in "0123456789" for ch in line):
            raise ValueError(f"line {number}: non-digit tile in {line!r}")
        rows.append(tuple(int(ch) for ch in line))
    return tuple(rows)


def _check_position(grid: Grid, x: int, y: int) -> None:
    if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
        raise ValueError(f"position ({x}, {y}) is outside the map")


def _neighbours(grid: Grid, x: int, y: int) -> Iterator[tuple[int, int]]:
    for nx, ny in ((x - 1, y), (x, y - 1), (x + 1, y), (x, y + 1)):
        if 0 <= ny < len(grid) and 0 <= nx < len(grid[ny]):
            yield nx, ny


def _uphill(grid: Grid, x: int, y: int) -> Iterator[tuple[int, int]]:
    target = grid[y][x] + 1
    return ((nx, ny) for nx, ny in _neighbours(grid, x, y) if grid[ny][nx] == target)


def trailhead_score(grid: Grid, x: int, y: int) -> int:
    """Number of distinct height-9 tiles reachable from the trailhead at (x, y)."""
    _check_position(grid, x, y)
    if grid[y][x] != 0:
        raise ValueError(f"position ({x}, {y}) is not a trailhead")
    frontier = {(x, y)}
    for _ in range(9):
        frontier = {step for here in frontier for step in _uphill(grid, *here)}
    return len(frontier)


def trailhead_rating(grid: Grid, x: int, y: int) -> int:
    """Number of distinct uphill trails from (x, y) that end at height 9."""
    _check_position(grid, x, y)
    if grid[y][x] == 9:
        return 1
    return sum(trailhead_rating(grid, nx, ny) for nx, ny in _uphill(grid, x, y))


def _trailheads(grid: Grid) -> Iterator[tuple[int, int]]:
    for y, row in enumerate(grid):
        for x, height in enumerate(row):
            if height == 0:
                yield x, y


def total_score(grid: Grid) -> int:
    """Sum of the scores of every trailhead."""
    return sum(trailhead_score(grid, x, y) for x, y in _trailheads(grid))


def total_rating(grid: Grid) -> int:
    """Sum of the ratings of every trailhead."""
    return sum(trailhead_rating(grid, x, y) for x, y in _trailheads(grid))


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
    grid = parse_map(text)
    print(total_score(grid))
    print(total_rating(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())