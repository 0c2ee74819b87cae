"""Plutonian pebbles: counting stones that change every blink."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Sequence


def parse_stones(text: str) -> list[int]:
    """Read space-separated stone numbers."""
    words = text.split()
    if not words:
        raise ValueError("no stones given")
    for word in words:
        if not all(ch in "0123456789" for ch in word):
            raise ValueError(f"not a stone number: {word!r}")
    return [int(word) for word in words]


def transform(value: int) -> tuple[int, ...]:
    """The stones that one stone with this number becomes after a blink."""
    if value == 0:
        return (1,)
    digits = str(value)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (value * 2024,)


def blink(counts: Counter[int]) -> Counter[int]:
    """Apply one blink to a multiset of stones, keyed by number."""
    result: Counter[int] = Counter()
    for value, count in counts.items():
        if count <= 0:
            continue
        for new_value in transform(value):
            result[new_value] += count
    return result


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """Number of stones after blinking the given number of times."""
    if blinks < 0:
        raise ValueError("blinks must not be negative")
    counts = Counter(stones)
    for _ in range(blinks):
        counts = blink(counts)
    return sum(counts.values())


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
    stones = parse_stones(text)
    print(count_stones(stones, 25))
    print(count_stones(stones, 75))
    return 0


if __name__ == "__main__":
    sys.exit(main())