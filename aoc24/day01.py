"""Historian location lists: total distance and similarity score."""

from __future__ import annotations

import re
import sys
from collections import Counter
from collections.abc import Sequence

_LINE = re.compile(r"(\d{1,5}) +(\d{1,5})")


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split lines of two space-separated numbers into a left and a right list."""
    left: list[int] = []
    right: list[int] = []
    for number, line in enumerate(text.splitlines(), start=1):
        match = _LINE.fullmatch(line)
        if match is None:
            raise ValueError(f"line {number}: expected two numbers, got {line!r}")
        left.append(int(match.group(1)))
        right.append(int(match.group(2)))
    return left, right


def _check_lengths(left: Sequence[int], right: Sequence[int]) -> None:
    if len(left) != len(right):
        raise ValueError("lists must have the same length")


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of distances between the lists when both are paired in sorted order."""
    _check_lengths(left, right)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of each left number times how often it appears in the right list."""
    _check_lengths(left, right)
    occurrences = Counter(right)
    return sum(value * occurrences[value] for value in left)


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
    left, right = parse_lists(text)
    print(total_distance(left, right))
    print(similarity_score(left, right))
    return 0


if __name__ == "__main__":
    sys.exit(main())