"""Historian hysteria: compare two lists of location ids."""

from __future__ import annotations

from collections import Counter


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split lines of "left right" numbers into the left and right lists."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"expected two numbers: {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def part1(text: str) -> int:
    """Total distance between the sorted lists, pair by pair."""
    left, right = parse_lists(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Similarity score: each left number times its count in the right list."""
    left, right = parse_lists(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)