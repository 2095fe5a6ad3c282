"""Resonant collinearity: count antinodes made by pairs of antennas."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Antenna:
    """An antenna's frequency and cell."""

    frequency: str
    x: int
    y: int


def find_antennas(grid: Sequence[str]) -> tuple[list[Antenna], set[Antenna]]:
    """Every non-'.' cell as an antenna, in reading order, and as a set."""
    antennas = [
        Antenna(cell, x, y)
        for y, row in enumerate(grid)
        for x, cell in enumerate(row)
        if cell != "."
    ]
    return antennas, set(antennas)


def _is_antinode(x: int, y: int, antennas: Sequence[Antenna], index: set[Antenna]) -> bool:
    for antenna in antennas:
        dx, dy = antenna.x - x, antenna.y - y
        if dx == 0 and dy == 0:
            continue
        if Antenna(antenna.frequency, x + 2 * dx, y + 2 * dy) in index:
            return True
    return False


def count_antinodes(grid: Sequence[str], antennas: Sequence[Antenna], index: set[Antenna]) -> int:
    """Cells twice as far from one antenna as from another of its frequency."""
    return sum(
        _is_antinode(x, y, antennas, index)
        for y, row in enumerate(grid)
        for x, _ in enumerate(row)
    )


def _direction(dx: int, dy: int) -> tuple[int, int]:
    divisor = math.gcd(dx, dy)
    return dx // divisor, dy // divisor


def _on_line(x: int, y: int, antenna: Antenna, antennas: Sequence[Antenna]) -> bool:
    dx, dy = antenna.x - x, antenna.y - y
    if dx == 0 and dy == 0:
        if any(
            other.frequency == antenna.frequency and other.x != antenna.x and other.y != antenna.y
            for other in antennas
        ):
            return True
        raise ValueError(f"antenna {antenna.frequency!r} at ({x}, {y}) has no partner")
    direction = _direction(dx, dy)
    for other in antennas:
        if other.frequency != antenna.frequency:
            continue
        if (other.x, other.y) in ((antenna.x, antenna.y), (x, y)):
            continue
        if _direction(other.x - x, other.y - y) == direction:
            return True
    return False


def count_antinode_lines(grid: Sequence[str], antennas: Sequence[Antenna]) -> int:
    """Cells from which two antennas of one frequency lie in the same direction.

    A cell holding an antenna counts when another antenna of its frequency
    differs from it in both coordinates.
    """
    return sum(
        any(_on_line(x, y, antenna, antennas) for antenna in antennas)
        for y, row in enumerate(grid)
        for x, _ in enumerate(row)
    )


def part1(text: str) -> int:
    """Antinode count."""
    grid = text.splitlines()
    antennas, index = find_antennas(grid)
    return count_antinodes(grid, antennas, index)


def part2(text: str) -> int:
    """Antinode count along whole lines."""
    grid = text.splitlines()
    antennas, _ = find_antennas(grid)
    return count_antinode_lines(grid, antennas)