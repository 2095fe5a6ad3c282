"""Ceres search: count XMAS words and X-shaped MAS crosses in a grid."""

from __future__ import annotations

from collections.abc import Sequence

_WORD = "XMAS"
_DIRECTIONS = tuple((dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if dx or dy)
_CROSS = {"MS", "SM"}


def count_xmas(grid: Sequence[str]) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    height = len(grid)
    reach = len(_WORD) - 1
    count = 0
    for y, line in enumerate(grid):
        for x, ch in enumerate(line):
            if ch != _WORD[0]:
                continue
            for dx, dy in _DIRECTIONS:
                if not (0 <= x + reach * dx < len(line) and 0 <= y + reach * dy < height):
                    continue
                if all(grid[y + k * dy][x + k * dx] == _WORD[k] for k in range(1, len(_WORD))):
                    count += 1
    return count


def count_x_mas(grid: Sequence[str]) -> int:
    """Number of 'A' cells with MAS written along both diagonals."""
    height = len(grid)
    count = 0
    for y, line in enumerate(grid):
        if y == 0 or y == height - 1:
            continue
        for x, ch in enumerate(line):
            if ch != "A" or x == 0 or x == len(line) - 1:
                continue
            falling = grid[y - 1][x - 1] + grid[y + 1][x + 1]
            rising = grid[y + 1][x - 1] + grid[y - 1][x + 1]
            if falling in _CROSS and rising in _CROSS:
                count += 1
    return count


def part1(text: str) -> int:
    """XMAS count."""
    return count_xmas(text.splitlines())


def part2(text: str) -> int:
    """X-MAS count."""
    return count_x_mas(text.splitlines())