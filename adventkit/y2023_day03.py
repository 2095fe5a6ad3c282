"""Gear ratios: part numbers next to symbols in an engine schematic."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

_DIGITS = "0123456789"


@dataclass(frozen=True)
class Part:
    """A part number and the box of cells around it (inclusive)."""

    num: int
    x1: int
    y1: int
    x2: int
    y2: int

    def contains(self, x: int, y: int) -> bool:
        """Whether cell (x, y) lies in the box."""
        return self.x1 <= x <= self.x2 and self.y1 <= y <= self.y2


def _numbers(grid: Sequence[str]) -> Iterator[tuple[int, int, int]]:
    """Yield (number, x, y) where x is the cell at which the number closes.

    A number closes at the first non-digit after it, or at the last cell of
    its line when it runs to the end.
    """
    for y, line in enumerate(grid):
        number = 0
        last = len(line) - 1
        for x, ch in enumerate(line):
            is_digit = ch in _DIGITS
            if is_digit:
                number = number * 10 + int(ch)
            if (not is_digit or x == last) and number:
                yield number, x, y
                number = 0


def engine_sum(grid: Sequence[str]) -> int:
    """Sum of the numbers that touch a symbol."""
    total = 0
    for number, x, y in _numbers(grid):
        left = x - len(str(number)) - 1
        # The closing cell counts as a neighbour; at a line's end it is the
        # number's own last digit, so such numbers always count.
        adjacent = grid[y][x] != "." or (left > 0 and grid[y][left] != ".")
        span = range(max(left, 0), x + 1)
        for row in (y - 1, y + 1):
            if 0 <= row < len(grid) and any(grid[row][col] != "." for col in span):
                adjacent = True
        if adjacent:
            total += number
    return total


def read_parts(grid: Sequence[str]) -> list[Part]:
    """Every number with the box of cells around it."""
    return [
        Part(
            num=number,
            x1=max(x - len(str(number)) - 1, 0),
            y1=max(y - 1, 0),
            x2=x,
            y2=y + 1,
        )
        for number, x, y in _numbers(grid)
    ]


def gear_ratio_sum(grid: Sequence[str], parts: Sequence[Part]) -> int:
    """Sum, over every '*' next to two or more parts, of the first two parts' product."""
    total = 0
    for y, line in enumerate(grid):
        for x, ch in enumerate(line):
            if ch != "*":
                continue
            around = [part for part in parts if part.contains(x, y)]
            if len(around) >= 2:
                total += around[0].num * around[1].num
    return total


def part1(text: str) -> int:
    """Sum of part numbers."""
    return engine_sum(text.splitlines())


def part2(text: str) -> int:
    """Sum of gear ratios."""
    grid = text.splitlines()
    return gear_ratio_sum(grid, read_parts(grid))