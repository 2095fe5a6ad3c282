"""Mull it over: add up the products of mul(a,b) instructions in corrupted memory."""

from __future__ import annotations

import re

_MUL = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")
_WINDOW = 12


def _mul_sum(text: str) -> int:
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def part1(text: str) -> int:
    """Sum of all valid mul products."""
    return sum(_mul_sum(line) for line in text.splitlines())


def part2(text: str) -> int:
    """Sum of mul products while enabled by do() and disabled by don't().

    The switches count only when followed by at least one more character on
    the line. Each enabled 'm' adds the products found in the 12 characters
    from it, so a window may see a mul that starts later than its 'm'.
    """
    enabled = True
    total = 0
    for line in text.splitlines():
        size = len(line)
        for index, ch in enumerate(line):
            if ch == "d":
                if index < size - 4 and line.startswith("do()", index):
                    enabled = True
                if index < size - 7 and line.startswith("don't()", index):
                    enabled = False
            if ch == "m" and enabled:
                total += _mul_sum(line[index : index + _WINDOW])
    return total