"""Bridge repair: find equations that operators can make true."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product

MAX_OPERATORS = 19


def _concat(left: int, right: int) -> int:
    try:
        return int(f"{left}{right}")
    except ValueError:
        return 0


def _apply(operator: int, left: int, right: int) -> int:
    if operator == 0:
        return left + right
    if operator == 1:
        return left * right
    return _concat(left, right)


def is_solvable(numbers: Sequence[int], base: int, target: int) -> bool:
    """Whether some choice of operators, applied left to right, gives target.

    Operators are numbered below ``base``: 0 adds, 1 multiplies and any
    higher one concatenates digits.
    """
    if not numbers:
        raise ValueError("no numbers")
    if base < 2:
        raise ValueError("base must be at least 2")
    if len(numbers) - 1 > MAX_OPERATORS:
        raise ValueError("too many numbers")
    first, rest = numbers[0], numbers[1:]
    for operators in product(range(base), repeat=len(rest)):
        result = first
        for operator, number in zip(operators, rest):
            result = _apply(operator, result, number)
        if result == target:
            return True
    return False


def _calibration(text: str, base: int) -> int:
    total = 0
    for line in text.splitlines():
        if not line.strip():
            continue
        head, sep, tail = line.partition(": ")
        if not sep:
            raise ValueError(f"malformed equation: {line!r}")
        target = int(head)
        if is_solvable([int(value) for value in tail.split()], base, target):
            total += target
    return total


def part1(text: str) -> int:
    """Sum of targets reachable with addition and multiplication."""
    return _calibration(text, 2)


def part2(text: str) -> int:
    """Sum of targets reachable with concatenation allowed too."""
    return _calibration(text, 3)