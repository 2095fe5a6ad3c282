"""Trebuchet: calibration values from the first and last digit of each line."""

from __future__ import annotations

_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def _combine(digits: list[int]) -> int:
    # A line without digits contributes -11, as first and last default to -1.
    first = digits[0] if digits else -1
    last = digits[-1] if digits else -1
    return first * 10 + last


def calibration_value(line: str) -> int:
    """Two-digit number from the first and last digit of the line."""
    return _combine([int(ch) for ch in line if ch.isdigit() and ch.isascii()])


def _digits_and_words(line: str) -> list[int]:
    found = []
    for index, ch in enumerate(line):
        if ch.isascii() and ch.isdigit():
            found.append(int(ch))
            continue
        for word, value in _WORDS.items():
            if line.startswith(word, index):
                found.append(value)
                break
    return found


def calibration_value_words(line: str) -> int:
    """Like calibration_value, but spelled-out digits count as well."""
    return _combine(_digits_and_words(line))


def part1(text: str) -> int:
    """Sum of calibration values using digits only."""
    return sum(calibration_value(line) for line in text.splitlines())


def part2(text: str) -> int:
    """Sum of calibration values counting spelled-out digits."""
    return sum(calibration_value_words(line) for line in text.splitlines())