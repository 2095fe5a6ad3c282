"""Tuning trouble: find the first run of distinct characters in a signal."""

from __future__ import annotations


def find_marker(signal: str, length: int) -> int:
    """Return the position just after the first window of distinct characters.

    The window that ends on the final character is not examined; 0 is
    returned when no marker is found.
    """
    for start in range(len(signal) - length):
        if len(set(signal[start : start + length])) == length:
            return start + length
    return 0


def _first_line(text: str) -> str | None:
    lines = text.splitlines()
    return lines[0] if lines else None


def part1(text: str) -> int:
    """Start-of-packet marker (4 distinct characters) of the first line."""
    line = _first_line(text)
    return 0 if line is None else find_marker(line, 4)


def part2(text: str) -> int:
    """Start-of-message marker (14 distinct characters) of the first line."""
    line = _first_line(text)
    return 0 if line is None else find_marker(line, 14)