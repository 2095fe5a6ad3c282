"""Red-nosed reports: find level sequences that change safely."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def check_report(levels: Sequence[int]) -> tuple[bool, int]:
    """Return (safe, problem).

    A report is safe when it moves in one direction, as set by its first two
    levels, by steps of 1 to 3. ``problem`` is the index of the level after
    the first bad step, or 0 for a safe report.
    """
    if len(levels) < 2:
        raise ValueError("a report needs at least two levels")
    ascending = levels[0] < levels[1]
    for index, (current, following) in enumerate(zip(levels, levels[1:]), start=1):
        wrong_way = current > following if ascending else current < following
        if wrong_way or not 1 <= abs(current - following) <= 3:
            return False, index
    return True, 0


def _dampened_safe(levels: Sequence[int], problem: int) -> bool:
    levels = list(levels)
    candidates = (
        levels[1:],
        levels[: problem - 1] + levels[problem:],
        levels[:problem] + levels[problem + 1 :],
    )
    return any(check_report(candidate)[0] for candidate in candidates)


def count_safe(reports: Iterable[Sequence[int]], dampener: bool) -> int:
    """Number of safe reports.

    With the dampener, an unsafe report also counts when dropping the first
    level, or one of the two levels around its problem, makes it safe.
    """
    total = 0
    for levels in reports:
        safe, problem = check_report(levels)
        if safe or (dampener and _dampened_safe(levels, problem)):
            total += 1
    return total


def parse_reports(text: str) -> list[list[int]]:
    """One list of levels per non-blank line."""
    return [[int(value) for value in line.split()] for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    """Safe reports."""
    return count_safe(parse_reports(text), False)


def part2(text: str) -> int:
    """Safe reports with the problem dampener."""
    return count_safe(parse_reports(text), True)