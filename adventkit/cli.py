"""Command line entry: solve one puzzle part for an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from adventkit import (
    y2022_day01,
    y2022_day02,
    y2022_day03,
    y2022_day04,
    y2022_day06,
    y2022_day07,
    y2022_day08,
    y2022_day09,
    y2022_day10,
    y2022_day11,
    y2023_day01,
    y2023_day02,
    y2023_day03,
    y2023_day04,
    y2023_day05,
    y2024_day01,
    y2024_day02,
    y2024_day03,
    y2024_day04,
    y2024_day05,
    y2024_day06,
    y2024_day07,
    y2024_day08,
)

Solver = Callable[[str], "int | str"]

_PUZZLES: dict[tuple[int, int], tuple[Solver, ...]] = {
    (2022, 1): (y2022_day01.part1,),
    (2022, 2): (y2022_day02.part1,),
    (2022, 3): (y2022_day03.part1,),
    (2022, 4): (y2022_day04.part1,),
    (2022, 6): (y2022_day06.part1, y2022_day06.part2),
    (2022, 7): (y2022_day07.part1, y2022_day07.part2),
    (2022, 8): (y2022_day08.part1, y2022_day08.part2),
    (2022, 9): (y2022_day09.part1, y2022_day09.part2),
    (2022, 10): (y2022_day10.part1, y2022_day10.part2),
    (2022, 11): (y2022_day11.part1, y2022_day11.part2),
    (2023, 1): (y2023_day01.part1, y2023_day01.part2),
    (2023, 2): (y2023_day02.part1, y2023_day02.part2),
    (2023, 3): (y2023_day03.part1, y2023_day03.part2),
    (2023, 4): (y2023_day04.part1, y2023_day04.part2),
    (2023, 5): (y2023_day05.part1, y2023_day05.part2),
    (2024, 1): (y2024_day01.part1, y2024_day01.part2),
    (2024, 2): (y2024_day02.part1, y2024_day02.part2),
    (2024, 3): (y2024_day03.part1, y2024_day03.part2),
    (2024, 4): (y2024_day04.part1, y2024_day04.part2),
    (2024, 5): (y2024_day05.part1, y2024_day05.part2),
    (2024, 6): (y2024_day06.part1, y2024_day06.part2),
    (2024, 7): (y2024_day07.part1, y2024_day07.part2),
    (2024, 8): (y2024_day08.part1, y2024_day08.part2),
}


def solve(year: int, day: int, part: int, text: str) -> int | str:
    """Run the solver for one part of one puzzle on text."""
    parts = _PUZZLES.get((year, day))
    if parts is None:
        raise ValueError(f"no puzzle for {year} day {day}")
    if not 1 <= part <= len(parts):
        raise ValueError(f"{year} day {day} has no part {part}")
    return parts[part - 1](text)


def main(argv: Sequence[str] | None = None) -> int:
    """Read an input file, solve the chosen part and print the answer."""
    parser = argparse.ArgumentParser(prog="adventkit", description="Solve a puzzle part.")
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    parser.add_argument("part", type=int, nargs="?", default=1)
    parser.add_argument("input", nargs="?", default="test.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print(f"adventkit: {exc}", file=sys.stderr)
        return 1
    try:
        result = solve(args.year, args.day, args.part, text)
    except ValueError as exc:
        print(f"adventkit: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())