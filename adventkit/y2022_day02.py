"""Rock paper scissors: score a strategy guide that names the wanted outcome.

Each round is written as "<opponent> <outcome>": the opponent plays A (rock),
B (paper) or C (scissors); X means the round must be lost, Y drawn and Z won.
A round scores the value of the shape played (rock 1, paper 2, scissors 3)
plus the outcome (loss 0, draw 3, win 6).
"""

from __future__ import annotations

from collections.abc import Iterable

_EXAMPLE = ("A Y", "B X", "C Z")

_OUTCOME_POINTS = {"X": 0, "Y": 3, "Z": 6}

# Shape value to play against each opponent move for each outcome.
_SHAPE_POINTS = {
    ("A", 0): 3,
    ("A", 3): 1,
    ("A", 6): 2,
    ("B", 0): 1,
    ("B", 3): 2,
    ("B", 6): 3,
    ("C", 0): 2,
    ("C", 3): 3,
    ("C", 6): 1,
}

# One round per pair: the opponent's move followed by the wanted outcome.
_ROUNDS = """\
BX BY AY BY BY AY AX AY CX AY AY BY BZ AY BZ BZ BZ BY AZ AY
BX AZ AZ AZ BZ AY AZ CX BZ AY BZ BY AY AY AY AY AZ CX CZ AY
AY AX CX BZ BY BY AY CX AY BZ BZ AY BY BZ AY CX BY AY AY AY
AY BZ BX AY BY AZ BY AY CX AZ CZ BZ BY AY AY BZ BY BY BY BZ
AX AY AY BZ CX AY BY CZ AY CY AY AY CX AX AZ AY BZ AZ BZ AY
BZ AY AZ CX CX BY AY AY AY AX BY BY AY AY AZ AY AZ BZ AY BZ
AZ CZ BY AY BZ AY BZ AY AY AX BY AZ CZ AY BZ AY AY AY BY BZ
BX CX BZ BY CX AX AY BX CX BY AZ AZ AY BZ BY CZ BZ AY BZ CY
BY AX AX CX BX AY CX BZ AY AZ BY BY BY CX AY AY BX CY AX BY
BY AY AY BZ BX AX CX BY BY BZ BY BX BZ AY AY AX BY AY AY BZ
AY CX BY BZ CZ BY AY AZ BY AY BZ CY AY AY AY BY AZ BZ AY CX
BY BZ AY AZ AY BY BZ AX BY AY AY BY AY AY CZ BZ CX BZ AY BY
BY AX AY CX BZ BY AX BZ BY BZ AZ AX AY AY BY AX BY BY BZ BY
BY BY AY AZ AX AX CZ BY AZ AY AY AX BY BZ CX AY BY CX BZ AY
BZ BZ BY AZ CZ BY AY BY AY BX AX BX BZ AY BY BX BY BZ AZ BY
CZ BZ AY BZ CX BY BZ BZ AY AZ AZ BY CY AY AY AX AX AY BY BY
BZ AX BZ BY BZ CZ AY CX CX BZ BZ BY AY AY AY BZ BY AX BZ BY
BX BZ BZ AZ BY BZ AY BX AY AY AY BY AY AZ AY AY CX AY BY BY
AY BZ BX AY BY AY AX CX BZ AY BZ CX BZ AX AZ AX BZ BY AY AZ
CZ BZ AY AZ AY AY BZ BZ AX AY AX BZ AY CX BY AX BY BY BY AY
AZ BY AY BZ BZ BZ BZ AX AX AX BX CY CX AZ BX BY AZ AX AY AY
AY BY AY BZ BY AY AY AY BZ BY BZ CX BZ BZ AZ BY AY AY BZ AY
BX AX AY AY AY CX BY BY BY CY AY AY AY BZ BZ AX BY BY BY BZ
AZ BX AY AX BZ AY BZ BY AZ BY CX AY CX BY CX CX BY BY BZ BY
AY CY AX BY BY BZ BY BX BZ BY BX BY BZ AY BX BZ BZ BX BZ AY
CX AY CY BZ AX AY AX CX AZ AY AZ AY CY BZ AY BY BY BY BY AY
CZ BY CY BY BX AZ AY AZ AY BZ BY BY AZ BY AY BZ CZ AY AY BZ
BY AX AY BZ AZ BY AZ AX BZ BZ AY AX AY BX BY BZ BY CZ BY CX
AZ CX BY AY BY CZ AY CX CX AY AZ BY AY BZ BZ AZ BX BY CX AY
BY BZ AZ BY AX BZ AX AX BX BY BY BY CX CZ AY BY AY AX BZ AX
AY BY BY CY AY BZ AY BX BZ AY AY BY AX BY BZ AY AX CY BZ BY
BZ AY BY AX BZ AZ BZ BY BY CY BY BY AY BZ AY AY BZ AX AZ BY
AY AY AY BZ BX CX AY BY CZ AY BY AX AY AY AZ BY AY AY BY BZ
AY AZ BY AZ AY AX BY CX BZ AY AY BY BX BZ AY CX BY AY BY BZ
CX AX BZ AY AY AY AY BZ BZ BY BZ AY CX AY BY BZ CX CZ BZ BZ
AX BZ BZ AY AY AY BY BY CY CZ AY BY BZ BZ CX CZ AY AY AZ AY
BY AY AY BZ AY BZ AX BY BZ BY BY CX CX AY BZ BY BY AZ BZ BY
AY BZ AY BX BZ AY AY BZ BZ CX AX BY BY AY CX AZ BZ AZ AX AY
AX AY AY CX CX BZ BY CY AY AY CX AX CX AY BY BY CX AX AY BZ
CX AY BY AY AX BY AX BY BZ AY BZ AY AX BZ AZ AY BZ BY AX AY
AY BY CZ AY AY BZ BY BY BY AY CZ CY AX BY BY BZ CY BX BZ AY
AY BZ BZ BZ BY BY BZ CY BZ BY BZ AX AY CX BY BZ BZ AY AY AY
BY AY AY AY BZ AY BZ BZ BX BY BY AY BY BY AY AX BZ AY BZ CX
AY AY BZ BZ CX CZ AY BZ CZ BY BY BZ AZ AY AY BY CY AY AY BZ
BZ AX AY BY AY AY AX AX BZ CY BY AY CX BY BY CZ BY AZ AY AX
CX AY AY BZ AX BZ CX CX AY BZ BY AY AX CX BZ BZ BY AY BZ CY
AY BY AY CX BZ CX AY BY AZ AY BX BZ CZ BY BY BZ CZ AX BZ AY
AY BZ AY BZ BZ BY BY BX AY AX BY BY AY AY BZ AY AX CX BZ BY
AY BZ BY BZ BZ BY AY CY AX BY AY BZ BY BZ AY CZ BX CZ BX BY
AY CX AY AY AX CX AZ BY AX AZ BY AX BY AX AY BY AY AY CX CX
CY BY CZ BY BZ CZ BY AZ AY AX AX AZ AY AZ BZ BX BY BY BZ AY
AY BY AX AY AY BZ CX CX BY AY CX CX AX CX AY AZ AZ CX AY BZ
BY BZ CX BZ AY CY CX BY CZ AX CX CX AX BY AX BZ BY AZ BY AX
AY BZ BY CZ BY BY BZ AX AZ BY BY CZ AY CX BZ CY BZ AY BY BZ
AY AY BZ AZ AZ CX BY AY AY BZ BY AX AZ BZ CZ AY BY BX CX AY
BY CZ AZ CX CX AY BY BX BY AX AX AX AZ AX BZ BZ AZ AZ AY BY
BZ AZ BZ BZ AY BY AY AY AY CX BY CX CX BZ CY AX BY BX CX BX
AZ CX CX BY AY BY BY BY BX BY BY AY BY BX BY BZ AZ AY AY BZ
AY BZ AY AY AY AZ BY AX BZ AY BY AX BZ BZ AY BY BY BZ AY BY
BY AY AY AZ CY BZ BY AX AY BZ CX BZ CX CX BZ BY CX AZ AZ CY
AY BY AZ AY BY AY AZ AY AY CX BY BY BY AX CZ BZ AX AY AZ AY
BY AY BZ BY BZ CX BY BZ AZ BY BY BZ CX AY BY AZ BY BZ BZ BY
AX AY AY BY BZ BY BZ AY CY AY BZ AY BZ AX AY AY CY CX BY AZ
BZ BZ BY BZ CZ CX AY BY BY BY BY BZ BZ BY AX AY BY AY AX AY
BZ CZ BY AY AY AY CX AY BZ CZ BY BZ AZ AX AY AY AY AY BZ BZ
BZ BZ AX BY BY BY BY BY BZ AX BY BY BY CY AY AY BZ AX CY AY
AY AY BY BZ AY BY BY AY BY AY AX AY CZ BZ BY AY BY BY AZ CX
BY BZ CY AY AY BX BY AY CZ BY BY AX AY AZ AY CY AY BX AY BZ
BY BZ AY AY BY BX BY BZ BY BX AY CZ CX AY BZ AX CZ BY BY AY
AY BZ BZ AX AX CX AX CX BY BY BY AY BY BX BZ AY AX AY BZ AX
AZ BY AY AY BZ BX BZ CZ BZ AY BZ AX AY AY BY BZ BY BX BY AY
AX BY AX CX CX AX AY AY AX BY AX BY AX BZ AY CX BY AY BZ AY
BY AX AX AY BZ BX CY BZ CY AY AY BZ CX BY BZ BZ CZ BZ CY AZ
CX AY BZ AX BZ AY AY BZ AZ AY BZ BZ BZ BX AZ BY BZ BZ AY BY
AZ BZ BY BZ BY BY BZ AY BY BX AY BY BY BZ BX AZ BZ AY BY CX
AY BZ BY AY CX BZ AY CX AX AY BZ AZ AY BX AY CX AY BY BY BZ
BX AZ BY AY BZ AY CY AZ AY AY BY BZ AY BY AY AY BZ BY CZ AY
BY AZ AX CX AY BZ BZ CX AY BY AY AX AY AX AX CX BY AY AY BY
AZ CY AY AX BZ AY AY AY BY CX AY CZ AY CY CX BY BY CX CZ BZ
AY AY BY BY AY CX AX BX BY CX BY CZ BZ AY BY BZ BX AY AY BY
AY BZ BZ BZ AY BY BX BZ AZ BZ AX CY BZ BY CX BY AZ AY BZ AY
AZ AY AY BX CX BY BX BX CX AY BY BY AZ BZ CX BY BY AY AY BZ
AY AX AX AZ BY AX AY CZ AY AX BX AY BY AY BX AY AY AY BY CX
AY AY BZ CX AX AY AY AY AY CX AZ CX BY BY AX CX BZ BY BZ AY
BY AY BY AY BZ CZ BZ AZ AX AZ AY BY BZ AY BZ AZ AY BY BY BZ
AY AY CX CX CZ AY BZ AY AX BY AX BZ AY BZ BY BY BZ AY BY AY
BZ AY CX AX AY BY CX AY CY BZ AY BY AY AY AY AY BZ BZ AZ BZ
AX AX CX BX AY AY AX CZ BZ AZ BY BY AY AX BZ AY AY BY BY BY
AX AX AX AX AX AX BY CX AY CX AX BZ CX BY AX BZ AY BY BY BZ
BY BX BZ CX CX AY AX BZ BY BZ CX AY CZ CX CZ BY BZ BZ BY AY
BX AY BY BZ BY AY BZ AX BY CX BY BY BY AX CX CX CZ AY AY BX
BZ AX BZ AX BZ BZ BZ BY BY AZ CZ BZ BY BZ BZ CX BY CY AY CX
AZ BZ BZ AX BY AZ BY BZ AX CY AY AY BY AY AX AZ BZ CZ AY BY
BZ BY BY BZ BX AX CX CX AY AX AY AY AY AX BX CX BY BZ AX AY
BY AX AY AY AY BY AY BZ BY CZ AY AZ CX BZ BX CZ AY AZ AY BZ
BZ CX BZ CX BY CX BY AZ BY AY CZ BY BY BX BX AX BY BY BZ AX
BY BZ BY BZ AY BY BZ BY CZ AY CY CZ AY BX CX CX BZ CX AZ CY
BZ BZ CX CZ AY BX AZ CY AY BY BY AY AZ BZ BX AY BX AZ BZ BX
AX AY BY BY BZ CX BZ BZ AY CZ BY AY CY BZ BZ BY AY CZ BY BY
AY AZ BZ AY CY AY AY AY AY CY BY BZ AY BY AX BY BZ AY BY BY
AZ BY CX BX CX BY AX AZ BZ BZ AZ AZ BX AZ AX BZ BY BY BZ BY
BY BZ BY BY AY BZ BY AY AY BY AY AY AY CY BY AX AY BZ BY BY
CZ AY CX CX AZ BZ BY BZ AX BY AY AX BY BZ BZ AX AX AY BZ AY
CX AY CX AY CX BY BZ AZ CZ BY BY BZ AY AY CX BZ BZ BZ AX AX
BZ BY CZ AY BY AX CY BY BY BY BY BZ BZ AY AY AY BZ BZ AX AY
CZ BZ CZ AX CZ BZ BZ AZ AZ AY AY AY AX CX BZ AY BY AX BZ BZ
BY BY BY AY BY CX AY AY BZ BZ AZ AZ AX BZ BZ BY CX CX AY BY
AX BY BY BX BY BY BZ BY BZ BX AY AX BY BZ AX AY BZ BZ BZ AY
AY BZ AY BY BZ AY BZ AY CX BY AX AY BY BY BY BZ AY BZ AZ BZ
AY BZ BZ AY BY AZ CX AY AY BZ CZ BX BZ AY CY BZ BY BY AX BY
AX AY BY AY BZ AY AX CX AY BZ CZ AY BY BY BY BY CX AZ BY BZ
BX AY BX AY AY BY AZ BY BY CX CX BY CX BY CZ CY BY AX AY CX
BY BZ CX BY AY BY BZ AY BZ CX AY BY BZ AZ BX BY BZ BY AY AY
BX BY BX BY CX AY AX AZ AY BZ CY CX BY BZ AY BY BZ AY AY BY
BZ BY AY BX AX AY BY AY AY AY BY AY BY AX CX AY AY BY BY BY
CY CX BZ BX AZ BY AX BY BZ BZ AY BY AX BY CX BZ AX AY BY BZ
AY BX AY AY CZ CZ CY AY BZ AY AX AY AY CX BX AX AY BZ BY BZ
BY CY BZ BY BY AY BZ BZ BY BZ BZ BX CX AY AY BX CX BZ BY AY
BY BZ AY BY BY BZ AX BY BZ BZ AY BZ BZ BZ CX CX BZ BY BY BZ
BX BY CY AY AX AY AZ CX AZ BZ AY BY AY BY AX BY BX AX CZ AX
AY AY CY BY AX AX BY CY BZ BZ BY AY AX AY AY AZ AX AY AY AY
BZ CX AX CX AY AY BY BY AX BY CY BY AZ BY BZ CX AX BY AZ BZ
BY BY BY BZ BY BY BY AX AY BZ CX AY AY BY BZ CX AX AY BX BY
AY AZ AX AZ AY CZ AY BY BY BZ CX BZ AZ BY BZ BY AY AY CZ AY
BZ BY BY AX BY AY BY AY AY CX AY BY AY CX BX AY BZ AY AY CZ
"""


def puzzle_input() -> list[str]:
    """Return the bundled strategy guide, one "X Y" round per entry."""
    return [f"{pair[0]} {pair[1]}" for pair in _ROUNDS.split()]


def example_input() -> list[str]:
    """Return the short worked example."""
    return list(_EXAMPLE)


def round_score(line: str) -> int:
    """Score one round written as "<opponent> <outcome>"."""
    if len(line) < 3:
        raise ValueError(f"malformed round: {line!r}")
    opponent, wanted = line[0], line[2]
    try:
        outcome = _OUTCOME_POINTS[wanted]
        shape = _SHAPE_POINTS[(opponent, outcome)]
    except KeyError:
        raise ValueError(f"malformed round: {line!r}") from None
    return shape + outcome


def total_score(lines: Iterable[str]) -> int:
    """Sum the scores of all rounds."""
    return sum(round_score(line) for line in lines)


def part1(text: str) -> int:
    """Total score of the rounds in text, one per line; blank lines are skipped."""
    return total_score(line for line in text.splitlines() if line.strip())