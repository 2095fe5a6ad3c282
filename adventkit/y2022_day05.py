"""Supply stacks: move crates between stacks and read the top of each.

Stacks are strings listed bottom to top. A move lifts the top crates of a
stack all at once, so they keep their order on the target stack.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import NamedTuple

_NUMBER = re.compile(r"[0-9]+")

_EXAMPLE_STACKS = ("ZN", "MCD", "P")

_EXAMPLE_MOVES = (
    "move 1 from 2 to 1",
    "move 3 from 1 to 3",
    "move 2 from 2 to 1",
    "move 1 from 1 to 2",
)

_STACKS = (
    "FCPGQR",
    "WTCP",
    "BHPMC",
    "LTQSMPR",
    "PHJZVGN",
    "DPJ",
    "LGPZFJTR",
    "NLHCFPTJ",
    "GVZQHTCW",
)

# Moves as "count source target" triples, ten per line.
_MOVES = """\
2 2 8  2 1 6  8 7 1  7 5 4  1 6 4  1 6 3  6 3 5  9 8 1  3 6 7  14 4 1
6 1 7  16 1 9  6 1 4  1 8 6  4 1 5  11 9 7  2 1 8  1 6 7  1 8 7  1 8 3
7 4 3  14 7 6  8 6 9  19 9 2  1 1 2  2 9 7  9 7 8  2 2 8  16 2 9  4 8 2
1 7 9  3 9 6  3 3 6  11 9 2  7 5 3  2 5 9  6 6 4  1 6 4  4 6 8  5 9 1
4 1 7  3 2 6  3 4 1  1 4 1  2 1 3  4 3 7  1 5 2  3 1 6  15 2 5  3 6 3
13 3 8  2 4 2  9 5 4  2 2 5  5 7 5  10 8 6  1 2 5  10 4 6  4 8 6  3 7 1
3 1 9  1 2 1  8 5 2  3 6 9  6 8 5  6 9 2  1 1 9  10 2 1  4 8 5  10 5 9
11 9 7  5 7 9  1 9 2  3 2 9  2 2 8  4 9 5  4 1 9  5 5 2  5 1 4  21 6 9
3 2 9  2 8 1  25 9 6  4 5 7  1 4 6  6 6 4  3 4 6  7 7 3  4 9 1  3 7 8
2 9 8  2 2 8  4 1 3  9 6 2  13 6 4  13 4 5  1 5 8  2 2 3  6 5 3  19 3 6
1 4 9  2 8 1  5 2 3  5 1 9  7 5 4  1 8 3  1 2 6  8 6 3  1 9 8  11 4 2
1 4 6  1 2 8  5 3 4  4 9 6  1 6 8  9 3 1  7 2 9  1 2 6  3 1 8  2 2 3
3 9 7  3 4 7  2 4 3  2 3 5  8 6 4  6 8 6  2 9 4  5 8 6  3 7 5  1 5 8
1 8 2  1 5 1  11 4 9  2 6 3  2 2 4  6 1 2  6 2 1  3 7 3  2 4 7  4 6 5
7 3 7  5 9 6  22 6 8  2 6 5  2 8 4  14 8 7  11 7 4  3 8 1  9 7 8  10 1 4
1 7 4  4 8 7  6 4 9  7 4 1  3 4 8  1 5 8  8 5 3  4 3 9  7 8 9  3 8 3
2 8 2  7 9 1  2 2 8  8 9 1  8 1 7  7 1 5  7 7 1  11 9 8  9 8 5  2 8 5
3 1 8  2 3 7  6 4 1  6 1 6  5 7 1  2 4 6  1 3 5  4 7 4  2 8 7  10 5 6
9 6 1  8 1 6  1 7 2  9 6 4  2 4 3  3 8 1  1 2 4  4 4 1  7 4 3  3 3 2
1 7 6  9 6 7  6 7 4  2 7 2  6 4 7  2 2 9  1 2 4  1 7 4  4 7 6  4 5 4
1 2 5  1 7 5  1 2 6  6 4 3  9 3 9  4 6 2  7 3 8  22 1 7  1 1 7  2 8 3
4 5 6  2 3 2  6 2 8  3 8 6  1 4 8  1 1 8  8 6 7  7 8 9  22 7 4  3 5 6
1 8 1  2 8 2  3 6 4  1 1 3  15 9 1  5 1 5  3 7 6  5 5 6  4 4 3  6 6 9
7 7 6  5 6 7  4 1 9  3 7 4  2 9 7  5 3 5  3 6 3  5 4 6  10 9 5  1 2 9
1 3 5  1 2 9  3 1 6  2 9 2  7 6 5  15 4 9  2 4 5  1 3 4  9 9 1  1 9 2
2 9 4  11 5 4  1 9 3  1 6 8  4 7 8  4 8 9  15 4 7  1 6 7  1 3 7  6 9 6
1 3 7  1 2 1  1 9 5  3 6 1  11 1 4  6 5 1  2 2 5  1 5 7  2 6 1  7 5 7
3 5 6  4 6 1  11 4 3  1 8 5  23 7 6  18 6 9  1 5 9  1 4 2  3 3 7  3 3 8
17 1 8  5 6 5  2 7 1  20 8 2  4 7 2  3 9 5  7 9 7  6 9 2  1 1 8  3 9 4
7 5 2  6 7 1  1 1 8  3 2 6  1 7 6  2 8 9  35 2 4  3 3 2  1 5 7  2 3 9
3 1 6  2 2 1  32 4 7  3 4 8  3 9 5  1 1 2  21 7 5  2 2 1  3 1 2  15 5 1
3 6 7  3 4 6  3 8 5  1 9 3  8 7 2  6 5 2  9 1 6  4 7 1  2 5 4  2 4 3
3 5 4  17 2 7  3 3 5  2 4 8  1 4 3  5 7 9  1 3 6  4 1 7  4 6 7  2 5 2
1 1 3  10 6 4  1 3 7  20 7 8  8 4 8  1 2 8  4 9 1  3 7 4  2 4 9  2 6 3
1 2 8  1 7 6  1 9 5  3 5 9  4 9 2  1 4 5  1 5 3  3 2 4  1 9 7  1 2 1
1 7 1  11 1 2  3 1 7  25 8 5  1 6 3  1 6 2  7 8 2  9 2 8  2 4 7  2 5 7
2 5 2  5 5 1  7 5 1  2 4 9  3 5 6  1 1 8  1 5 6  1 4 7  1 9 2  3 5 2
2 6 9  3 9 8  1 5 4  3 3 9  10 1 5  4 2 8  2 6 1  3 9 7  1 1 9  1 4 3
1 9 2  9 8 2  2 3 7  2 7 6  3 5 6  4 8 6  4 8 3  4 3 2  4 6 8  1 7 9
2 1 8  2 8 3  1 9 2  13 2 4  6 5 7  2 5 7  10 2 4  11 7 8  1 6 4  4 6 7
24 4 9  11 7 4  1 3 8  1 3 5  4 4 2  5 4 2  9 2 5  4 9 5  1 5 1  2 5 7
2 2 5  1 1 7  2 2 3  18 9 6  9 8 1  2 9 5  5 1 8  2 8 7  4 8 4  5 8 7
10 5 1  10 7 4  4 5 8  14 1 9  6 9 8  1 5 1  12 6 9  4 6 8  11 8 5  1 6 1
19 9 7  2 3 5  13 7 5  3 7 1  4 8 9  2 7 6  7 4 8  5 8 1  1 1 3  1 7 2
6 1 6  1 2 5  1 8 1  1 8 2  2 4 8  5 6 1  2 4 7  2 9 6  1 6 5  4 6 2
1 9 5  2 4 5  4 2 4  2 8 3  3 3 2  4 1 2  2 4 7  4 2 3  4 1 2  13 5 1
1 6 2  1 1 8  15 5 2  4 3 1  5 4 3  1 3 6  1 8 7  1 9 8  1 7 8  3 3 2
1 8 2  1 3 7  13 1 4  3 5 3  1 1 2  1 8 5  5 7 2  1 6 5  2 3 4  10 2 5
1 9 5  3 1 8  3 8 3  11 4 5  12 2 8  4 4 7  10 8 5  2 8 1  1 7 3  1 7 9
5 3 7  1 9 4  7 7 6  13 5 8  6 6 7  5 7 4  1 6 4  2 4 9  1 7 9  3 4 3
1 3 6  4 5 7
"""


class Move(NamedTuple):
    """A move of ``count`` crates between two 1-based stack numbers."""

    count: int
    source: int
    target: int


def puzzle_input() -> tuple[list[str], list[str]]:
    """Return the bundled stacks and move lines."""
    numbers = [int(value) for value in _MOVES.split()]
    triples = zip(*[iter(numbers)] * 3)
    moves = [f"move {count} from {source} to {target}" for count, source, target in triples]
    return list(_STACKS), moves


def example_input() -> tuple[list[str], list[str]]:
    """Return the short worked example's stacks and move lines."""
    return list(_EXAMPLE_STACKS), list(_EXAMPLE_MOVES)


def parse_move(line: str) -> Move:
    """Parse "move N from A to B"."""
    numbers = _NUMBER.findall(line)
    if len(numbers) < 3:
        raise ValueError(f"malformed move: {line!r}")
    count, source, target = (int(number) for number in numbers[:3])
    return Move(count, source, target)


def rearrange(stacks: Iterable[str], moves: Iterable[str]) -> list[str]:
    """Apply the move lines to the stacks and return the new stacks."""
    result = list(stacks)
    for line in moves:
        move = parse_move(line)
        for number in (move.source, move.target):
            if not 1 <= number <= len(result):
                raise ValueError(f"no stack {number} in move {line!r}")
        source = result[move.source - 1]
        if move.count > len(source):
            raise ValueError(f"stack {move.source} holds fewer than {move.count} crates")
        cut = len(source) - move.count
        result[move.source - 1] = source[:cut]
        result[move.target - 1] += source[cut:]
    return result


def top_crates(stacks: Iterable[str], moves: Iterable[str]) -> str:
    """The crate on top of each stack after all moves."""
    final = rearrange(stacks, moves)
    if any(not stack for stack in final):
        raise ValueError("a stack is empty after the moves")
    return "".join(stack[-1] for stack in final)