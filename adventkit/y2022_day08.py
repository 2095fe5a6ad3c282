"""Treetop tree house: visibility and scenic scores in a height grid."""

from __future__ import annotations

Forest = list[list[int]]


def parse_forest(text: str) -> Forest:
    """Parse rows of digit heights."""
    return [[int(ch) for ch in line] for line in text.splitlines() if line]


def _views(forest: Forest, row: int, col: int) -> list[list[int]]:
    line = forest[row]
    column = [r[col] for r in forest]
    return [
        line[:col][::-1],
        line[col + 1 :],
        column[:row][::-1],
        column[row + 1 :],
    ]


def is_visible(forest: Forest, row: int, col: int) -> bool:
    """Whether the tree can be seen from outside the grid in any direction."""
    tree = forest[row][col]
    return any(
        all(height < tree for height in view) for view in _views(forest, row, col)
    )


def scenic_score(forest: Forest, row: int, col: int) -> int:
    """Product of viewing distances in the four directions."""
    tree = forest[row][col]
    score = 1
    for view in _views(forest, row, col):
        distance = 0
        for height in view:
            distance += 1
            if height >= tree:
                break
        score *= distance
    return score


def part1(text: str) -> int:
    """Number of trees visible from outside the grid."""
    forest = parse_forest(text)
    return sum(
        is_visible(forest, r, c)
        for r, line in enumerate(forest)
        for c in range(len(line))
    )


def part2(text: str) -> int:
    """Highest scenic score of any tree."""
    forest = parse_forest(text)
    return max(
        (
            scenic_score(forest, r, c)
            for r, line in enumerate(forest)
            for c in range(len(line))
        ),
        default=0,
    )