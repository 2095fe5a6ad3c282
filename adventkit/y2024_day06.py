"""Guard gallivant: follow a patrolling guard and find where to trap it."""

from __future__ import annotations

from dataclasses import dataclass

EDGE = "E"
WALL = "#"
VISITED = "X"

_AHEAD = {"n": (0, -1), "e": (1, 0), "s": (0, 1), "w": (-1, 0)}
_TURN_RIGHT = {"n": "e", "e": "s", "s": "w", "w": "n"}

Grid = list[list[str]]


@dataclass(frozen=True)
class Guard:
    """The guard's cell in the padded grid and the way it faces (n, e, s, w)."""

    x: int
    y: int
    facing: str = "n"


def parse_lab(text: str) -> tuple[Guard, Grid]:
    """Read the map, framed by a border of edge cells, and the guard's start."""
    grid: Grid = []
    guard = None
    for line in text.splitlines():
        if not grid:
            grid.append(list(EDGE * (len(line) + 2)))
        grid.append(list(EDGE + line + EDGE))
        column = line.find("^")
        if column >= 0:
            guard = Guard(column + 1, len(grid) - 1)
    if guard is None:
        raise ValueError("no guard (^) on the map")
    grid.append(list(EDGE * len(grid[0])))
    return guard, grid


def patrol(guard: Guard, grid: Grid) -> bool:
    """Walk the guard, marking cells visited in grid; True if it loops forever."""
    x, y, facing = guard.x, guard.y, guard.facing
    grid[y][x] = VISITED
    seen: set[tuple[int, int, str]] = set()
    while True:
        seen.add((x, y, facing))
        dx, dy = _AHEAD[facing]
        ahead = grid[y + dy][x + dx]
        if ahead == EDGE:
            return False
        if ahead == WALL:
            facing = _TURN_RIGHT[facing]
        if ahead in (".", VISITED):
            x += dx
            y += dy
            grid[y][x] = VISITED
        if (x, y, facing) in seen:
            return True


def visited_count(grid: Grid) -> int:
    """Number of cells marked visited."""
    return sum(row.count(VISITED) for row in grid)


def _copy(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def part1(text: str) -> int:
    """Cells the guard visits before leaving the map."""
    guard, grid = parse_lab(text)
    patrol(guard, grid)
    return visited_count(grid)


def part2(text: str) -> int:
    """Cells on the guard's path where a new obstacle traps it in a loop."""
    guard, original = parse_lab(text)
    walked = _copy(original)
    patrol(guard, walked)
    candidates = [
        (x, y) for y, row in enumerate(walked) for x, cell in enumerate(row) if cell == VISITED
    ]
    stuck = 0
    for x, y in candidates:
        trial = _copy(original)
        trial[y][x] = WALL
        if patrol(guard, trial):
            stuck += 1
    return stuck