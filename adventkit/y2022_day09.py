"""Rope bridge: count the positions the rope's tail visits."""

from __future__ import annotations

from dataclasses import dataclass

_STEPS = {"U": (0, 1), "D": (0, -1), "R": (1, 0), "L": (-1, 0)}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass
class Knot:
    """One knot of the rope on an integer grid."""

    x: int = 0
    y: int = 0

    def move(self, direction: str) -> None:
        """Move one step in direction U, D, R or L."""
        try:
            dx, dy = _STEPS[direction]
        except KeyError:
            raise ValueError(f"unknown dir: {direction}") from None
        self.x += dx
        self.y += dy

    def follow(self, head: Knot) -> None:
        """Catch up with the knot ahead when it is no longer touching."""
        dx = head.x - self.x
        dy = head.y - self.y
        if dy == 0:
            if abs(dx) == 2:
                self.x += _sign(dx)
        elif dx == 0:
            if abs(dy) == 2:
                self.y += _sign(dy)
        elif abs(dx) > 1 or abs(dy) > 1:
            self.x += _sign(dx)
            self.y += _sign(dy)


def simulate_rope(length: int, text: str) -> int:
    """Number of distinct positions the last knot visits, the start included."""
    if length < 1:
        raise ValueError("a rope needs at least one knot")
    rope = [Knot() for _ in range(length)]
    visited = {(0, 0)}
    for line in text.splitlines():
        if not line.strip():
            continue
        direction, count = line.split()
        for _ in range(int(count)):
            rope[0].move(direction)
            for ahead, knot in zip(rope, rope[1:]):
                knot.follow(ahead)
            if length > 1:
                visited.add((rope[-1].x, rope[-1].y))
    return len(visited)


def part1(text: str) -> int:
    """Tail positions of a two-knot rope."""
    return simulate_rope(2, text)


def part2(text: str) -> int:
    """Tail positions of a ten-knot rope."""
    return simulate_rope(10, text)