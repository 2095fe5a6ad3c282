"""Cathode-ray tube: run a tiny CPU and draw its sprite on a screen."""

from __future__ import annotations

from collections.abc import Iterator

SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6


def register_values(text: str) -> Iterator[int]:
    """Yield the X register's value during every clock cycle."""
    x = 1
    for line in text.splitlines():
        command, *args = line.split(" ")
        if command == "noop":
            yield x
        elif command == "addx":
            if not args:
                raise ValueError(f"addx needs an argument: {line!r}")
            delta = int(args[0])
            yield x
            yield x
            x += delta


def signal_strength(text: str) -> int:
    """Sum of cycle times X at cycles 20, 60, 100 and every 40 after."""
    return sum(
        cycle * x
        for cycle, x in enumerate(register_values(text), start=1)
        if (cycle - 20) % SCREEN_WIDTH == 0
    )


def render(text: str) -> str:
    """Draw the screen: six rows of 40 pixels, '#' lit and '.' dark."""
    pixels = [
        "#" if abs(x - cycle % SCREEN_WIDTH) <= 1 else "."
        for cycle, x in enumerate(register_values(text))
    ]
    size = SCREEN_WIDTH * SCREEN_HEIGHT
    if len(pixels) > size:
        raise ValueError("the program runs longer than the screen has pixels")
    pixels.extend("." * (size - len(pixels)))
    return "\n".join(
        "".join(pixels[row * SCREEN_WIDTH : (row + 1) * SCREEN_WIDTH])
        for row in range(SCREEN_HEIGHT)
    )


def part1(text: str) -> int:
    """Total signal strength."""
    return signal_strength(text)


def part2(text: str) -> str:
    """The rendered screen."""
    return render(text)