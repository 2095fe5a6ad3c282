"""Cube conundrum: check games of coloured cubes drawn from a bag."""

from __future__ import annotations

LIMITS = {"red": 12, "green": 13, "blue": 14}


def _parse_game(line: str) -> tuple[int, list[tuple[int, str]]]:
    header, sep, body = line.partition(":")
    if not sep:
        raise ValueError(f"malformed game: {line!r}")
    try:
        game_id = int(header[5:])
    except ValueError:
        raise ValueError(f"malformed game id: {line!r}") from None
    draws = []
    for show in body.split(";"):
        for item in show.split(","):
            parts = item.split()
            if len(parts) != 2:
                raise ValueError(f"malformed draw {item!r} in {line!r}")
            try:
                count = int(parts[0])
            except ValueError:
                raise ValueError(f"malformed count {item!r} in {line!r}") from None
            draws.append((count, parts[1]))
    return game_id, draws


def game_possible(line: str) -> bool:
    """Whether no draw shows more cubes of a colour than the bag holds."""
    _, draws = _parse_game(line)
    return all(count <= LIMITS.get(colour, count) for count, colour in draws)


def minimum_power(line: str) -> int:
    """Product of the fewest red, green and blue cubes the game needs."""
    _, draws = _parse_game(line)
    fewest = dict.fromkeys(LIMITS, 0)
    for count, colour in draws:
        if colour in fewest:
            fewest[colour] = max(fewest[colour], count)
    return fewest["red"] * fewest["green"] * fewest["blue"]


def _lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    """Sum of the ids of possible games."""
    return sum(_parse_game(line)[0] for line in _lines(text) if game_possible(line))


def part2(text: str) -> int:
    """Sum of the minimum powers of all games."""
    return sum(minimum_power(line) for line in _lines(text))