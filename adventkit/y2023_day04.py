"""Scratchcards: score winning numbers and count the cards won."""

from __future__ import annotations

from collections.abc import Iterable


def _matches(line: str) -> int:
    _, sep, numbers = line.partition(":")
    winning, bar, held = numbers.partition("|")
    if not sep or not bar:
        raise ValueError(f"malformed card: {line!r}")
    try:
        winning_set = {int(n) for n in winning.split()}
        return sum(int(n) in winning_set for n in held.split())
    except ValueError:
        raise ValueError(f"malformed card: {line!r}") from None


def card_value(line: str) -> int:
    """Points of a card: 1 for the first match, doubled for each further one."""
    matches = _matches(line)
    return 1 << (matches - 1) if matches else 0


def count_cards(lines: Iterable[str]) -> int:
    """Total cards held after every card wins copies of the cards below it."""
    cards = list(lines)
    copies = [1] * len(cards)
    for index, line in enumerate(cards):
        matches = _matches(line)
        if index + matches >= len(cards):
            raise ValueError(f"card {index + 1} wins copies past the last card")
        for won in range(index + 1, index + matches + 1):
            copies[won] += copies[index]
    return sum(copies)


def _lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    """Total points of all cards."""
    return sum(card_value(line) for line in _lines(text))


def part2(text: str) -> int:
    """Total number of cards after winning copies."""
    return count_cards(_lines(text))