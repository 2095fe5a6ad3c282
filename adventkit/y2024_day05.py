"""Print queue: check page updates against ordering rules and fix them."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

MAX_CORRECTIONS = 100


@dataclass
class Rule:
    """Pages that must come before and after one page."""

    before: set[int] = field(default_factory=set)
    after: set[int] = field(default_factory=set)


def parse_manual(text: str) -> tuple[dict[int, Rule], list[list[int]]]:
    """Parse "a|b" rules, a blank line, then comma separated updates."""
    rules: dict[int, Rule] = {}
    updates: list[list[int]] = []
    reading_rules = True
    for line in text.splitlines():
        if not line:
            reading_rules = False
            continue
        if reading_rules:
            first, sep, second = line.partition("|")
            if not sep:
                raise ValueError(f"malformed rule: {line!r}")
            earlier, later = int(first), int(second)
            rules.setdefault(earlier, Rule()).after.add(later)
            rules.setdefault(later, Rule()).before.add(earlier)
        else:
            updates.append([int(page) for page in line.split(",")])
    return rules, updates


def is_ordered(update: Sequence[int], rules: Mapping[int, Rule]) -> bool:
    """Whether no page breaks a rule about the pages around it."""
    for index, page in enumerate(update):
        rule = rules.get(page)
        if rule is None:
            continue
        if any(earlier in rule.after for earlier in update[:index]):
            return False
        if any(later in rule.before for later in update[index + 1 :]):
            return False
    return True


def correct_update(update: Sequence[int], rules: Mapping[int, Rule]) -> list[int]:
    """One pass of swaps towards a correct order; returns the new update.

    For each position, the page there is swapped with the first earlier page
    that must follow it, then its original value is written over the first
    later page that must precede it.
    """
    pages = list(update)
    for index, page in enumerate(pages):
        rule = rules.get(page)
        if rule is None:
            continue
        for position, earlier in enumerate(pages[:index]):
            if earlier in rule.after:
                pages[position] = page
                pages[index] = earlier
                break
        for position, later in enumerate(pages[index + 1 :], start=index + 1):
            if later in rule.before:
                pages[position] = page
                pages[index] = later
                break
    return pages


def _middle(pages: Sequence[int]) -> int:
    return pages[len(pages) // 2]


def part1(text: str) -> int:
    """Sum of middle pages of correctly ordered updates."""
    rules, updates = parse_manual(text)
    return sum(_middle(update) for update in updates if is_ordered(update, rules))


def part2(text: str) -> int:
    """Sum of middle pages of the wrongly ordered updates once corrected."""
    rules, updates = parse_manual(text)
    total = 0
    for update in updates:
        if is_ordered(update, rules):
            continue
        pages = update
        attempts = 0
        while not is_ordered(pages, rules):
            attempts += 1
            if attempts > MAX_CORRECTIONS:
                raise RuntimeError(f"update {update} cannot be put in order")
            pages = correct_update(pages, rules)
        total += _middle(pages)
    return total