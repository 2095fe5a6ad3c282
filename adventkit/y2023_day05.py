"""Seed almanac: map seeds through a chain of range conversions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

STAGES = (
    "seed",
    "soil",
    "fertilizer",
    "water",
    "light",
    "temperature",
    "humidity",
    "location",
)


@dataclass(frozen=True)
class Conversion:
    """Values from start to end (inclusive) of one category shift by diff."""

    source: str
    diff: int
    start: int
    end: int

    def contains(self, value: int) -> bool:
        """Whether value lies in this range."""
        return self.start <= value <= self.end


def load_almanac(text: str) -> tuple[list[int], list[Conversion]]:
    """Parse the seed list and every conversion range."""
    seeds: list[int] = []
    conversions: list[Conversion] = []
    source = ""
    for line in text.splitlines():
        if not line:
            continue
        if line.startswith("seeds:"):
            seeds = [int(value) for value in line[6:].split()]
            continue
        if line.endswith(" map:"):
            source = line[: -len(" map:")].split("-to-")[0]
            continue
        fields = line.split()
        if len(fields) != 3:
            raise ValueError(f"malformed mapping line: {line!r}")
        destination, start, length = (int(value) for value in fields)
        conversions.append(Conversion(source, destination - start, start, start + length - 1))
    return seeds, conversions


def lowest_location(seeds: Sequence[int], conversions: Sequence[Conversion]) -> int:
    """Lowest location any seed maps to through the full chain of stages.

    Where several ranges of one stage hold a value, the last one applies.
    """
    if not seeds:
        raise ValueError("no seeds")
    locations = []
    for seed in seeds:
        value = seed
        for stage in STAGES:
            diff = 0
            for conversion in conversions:
                if conversion.source == stage and conversion.contains(value):
                    diff = conversion.diff
            value += diff
        locations.append(value)
    return min(locations)


def _sort_key(conversion: Conversion) -> tuple[int, int]:
    return conversion.start, conversion.end


def squash_ranges(conversions: Sequence[Conversion]) -> list[Conversion]:
    """Merge ranges that share a start into non-overlapping pieces.

    A range lying inside the next one (in start, end order) is replaced by a
    piece with both shifts added, followed by the rest of the larger range.
    """
    out = list(conversions)
    changed = True
    while changed:
        changed = False
        out.sort(key=_sort_key)
        for i in range(len(out)):
            if i >= len(out) - 1:
                continue
            inner, outer = out[i], out[i + 1]
            if not (outer.start <= inner.start <= outer.end and outer.start <= inner.end <= outer.end):
                continue
            pieces = []
            if outer.start != inner.start:
                pieces.append(Conversion("split", outer.diff, outer.start, inner.start))
            pieces.append(Conversion("split", inner.diff + outer.diff, inner.start, inner.end))
            if outer.end != inner.end:
                pieces.append(Conversion("split", outer.diff, inner.end + 1, outer.end))
            out = out[:i] + pieces + out[i + 2 :]
            changed = True
    return out


def lowest_location_in_ranges(seeds: Sequence[int], conversions: Sequence[Conversion]) -> int:
    """Lowest value over seed ranges given as (start, length) pairs.

    Each seed is shifted by the first range that holds it.
    """
    if len(seeds) % 2:
        raise ValueError("seed ranges come in start, length pairs")
    lowest: int | None = None
    for start, length in zip(seeds[::2], seeds[1::2]):
        for seed in range(start, start + length):
            value = seed
            for conversion in conversions:
                if conversion.contains(seed):
                    value += conversion.diff
                    break
            if lowest is None or value < lowest:
                lowest = value
    if lowest is None:
        raise ValueError("no seeds")
    return lowest


def part1(text: str) -> int:
    """Lowest location of the listed seeds."""
    seeds, conversions = load_almanac(text)
    return lowest_location(seeds, conversions)


def part2(text: str) -> int:
    """Lowest value over the seed ranges after squashing the conversions."""
    seeds, conversions = load_almanac(text)
    return lowest_location_in_ranges(seeds, squash_ranges(conversions))