import pytest

from adventkit import y2023_day05 as day

EXAMPLE = """\
seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4
"""

SMALL = """\
seeds: 10 3

seed-to-soil map:
50 10 2
"""


def test_part1_example():
    assert day.part1(EXAMPLE) == 35


@pytest.mark.parametrize("seed, location", [(79, 82), (14, 43), (55, 86), (13, 35)])
def test_single_seed_locations(seed, location):
    _, conversions = day.load_almanac(EXAMPLE)
    assert day.lowest_location([seed], conversions) == location


def test_load_almanac():
    seeds, conversions = day.load_almanac(EXAMPLE)
    assert seeds == [79, 14, 55, 13]
    assert conversions[0] == day.Conversion("seed", -48, 98, 99)
    assert conversions[-1] == day.Conversion("humidity", -37, 93, 96)
    assert len(conversions) == 18


def test_malformed_mapping_line():
    with pytest.raises(ValueError):
        day.load_almanac("seeds: 1\n\nseed-to-soil map:\n1 2\n")


def test_no_seeds_raises():
    with pytest.raises(ValueError):
        day.lowest_location([], [])


def test_conversion_contains():
    conversion = day.Conversion("seed", 2, 5, 9)
    assert conversion.contains(5)
    assert conversion.contains(9)
    assert not conversion.contains(10)


def test_squash_identical_ranges_merge():
    result = day.squash_ranges([day.Conversion("a", 2, 0, 9), day.Conversion("b", 3, 0, 9)])
    assert result == [day.Conversion("split", 5, 0, 9)]


def test_squash_nested_ranges_split():
    result = day.squash_ranges([day.Conversion("seed", 5, 0, 9), day.Conversion("soil", 3, 0, 4)])
    assert result == [day.Conversion("split", 8, 0, 4), day.Conversion("split", 5, 5, 9)]


def test_squash_leaves_disjoint_ranges_sorted():
    first = day.Conversion("a", 1, 20, 29)
    second = day.Conversion("b", 2, 0, 9)
    assert day.squash_ranges([first, second]) == [second, first]


def test_squash_result_has_distinct_starts():
    _, conversions = day.load_almanac(EXAMPLE)
    squashed = day.squash_ranges(conversions)
    starts = [c.start for c in squashed]
    assert len(starts) == len(set(starts))
    assert starts == sorted(starts)


def test_lowest_location_in_ranges():
    conversions = [day.Conversion("x", 40, 10, 11)]
    assert day.lowest_location_in_ranges([10, 3], conversions) == 12


def test_lowest_location_in_ranges_odd_seeds():
    with pytest.raises(ValueError):
        day.lowest_location_in_ranges([10, 3, 5], [])


def test_part2_small():
    assert day.part2(SMALL) == 12


def test_part2_odd_seed_count_raises():
    with pytest.raises(ValueError):
        day.part2("seeds: 1 2 3\n")