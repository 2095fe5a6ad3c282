import pytest

from adventkit import y2022_day04 as day


def test_example_overlap_count():
    assert day.overlapping_pairs(day.example_input()) == 4


def test_part1_matches_list_form():
    text = "\n".join(day.example_input()) + "\n"
    assert day.part1(text) == day.overlapping_pairs(day.example_input())


def test_parse_pair_reads_both_ranges():
    assert day.parse_pair("2-4,6-8") == ((2, 4), (6, 8))
    assert day.parse_pair("80-94,80-81") == ((80, 94), (80, 81))


def test_identical_ranges_overlap():
    assert day.overlapping_pairs(["3-5,3-5"]) == 1


def test_disjoint_ranges_do_not_overlap():
    assert day.overlapping_pairs(["1-2,4-5", "4-5,1-2"]) == 0


def test_overlap_is_symmetric_on_puzzle_input():
    pairs = day.puzzle_input()
    swapped = [",".join(reversed(line.split(","))) for line in pairs]
    assert day.overlapping_pairs(pairs) == day.overlapping_pairs(swapped)


def test_puzzle_input_parses_and_count_is_bounded():
    pairs = day.puzzle_input()
    assert pairs[0] == "4-90,1-4"
    assert pairs[-1] == "14-70,13-69"
    assert all(len(day.parse_pair(line)) == 2 for line in pairs)
    assert 0 <= day.overlapping_pairs(pairs) <= len(pairs)


@pytest.mark.parametrize("line", ["garbage", "1-2", "1-2,x-3", "1,2"])
def test_malformed_pair_raises(line):
    with pytest.raises(ValueError):
        day.parse_pair(line)