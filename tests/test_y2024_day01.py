import pytest

from adventkit.y2024_day01 import parse_lists, part1, part2

EXAMPLE = """\
3   4
4   3
2   5
1   3
3   9
3   3
"""


def test_parse_lists():
    left, right = parse_lists(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_part1_example():
    assert part1(EXAMPLE) == 11


def test_part2_example():
    assert part2(EXAMPLE) == 31


def test_missing_column_raises():
    with pytest.raises(ValueError):
        parse_lists("3   4\n5\n")


def test_non_number_raises():
    with pytest.raises(ValueError):
        parse_lists("3   x\n")