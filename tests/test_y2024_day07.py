import pytest

from adventkit.y2024_day07 import is_solvable, part1, part2

EXAMPLE = """\
190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


@pytest.mark.parametrize(
    ("numbers", "base", "target", "expected"),
    [
        ([10, 19], 2, 190, True),
        ([81, 40, 27], 2, 3267, True),
        ([17, 5], 2, 83, False),
        ([15, 6], 2, 156, False),
        ([15, 6], 3, 156, True),
        ([6, 8, 6, 15], 3, 7290, True),
        ([7], 2, 7, True),
    ],
)
def test_is_solvable(numbers, base, target, expected):
    assert is_solvable(numbers, base, target) is expected


def test_part1_example():
    assert part1(EXAMPLE) == 3749


def test_part2_example():
    assert part2(EXAMPLE) == 11387


def test_too_many_numbers_raises():
    with pytest.raises(ValueError):
        is_solvable([1] * 21, 2, 1)


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        part1("190 10 19\n")