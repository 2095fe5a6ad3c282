import pytest

from adventkit.y2024_day02 import check_report, count_safe, parse_reports, part1, part2

EXAMPLE = """\
7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


@pytest.mark.parametrize(
    ("levels", "expected"),
    [
        ([7, 6, 4, 2, 1], (True, 0)),
        ([1, 2, 7, 8, 9], (False, 2)),
        ([1, 3, 2, 4, 5], (False, 2)),
        ([8, 6, 4, 4, 1], (False, 3)),
        ([1, 3, 6, 7, 9], (True, 0)),
    ],
)
def test_check_report(levels, expected):
    assert check_report(levels) == expected


def test_parse_reports():
    reports = parse_reports(EXAMPLE)
    assert len(reports) == 6
    assert reports[0] == [7, 6, 4, 2, 1]


def test_count_safe():
    reports = parse_reports(EXAMPLE)
    assert count_safe(reports, False) == 2
    assert count_safe(reports, True) == 4


def test_part1_example():
    assert part1(EXAMPLE) == 2


def test_part2_example():
    assert part2(EXAMPLE) == 4


def test_single_level_raises():
    with pytest.raises(ValueError):
        check_report([5])