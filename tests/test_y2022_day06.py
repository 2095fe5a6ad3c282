import pytest

from adventkit.y2022_day06 import find_marker, part1, part2

EXAMPLE = "mjqjpqmgbljsphjdztnvjfqwrcgsmsb\n"


def test_part1_example():
    assert part1(EXAMPLE) == 7


@pytest.mark.parametrize(
    "signal, packet, message",
    [
        ("bvwbjplbgvbhsrlpgdmjqwftvncz", 5, 23),
        ("nppdvjthqldpwncqszvftbrmjlhg", 6, 23),
        ("nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg", 10, 29),
        ("zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw", 11, 26),
    ],
)
def test_markers(signal, packet, message):
    assert find_marker(signal, 4) == packet
    assert find_marker(signal, 14) == message


def test_last_window_not_examined():
    assert find_marker("abcd", 4) == 0


def test_no_marker():
    assert find_marker("aaaaaaaa", 4) == 0


def test_only_first_line_used():
    assert part1("aaaaaa\nabcdefgh\n") == 0


def test_empty_text():
    assert part1("") == 0
    assert part2("") == 0