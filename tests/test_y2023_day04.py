import pytest

from adventkit import y2023_day04 as day

EXAMPLE = """\
Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11
"""

LINES = EXAMPLE.splitlines()


def test_part1_example():
    assert day.part1(EXAMPLE) == 13


def test_part2_example():
    assert day.part2(EXAMPLE) == 30


def test_card_values():
    assert [day.card_value(line) for line in LINES] == [8, 2, 2, 1, 0, 0]


def test_count_cards_at_least_one_per_card():
    assert day.count_cards(LINES) >= len(LINES)
    assert day.count_cards(LINES) == day.part2(EXAMPLE)


def test_winning_past_last_card_raises():
    with pytest.raises(ValueError):
        day.count_cards(["Card 1: 5 | 5"])


@pytest.mark.parametrize("line", ["Card 1 41 | 41", "Card 1: 41 41", "Card 1: x | 1"])
def test_malformed_card_raises(line):
    with pytest.raises(ValueError):
        day.card_value(line)