import string

import pytest

from adventkit.y2022_day03 import (
    badge_priority_sum,
    example_input,
    find_badge,
    part1,
    priority,
    puzzle_input,
)


def test_example_first_group_badge():
    first, second, third = example_input()[:3]
    assert find_badge(first, second, third) == "r"


def test_example_sum():
    assert badge_priority_sum(example_input()) == 70


def test_lowercase_a_has_priority_one():
    assert priority("a") == 1


def test_priorities_follow_letter_order():
    letters = string.ascii_lowercase + string.ascii_uppercase
    assert [priority(ch) for ch in letters] == list(range(1, len(letters) + 1))


def test_badge_is_in_all_three():
    data = example_input()
    for start in range(0, len(data), 3):
        group = data[start : start + 3]
        badge = find_badge(*group)
        assert all(badge in rucksack for rucksack in group)


def test_no_common_item_raises():
    with pytest.raises(ValueError):
        find_badge("abc", "def", "ghi")


def test_incomplete_group_raises():
    with pytest.raises(ValueError):
        badge_priority_sum(example_input()[:4])


def test_puzzle_input_forms_whole_groups():
    data = puzzle_input()
    assert len(data) % 3 == 0
    assert all(data)


def test_part1_matches_list_form():
    data = puzzle_input()
    assert part1("\n".join(data) + "\n") == badge_priority_sum(data)


def test_example_input_is_a_copy():
    data = example_input()
    data.clear()
    assert len(example_input()) == 6