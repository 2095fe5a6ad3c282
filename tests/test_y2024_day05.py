import pytest

from adventkit.y2024_day05 import correct_update, is_ordered, parse_manual, part1, part2

EXAMPLE = """\
47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


def test_parse_manual():
    rules, updates = parse_manual(EXAMPLE)
    assert 53 in rules[47].after
    assert 97 in rules[47].before
    assert len(updates) == 6
    assert updates[2] == [75, 29, 13]


def test_is_ordered():
    rules, updates = parse_manual(EXAMPLE)
    assert [is_ordered(update, rules) for update in updates] == [True, True, True, False, False, False]


def test_correct_update_single_pass():
    rules, _ = parse_manual(EXAMPLE)
    assert correct_update([61, 13, 29], rules) == [61, 29, 13]
    assert correct_update([75, 97, 47, 61, 53], rules) == [97, 75, 47, 61, 53]


def test_correct_update_leaves_input_alone():
    rules, _ = parse_manual(EXAMPLE)
    update = [61, 13, 29]
    correct_update(update, rules)
    assert update == [61, 13, 29]


def test_part1_example():
    assert part1(EXAMPLE) == 143


def test_part2_example():
    assert part2(EXAMPLE) == 123


def test_malformed_rule_raises():
    with pytest.raises(ValueError):
        parse_manual("47-53\n\n47,53\n")