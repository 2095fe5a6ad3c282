import pytest

from adventkit.y2022_day11 import Monkey, monkey_business, parse_monkeys, part1, part2

EXAMPLE = """\
Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""


def test_part1_example():
    assert part1(EXAMPLE) == 10605


def test_part2_example():
    assert part2(EXAMPLE) == 2713310158


def test_parse_example():
    monkeys = parse_monkeys(EXAMPLE)
    assert len(monkeys) == 4
    assert monkeys[0].items == [79, 98]
    assert monkeys[0].divisor == 23
    assert (monkeys[0].if_true, monkeys[0].if_false) == (2, 3)


def test_inspect_operations():
    monkeys = parse_monkeys(EXAMPLE)
    assert monkeys[0].inspect(79) == 79 * 19
    assert monkeys[1].inspect(54) == 60
    assert monkeys[2].inspect(79) == 6241


def test_monkey_business_leaves_input_unchanged():
    monkeys = parse_monkeys(EXAMPLE)
    monkey_business(monkeys, 20, True)
    assert monkeys[3].items == [74]
    assert monkey_business(monkeys, 20, True) == 10605


def test_zero_rounds():
    assert monkey_business(parse_monkeys(EXAMPLE), 0, True) == 0


def test_unsupported_operation():
    text = "Monkey 0:\n  Operation: new = old + old\n"
    with pytest.raises(ValueError):
        parse_monkeys(text)


def test_too_few_monkeys():
    with pytest.raises(ValueError):
        monkey_business([Monkey(items=[1])], 1, True)