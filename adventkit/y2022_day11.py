"""Monkey in the middle: track worry levels thrown between monkeys."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass, field
from enum import Enum


class Operation(Enum):
    """How a monkey changes the worry level of an item it inspects."""

    ADD = "add"
    MULTIPLY = "multiply"
    SQUARE = "square"


@dataclass
class Monkey:
    """A monkey's items and throwing rules."""

    items: list[int] = field(default_factory=list)
    operation: Operation = Operation.MULTIPLY
    operand: int = 0
    divisor: int = 1
    if_true: int = 0
    if_false: int = 0

    def inspect(self, worry: int) -> int:
        """Return the worry level after this monkey's operation."""
        if self.operation is Operation.SQUARE:
            return worry * worry
        if self.operation is Operation.ADD:
            return worry + self.operand
        return worry * self.operand

    def target(self, worry: int) -> int:
        """Index of the monkey that receives an item with this worry level."""
        return self.if_true if worry % self.divisor == 0 else self.if_false


def _parse_operation(monkey: Monkey, value: str) -> None:
    _, _, expression = value.partition("=")
    parts = expression.split()
    if len(parts) != 3 or parts[0] != "old":
        raise ValueError(f"malformed operation: {value!r}")
    operator, argument = parts[1], parts[2]
    if operator == "*" and argument == "old":
        monkey.operation = Operation.SQUARE
        return
    try:
        monkey.operand = int(argument)
    except ValueError:
        raise ValueError(f"unsupported operation: {value!r}") from None
    if operator == "+":
        monkey.operation = Operation.ADD
    elif operator == "*":
        monkey.operation = Operation.MULTIPLY
    else:
        raise ValueError(f"unsupported operation: {value!r}")


def parse_monkeys(text: str) -> list[Monkey]:
    """Parse the monkey descriptions in order."""
    monkeys: list[Monkey] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        key, _, value = line.partition(":")
        value = value.strip()
        if key.startswith("Monkey "):
            monkeys.append(Monkey())
            continue
        if not monkeys:
            raise ValueError(f"line outside any monkey: {raw!r}")
        monkey = monkeys[-1]
        if key == "Starting items":
            monkey.items = [int(item) for item in value.split(",") if item.strip()]
        elif key == "Operation":
            _parse_operation(monkey, value)
        elif key == "Test":
            monkey.divisor = int(value.split()[-1])
        elif key == "If true":
            monkey.if_true = int(value.split()[-1])
        elif key == "If false":
            monkey.if_false = int(value.split()[-1])
    return monkeys


def monkey_business(monkeys: list[Monkey], rounds: int, relief: bool) -> int:
    """Product of the two highest inspection counts after the given rounds.

    With relief the worry level is divided by three after each inspection;
    without it the level is kept modulo the product of all divisors.
    The monkeys passed in are left unchanged.
    """
    if len(monkeys) < 2:
        raise ValueError("at least two monkeys are needed")
    modulus = math.prod(monkey.divisor for monkey in monkeys)
    held = [list(monkey.items) for monkey in monkeys]
    inspections = [0] * len(monkeys)
    for _ in range(rounds):
        for index, monkey in enumerate(monkeys):
            for item in held[index]:
                worry = monkey.inspect(item)
                worry = worry // 3 if relief else worry % modulus
                held[monkey.target(worry)].append(worry)
                inspections[index] += 1
            held[index] = []
    first, second = heapq.nlargest(2, inspections)
    return first * second


def part1(text: str) -> int:
    """Monkey business after 20 rounds with relief."""
    return monkey_business(parse_monkeys(text), 20, True)


def part2(text: str) -> int:
    """Monkey business after 10000 rounds without relief."""
    return monkey_business(parse_monkeys(text), 10000, False)