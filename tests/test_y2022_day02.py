import re

import pytest

from adventkit.y2022_day02 import (
    example_input,
    part1,
    puzzle_input,
    round_score,
    total_score,
)

ALL_ROUNDS = [f"{o} {s}" for o in "ABC" for s in "XYZ"]


def test_example_input_matches_source():
    assert example_input() == ["A Y", "B X", "C Z"]


def test_example_total():
    assert total_score(example_input()) == 12


def test_example_total_is_sum_of_rounds():
    rounds = example_input()
    assert total_score(rounds) == sum(round_score(r) for r in rounds)


def test_every_combination_gives_distinct_score():
    assert sorted(round_score(r) for r in ALL_ROUNDS) == list(range(1, 10))


@pytest.mark.parametrize("opponent", "ABC")
def test_outcome_bands(opponent):
    assert 1 <= round_score(f"{opponent} X") <= 3
    assert 4 <= round_score(f"{opponent} Y") <= 6
    assert 7 <= round_score(f"{opponent} Z") <= 9


@pytest.mark.parametrize("opponent", "ABC")
def test_each_outcome_plays_a_different_shape(opponent):
    shapes = {
        round_score(f"{opponent} X"),
        round_score(f"{opponent} Y") - 3,
        round_score(f"{opponent} Z") - 6,
    }
    assert shapes == {1, 2, 3}


def test_puzzle_input_shape():
    rounds = puzzle_input()
    assert rounds[0] == "B X"
    assert rounds[-1] == "C Z"
    assert all(re.fullmatch(r"[ABC] [XYZ]", r) for r in rounds)


def test_puzzle_input_returns_fresh_list():
    first = puzzle_input()
    first.clear()
    assert puzzle_input()


def test_part1_matches_total_score():
    rounds = puzzle_input()
    assert part1("\n".join(rounds) + "\n") == total_score(rounds)


def test_part1_skips_blank_lines():
    assert part1("A Y\n\nB X\n\n") == total_score(["A Y", "B X"])


def test_part1_empty_text():
    assert part1("") == 0


@pytest.mark.parametrize("line", ["D X", "A Q", "A", "", "AX"])
def test_malformed_round_raises(line):
    with pytest.raises(ValueError):
        round_score(line)


def test_total_score_propagates_error():
    with pytest.raises(ValueError):
        total_score(["A Y", "Z Z"])