import pytest

from adventkit import y2022_day05 as day


def test_example_top_crates():
    stacks, moves = day.example_input()
    assert day.top_crates(stacks, moves) == "MCD"


def test_parse_move():
    assert day.parse_move("move 3 from 1 to 3") == (3, 1, 3)
    move = day.parse_move("move 14 from 4 to 1")
    assert (move.count, move.source, move.target) == (14, 4, 1)


def test_parse_move_malformed():
    with pytest.raises(ValueError):
        day.parse_move("move from to")


def test_moved_crates_keep_their_order():
    assert day.rearrange(["ABC", ""], ["move 2 from 1 to 2"]) == ["A", "BC"]


def test_move_to_same_stack_changes_nothing():
    assert day.rearrange(["XYZ", "Q"], ["move 2 from 1 to 1"]) == ["XYZ", "Q"]


def test_input_not_mutated():
    stacks, moves = day.example_input()
    original = list(stacks)
    day.rearrange(stacks, moves)
    assert stacks == original


def test_example_crates_preserved():
    stacks, moves = day.example_input()
    final = day.rearrange(stacks, moves)
    assert sorted("".join(final)) == sorted("".join(stacks))
    assert len(final) == len(stacks)


def test_puzzle_crates_preserved():
    stacks, moves = day.puzzle_input()
    final = day.rearrange(stacks, moves)
    assert len(final) == 9
    assert sorted("".join(final)) == sorted("".join(stacks))


def test_puzzle_moves_parse_to_valid_stacks():
    stacks, moves = day.puzzle_input()
    parsed = [day.parse_move(line) for line in moves]
    assert all(1 <= m.source <= len(stacks) and 1 <= m.target <= len(stacks) for m in parsed)
    assert all(m.count >= 1 for m in parsed)


def test_too_many_crates_raises():
    with pytest.raises(ValueError):
        day.rearrange(["AB", ""], ["move 3 from 1 to 2"])


def test_unknown_stack_raises():
    with pytest.raises(ValueError):
        day.rearrange(["AB", ""], ["move 1 from 1 to 3"])


def test_empty_stack_top_raises():
    with pytest.raises(ValueError):
        day.top_crates(["AB", ""], ["move 2 from 1 to 2"])