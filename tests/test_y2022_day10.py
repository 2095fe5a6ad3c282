import pytest

from adventkit.y2022_day10 import part1, part2, register_values, render, signal_strength

TINY = "noop\naddx 3\naddx -5\n"


def test_register_values_tiny():
    assert list(register_values(TINY)) == [1, 1, 1, 4, 4]


def test_signal_strength_all_noop():
    assert signal_strength("noop\n" * 220) == 720


def test_signal_strength_after_addx():
    program = "addx 4\n" + "noop\n" * 30
    assert part1(program) == 100


def test_short_program_has_no_strength():
    assert signal_strength(TINY) == 0


def test_render_all_noop():
    screen = render("noop\n" * 240)
    rows = screen.split("\n")
    assert len(rows) == 6
    assert all(row == "###" + "." * 37 for row in rows)


def test_part2_is_render():
    program = "addx 15\naddx -11\n" + "noop\n" * 20
    assert part2(program) == render(program)


def test_render_too_long():
    with pytest.raises(ValueError):
        render("noop\n" * 241)


def test_addx_bad_argument():
    with pytest.raises(ValueError):
        list(register_values("addx x\n"))


def test_addx_missing_argument():
    with pytest.raises(ValueError):
        list(register_values("addx\n"))