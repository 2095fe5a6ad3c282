from adventkit.y2024_day03 import part1, part2

EXAMPLE = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))\n"
EXAMPLE2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))\n"


def test_part1_example():
    assert part1(EXAMPLE) == 161


def test_part2_example():
    assert part2(EXAMPLE2) == 48


def test_part1_ignores_long_operands():
    assert part1("mul(1234,2) mul(3,4)") == 12


def test_disabled_state_carries_across_lines():
    assert part2("don't()x\nmul(2,3)\n") == 0


def test_do_at_end_of_line_is_ignored():
    assert part2("don't()x\ndo()\nmul(2,3)\n") == 0


def test_do_followed_by_text_enables():
    assert part2("don't()x\ndo()x\nmul(2,3)\n") == 6


def test_window_sees_mul_of_later_m():
    assert part2("mmul(2,4)") == 16