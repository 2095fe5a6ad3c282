from adventkit.y2023_day01 import calibration_value, calibration_value_words, part1, part2

EXAMPLE = """\
1abc2
pqr3stu8vwx
a1b2c3d4e5f
treb7uchet
"""

EXAMPLE_WORDS = """\
two1nine
eightwothree
abcone2threexyz
xtwone3four
4nineeightseven2
zoneight234
7pqrstsixteen
"""


def test_part1_example():
    assert part1(EXAMPLE) == 142


def test_part2_example():
    assert part2(EXAMPLE_WORDS) == 281


def test_single_digit_repeats():
    assert calibration_value("treb7uchet") == 77


def test_words_ignored_in_part1():
    assert calibration_value("two1nine") == 11


def test_overlapping_words():
    assert calibration_value_words("eightwothree") == 83
    assert calibration_value_words("zoneight234") == 14


def test_no_digits():
    assert calibration_value("abc") == -11
    assert calibration_value_words("xyz") == -11


def test_digit_only_lines_agree():
    for line in EXAMPLE.splitlines():
        assert calibration_value_words(line) == calibration_value(line)