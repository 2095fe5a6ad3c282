from adventkit.y2022_day01 import elf_totals, part1, puzzle_input, top_three_total


def test_puzzle_input_starts_and_ends_as_listed():
    values = puzzle_input()
    assert values[0] == 6529
    assert values[-1] == -1


def test_one_total_per_separator():
    values = puzzle_input()
    assert len(list(elf_totals(values))) == values.count(-1)


def test_elf_totals_split_on_separator():
    assert list(elf_totals([1, 2, -1, 10, -1])) == [3, 10]


def test_unterminated_group_is_ignored():
    assert list(elf_totals([5, -1, 7])) == [5]


def test_fewer_than_three_elves():
    assert top_three_total([4, -1, 6, -1]) == 10


def test_top_three_independent_of_order():
    values = puzzle_input()
    groups = []
    current = []
    for value in values:
        current.append(value)
        if value == -1:
            groups.append(current)
            current = []
    reordered = [value for group in reversed(groups) for value in group]
    assert top_three_total(reordered) == top_three_total(values)


def test_top_three_bounds():
    values = puzzle_input()
    totals = list(elf_totals(values))
    best = max(totals)
    result = top_three_total(values)
    assert best < result <= 3 * best


def test_part1_matches_values():
    values = puzzle_input()
    lines = ["" if value == -1 else str(value) for value in values]
    assert part1("\n".join(lines)) == top_three_total(values)


def test_part1_without_trailing_blank_line():
    assert part1("1\n2\n\n3\n") == top_three_total([1, 2, -1, 3, -1])


def test_part1_empty_text():
    assert part1("") == 0