from adventkit import y2023_day03 as day

EXAMPLE = """\
467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598..
"""


def test_part1_example():
    assert day.part1(EXAMPLE) == 4361


def test_part2_example():
    assert day.part2(EXAMPLE) == 467835


def test_part_contains():
    part = day.Part(5, 1, 1, 3, 3)
    assert part.contains(1, 3)
    assert part.contains(3, 1)
    assert not part.contains(4, 2)
    assert not part.contains(2, 0)


def test_read_parts_first_box():
    parts = day.read_parts(EXAMPLE.splitlines())
    assert parts[0] == day.Part(467, 0, 0, 3, 1)
    assert [p.num for p in parts][:2] == [467, 114]
    assert len(parts) == 10


def test_isolated_number_not_counted():
    assert day.engine_sum(["12.."]) == 0


def test_number_before_symbol_counted():
    assert day.engine_sum(["12*"]) == 12


def test_number_at_line_end_always_counts():
    assert day.engine_sum(["..12"]) == 12


def test_symbol_below_counts():
    assert day.engine_sum([".7.", "..#"]) == 7


def test_gear_with_two_parts():
    grid = ["2*3"]
    assert day.gear_ratio_sum(grid, day.read_parts(grid)) == 6


def test_gear_with_one_part_ignored():
    grid = ["2*.", "..."]
    assert day.gear_ratio_sum(grid, day.read_parts(grid)) == 0


def test_empty_schematic():
    assert day.part1("") == 0
    assert day.part2("") == 0