import pytest

from adventkit.y2024_day08 import (
    Antenna,
    count_antinode_lines,
    count_antinodes,
    find_antennas,
    part1,
    part2,
)

EXAMPLE = """\
............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""


def test_find_antennas():
    antennas, index = find_antennas(EXAMPLE.splitlines())
    assert len(antennas) == 7
    assert antennas[0] == Antenna("0", 8, 1)
    assert Antenna("A", 9, 9) in index


def test_part1_example():
    assert part1(EXAMPLE) == 14


def test_part2_example():
    assert part2(EXAMPLE) == 34


def test_count_functions_match_parts():
    grid = EXAMPLE.splitlines()
    antennas, index = find_antennas(grid)
    assert count_antinodes(grid, antennas, index) == 14
    assert count_antinode_lines(grid, antennas) == 34


def test_lone_antenna_has_no_antinodes():
    assert part1("a..\n...\n") == 0


def test_lone_antenna_on_lines_raises():
    with pytest.raises(ValueError):
        part2("a..\n...\n")