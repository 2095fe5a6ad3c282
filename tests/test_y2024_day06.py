import pytest

from adventkit.y2024_day06 import Guard, parse_lab, patrol, part1, part2, visited_count

EXAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

LOOP = """\
.#...
....#
.....
#^...
...#.
"""


def test_parse_lab_frames_map():
    guard, grid = parse_lab(EXAMPLE)
    assert guard == Guard(5, 7, "n")
    assert len(grid) == 12
    assert all(len(row) == 12 for row in grid)
    assert "".join(grid[0]) == "E" * 12
    assert grid[3][0] == "E" and grid[3][-1] == "E"


def test_part1_example():
    assert part1(EXAMPLE) == 41


def test_part2_example():
    assert part2(EXAMPLE) == 6


def test_patrol_detects_loop():
    guard, grid = parse_lab(LOOP)
    assert patrol(guard, grid) is True


def test_patrol_leaves_map():
    guard, grid = parse_lab("...\n.^.\n...\n")
    assert patrol(guard, grid) is False
    assert visited_count(grid) == 2


def test_missing_guard_raises():
    with pytest.raises(ValueError):
        parse_lab("...\n...\n")