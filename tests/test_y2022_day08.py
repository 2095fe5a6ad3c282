from adventkit.y2022_day08 import is_visible, parse_forest, part1, part2, scenic_score

EXAMPLE = """\
30373
25512
65332
33549
35390
"""


def test_part1_example():
    assert part1(EXAMPLE) == 21


def test_part2_example():
    assert part2(EXAMPLE) == 8


def test_parse_forest():
    forest = parse_forest(EXAMPLE)
    assert forest[0] == [3, 0, 3, 7, 3]
    assert len(forest) == 5


def test_visibility_examples():
    forest = parse_forest(EXAMPLE)
    assert is_visible(forest, 1, 1) is True
    assert is_visible(forest, 1, 3) is False
    assert is_visible(forest, 2, 2) is False


def test_edges_always_visible():
    forest = parse_forest(EXAMPLE)
    size = len(forest)
    for i in range(size):
        assert is_visible(forest, 0, i)
        assert is_visible(forest, size - 1, i)
        assert is_visible(forest, i, 0)
        assert is_visible(forest, i, size - 1)


def test_scenic_score_examples():
    forest = parse_forest(EXAMPLE)
    assert scenic_score(forest, 1, 2) == 4
    assert scenic_score(forest, 3, 2) == 8


def test_edge_scores_are_zero():
    forest = parse_forest(EXAMPLE)
    assert scenic_score(forest, 0, 2) == 0
    assert scenic_score(forest, 2, 4) == 0


def test_empty_text():
    assert part1("") == 0
    assert part2("") == 0