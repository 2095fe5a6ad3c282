import pytest

from adventkit.cli import main, solve

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_solve_dispatches_both_parts():
    assert solve(2024, 1, 1, EXAMPLE) == 11
    assert solve(2024, 1, 2, EXAMPLE) == 31


def test_solve_other_year():
    assert solve(2022, 6, 1, "mjqjpqmgbljsphdztnvjfqwrcgsmlb\n") == 7


def test_solve_unknown_day_raises():
    with pytest.raises(ValueError):
        solve(2024, 25, 1, EXAMPLE)


def test_solve_unknown_part_raises():
    with pytest.raises(ValueError):
        solve(2022, 1, 2, "1\n")


def test_main_prints_answer(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main(["2024", "1", "2", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "31"


def test_main_missing_file(tmp_path, capsys):
    assert main(["2024", "1", "1", str(tmp_path / "absent.txt")]) == 1
    assert "adventkit" in capsys.readouterr().err


def test_main_unknown_puzzle(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main(["2019", "1", "1", str(path)]) == 1
    assert "no puzzle" in capsys.readouterr().err