import pytest

from adventkit.y2022_day07 import directory_sizes, parse_listing, part1, part2

EXAMPLE = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


def test_part1_example():
    assert part1(EXAMPLE) == 95437


def test_part2_example():
    assert part2(EXAMPLE) == 24933642


def test_directory_sizes_example():
    assert directory_sizes(EXAMPLE) == {
        "/": 48381165,
        "/a/": 94853,
        "/a/e/": 584,
        "/d/": 24933642,
    }


def test_parse_listing_paths():
    files, dirs = parse_listing(EXAMPLE)
    assert dirs == {"/", "/a/", "/a/e/", "/d/"}
    assert files["/a/e/i"] == 584
    assert files["/b.txt"] == 14848514


def test_root_holds_everything():
    files, _ = parse_listing(EXAMPLE)
    assert directory_sizes(EXAMPLE)["/"] == sum(files.values())


def test_leaving_root_is_an_error():
    with pytest.raises(ValueError):
        parse_listing("$ cd /\n$ cd ..\n")


def test_bad_size_is_an_error():
    with pytest.raises(ValueError):
        parse_listing("$ cd /\n$ ls\nbig file.txt\n")