"""No space left on device: directory sizes from a shell session."""

from __future__ import annotations

DISK_SIZE = 70_000_000
NEEDED = 30_000_000
SMALL_LIMIT = 100_000


def parse_listing(text: str) -> tuple[dict[str, int], set[str]]:
    """Return file sizes by path and the set of directory paths.

    Directory paths end with a slash; the root is "/".
    """
    files: dict[str, int] = {}
    dirs: set[str] = {"/"}
    cwd = ""
    for line in text.splitlines():
        if not line:
            continue
        if line.startswith("$"):
            command = line[2:]
            if command[:2] == "cd":
                target = command[3:]
                if target == "..":
                    cut = cwd.rfind("/")
                    if cut < 0:
                        raise ValueError("cannot leave the root directory")
                    cwd = cwd[:cut]
                elif target == "/":
                    cwd = ""
                else:
                    cwd += "/" + target
            continue
        size, name = line.split(" ", 1)
        if size == "dir":
            dirs.add(f"{cwd}/{name}/")
        else:
            files[f"{cwd}/{name}"] = int(size)
    return files, dirs


def directory_sizes(text: str) -> dict[str, int]:
    """Total size of every directory, including its subdirectories."""
    files, dirs = parse_listing(text)
    return {
        directory: sum(size for path, size in files.items() if path.startswith(directory))
        for directory in dirs
    }


def part1(text: str) -> int:
    """Sum the sizes of directories of at most 100000."""
    return sum(size for size in directory_sizes(text).values() if size <= SMALL_LIMIT)


def part2(text: str) -> int:
    """Size of the smallest directory whose removal frees enough space."""
    files, _ = parse_listing(text)
    must_free = NEEDED - DISK_SIZE + sum(files.values())
    best_excess = DISK_SIZE
    result = 0
    for size in directory_sizes(text).values():
        excess = size - must_free
        if size > must_free and excess < best_excess:
            best_excess = excess
            result = size
    return result