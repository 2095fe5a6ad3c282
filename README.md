# adventkit

Solvers for daily programming puzzles from the 2022, 2023 and 2024 seasons.
Each day is its own module, named `adventkit.y<year>_day<nn>`:

- 2022: days 01 to 11
- 2023: days 01 to 05
- 2024: days 01 to 08

Most modules expose `part1(text)` and `part2(text)`. Each takes the whole
puzzle input as a string and returns the answer. The 2022 days 01 to 04 have
only `part1`. `y2022_day10.part2` returns the drawn screen as six lines of
`#` and `.` rather than a number. Input that a solver cannot read raises
`ValueError`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
adventkit YEAR DAY [PART] [INPUT]
```

The command reads the input file, runs the chosen part and prints the answer.
`PART` defaults to 1 and `INPUT` to `test.txt` in the current directory. For
example:

```
adventkit 2024 3 2 input.txt
adventkit --help
```

An unknown year, day or part, a file that cannot be read, or input a solver
rejects is reported on standard error, and the command exits with status 1.

The same choice is available from Python as
`adventkit.cli.solve(year, day, part, text)`.

## Library use

```python
from adventkit import y2022_day06

print(y2022_day06.part1("mjqjpqmgbljsphdztnvjfqwrcgsmlb"))  # 7
```

Besides `part1` and `part2`, the modules expose the pieces the answers are
built from. Examples are `y2022_day08.scenic_score(forest, row, col)`,
`y2022_day09.Knot`, `y2022_day11.parse_monkeys(text)`,
`y2024_day02.check_report(levels)` and `y2024_day07.is_solvable(numbers, base, target)`.

### Bundled data

The 2022 days 01 to 05 carry their puzzle data. `puzzle_input()` returns it,
and days 02 to 05 also offer a short worked example through `example_input()`.

```python
from adventkit import y2022_day02

print(y2022_day02.total_score(y2022_day02.example_input()))  # 12
```

2022 day 05 works on stacks and move lines rather than on a single text, so
it has no `part1` and no command-line entry. Call `top_crates` directly:

```python
from adventkit import y2022_day05

stacks, moves = y2022_day05.example_input()
print(y2022_day05.top_crates(stacks, moves))  # MCD
```

## What it does not do

- It does not fetch puzzle inputs. Apart from the bundled 2022 data, you
  supply each input as a file or a string.
- `y2023_day05.part2` checks every seed in every range one by one. On full
  puzzle inputs it can take a very long time.

## Tests

```
pytest
```