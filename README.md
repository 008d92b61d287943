# aocdays

Solutions to a set of Advent of Code puzzles, one module per puzzle, together
with a small helper that downloads your personal puzzle input.

## Puzzles covered

| Module                 | Puzzle           |
|------------------------|------------------|
| `aocdays.y2022_day21`  | 2022, day 21     |
| `aocdays.y2022_day23`  | 2022, day 23     |
| `aocdays.y2022_day24`  | 2022, day 24     |
| `aocdays.y2022_day25`  | 2022, day 25     |
| `aocdays.y2023_day01`  | 2023, day 1      |
| `aocdays.y2023_day02`  | 2023, day 2      |
| `aocdays.y2023_day03`  | 2023, day 3      |
| `aocdays.y2023_day04`  | 2023, day 4      |
| `aocdays.y2023_day05`  | 2023, day 5      |
| `aocdays.y2023_day06`  | 2023, day 6      |
| `aocdays.y2023_day07`  | 2023, day 7      |
| `aocdays.y2023_day08`  | 2023, day 8      |
| `aocdays.y2023_day09`  | 2023, day 9      |
| `aocdays.y2023_day10`  | 2023, day 10     |
| `aocdays.y2023_day11`  | 2023, day 11     |
| `aocdays.y2023_day12`  | 2023, day 12     |

Every module offers `part1(path)` and `part2(path)`. Each reads the puzzle
input from `path` and returns the answer as a string. If `path` is left out,
it defaults to `inputs/input` followed by the two-digit day, for example
`inputs/input01`. Day 25 of 2022 has no second puzzle, so its `part2` only
reads and checks the input and returns an empty string.

```python
from aocdays import y2023_day01

print(y2023_day01.part1("inputs/input01"))
print(y2023_day01.part2("inputs/input01"))
```

The building blocks are public too, so the worked examples from a puzzle
description can be checked directly:

```python
from aocdays.y2022_day25 import SnafuNumber
from aocdays.y2023_day09 import parse_histories

str(SnafuNumber.from_decimal(2022))          # "1=11-2"
SnafuNumber.parse("1=-0-2").to_decimal()     # 1747

histories = parse_histories("0 3 6 9 12 15\n")
histories[0].extrapolate()                   # 18
```

Malformed input raises `ValueError` with a message that names the offending
line or character.

## Fetching puzzle inputs

`aocdays.inputs.get_day_input(day, inputs_dir="inputs", cookies_path="cookies.json")`
downloads the input for a 2022 day and saves it as `input` followed by the
two-digit day in `inputs_dir`, creating the directory if needed. A file that
is already there is left alone and no request is made. Either way the path of
the file is returned. `input_path(day, inputs_dir)` tells you where that file
lives without touching the network.

The request is authenticated with the cookies in a JSON file that maps cookie
names to values, for example:

```json
{"session": "placeholder"}
```

Put the value of your own session cookie in place of `placeholder`.
`load_cookies(path)` reads that file and raises `ValueError` if it is not an
object of strings.

```python
from aocdays.inputs import get_day_input
from aocdays import y2022_day21

path = get_day_input(21, "inputs", "cookies.json")
print(y2022_day21.part1(path))
```

Errors are raised as exceptions:

* `NotLoggedInError`: the server answered with status 400. Refresh your
  session cookie.
* `InputUnavailableError`: the puzzle for that day has not been released yet.

## What this package does not do

There is no command-line program. Nothing picks a day from the command line,
downloads its input and prints both answers; call `get_day_input` and the
day modules' `part1` and `part2` from Python instead. The input helper only
fetches 2022 inputs.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
root.