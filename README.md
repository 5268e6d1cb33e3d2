# advent2024

Solutions to days 1 to 21 of the 2024 Advent of Code puzzles. Each day is a
module in `advent2024.solutions` with a `part_one` and a `part_two` function
that take the puzzle text and return the answer, and a `main` that runs both
parts on your input, prints the answers, can benchmark them and can hand an
answer to the `aoc` command-line client for submission.

No third-party libraries are needed.

## Installing

```
pip install .
pip install ".[test]"   # with pytest, to run the test suite
```

## Puzzle data

Inputs are read relative to the current working directory, with the day
written as two digits:

```
data/inputs/01.txt      # your puzzle input for day 1
data/examples/01.txt    # an example, for use from Python or tests
data/examples/03-1.txt  # a per-part example
```

`advent2024.files.read_file(folder, day)` reads `data/<folder>/<NN>.txt` and
`read_file_part(folder, day, part)` reads `data/<folder>/<NN>-<part>.txt`.

A few days tell the worked example from a real input by its size and change
their parameters to match: day 14 uses an 11 × 7 room for inputs shorter than
200 characters (101 × 103 otherwise), day 18 uses a 7 × 7 grid and 12 fallen
bytes for inputs of up to 100 lines (71 × 71 and 1024 otherwise), and day 20
uses smaller time savings on narrow maps.

## Running a day

Each day has its own command, `advent2024-day01` to `advent2024-day21`:

```
advent2024-day01
advent2024-day16 --time
advent2024-day05 --submit 2
```

The command reads `data/inputs/NN.txt` and prints one line per part, such as
`Part 1: 11 (1.2ms)`. A part whose answer spans several lines is printed
below its heading.

Options:

- `--time` — run each part repeatedly (between 10 and 10,000 times, aiming
  for about a second in total) and report the average time with the number
  of samples.
- `--submit N` — after solving, submit the answer of part `N` with the `aoc`
  client, which must be installed and on your `PATH`. If `AOC_YEAR` is set
  in the environment it is passed on as the event year. The command exits
  with status 1 if `N` is not a number or `aoc` cannot be started.

## Using the solutions from Python

```python
from advent2024.day import Day
from advent2024.files import read_file
from advent2024.solutions import day01

text = read_file("examples", Day(1))
print(day01.part_one(text), day01.part_two(text))
```

`advent2024.runner.run_day(day, part_one, part_two, argv)` does what the day
commands do, and `run_part(func, puzzle_input, day, part, argv)` runs a single
part on text you supply; both take the options above in `argv`.

Other modules:

- `advent2024.day` — `Day`, an `int` from 1 to 25 that prints as two digits;
  `Day.parse("7")`, `Day.today()` (the current day in December, in the puzzle
  server's UTC−5 time zone, or `None`), and `all_days()`. Out-of-range days
  raise `InvalidDayError`.
- `advent2024.grid` — `Point` with bounded moves (`up`, `down`, `left`,
  `right`, their `_n` forms, diagonals and `udlr`), plus the `Direction` and
  `CardinalDirection` enums.
- `advent2024.aoc_cli` — `check()`, `read(day)`, `download(day)` and
  `submit(day, part, result)`, each running the `aoc` client; failures raise
  `AocCommandError`. `download` writes to `data/inputs/NN.txt` and
  `data/puzzles/NN.md`.
- `advent2024.timings` — `Timing` and `Timings`, benchmark records per day
  that can be converted to and from JSON (`to_json`, `from_json`), saved and
  loaded (`store_file`, `read_from_file`, by default `./data/timings.json`),
  merged, totalled in milliseconds and checked with `is_day_complete`.

## What it does not do

There are no solutions for days 22 to 25. There is no single command that
runs every day, creates the files for a new day, downloads or shows a puzzle,
or collects benchmark results: the day commands do not record their timings,
and nothing here writes a benchmark table into a README. The `aoc_cli` and
`timings` functions are there to be called from Python for these jobs.

## Tests

```
pytest
```