"""Running, timing, printing and submitting puzzle solutions."""

from __future__ import annotations

import sys
import time
from typing import Any, Callable, Optional, Sequence

from advent2024 import aoc_cli
from advent2024.day import Day
from advent2024.files import read_file

ANSI_ITALIC = "\x1b[3m"
ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"

_USAGE = "Unexpected command-line input. Format: solve 1 --submit 1"
_NANOS_PER_SECOND = 1_000_000_000
_MIN_ITERATIONS = 10
_MAX_ITERATIONS = 10_000

Solver = Callable[[str], Any]


def run_part(
    func: Solver,
    puzzle_input: str,
    day: int,
    part: int,
    argv: Optional[Sequence[str]] = None,
) -> Any:
    """Run one part, print its answer and timing, and submit it if asked to.

    ``--time`` in ``argv`` benchmarks the part; ``--submit N`` submits the
    answer when N equals ``part``. Returns the part's answer.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    label = f"Part {part}"

    start = time.perf_counter_ns()
    result = func(puzzle_input)
    base_nanos = time.perf_counter_ns() - start

    _print_result(result, label, "")

    if "--time" in args:
        nanos, samples = _bench(func, puzzle_input, base_nanos)
    else:
        nanos, samples = base_nanos, 1

    _print_result(result, label, _format_duration(nanos, samples))

    if result is not None:
        _submit_result(result, Day(day), part, args)
    return result


def run_day(
    day: int,
    part_one: Optional[Solver] = None,
    part_two: Optional[Solver] = None,
    argv: Optional[Sequence[str]] = None,
) -> dict[int, Any]:
    """Run the given parts on the day's input from ``data/inputs``."""
    day = Day(day)
    puzzle_input = read_file("inputs", day)
    return {
        part: run_part(func, puzzle_input, day, part, argv)
        for part, func in ((1, part_one), (2, part_two))
        if func is not None
    }


def _bench(func: Solver, puzzle_input: str, base_nanos: int) -> tuple[int, int]:
    print(f" > {ANSI_ITALIC}benching{ANSI_RESET}", end="", flush=True)
    iterations = _NANOS_PER_SECOND // max(base_nanos, 10)
    iterations = min(max(iterations, _MIN_ITERATIONS), _MAX_ITERATIONS)

    timings = []
    for _ in range(iterations):
        start = time.perf_counter_ns()
        func(puzzle_input)
        timings.append(time.perf_counter_ns() - start)

    return sum(timings) // len(timings), iterations


def _format_elapsed(nanos: int) -> str:
    if nanos >= 1_000_000_000:
        value, unit = nanos / 1_000_000_000, "s"
    elif nanos >= 1_000_000:
        value, unit = nanos / 1_000_000, "ms"
    elif nanos >= 1_000:
        value, unit = nanos / 1_000, "µs"
    else:
        value, unit = float(nanos), "ns"
    return f"{value:.1f}{unit}"


def _format_duration(nanos: int, samples: int) -> str:
    elapsed = _format_elapsed(nanos)
    if samples == 1:
        return f" ({elapsed})"
    return f" ({elapsed} @ {samples} samples)"


def _print_result(result: Any, label: str, duration: str) -> None:
    intermediate = not duration

    if result is None:
        if intermediate:
            print(f"{label}: ✖", end="", flush=True)
        else:
            print(f"\r{label}: ✖             ")
        return

    text = str(result)
    if "\n" in text:
        line = f"{label}: ▼ {duration}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print(f"\r{line}")
            print(text)
    else:
        line = f"{label}: {ANSI_BOLD}{text}{ANSI_RESET}{duration}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print(f"\r{line}")


def _submit_result(result: Any, day: Day, part: int, args: list[str]):
    if "--submit" not in args:
        return None

    position = args.index("--submit") + 1
    try:
        part_submit = int(args[position])
    except (IndexError, ValueError):
        part_submit = -1
    if not 0 <= part_submit <= 255:
        print(_USAGE, file=sys.stderr)
        raise SystemExit(1)

    if part_submit != part:
        return None

    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        print(
            'command "aoc" not found or not callable. '
            "Install aoc-cli to submit answers.",
            file=sys.stderr,
        )
        raise SystemExit(1)

    print("Submitting result via aoc-cli...")
    try:
        return aoc_cli.submit(day, part, str(result))
    except aoc_cli.AocCommandError as exc:
        print(f"failed to call aoc-cli: {exc}", file=sys.stderr)
        return None