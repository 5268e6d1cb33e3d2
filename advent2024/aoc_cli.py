"""Calls to the external ``aoc`` command-line client."""

from __future__ import annotations

import os
import re
import subprocess

from advent2024.day import Day

_AOC = "aoc"
_YEAR_TEXT = re.compile(r"\+?[0-9]+")
_YEAR_MAX = 65535


class AocCommandError(Exception):
    """The aoc client could not be run or reported a failure."""


class CommandNotFoundError(AocCommandError):
    def __init__(self) -> None:
        super().__init__("aoc-cli is not present in environment.")


class CommandNotCallableError(AocCommandError):
    def __init__(self) -> None:
        super().__init__("aoc-cli could not be called.")


class BadExitStatusError(AocCommandError):
    def __init__(self, completed: subprocess.CompletedProcess) -> None:
        super().__init__("aoc-cli exited with a non-zero status.")
        self.completed = completed


def check() -> None:
    """Raise CommandNotFoundError unless the aoc client can be started."""
    try:
        subprocess.run([_AOC, "-V"], capture_output=True, check=False)
    except OSError as exc:
        raise CommandNotFoundError() from exc


def read(day: int) -> subprocess.CompletedProcess:
    """Show the puzzle description for ``day``."""
    day = Day(day)
    args = _build_args(
        "read",
        ["--description-only", "--puzzle-file", _puzzle_path(day)],
        day,
    )
    return _call(args)


def download(day: int) -> subprocess.CompletedProcess:
    """Download the input and puzzle description for ``day``."""
    day = Day(day)
    input_path = _input_path(day)
    puzzle_path = _puzzle_path(day)
    args = _build_args(
        "download",
        [
            "--overwrite",
            "--input-file",
            input_path,
            "--puzzle-file",
            puzzle_path,
        ],
        day,
    )
    completed = _call(args)
    print("---")
    print(f'🎄 Successfully wrote input to "{input_path}".')
    print(f'🎄 Successfully wrote puzzle to "{puzzle_path}".')
    return completed


def submit(day: int, part: int, result: str) -> subprocess.CompletedProcess:
    """Submit ``result`` as the answer to ``part`` of ``day``."""
    args = _build_args("submit", [], Day(day))
    args.extend([str(part), result])
    return _call(args)


def _input_path(day: Day) -> str:
    return f"data/inputs/{day}.txt"


def _puzzle_path(day: Day) -> str:
    return f"data/puzzles/{day}.md"


def _year() -> int | None:
    value = os.environ.get("AOC_YEAR")
    if value is None or not _YEAR_TEXT.fullmatch(value):
        return None
    year = int(value)
    return year if year <= _YEAR_MAX else None


def _build_args(command: str, args: list[str], day: Day) -> list[str]:
    cmd_args = list(args)
    year = _year()
    if year is not None:
        cmd_args.extend(["--year", str(year)])
    cmd_args.extend(["--day", str(day), command])
    return cmd_args


def _call(args: list[str]) -> subprocess.CompletedProcess:
    try:
        completed = subprocess.run([_AOC, *args], check=False)
    except OSError as exc:
        raise CommandNotCallableError() from exc
    if completed.returncode != 0:
        raise BadExitStatusError(completed)
    return completed