"""Reading puzzle inputs and examples from the data directory."""

from __future__ import annotations

from pathlib import Path

from advent2024.day import Day


def _data_path(folder: str, name: str) -> Path:
    return Path.cwd() / "data" / folder / name


def read_file(folder: str, day: int) -> str:
    """Read ``data/<folder>/<day>.txt`` relative to the working directory."""
    return _data_path(folder, f"{Day(day)}.txt").read_text(encoding="utf-8")


def read_file_part(folder: str, day: int, part: int) -> str:
    """Read ``data/<folder>/<day>-<part>.txt`` relative to the working directory."""
    return _data_path(folder, f"{Day(day)}-{part}.txt").read_text(encoding="utf-8")