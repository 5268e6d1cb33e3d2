"""Benchmark timings per day, stored as JSON."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from advent2024.day import Day, InvalidDayError

TIMINGS_FILE_PATH = "./data/timings.json"

PathLike = Union[str, Path]


def _optional_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class Timing:
    """Benchmark times for a single day."""

    day: Day
    part_1: Optional[str] = None
    part_2: Optional[str] = None
    total_nanos: float = 0.0

    @classmethod
    def from_dict(cls, value: Any) -> Timing:
        """Build a timing from a decoded JSON object; raise ValueError if malformed."""
        if not isinstance(value, dict):
            raise ValueError("Expected timing to be a JSON object.")

        day_text = value.get("day")
        if not isinstance(day_text, str):
            raise ValueError("Expected timing.day to be a Day struct.")
        try:
            day = Day.parse(day_text)
        except InvalidDayError as exc:
            raise ValueError("Expected timing.day to be a Day struct.") from exc

        if "part_1" not in value:
            raise ValueError("Expected timing.part_1 to be null or string.")
        if "part_2" not in value:
            raise ValueError("Expected timing.part_2 to be null or string.")

        total_nanos = value.get("total_nanos")
        if not _is_number(total_nanos):
            raise ValueError("Expected timing.total_nanos to be a number.")

        return cls(
            day=day,
            part_1=_optional_text(value["part_1"]),
            part_2=_optional_text(value["part_2"]),
            total_nanos=float(total_nanos),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "day": str(Day(self.day)),
            "part_1": self.part_1,
            "part_2": self.part_2,
            "total_nanos": float(self.total_nanos),
        }


@dataclass
class Timings:
    """Benchmark times for a set of days."""

    data: list[Timing] = field(default_factory=list)

    @classmethod
    def from_json(cls, text: str) -> Timings:
        """Parse timings from JSON text; raise ValueError if malformed."""
        try:
            document = json.loads(text)
        except ValueError as exc:
            raise ValueError("not valid JSON file.") from exc
        if not isinstance(document, dict):
            raise ValueError("expected JSON document to be an object.")
        if "data" not in document:
            raise ValueError("expected JSON document to have key `data`.")
        entries = document["data"]
        if not isinstance(entries, list):
            raise ValueError("expected `json.data` to be an array.")
        return cls([Timing.from_dict(entry) for entry in entries])

    def to_json(self) -> str:
        return json.dumps({"data": [timing.to_dict() for timing in self.data]})

    def store_file(self, path: PathLike = TIMINGS_FILE_PATH) -> None:
        """Write the timings as JSON to ``path``."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def read_from_file(cls, path: PathLike = TIMINGS_FILE_PATH) -> Timings:
        """Read timings from ``path``; report problems and return empty timings."""
        try:
            return cls.from_json(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            print(exc, file=sys.stderr)
            return cls()

    def merge(self, new: Timings) -> Timings:
        """Combine two sets of timings, preferring entries from ``new``."""
        data = list(new.data)
        known_days = {timing.day for timing in data}
        data.extend(timing for timing in self.data if timing.day not in known_days)
        data.sort(key=lambda timing: timing.day)
        return Timings(data)

    def total_millis(self) -> float:
        return sum(timing.total_nanos for timing in self.data) / 1_000_000

    def is_day_complete(self, day: int) -> bool:
        return any(
            timing.day == day
            and timing.part_1 is not None
            and timing.part_2 is not None
            for timing in self.data
        )