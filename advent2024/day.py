"""Days of advent, numbered 1 to 25."""

from __future__ import annotations

import operator
import re
from datetime import datetime, timedelta, timezone
from typing import Iterator, Optional

_SERVER_TZ = timezone(timedelta(hours=-5))
_DAY_TEXT = re.compile(r"\+?[0-9]+")
_FIRST_DAY = 1
_LAST_DAY = 25


class InvalidDayError(ValueError):
    """Raised for a day number outside 1 to 25."""

    def __init__(self, message: str = "expecting a day number between 1 and 25"):
        super().__init__(message)


class Day(int):
    """A valid day of advent. Displays as a two-digit number."""

    def __new__(cls, value: int) -> Day:
        number = operator.index(value)
        if not _FIRST_DAY <= number <= _LAST_DAY:
            raise InvalidDayError()
        return super().__new__(cls, number)

    def __str__(self) -> str:
        return f"{int(self):02d}"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return format(int(self), spec)

    def __repr__(self) -> str:
        return f"Day({int(self)})"

    @classmethod
    def parse(cls, text: str) -> Day:
        """Parse a day number from text, such as ``"7"`` or ``"07"``."""
        if not _DAY_TEXT.fullmatch(text):
            raise InvalidDayError()
        return cls(int(text))

    @classmethod
    def today(cls) -> Optional[Day]:
        """The current day in the puzzle server's time zone, if it is 1-25 December."""
        now = datetime.now(_SERVER_TZ)
        if now.month == 12 and now.day <= _LAST_DAY:
            return cls(now.day)
        return None


def all_days() -> Iterator[Day]:
    """Yield every day of advent from the 1st to the 25th."""
    for number in range(_FIRST_DAY, _LAST_DAY + 1):
        yield Day(number)