from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from advent2024.day import Day, InvalidDayError, all_days


def test_all_days_iterator():
    iterator = all_days()
    for expected in range(1, 26):
        assert next(iterator) == Day(expected)
    with pytest.raises(StopIteration):
        next(iterator)


def test_day_displays_as_two_digits():
    assert str(Day(8)) == "08"
    assert f"{Day(8)}" == "08"
    assert str(Day(25)) == "25"


@pytest.mark.parametrize("value", [0, 26, -1, 255])
def test_out_of_range_day_is_rejected(value):
    with pytest.raises(InvalidDayError):
        Day(value)


def test_invalid_day_error_message():
    with pytest.raises(InvalidDayError, match="between 1 and 25"):
        Day(0)


def test_day_compares_with_int():
    assert Day(3) == 3
    assert Day(3) < 4
    assert sorted([Day(5), Day(1), Day(3)]) == [1, 3, 5]


@pytest.mark.parametrize("text, expected", [("1", 1), ("07", 7), ("25", 25), ("+4", 4)])
def test_parse_valid(text, expected):
    assert Day.parse(text) == Day(expected)


@pytest.mark.parametrize("text", ["0", "26", "abc", "", " 5", "-3", "1.5"])
def test_parse_invalid(text):
    with pytest.raises(InvalidDayError):
        Day.parse(text)


def test_today_in_december():
    with patch("advent2024.day.datetime") as mocked:
        mocked.now.return_value = datetime(2024, 12, 3, tzinfo=timezone.utc)
        assert Day.today() == Day(3)


def test_today_after_the_25th():
    with patch("advent2024.day.datetime") as mocked:
        mocked.now.return_value = datetime(2024, 12, 26, tzinfo=timezone.utc)
        assert Day.today() is None


def test_today_outside_december():
    with patch("advent2024.day.datetime") as mocked:
        mocked.now.return_value = datetime(2024, 7, 10, tzinfo=timezone.utc)
        assert Day.today() is None