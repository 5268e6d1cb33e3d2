import json

import pytest

from advent2024.day import Day
from advent2024.timings import Timing, Timings


def mock_timings() -> Timings:
    return Timings(
        [
            Timing(Day(1), "10ms", "20ms", 3e10),
            Timing(Day(2), "30ms", "40ms", 7e10),
            Timing(Day(4), "40ms", None, 4e10),
        ]
    )


def test_handles_json_timings():
    text = '{ "data": [{ "day": "01", "part_1": "1ms", "part_2": null, "total_nanos": 1000000000 }] }'
    timings = Timings.from_json(text)
    assert len(timings.data) == 1
    timing = timings.data[0]
    assert timing.day == Day(1)
    assert timing.part_1 == "1ms"
    assert timing.part_2 is None
    assert timing.total_nanos == 1_000_000_000.0


def test_handles_empty_timings():
    assert Timings.from_json('{ "data": [] }').data == []


def test_rejects_document_without_data():
    with pytest.raises(ValueError):
        Timings.from_json("{}")


def test_rejects_invalid_json_text():
    with pytest.raises(ValueError, match="not valid JSON"):
        Timings.from_json("{not json")


def test_rejects_malformed_timings():
    text = '{ "data": [{ "day": "01" }, { "day": "26" }, { "day": "02", "part_2": null, "total_nanos": 0 }] }'
    with pytest.raises(ValueError):
        Timings.from_json(text)


def test_rejects_out_of_range_day():
    text = '{ "data": [{ "day": "26", "part_1": null, "part_2": null, "total_nanos": 0 }] }'
    with pytest.raises(ValueError, match="timing.day"):
        Timings.from_json(text)


def test_serializes_timings():
    document = json.loads(mock_timings().to_json())
    assert len(document["data"]) == 3
    assert document["data"][0] == {
        "day": "01",
        "part_1": "10ms",
        "part_2": "20ms",
        "total_nanos": 3e10,
    }
    assert document["data"][2]["part_2"] is None


def test_json_round_trip():
    assert Timings.from_json(mock_timings().to_json()) == mock_timings()


def test_store_and_read_file(tmp_path):
    path = tmp_path / "timings.json"
    mock_timings().store_file(path)
    assert Timings.read_from_file(path) == mock_timings()


def test_read_missing_file_gives_empty(tmp_path):
    assert Timings.read_from_file(tmp_path / "missing.json").data == []


def test_handles_completed_days():
    timings = Timings([Timing(Day(1), "1ms", "2ms", 3e9)])
    assert timings.is_day_complete(Day(1)) is True


def test_handles_partial_days():
    timings = Timings([Timing(Day(1), "1ms", None, 1e9)])
    assert timings.is_day_complete(Day(1)) is False


def test_handles_uncompleted_days():
    timings = Timings([Timing(Day(1), None, None, 0.0)])
    assert timings.is_day_complete(Day(1)) is False


def test_merge_disjunct_timings():
    merged = mock_timings().merge(Timings([Timing(Day(3), None, None, 0.0)]))
    assert [timing.day for timing in merged.data] == [1, 2, 3, 4]


def test_merge_overlapping_timings():
    merged = mock_timings().merge(Timings([Timing(Day(2), None, None, 0.0)]))
    assert [timing.day for timing in merged.data] == [1, 2, 4]
    assert merged.data[1].total_nanos == 0.0


def test_merge_into_empty_timings():
    assert len(Timings().merge(mock_timings()).data) == 3


def test_merge_with_empty_other_timings():
    assert len(mock_timings().merge(Timings()).data) == 3


def test_total_millis():
    assert mock_timings().total_millis() == pytest.approx(140_000.0)