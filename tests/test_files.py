import pytest

from advent2024.day import Day, InvalidDayError
from advent2024.files import read_file, read_file_part


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    examples = tmp_path / "data" / "examples"
    examples.mkdir(parents=True)
    return examples


def test_read_file_uses_padded_day(data_dir):
    (data_dir / "03.txt").write_text("example three\n", encoding="utf-8")
    assert read_file("examples", Day(3)) == "example three\n"


def test_read_file_accepts_plain_int(data_dir):
    (data_dir / "12.txt").write_text("twelve", encoding="utf-8")
    assert read_file("examples", 12) == "twelve"


def test_read_file_part_appends_suffix(data_dir):
    (data_dir / "05-2.txt").write_text("second part", encoding="utf-8")
    (data_dir / "05.txt").write_text("whole", encoding="utf-8")
    assert read_file_part("examples", Day(5), 2) == "second part"
    assert read_file("examples", Day(5)) == "whole"


def test_missing_file_raises(data_dir):
    with pytest.raises(FileNotFoundError):
        read_file("examples", Day(1))
    with pytest.raises(FileNotFoundError):
        read_file_part("examples", Day(1), 1)


def test_invalid_day_raises(data_dir):
    with pytest.raises(InvalidDayError):
        read_file("examples", 30)