import pytest

from timelog_analysis.adapters.csv_adapter import parse as parse_csv
from timelog_analysis.errors import LoadError


def test_csv_parse_success(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(
        "Date,Clock In Time,Clock Out Time,Notes\n"
        "01/07/2024,08:00,16:30,\n"
        '02/07/2024,08:15,17:00,"16:00 lecture, Post-Work Commitment"\n',
        encoding="utf-8",
    )
    records = parse_csv(str(path))
    assert len(records) == 2
    assert records[0].date_text == "01/07/2024"
    assert records[0].notes_text == ""
    assert records[1].notes_text == "16:00 lecture, Post-Work Commitment"


def test_csv_parse_keeps_text_and_order_with_shuffled_header(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(
        "Notes,Clock Out Time,Date,Clock In Time\n"
        "Conference,17:00,03/07/2024,08:00\n"
        ",16:00,01/07/2024,07:30\n",
        encoding="utf-8",
    )
    records = parse_csv(str(path))
    assert [r.date_text for r in records] == ["03/07/2024", "01/07/2024"]
    assert records[0].clock_in_text == "08:00"
    assert records[0].clock_out_text == "17:00"
    assert records[0].notes_text == "Conference"


def test_csv_parse_short_row_leaves_notes_absent(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("Date,Clock In Time,Clock Out Time,Notes\n01/07/2024,08:00,16:30\n", encoding="utf-8")
    records = parse_csv(str(path))
    assert records[0].notes_text is None


def test_csv_parse_missing_file(tmp_path):
    with pytest.raises(LoadError):
        parse_csv(str(tmp_path / "missing.csv"))


def test_csv_parse_wrong_header(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("Date,Start,End,Notes\n01/07/2024,08:00,16:30,\n", encoding="utf-8")
    with pytest.raises(LoadError):
        parse_csv(str(path))


def test_csv_parse_empty_file(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(LoadError):
        parse_csv(str(path))


def test_csv_parse_extra_field(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(
        "Date,Clock In Time,Clock Out Time,Notes\n01/07/2024,08:00,16:30,Conference,extra\n",
        encoding="utf-8",
    )
    with pytest.raises(LoadError):
        parse_csv(str(path))
