import logging

import pytest

from tlescope.tleparser import TLEEntry, parse_tle_file

NAME = "ISS (ZARYA)"
LINE1 = "1 25544U 98067A   24001.50000000  .00016717  00000-0  10270-3 0  9002"
LINE2 = "2 25544  51.6416 247.4627 0006703 130.5360 325.0288 15.72125391563537"
OTHER = "SAT TWO"


def _write(tmp_path, text):
    path = tmp_path / "sats.tle"
    path.write_text(text, encoding="utf-8")
    return path


def test_single_entry(tmp_path):
    path = _write(tmp_path, f"{NAME}\n{LINE1}\n{LINE2}\n")
    assert parse_tle_file(path) == [TLEEntry(NAME, LINE1, LINE2)]


def test_accepts_string_path(tmp_path):
    path = _write(tmp_path, f"{NAME}\n{LINE1}\n{LINE2}")
    assert parse_tle_file(str(path)) == [TLEEntry(NAME, LINE1, LINE2)]


def test_blank_lines_between_entries_are_skipped(tmp_path):
    text = f"\n{NAME}\n{LINE1}\n{LINE2}\n\n\n{OTHER}\n{LINE1}\n{LINE2}\n"
    entries = parse_tle_file(_write(tmp_path, text))
    assert [entry.name for entry in entries] == [NAME, OTHER]
    assert all(entry.line2 == LINE2 for entry in entries)


def test_incomplete_entry_keeps_previous(tmp_path, caplog):
    text = f"{NAME}\n{LINE1}\n{LINE2}\n{OTHER}\n{LINE1}\n"
    with caplog.at_level(logging.WARNING, logger="tlescope.tleparser"):
        entries = parse_tle_file(_write(tmp_path, text))
    assert entries == [TLEEntry(NAME, LINE1, LINE2)]
    assert OTHER in caplog.text


def test_name_only_is_incomplete(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="tlescope.tleparser"):
        entries = parse_tle_file(_write(tmp_path, f"{OTHER}\n"))
    assert entries == []
    assert "Incomplete" in caplog.text


def test_empty_file(tmp_path):
    assert parse_tle_file(_write(tmp_path, "")) == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_tle_file(tmp_path / "absent.tle")