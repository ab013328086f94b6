from datetime import date

import pytest

from lucky_for_life.loader.csv_parser import load_drawings, parse_rows

HEADER = ["Date", "Number 1", "Number 2", "Number 3", "Number 4", "Number 5", "Lucky Ball"]


def test_load_reverses_to_chronological_order(drawings):
    assert len(drawings) == 5
    assert drawings[0].draw_date == date(2024, 1, 3)
    assert drawings[-1].draw_date == date(2024, 1, 15)
    assert [d.sequence_index for d in drawings] == [0, 1, 2, 3, 4]
    assert drawings[-1].numbers == (5, 12, 23, 34, 45)
    assert drawings[-1].special_number == 7


def test_unusable_rows_are_skipped():
    rows = [
        HEADER,
        ["01/15/2024", "5", "12", "23", "34", "45", "7"],
        ["01/14/2024", "5", "12"],                          # too short
        ["", "1", "2", "3", "4", "5", "6"],                 # blank date
        ["2024-01-13", "1", "2", "3", "4", "5", "6"],       # wrong date format
        ["01/12/2024", "a", "2", "3", "4", "5", "6"],       # not an integer
        ["01/11/2024", "1", "2", "3", "4", "49", "6"],      # out of range
        ["01/10/2024", "1", "1", "3", "4", "5", "6"],       # duplicate
        ["01/09/2024", "1", "2", "3", "4", "5", "19"],      # lucky ball out of range
        ["01/08/2024", "1", "2", "3", "4", "5", "18"],
    ]
    drawings = parse_rows(rows)
    assert [d.draw_date for d in drawings] == [date(2024, 1, 8), date(2024, 1, 15)]
    assert [d.sequence_index for d in drawings] == [0, 1]


def test_header_only_yields_nothing():
    assert parse_rows([HEADER]) == []
    assert parse_rows([]) == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_drawings(tmp_path / "missing.csv")
