import csv
import json

import pytest

from lucky_for_life.services.export_service import CSV_HEADER, export_analysis, export_payload


def test_payload(analyzer):
    payload = export_payload(analyzer)
    meta = payload["metadata"]
    assert meta["total_drawings"] == 5
    assert meta["date_range"] == "01/03/2024 to 01/15/2024"
    assert meta["chi_square"] == pytest.approx(analyzer.chi_square.total)
    assert len(payload["main_numbers"]) == 48
    assert len(payload["lucky_balls"]) == 18
    assert payload["main_numbers"]["23"]["total_frequency"] == 3
    assert payload["patterns"]["sum_ranges"] == {"100": 2, "120": 3}


def test_export_json(analyzer, tmp_path):
    path = export_analysis(analyzer, "json", tmp_path)
    assert path.suffix == ".json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["lucky_balls"]["7"]["total_frequency"] == 2
    assert data["main_numbers"]["23"]["last_seen_date"] == "2024-01-15"


def test_export_csv(analyzer, tmp_path):
    path = export_analysis(analyzer, "csv", tmp_path / "nested")
    with path.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))
    assert rows[0] == CSV_HEADER
    assert len(rows) == 49
    row = rows[23]
    assert row[0] == "23"
    assert row[1] == "3"
    assert row[3] == "2.00"
    assert row[4] == "4"
    assert row[5] == "01/15/2024"
    assert rows[1][5] == ""


def test_unsupported_format(analyzer, tmp_path):
    with pytest.raises(ValueError):
        export_analysis(analyzer, "xml", tmp_path / "out")
    assert not (tmp_path / "out").exists()


def test_empty_history_payload(empty_analyzer):
    assert export_payload(empty_analyzer)["metadata"]["date_range"] == ""
