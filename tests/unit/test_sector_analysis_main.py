"""Unit tests for the sector analysis driver and CLI."""

import json
import os
from unittest.mock import Mock

import pandas as pd
import pytest

import parsing.sector_analysis_main as sam
from conftest import NORMAL_LAP_2, START_LAP, racer_header
from parsing._errors import DocumentOpenError


@pytest.fixture
def fake_pdf(monkeypatch):
    """Replace PDF access with fixed page token lists."""
    pages = [["Race Sector Analysis"] + racer_header("44", "Jane Doe") + START_LAP + NORMAL_LAP_2]
    doc = Mock()
    monkeypatch.setattr(sam, "open_document", lambda path: doc)
    monkeypatch.setattr(sam, "parse_file", lambda d: pages)
    return pages, doc


class TestParseSectorAnalysis:
    """Tests for parse_sector_analysis."""

    def test_closes_document(self, fake_pdf):
        pages, doc = fake_pdf
        race_data = sam.parse_sector_analysis("race.pdf")
        assert list(race_data) == ["Jane Doe"]
        doc.close.assert_called_once()

    def test_closes_document_on_failure(self, fake_pdf):
        pages, doc = fake_pdf
        pages[0][pages[0].index("42.100")] = "abc"
        with pytest.raises(sam.SectorAnalysisError):
            sam.parse_sector_analysis("race.pdf")
        doc.close.assert_called_once()


class TestMain:
    """Tests for the command line entry point."""

    def test_writes_json(self, fake_pdf, tmp_path):
        out = tmp_path / "result.json"
        assert sam.main(["-f", "race.pdf", "-o", str(out)]) == 0
        data = json.loads(out.read_text())
        assert [lap["lap"] for lap in data["Jane Doe"]] == [1, 2]
        assert data["Jane Doe"][0]["sectors"][0] == {"sector": 1, "time_ms": None, "speed": 212.4}

    def test_prints_json_without_output(self, fake_pdf, capsys):
        assert sam.main(["-f", "race.pdf"]) == 0
        assert "Jane Doe" in json.loads(capsys.readouterr().out)

    def test_error_exits_non_zero_without_output(self, fake_pdf, tmp_path, capsys):
        pages, _ = fake_pdf
        pages[0][pages[0].index("42.100")] = "abc"
        out = tmp_path / "result.json"
        assert sam.main(["-f", "race.pdf", "-o", str(out)]) == 1
        assert not out.exists()
        assert "'abc'" in capsys.readouterr().err

    def test_open_error(self, monkeypatch, capsys):
        def fail(path):
            raise DocumentOpenError(path, "no such file")
        monkeypatch.setattr(sam, "open_document", fail)
        assert sam.main(["-f", "missing.pdf"]) == 1
        assert "missing.pdf" in capsys.readouterr().err


class TestParseAndSave:
    """Tests for the batch driver."""

    def test_writes_raw_and_clean_outputs(self, fake_pdf, tmp_path):
        os.makedirs(tmp_path / sam.INPUT_DIR)
        (tmp_path / sam.INPUT_DIR / "race.pdf").write_bytes(b"%PDF")

        sam.parse_and_save_sector_analysis("ALL", base_dir=str(tmp_path))

        raw = json.loads((tmp_path / sam.RAW_DIR / "race.json").read_text())
        assert list(raw) == ["Jane Doe"]
        df = pd.read_parquet(tmp_path / sam.CLEAN_DIR / "race.pq")
        assert set(df.Racer) == {"Jane Doe"}
        assert len(df) == 6

    def test_upper_case_extension(self, fake_pdf, tmp_path):
        os.makedirs(tmp_path / sam.INPUT_DIR)
        (tmp_path / sam.INPUT_DIR / "RACE.PDF").write_bytes(b"%PDF")

        sam.parse_and_save_sector_analysis("ALL", base_dir=str(tmp_path))

        assert os.listdir(tmp_path / sam.RAW_DIR) == ["RACE.json"]
        assert os.listdir(tmp_path / sam.CLEAN_DIR) == ["RACE.pq"]

    def test_skips_parsed_files(self, fake_pdf, tmp_path, monkeypatch):
        sam.parse_and_save_sector_analysis(["race.pdf"], base_dir=str(tmp_path))
        parser = Mock()
        monkeypatch.setattr(sam, "parse_sector_analysis", parser)
        sam.parse_and_save_sector_analysis(["race.pdf"], base_dir=str(tmp_path))
        parser.assert_not_called()

    def test_failed_file_leaves_no_output(self, fake_pdf, tmp_path, caplog):
        pages, _ = fake_pdf
        pages[0][pages[0].index("42.100")] = "abc"

        sam.parse_and_save_sector_analysis(["race.pdf"], base_dir=str(tmp_path))

        assert os.listdir(tmp_path / sam.RAW_DIR) == []
        assert os.listdir(tmp_path / sam.CLEAN_DIR) == []
        assert "Failed to parse and clean race.pdf" in caplog.text
