"""Tests for CSV output."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pylasread.exceptions import OutputError
from pylasread.writer import format_csv, write_csv


class TestFormatCSV:
    """Tests for format_csv."""

    def test_header_and_rows(self) -> None:
        """Test CSV header and rows."""
        text = format_csv(["DEPT", "GR"], [[100, 50], [200, 999.5]])
        assert text == "DEPT,GR\n100,50\n200,999.5"

    def test_string_values(self) -> None:
        """Test string cells in CSV."""
        assert format_csv(["DEPT", "LITH"], [[1.5, "SAND"]]) == "DEPT,LITH\n1.5,SAND"

    def test_no_rows(self) -> None:
        """Test CSV with no rows."""
        assert format_csv(["DEPT"], []) == "DEPT\n"

    def test_first_line_is_header(self) -> None:
        """The first line is the header."""
        header = ["DEPT", "DT", "RHOB"]
        lines = format_csv(header, [[1, 2, 3], [4, 5, 6]]).split("\n")
        assert lines[0].split(",") == header
        assert len(lines[1:]) == 2


class TestWriteCSV:
    """Tests for write_csv."""

    def test_writes_file(self, tmp_path: Path) -> None:
        """Test writing a CSV file."""
        out = write_csv(tmp_path / "log.csv", ["DEPT", "GR"], [[1, 2]])
        assert out == tmp_path / "log.csv"
        assert out.read_text(encoding="utf-8") == "DEPT,GR\n1,2"

    def test_adds_csv_suffix(self, tmp_path: Path) -> None:
        """Test that .csv is appended."""
        out = write_csv(tmp_path / "log", ["DEPT"], [[1]])
        assert out.name == "log.csv"
        assert out.exists()

    def test_logs_saved_path(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test the log message on save."""
        with caplog.at_level(logging.INFO, logger="pylasread.writer"):
            write_csv(tmp_path / "log.csv", ["DEPT"], [[1]])
        assert "has been saved" in caplog.text

    def test_unwritable_path_raises(self, tmp_path: Path) -> None:
        """Test writing to a bad path."""
        with pytest.raises(OutputError, match="Cannot write"):
            write_csv(tmp_path / "missing_dir" / "log.csv", ["DEPT"], [[1]])
