"""Pytest fixtures for pylasread tests."""

from __future__ import annotations

from pathlib import Path

import pytest

# Test data at repository root
TEST_DATA_DIR = Path(__file__).parent.parent / "test_data"

MINIMAL_LAS = """~VERSION INFORMATION
 VERS.   2.0 : CWLS log format
 WRAP.  NO  : single line
~WELL INFORMATION
 STRT.M   100.0 : START DEPTH
 STOP.M   300.0 : STOP DEPTH
 NULL.    -999.25 : NULL VALUE
 WELL.    Test Well #1 : WELL NAME
~CURVE INFORMATION
DEPT.M : Depth
GR.API : Gamma Ray
~A
100 50
200 999
300 60
"""


@pytest.fixture
def test_data_dir() -> Path:
    """Path to test data directory."""
    return TEST_DATA_DIR


@pytest.fixture
def all_las_files() -> list[Path]:
    """All LAS test files in test_data/."""
    if TEST_DATA_DIR.exists():
        return sorted(TEST_DATA_DIR.glob("*.las"))
    return []


@pytest.fixture
def minimal_las() -> str:
    """Two-curve document with three data rows."""
    return MINIMAL_LAS


@pytest.fixture
def minimal_las_file(tmp_path: Path) -> Path:
    """MINIMAL_LAS written to a temporary file."""
    path = tmp_path / "minimal.las"
    path.write_text(MINIMAL_LAS, encoding="utf-8")
    return path
