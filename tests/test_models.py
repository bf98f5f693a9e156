"""Tests for LAS data models and exceptions."""

from __future__ import annotations

import pytest

from pylasread.exceptions import (
    AcquisitionError,
    ColumnNotFoundError,
    LasError,
    MalformedLineError,
    OutputError,
    PropertyNotFoundError,
    SectionAbsentError,
    wrap_errors,
)
from pylasread.models import PropertyRecord, Section, SectionKind, WellMetadata


class TestSectionKind:
    """Tests for SectionKind."""

    def test_from_letter(self) -> None:
        """Test lookup by section letter."""
        assert SectionKind.from_code("V") is SectionKind.VERSION
        assert SectionKind.from_code("a") is SectionKind.DATA

    def test_from_table_name(self) -> None:
        """Test lookup by table name."""
        assert SectionKind.from_code("well") is SectionKind.WELL
        assert SectionKind.from_code("curve") is SectionKind.CURVE
        assert SectionKind.from_code("param") is SectionKind.PARAMETER
        assert SectionKind.from_code("Parameter") is SectionKind.PARAMETER

    def test_passthrough(self) -> None:
        """Test passing a SectionKind through."""
        assert SectionKind.from_code(SectionKind.OTHER) is SectionKind.OTHER

    def test_unknown(self) -> None:
        """Test an unknown section code."""
        with pytest.raises(ValueError):
            SectionKind.from_code("Z")

    def test_label(self) -> None:
        """Test section labels."""
        assert SectionKind.PARAMETER.label == "parameter"


class TestRecords:
    """Tests for record dataclasses."""

    def test_property_record_defaults(self) -> None:
        """Test PropertyRecord defaults."""
        record = PropertyRecord(name="DEPT")
        assert record.unit == ""
        assert record.value == ""
        assert record.description == "none"

    def test_property_record_to_dict(self) -> None:
        """Test PropertyRecord.to_dict."""
        record = PropertyRecord(name="GR", unit="API", value="", description="Gamma")
        assert record.to_dict() == {"unit": "API", "value": "", "description": "Gamma"}

    def test_section_is_frozen(self) -> None:
        """Test that Section is immutable."""
        section = Section(kind=SectionKind.OTHER, body="note")
        with pytest.raises(AttributeError):
            section.body = "changed"  # type: ignore[misc]

    def test_metadata_default_not_wrapped(self) -> None:
        """Test WellMetadata defaults."""
        assert WellMetadata(version=2.0).wrapped is False


class TestExceptions:
    """Tests for the error hierarchy and wrap_errors."""

    @pytest.mark.parametrize(
        "kind",
        [
            AcquisitionError,
            SectionAbsentError,
            PropertyNotFoundError,
            ColumnNotFoundError,
            MalformedLineError,
            OutputError,
        ],
    )
    def test_kinds_are_las_errors(self, kind: type[LasError]) -> None:
        """Every error kind is a LasError."""
        assert issubclass(kind, LasError)

    def test_wrap_keeps_kind_in_message_and_cause(self) -> None:
        """Test wrapping an error kind."""
        with pytest.raises(LasError) as exc_info:
            with wrap_errors("Error getting column"):
                raise ColumnNotFoundError("Column 'X' not found")
        err = exc_info.value
        assert type(err) is LasError
        assert str(err) == "Error getting column: ColumnNotFoundError: Column 'X' not found"
        assert isinstance(err.__cause__, ColumnNotFoundError)

    def test_wrap_plain_las_error(self) -> None:
        """Test wrapping a plain LasError."""
        with pytest.raises(LasError, match="^outer: inner$"):
            with wrap_errors("outer"):
                raise LasError("inner")

    def test_other_exceptions_pass_through(self) -> None:
        """Non-LasError exceptions are not wrapped."""
        with pytest.raises(KeyError):
            with wrap_errors("outer"):
                raise KeyError("x")

    def test_no_error(self) -> None:
        """Test a block that does not raise."""
        with wrap_errors("outer"):
            value = 1
        assert value == 1
