"""LASDocument: query interface over one LAS document.

The document text is fetched from its TextSource on first use and kept.
Every accessor derives its result from that text on demand, so accessors
can be called in any order and any number of times.
"""

from __future__ import annotations

import logging
import warnings
from pathlib import Path
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from .data_reader import (
    DEFAULT_NULL,
    read_data_matrix,
    strip_null_rows,
    to_float_array,
)
from .exceptions import (
    ColumnNotFoundError,
    LasError,
    SectionAbsentError,
    wrap_errors,
)
from .models import DataRow, PropertyRecord, SectionKind, Value, WellMetadata
from .parser import parse_header, parse_metadata, parse_property_table
from .sections import find_section, strip_comments
from .sources import TextSource
from .writer import format_csv, write_csv

logger = logging.getLogger(__name__)

PropertyTable = dict[str, dict[str, str]]


def _cell(row: DataRow, index: int) -> Optional[Value]:
    return row[index] if index < len(row) else None


class LASDocument:
    """Structured access to the sections of a LAS document.

    Args:
        source: Provider of the raw text.
        zero_as_number: Read zero-valued data tokens as numbers. By default
            they stay strings, matching readers that only convert tokens with
            a truthy numeric value.

    All accessors raise LasError on failure. The specific kind
    (SectionAbsentError, ColumnNotFoundError, ...) is named in the message
    and found along the ``__cause__`` chain; accessors built on other
    accessors add one plain LasError per level.

    Example:
        >>> las = LASDocument(FileSource("sample.las"))
        >>> print(las.header())
        >>> print(las.column("DT"))
    """

    def __init__(self, source: TextSource, zero_as_number: bool = False) -> None:
        self.source = source
        self.zero_as_number = zero_as_number
        self._content: str | None = None

    def __repr__(self) -> str:
        return f"LASDocument({self.source.describe()!r})"

    # -- raw text and sections ------------------------------------------

    @property
    def text(self) -> str:
        """Full document text with line endings normalised to ``\\n``."""
        if self._content is None:
            content = self.source.read_text()
            self._content = content.replace("\r\n", "\n").replace("\r", "\n")
            logger.debug("Loaded %s (%d chars)", self.source.describe(), len(self._content))
        return self._content

    def section(self, code: str | SectionKind) -> str | None:
        """Raw body of a section, or None if the document has no such section."""
        return find_section(self.text, code)

    def _required_section(self, kind: SectionKind) -> str:
        body = self.section(kind)
        if body is None:
            raise SectionAbsentError(f"No ~{kind.value} ({kind.label}) section in document")
        return body

    def _property(self, kind: SectionKind) -> dict[str, PropertyRecord]:
        return parse_property_table(self.section(kind), kind)

    @staticmethod
    def _as_table(records: dict[str, PropertyRecord]) -> PropertyTable:
        return {name: record.to_dict() for name, record in records.items()}

    # -- version ----------------------------------------------------------

    def metadata(self) -> WellMetadata:
        with wrap_errors("Couldn't get metadata"):
            return parse_metadata(self._required_section(SectionKind.VERSION))

    def version(self) -> float:
        """LAS version number from ~V (e.g. 2.0)."""
        with wrap_errors("Couldn't get version"):
            return self.metadata().version

    def wrap(self) -> bool:
        """True if the file declares WRAP YES."""
        with wrap_errors("Couldn't get wrap"):
            return self.metadata().wrapped

    # -- property tables ----------------------------------------------------

    def well_params(self) -> PropertyTable:
        """~W entries as ``{name: {unit, value, description}}``."""
        with wrap_errors("Couldn't get the property"):
            return self._as_table(self._property(SectionKind.WELL))

    def curve_params(self) -> PropertyTable:
        """~C entries as ``{name: {unit, value, description}}``."""
        with wrap_errors("Couldn't get the property"):
            return self._as_table(self._property(SectionKind.CURVE))

    def log_params(self) -> PropertyTable:
        """~P entries as ``{name: {unit, value, description}}``."""
        with wrap_errors("Couldn't get the property"):
            return self._as_table(self._property(SectionKind.PARAMETER))

    def other(self) -> str:
        """Free text of ~O joined into one line, empty if the section is absent."""
        with wrap_errors("Couldn't get other metadata"):
            body = self.section(SectionKind.OTHER)
            if body is None:
                return ""
            lines = strip_comments(body).split("\n")
            return " ".join(line.strip() for line in lines if line.strip())

    # -- curves -------------------------------------------------------------

    def header(self) -> list[str]:
        """Curve mnemonics in column order."""
        with wrap_errors("Couldn't get the header"):
            return parse_header(self._required_section(SectionKind.CURVE))

    def header_and_descr(self) -> dict[str, str]:
        """Map of curve mnemonic to its description."""
        with wrap_errors("Couldn't get the header"):
            curves = self._property(SectionKind.CURVE)
            return {name: record.description for name, record in curves.items()}

    def column_count(self) -> int:
        with wrap_errors("Couldn't get column count"):
            return len(self.header())

    # -- data -----------------------------------------------------------------

    def null_value(self) -> float:
        """NULL sentinel from ~W, -999.25 when the well section does not declare one."""
        with wrap_errors("Couldn't get null value"):
            well = self._property(SectionKind.WELL)
            if "NULL" not in well:
                warnings.warn(
                    f"Well section has no NULL entry, using {DEFAULT_NULL}",
                    stacklevel=2,
                )
                return DEFAULT_NULL
            raw = well["NULL"].value
            try:
                return float(raw)
            except ValueError:
                raise LasError(f"NULL value is not a number: {raw!r}") from None

    def data(self) -> list[DataRow]:
        """Data rows in document order, one value per curve."""
        with wrap_errors("Couldn't read data"):
            curve_count = len(self.header())
            body = self._required_section(SectionKind.DATA)
            return read_data_matrix(body, curve_count, self.zero_as_number)

    def data_stripped(self) -> list[DataRow]:
        """Data rows without any row holding the NULL sentinel."""
        with wrap_errors("Couldn't read data"):
            return strip_null_rows(self.data(), self.null_value())

    def row_count(self) -> int:
        with wrap_errors("Couldn't get row count"):
            return len(self.data())

    def _column_index(self, name: str) -> int:
        headers = self.header()
        if name not in headers:
            raise ColumnNotFoundError(f"Column '{name}' not found, available: {headers}")
        return headers.index(name)

    def column(self, name: str) -> list[Optional[Value]]:
        """All values of one curve; the first curve wins if the name repeats.

        A short last row yields None for the curves it does not reach.
        """
        with wrap_errors("Error getting column"):
            index = self._column_index(name)
            return [_cell(row, index) for row in self.data()]

    def column_stripped(self, name: str) -> list[Optional[Value]]:
        """Values of one curve from the null-stripped rows."""
        with wrap_errors("Error getting column"):
            index = self._column_index(name)
            return [_cell(row, index) for row in self.data_stripped()]

    def data_array(self, stripped: bool = False) -> NDArray[np.float64]:
        """Data as a 2-D float64 array, non-numeric cells as NaN."""
        with wrap_errors("Couldn't read data"):
            rows = self.data_stripped() if stripped else self.data()
            return to_float_array(rows, len(self.header()))

    def column_array(self, name: str) -> NDArray[np.float64]:
        """One curve as a float64 array, non-numeric cells as NaN."""
        with wrap_errors("Error getting column"):
            index = self._column_index(name)
            return self.data_array()[:, index]

    # -- output ---------------------------------------------------------------

    def to_csv(self, file_path: str | Path | None = None) -> str:
        """Return the data as CSV text, also writing it to *file_path* if given."""
        with wrap_errors("Couldn't create csv file"):
            return self._emit_csv(self.data(), file_path)

    def to_csv_stripped(self, file_path: str | Path | None = None) -> str:
        """Like to_csv() but with null rows removed."""
        with wrap_errors("Couldn't create csv file"):
            return self._emit_csv(self.data_stripped(), file_path)

    def _emit_csv(self, rows: list[DataRow], file_path: str | Path | None) -> str:
        header = self.header()
        if file_path is not None:
            write_csv(file_path, header, rows)
        return format_csv(header, rows)
