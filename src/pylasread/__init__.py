"""pylasread - Python library for reading LAS (Log ASCII Standard) well log files.

Public API:
    read_las_file()  - Open a LAS document from a path, URL, bytes or handle
    read_las_text()  - Open a LAS document held in a string
    LASDocument      - Header, data, column and CSV queries over one document
    TextSource       - Base class for pluggable text acquisition
"""

from .data_reader import chunk, coerce_value, read_data_matrix, strip_null_rows
from .document import LASDocument
from .exceptions import (
    AcquisitionError,
    ColumnNotFoundError,
    LasError,
    MalformedLineError,
    OutputError,
    PropertyNotFoundError,
    SectionAbsentError,
)
from .models import PropertyRecord, Section, SectionKind, WellMetadata
from .parser import parse_header, parse_metadata, parse_property_line, parse_property_table
from .reader import read_las_file, read_las_text
from .sections import find_section, split_sections, strip_comments
from .sources import FileSource, StreamSource, StringSource, TextSource, URLSource, source_for
from .writer import format_csv, write_csv

__all__ = [
    # Entry points
    "read_las_file",
    "read_las_text",
    "LASDocument",
    # Text sources
    "TextSource",
    "FileSource",
    "URLSource",
    "StringSource",
    "StreamSource",
    "source_for",
    # Parsing building blocks
    "strip_comments",
    "find_section",
    "split_sections",
    "parse_property_line",
    "parse_property_table",
    "parse_header",
    "parse_metadata",
    "coerce_value",
    "chunk",
    "read_data_matrix",
    "strip_null_rows",
    # Output
    "format_csv",
    "write_csv",
    # Data models
    "SectionKind",
    "Section",
    "PropertyRecord",
    "WellMetadata",
    # Exceptions
    "LasError",
    "AcquisitionError",
    "SectionAbsentError",
    "PropertyNotFoundError",
    "ColumnNotFoundError",
    "MalformedLineError",
    "OutputError",
]
