"""CSV output for LAS data.

The CSV form is the header joined by commas on the first line followed by
one comma-joined line per data row. Values are written with ``str()``, no
quoting is applied.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .exceptions import OutputError
from .models import DataRow

logger = logging.getLogger(__name__)


def format_csv(header: Sequence[str], rows: Sequence[DataRow]) -> str:
    """Render the header and rows as CSV text (no trailing newline)."""
    head = ",".join(header) + "\n"
    return head + "\n".join(",".join(str(value) for value in row) for row in rows)


def write_csv(
    file_path: str | Path,
    header: Sequence[str],
    rows: Sequence[DataRow],
    encoding: str = "utf-8",
) -> Path:
    """Write LAS data to a CSV file.

    Args:
        file_path: Output path; ``.csv`` is appended when it has no suffix.
        header: Curve names.
        rows: Data rows.
        encoding: Output file encoding (default: utf-8).

    Returns:
        The path actually written.

    Raises:
        OutputError: If the file cannot be written.
    """
    file_path = Path(file_path)
    if not file_path.suffix:
        file_path = file_path.with_suffix(".csv")

    try:
        file_path.write_text(format_csv(header, rows), encoding=encoding)
    except OSError as e:
        raise OutputError(f"Cannot write to {file_path}: {e}") from e

    logger.info("%s has been saved", file_path)
    return file_path
