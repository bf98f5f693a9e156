"""LAS reader: main entry points.

``read_las_file()`` accepts a path, URL, bytes, open handle or TextSource and
returns a LASDocument. Nothing is read until the first accessor is called.
"""

from __future__ import annotations

from .document import LASDocument
from .sources import DEFAULT_TIMEOUT, SourceLike, StringSource, source_for


def read_las_file(
    source: SourceLike,
    zero_as_number: bool = False,
    encoding: str | None = None,
    max_file_size: int | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> LASDocument:
    """Open a LAS document from a path, URL, bytes, handle or TextSource.

    Args:
        source: Where to read the document from.
        zero_as_number: Read zero-valued data tokens as numbers instead of strings.
        encoding: Optional encoding override. If None, auto-detected.
        max_file_size: Optional maximum file size in bytes (local files only).
        timeout: Request timeout in seconds (URLs only).

    Returns:
        LASDocument bound to the chosen source.

    Raises:
        AcquisitionError: If *source* is of an unsupported type or bytes
            cannot be decoded. Read errors surface on first access.

    Example:
        >>> las = read_las_file("sample.las")
        >>> print(las.well_params()["WELL"]["value"])
        >>> print(las.column("DEPT"))
    """
    text_source = source_for(
        source,
        encoding=encoding,
        max_file_size=max_file_size,
        timeout=timeout,
    )
    return LASDocument(text_source, zero_as_number=zero_as_number)


def read_las_text(text: str, zero_as_number: bool = False) -> LASDocument:
    """Open a LAS document held in a string."""
    return LASDocument(StringSource(text), zero_as_number=zero_as_number)
