"""Custom exceptions for pylasread.

Callers only need to catch ``LasError``. The more specific kinds below are
kept as subclasses and survive in the message and ``__cause__`` of the
wrapping error raised by the document accessors.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager


class LasError(Exception):
    """Base exception for all pylasread errors."""


class AcquisitionError(LasError):
    """Raised when the raw LAS text cannot be obtained (bad path, network, handle)."""


class SectionAbsentError(LasError):
    """Raised when a required ``~`` section is missing from the document."""


class PropertyNotFoundError(LasError):
    """Raised when a well/curve/parameter table has no parsable content."""


class ColumnNotFoundError(LasError):
    """Raised when a requested curve name is not in the header."""


class MalformedLineError(LasError):
    """Raised when a property line lacks the ``:`` value/description separator."""


class OutputError(LasError):
    """Raised when CSV output cannot be written."""


@contextmanager
def wrap_errors(action: str) -> Iterator[None]:
    """Re-raise any LasError from the block as a plain LasError prefixed by *action*."""
    try:
        yield
    except LasError as e:
        detail = str(e) if type(e) is LasError else f"{type(e).__name__}: {e}"
        raise LasError(f"{action}: {detail}") from e
