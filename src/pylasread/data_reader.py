"""ASCII data section reader for LAS files.

The ~A body is read as one whitespace-delimited token stream and regrouped
into rows of one value per curve. Line breaks carry no meaning, so wrapped
and unwrapped files are read the same way.
"""

from __future__ import annotations

import math
import warnings
from collections.abc import Sequence
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from .exceptions import LasError
from .models import DataRow, Value
from .sections import strip_comments

T = TypeVar("T")

DEFAULT_NULL = -999.25


def coerce_value(token: str, zero_as_number: bool = False) -> Value:
    """Convert a data token to int or float, or keep it as a string.

    Zero-valued tokens (``0``, ``0.000``) and NaN stay strings unless
    *zero_as_number* is set. The default keeps output compatible with
    readers that only convert tokens with a truthy numeric value.
    """
    try:
        number: float = int(token)
    except ValueError:
        try:
            number = float(token)
        except ValueError:
            return token

    if math.isnan(number):
        return token
    if number == 0 and not zero_as_number:
        return token
    return number


def chunk(values: Sequence[T], size: int) -> list[list[T]]:
    """Group *values* into lists of *size* items; the last one may be shorter."""
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return [list(values[i : i + size]) for i in range(0, len(values), size)]


def read_data_matrix(
    body: str,
    curve_count: int,
    zero_as_number: bool = False,
) -> list[DataRow]:
    """Read the ~A body into rows of *curve_count* values.

    Args:
        body: Text of the ~A section.
        curve_count: Number of curves declared in ~C.
        zero_as_number: Convert zero-valued tokens to numbers too.

    Returns:
        Rows in document order. If the token count is not a multiple of
        *curve_count*, the last row is shorter and a warning is emitted.

    Raises:
        LasError: If *curve_count* is less than one.
    """
    if curve_count < 1:
        raise LasError("Cannot read data section without curve definitions")

    tokens = strip_comments(body).split()
    values = [coerce_value(token, zero_as_number) for token in tokens]
    rows = chunk(values, curve_count)

    remainder = len(values) % curve_count
    if remainder:
        warnings.warn(
            f"Data section has {len(values)} values, not a multiple of {curve_count} curves. "
            f"Last row holds only {remainder} values.",
            stacklevel=2,
        )
    return rows


def strip_null_rows(rows: Sequence[DataRow], null_value: float) -> list[DataRow]:
    """Drop every row holding a numeric value equal to *null_value*."""
    return [row for row in rows if not any(_is_null(v, null_value) for v in row)]


def _is_null(value: Value, null_value: float) -> bool:
    return not isinstance(value, str) and value == null_value


def to_float_array(rows: Sequence[DataRow], width: int) -> NDArray[np.float64]:
    """Convert rows to a 2-D float64 array of shape (len(rows), width).

    String cells and the missing cells of a short last row become NaN.
    """
    array = np.full((len(rows), width), np.nan, dtype=np.float64)
    for i, row in enumerate(rows):
        for j, value in enumerate(row[:width]):
            if isinstance(value, str):
                try:
                    array[i, j] = float(value)
                except ValueError:
                    continue
            else:
                array[i, j] = value
    return array
