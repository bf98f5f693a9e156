"""Encoding detection utilities for LAS text.

Well logs come from many vendors and decades; besides UTF-8 they are
commonly CP1252 / Latin-1 (Western European) or CP1251 / CP866 (Russian).
"""

from __future__ import annotations

from pathlib import Path

import chardet

# Tried in order when detection fails
FALLBACK_ENCODINGS = ["utf-8", "cp1251", "cp1252", "cp866", "latin-1"]

# chardet only needs the start of the file
DETECTION_SAMPLE_SIZE = 50_000


def detect_encoding(raw: bytes) -> str:
    """Detect the encoding of *raw* with chardet, defaulting to utf-8."""
    result = chardet.detect(raw[:DETECTION_SAMPLE_SIZE])
    if result["confidence"] and result["confidence"] > 0.7:
        return result["encoding"] or "utf-8"
    return "utf-8"


def decode_bytes(raw: bytes, encoding: str | None = None) -> tuple[str, str]:
    """Decode LAS bytes with an explicit encoding, detection, or the fallback chain.

    Returns:
        Tuple of (encoding used, text).

    Raises:
        UnicodeDecodeError: If an explicit *encoding* cannot decode the bytes.
    """
    if encoding is not None:
        return encoding, raw.decode(encoding)

    detected = detect_encoding(raw)
    for enc in [detected, *FALLBACK_ENCODINGS]:
        try:
            return enc, raw.decode(enc)
        except (UnicodeDecodeError, LookupError):
            continue

    return "utf-8", raw.decode("utf-8", errors="replace")


def read_with_encoding(
    file_path: Path,
    encoding: str | None = None,
    max_file_size: int | None = None,
) -> tuple[str, str]:
    """Read file content with encoding detection and fallback chain.

    Args:
        file_path: Path to the file.
        encoding: Explicit encoding override. If None, auto-detected.
        max_file_size: Optional maximum file size in bytes.

    Returns:
        Tuple of (detected_encoding, file_content).

    Raises:
        ValueError: If file exceeds max_file_size.
    """
    if max_file_size is not None:
        file_size = file_path.stat().st_size
        if file_size > max_file_size:
            raise ValueError(
                f"File size ({file_size} bytes) exceeds maximum allowed "
                f"({max_file_size} bytes): {file_path}"
            )

    return decode_bytes(file_path.read_bytes(), encoding)
