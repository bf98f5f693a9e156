"""Text sources: where the raw LAS text comes from.

The parser never reads files or sockets itself. A LASDocument is given a
TextSource and asks it for the text once. Hosts pick the implementation
that fits (file, URL, in-memory string, open handle) or let
``source_for()`` choose one from the argument type.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union

import requests

from .encoding import decode_bytes, read_with_encoding
from .exceptions import AcquisitionError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

SourceLike = Union["TextSource", str, Path, bytes, IO[Any]]


class TextSource(ABC):
    """Provider of the full text of one LAS document."""

    @abstractmethod
    def read_text(self) -> str:
        """Return the document text.

        Raises:
            AcquisitionError: If the text cannot be obtained.
        """

    def describe(self) -> str:
        return type(self).__name__


class StringSource(TextSource):
    """LAS text already held in memory."""

    def __init__(self, text: str) -> None:
        self.text = text

    def read_text(self) -> str:
        return self.text

    def describe(self) -> str:
        return f"<string, {len(self.text)} chars>"


class FileSource(TextSource):
    """LAS file on the local filesystem."""

    def __init__(
        self,
        path: str | Path,
        encoding: str | None = None,
        max_file_size: int | None = None,
    ) -> None:
        self.path = Path(path)
        self.encoding = encoding
        self.max_file_size = max_file_size
        self.detected_encoding: str | None = None

    def read_text(self) -> str:
        if not self.path.exists():
            raise AcquisitionError(f"File not found: {self.path}")
        if not self.path.is_file():
            raise AcquisitionError(f"Not a file: {self.path}")

        logger.debug("Reading LAS file %s", self.path)
        try:
            encoding, content = read_with_encoding(self.path, self.encoding, self.max_file_size)
        except (OSError, ValueError, LookupError) as e:
            raise AcquisitionError(f"Cannot read {self.path}: {e}") from e

        self.detected_encoding = encoding
        return content

    def describe(self) -> str:
        return str(self.path)


class URLSource(TextSource):
    """LAS file served over HTTP(S)."""

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT,
        encoding: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.encoding = encoding
        self.session = session or requests.Session()

    def read_text(self) -> str:
        logger.debug("Fetching LAS file %s", self.url)
        try:
            resp = self.session.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise AcquisitionError(f"Cannot fetch {self.url}: {e}") from e

        try:
            _encoding, content = decode_bytes(resp.content, self.encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise AcquisitionError(f"Cannot decode {self.url}: {e}") from e
        return content

    def describe(self) -> str:
        return self.url


class StreamSource(TextSource):
    """Open file-like handle, text or binary mode."""

    def __init__(self, handle: IO[Any], encoding: str | None = None) -> None:
        self.handle = handle
        self.encoding = encoding

    def read_text(self) -> str:
        try:
            content = self.handle.read()
        except OSError as e:
            raise AcquisitionError(f"Cannot read from handle: {e}") from e

        if isinstance(content, bytes):
            try:
                _encoding, content = decode_bytes(content, self.encoding)
            except (UnicodeDecodeError, LookupError) as e:
                raise AcquisitionError(f"Cannot decode handle content: {e}") from e
        return content

    def describe(self) -> str:
        return getattr(self.handle, "name", "<stream>")


def source_for(
    source: SourceLike,
    encoding: str | None = None,
    max_file_size: int | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> TextSource:
    """Pick a TextSource for *source* based on its type.

    ``http://`` and ``https://`` strings are fetched, other strings and paths
    are read from disk, bytes are decoded and objects with ``read()`` are
    treated as open handles.
    """
    if isinstance(source, TextSource):
        return source
    if isinstance(source, bytes):
        try:
            _encoding, text = decode_bytes(source, encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise AcquisitionError(f"Cannot decode LAS bytes: {e}") from e
        return StringSource(text)
    if isinstance(source, str) and source.lower().startswith(("http://", "https://")):
        return URLSource(source, timeout=timeout, encoding=encoding)
    if isinstance(source, (str, Path)):
        return FileSource(source, encoding=encoding, max_file_size=max_file_size)
    if hasattr(source, "read"):
        return StreamSource(source, encoding=encoding)
    raise AcquisitionError(f"Unsupported LAS source: {type(source).__name__}")
