"""Data models for LAS document structures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

Value = Union[int, float, str]
DataRow = list[Value]


class SectionKind(Enum):
    """Section codes, i.e. the letter following ``~`` on a marker line."""

    VERSION = "V"
    WELL = "W"
    CURVE = "C"
    PARAMETER = "P"
    OTHER = "O"
    DATA = "A"

    @classmethod
    def from_code(cls, code: str | SectionKind) -> SectionKind:
        """Resolve a section letter (any case) or a table name like ``"well"``."""
        if isinstance(code, SectionKind):
            return code
        key = code.strip().upper()
        if key in _TABLE_NAMES:
            return _TABLE_NAMES[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown LAS section code: {code!r}") from None

    @property
    def label(self) -> str:
        return self.name.lower()


_TABLE_NAMES = {
    "WELL": SectionKind.WELL,
    "CURVE": SectionKind.CURVE,
    "PARAM": SectionKind.PARAMETER,
    "PARAMETER": SectionKind.PARAMETER,
}


@dataclass(frozen=True)
class Section:
    """Raw body of one ``~`` section (text after the marker line)."""

    kind: SectionKind
    body: str


@dataclass
class PropertyRecord:
    """Single ``MNEMONIC.UNIT VALUE : DESCRIPTION`` line from ~W, ~C or ~P."""

    name: str
    unit: str = ""
    value: str = ""
    description: str = "none"

    def to_dict(self) -> dict[str, str]:
        """Convert to the name-less dict used by property tables."""
        return {
            "unit": self.unit,
            "value": self.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class WellMetadata:
    """Version information from the ~V section.

    ``wrapped`` is informational only: the data section is always read as one
    whitespace-delimited token stream.
    """

    version: float
    wrapped: bool = False
