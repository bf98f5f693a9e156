"""Line-level parsers for LAS header sections.

The LAS 2.0 header line is loosely formatted:
  MNEMONIC.UNIT  VALUE : DESCRIPTION

The unit may be missing, the description may be empty and the value field is
padded with a variable amount of whitespace. There is no single delimiter, so
the line is decoded by a small tokenizer applying ordered rules instead of a
set of overlapping patterns:

1. name: everything up to the first ``.`` or whitespace
2. the mnemonic's ``.`` (after optional whitespace); if whitespace follows it
   directly, there is no unit
3. unit: the non-whitespace run right after the ``.``
4. the rest splits at the first ``:`` into a value and a description region
5. description: trimmed, ``none`` when empty
6. value: the value region is cut where a stray word sits between two wide
   whitespace gaps, and the last non-blank segment wins; single and double
   spaces inside a value are kept
"""

from __future__ import annotations

import re

from .exceptions import LasError, MalformedLineError, PropertyNotFoundError
from .models import PropertyRecord, SectionKind, WellMetadata
from .sections import strip_comments

NO_DESCRIPTION = "none"

# Padding word between two wide gaps in the value field
COLUMN_GAP_PATTERN = re.compile(r"\s{2,}\w*\s{2,}")


def _scan_name(line: str) -> int:
    """Return the index where the mnemonic ends (first '.' or whitespace)."""
    for i, char in enumerate(line):
        if char == "." or char.isspace():
            return i
    return len(line)


def _skip_spaces(line: str, pos: int) -> int:
    while pos < len(line) and line[pos].isspace():
        pos += 1
    return pos


def _scan_unit(line: str, pos: int) -> tuple[str, int]:
    """Read the unit starting right after the mnemonic's dot."""
    if pos >= len(line) or line[pos].isspace():
        return "", pos
    end = pos
    while end < len(line) and not line[end].isspace():
        end += 1
    return line[pos:end], end


def pick_value(region: str) -> str:
    """Choose the value from the text between the unit and the colon.

    Some files pad the value field with a stray word framed by wide gaps.
    That word is dropped together with its gaps. The last remaining segment
    is used, or the one before it when the last is only a trailing blank.
    """
    segments = COLUMN_GAP_PATTERN.split(region.lstrip())
    if len(segments) > 1 and not segments[-1]:
        return segments[-2].strip()
    return segments[-1].strip()


def parse_property_line(line: str, require_colon: bool = True) -> PropertyRecord:
    """Decode one ``MNEMONIC.UNIT VALUE : DESCRIPTION`` line.

    Args:
        line: Single header line, comments already removed.
        require_colon: When False, a line without ``:`` is read as a value
            with no description.

    Returns:
        PropertyRecord with name, unit, value and description.

    Raises:
        MalformedLineError: If the line has no ``:`` and one is required.
    """
    text = line.strip()

    name_end = _scan_name(text)
    name = text[:name_end]

    pos = _skip_spaces(text, name_end)
    if pos < len(text) and text[pos] == ".":
        unit, pos = _scan_unit(text, pos + 1)
    else:
        # No dot at all: the mnemonic is followed by the value directly
        unit, pos = "", name_end

    value_region, colon, description_region = text[pos:].partition(":")
    if not colon and require_colon:
        raise MalformedLineError(f"Missing ':' separator in line: {line.strip()!r}")

    return PropertyRecord(
        name=name,
        unit=unit,
        value=pick_value(value_region),
        description=description_region.strip() or NO_DESCRIPTION,
    )


def _content_lines(body: str) -> list[str]:
    return [line for line in strip_comments(body).split("\n") if line.strip()]


def parse_property_table(
    body: str | None,
    kind: str | SectionKind = SectionKind.WELL,
) -> dict[str, PropertyRecord]:
    """Build a name-keyed table from a ~W, ~C or ~P section body.

    A later line with the same mnemonic replaces the earlier one.

    Raises:
        PropertyNotFoundError: If the body is absent or holds no property lines.
        MalformedLineError: If a line cannot be split into value and description.
    """
    kind = SectionKind.from_code(kind)
    lines = _content_lines(body) if body else []
    if not lines:
        raise PropertyNotFoundError(f"No '{kind.label}' properties found (~{kind.value})")

    table: dict[str, PropertyRecord] = {}
    for line in lines:
        record = parse_property_line(line)
        table[record.name] = record
    return table


def parse_header(body: str) -> list[str]:
    """Return curve mnemonics from a ~C body in column order, duplicates kept."""
    return [_mnemonic(line) for line in _content_lines(body)]


def _mnemonic(line: str) -> str:
    text = line.strip()
    return text[: _scan_name(text)]


def parse_metadata(body: str) -> WellMetadata:
    """Parse the ~V body into version number and wrap flag.

    VERS and WRAP are looked up by mnemonic; files that name them
    differently fall back to the first and second line. The description
    after ``:`` is optional here.

    Raises:
        LasError: If there are fewer than two lines or VERS is not a number.
    """
    records = [
        parse_property_line(line, require_colon=False) for line in _content_lines(body)
    ]
    if len(records) < 2:
        raise LasError(f"Version section needs VERS and WRAP lines, found {len(records)}")

    by_name = {r.name.upper(): r.value for r in records}
    vers = by_name.get("VERS", records[0].value)
    wrap = by_name.get("WRAP", records[1].value)

    try:
        version = float(vers)
    except ValueError:
        raise LasError(f"Version is not a number: {vers!r}") from None

    return WellMetadata(version=version, wrapped=wrap.lower() == "yes")
