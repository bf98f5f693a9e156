"""Section splitting and comment removal for LAS text.

A LAS document is a sequence of sections, each introduced by a marker line
starting with ``~`` and a section letter. Anything after the letter on the
marker line is a label (``~VERSION INFORMATION``, ``~A  DEPT  GR``) and is
ignored. A section ends at the next marker line or at the end of the text.
"""

from __future__ import annotations

import logging
import re

from .models import Section, SectionKind

logger = logging.getLogger(__name__)

# Any marker line: ~ followed by the section letter, optional label
SECTION_PATTERN = re.compile(r"^[ \t]*~(?P<code>[A-Za-z])[^\n]*$", re.MULTILINE)

# Start of the next section: any line beginning with ~
NEXT_SECTION_PATTERN = re.compile(r"^[ \t]*~", re.MULTILINE)


def strip_comments(text: str) -> str:
    """Remove ``#`` comment lines from a block of text.

    The block is trimmed and every remaining line is left-trimmed, so the
    result has no leading indentation and no surrounding blank lines.
    """
    lines = (line.lstrip() for line in text.strip().split("\n"))
    return "\n".join(line for line in lines if not line.startswith("#"))


def _marker_pattern(code: str) -> re.Pattern[str]:
    return re.compile(rf"^[ \t]*~{re.escape(code)}[^\n]*(?:\n|$)", re.MULTILINE | re.IGNORECASE)


def _body_from(text: str, start: int) -> str:
    end = NEXT_SECTION_PATTERN.search(text, start)
    return text[start : end.start()] if end else text[start:]


def find_section(text: str, code: str | SectionKind) -> str | None:
    """Return the body of the first section with the given code, or None if absent.

    Args:
        text: Full document text.
        code: Section letter (``"V"``, ``"w"``...) or SectionKind.

    Returns:
        Text between the marker line and the next ``~`` line (or end of text),
        or None when no marker for this section exists.
    """
    kind = SectionKind.from_code(code)
    match = _marker_pattern(kind.value).search(text)
    if match is None:
        logger.debug("Section ~%s not found", kind.value)
        return None
    return _body_from(text, match.end())


def split_sections(text: str) -> dict[SectionKind, Section]:
    """Split a document into all of its recognised sections.

    Only the first section of each kind is kept. Markers with a letter that
    is not a LAS section code are skipped along with their body.
    """
    sections: dict[SectionKind, Section] = {}
    for match in SECTION_PATTERN.finditer(text):
        try:
            kind = SectionKind(match.group("code").upper())
        except ValueError:
            logger.debug("Skipping unknown section marker %r", match.group(0).strip())
            continue
        if kind in sections:
            continue
        start = match.end() + 1 if text[match.end() : match.end() + 1] == "\n" else match.end()
        sections[kind] = Section(kind=kind, body=_body_from(text, start))
    return sections
