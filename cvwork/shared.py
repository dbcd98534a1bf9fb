"""
Shared models and text utilities.

Defines the resume records (work experience, work section) and the text
normalization helpers used by the loader and the renderers.
"""

from __future__ import annotations

import re

from dataclasses import dataclass
from typing import List, Tuple

from .content import Content, Text
from .fields import ABSENT, Field, as_field

# ------------------------- Defaults -------------------------

DEFAULT_TITLE = "Work Experience"

# strftime tokens: abbreviated month + 4-digit year, e.g. "Jan 2042"
DEFAULT_DATE_FORMAT = "%b %Y"

# ------------------------- Models -------------------------

_TEXT_FIELDS = ("company", "location", "position")
_DATE_FIELDS = ("start", "end")


@dataclass(frozen=True)
class WorkExperience:
    """
    One position held, as shown in a resume.

    ``body`` is mandatory; every other field is optional. ``company``,
    ``location`` and ``position`` accept text or content, ``start`` and
    ``end`` additionally accept a ``datetime.date``.
    """
    body: Content
    company: Field = ABSENT
    location: Field = ABSENT
    position: Field = ABSENT
    start: Field = ABSENT
    end: Field = ABSENT

    def __post_init__(self) -> None:
        body = self.body
        if isinstance(body, str):
            body = Text(body)
        if not isinstance(body, Content):
            raise TypeError(f"body must be content, got {type(self.body).__name__}")
        object.__setattr__(self, "body", body)

        for name in _TEXT_FIELDS:
            object.__setattr__(self, name, as_field(getattr(self, name)))
        for name in _DATE_FIELDS:
            object.__setattr__(self, name, as_field(getattr(self, name), allow_date=True))


@dataclass(frozen=True)
class WorkSection:
    """
    A titled, ordered group of work experiences.

    An absent title is replaced by DEFAULT_TITLE when the section is formatted.
    """
    entries: Tuple[WorkExperience, ...] = ()
    title: Field = ABSENT

    def __post_init__(self) -> None:
        entries = tuple(self.entries)
        for entry in entries:
            if not isinstance(entry, WorkExperience):
                raise TypeError(f"Section entries must be WorkExperience, got {type(entry).__name__}")
        object.__setattr__(self, "entries", entries)
        object.__setattr__(self, "title", as_field(self.title))

# ------------------------- Text helpers -------------------------

_WS_RE = re.compile(r"\s+")

def _strip_invalid_xml_1_0_chars(s: str) -> str:
    """
    Remove characters invalid in XML 1.0.
    Valid:
      #x9 | #xA | #xD |
      [#x20-#xD7FF] |
      [#xE000-#xFFFD] |
      [#x10000-#x10FFFF]
    """
    out: List[str] = []
    for ch in s:
        cp = ord(ch)
        if (
            cp == 0x9
            or cp == 0xA
            or cp == 0xD
            or (0x20 <= cp <= 0xD7FF)
            or (0xE000 <= cp <= 0xFFFD)
            or (0x10000 <= cp <= 0x10FFFF)
        ):
            out.append(ch)
    return "".join(out)

def normalize_text_for_processing(s: str) -> str:
    """
    Normalize text before it reaches a document:
    - convert NBSP to normal space
    - replace soft hyphen with real hyphen
    - normalize newlines
    - strip invalid XML chars
    """
    s = s.replace("\u00A0", " ")
    s = s.replace("\u00AD", "-")  # preserve "high-quality"
    s = s.replace("\r\n", "\n").replace("\r", "\n")
    s = _strip_invalid_xml_1_0_chars(s)
    return s

def clean_text(text: str) -> str:
    """Collapse whitespace and trim."""
    text = normalize_text_for_processing(text)
    text = _WS_RE.sub(" ", text)
    return text.strip()
