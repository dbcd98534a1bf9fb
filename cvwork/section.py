"""
Work section aggregation.

Collects experiences into a WorkSection and formats the section as a
bold title followed by a list of formatted experiences.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Tuple

from .content import Block, Content, ListNode, Strong, Text, seq
from .experience import format_experience
from .fields import AbsentField, Field, PlainField, RichField
from .logging_utils import LOG
from .shared import DEFAULT_TITLE, WorkExperience, WorkSection


def merge_entries(
    named: Optional[Mapping[str, WorkExperience]] = None,
    positional: Sequence[WorkExperience] = (),
) -> Tuple[WorkExperience, ...]:
    """
    Merge named and positional entries into one ordered tuple.

    Named entries come first, in mapping order, followed by positional
    entries in sequence order. How the two kinds were interleaved by the
    caller does not matter.
    """
    merged = list((named or {}).values())
    merged.extend(positional)
    return tuple(merged)


def build_section(
    title: Any = None,
    named: Optional[Mapping[str, WorkExperience]] = None,
    positional: Sequence[WorkExperience] = (),
) -> WorkSection:
    """
    Build a WorkSection.

    Args:
        title: None (use DEFAULT_TITLE), a string or a content node
        named: Entries keyed by name; order is preserved
        positional: Entries in order

    Returns:
        The section with entries merged named-first
    """
    return WorkSection(entries=merge_entries(named, positional), title=title)


def format_title(title: Field) -> Content:
    if isinstance(title, AbsentField):
        return Strong(Text(DEFAULT_TITLE))
    if isinstance(title, PlainField):
        return Strong(Text(title.text))
    if isinstance(title, RichField):
        return title.content
    raise TypeError(f"Unexpected title kind: {type(title).__name__}")


def format_section(
    section: WorkSection,
    marker: Optional[str] = None,
    date_format: Optional[str] = None,
) -> Content:
    """
    Format a section: the title as a block, then one list item per entry.

    Args:
        section: The section to format
        marker: List marker handed to the renderer as-is; None for its default
        date_format: Forwarded to every format_experience call

    Returns:
        ``Seq(Block(title), ListNode(items, marker))``
    """
    items = tuple(format_experience(entry, date_format=date_format) for entry in section.entries)
    LOG.debug("Formatted work section with %d entries", len(items))
    return seq(Block(format_title(section.title)), ListNode(items, marker=marker))
