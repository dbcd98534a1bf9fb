"""
Rich content model.

Immutable content nodes that the formatters produce and the renderers
consume. Nodes compare structurally, and ``+`` concatenates two nodes
into a flattened ``Seq`` without touching either operand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple


class Content:
    """Base class for all content nodes."""

    __slots__ = ()

    def __add__(self, other: "Content") -> "Seq":
        if not isinstance(other, Content):
            return NotImplemented
        return seq(self, other)


@dataclass(frozen=True)
class Text(Content):
    """A run of plain text."""
    text: str


@dataclass(frozen=True)
class Emph(Content):
    """Italic emphasis."""
    body: Content


@dataclass(frozen=True)
class Strong(Content):
    """Bold text."""
    body: Content


@dataclass(frozen=True)
class HFill(Content):
    """Flexible horizontal spacer that consumes all remaining line width."""


@dataclass(frozen=True)
class Seq(Content):
    """Ordered inline sequence of content nodes."""
    children: Tuple[Content, ...] = ()

    def __iter__(self) -> Iterator[Content]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)


@dataclass(frozen=True)
class Block(Content):
    """Content placed as a new block below whatever precedes it."""
    body: Content


@dataclass(frozen=True)
class ListNode(Content):
    """
    A bulleted list.

    ``marker`` is handed to the renderer verbatim; ``None`` selects the
    renderer's own default bullet.
    """
    items: Tuple[Content, ...] = ()
    marker: Optional[str] = None


def _flatten(parts: Iterable[Content]) -> Iterator[Content]:
    for part in parts:
        if isinstance(part, Seq):
            yield from part.children
        else:
            yield part


def seq(*parts: Content) -> Seq:
    """Build a flattened sequence from ``parts`` (nested ``Seq`` nodes are spliced in)."""
    for part in parts:
        if not isinstance(part, Content):
            raise TypeError(f"Expected content node, got {type(part).__name__}")
    return Seq(tuple(_flatten(parts)))


def plain_text(content: Content) -> str:
    """
    Return the unstyled text of a content tree.

    The spacer becomes a single space, blocks and list items start on a
    new line. Used for logging and quick assertions, not for layout.
    """
    if isinstance(content, Text):
        return content.text
    if isinstance(content, (Emph, Strong)):
        return plain_text(content.body)
    if isinstance(content, HFill):
        return " "
    if isinstance(content, Seq):
        return "".join(plain_text(child) for child in content.children)
    if isinstance(content, Block):
        return "\n" + plain_text(content.body)
    if isinstance(content, ListNode):
        return "".join("\n" + plain_text(item) for item in content.items)
    raise TypeError(f"Unknown content node: {type(content).__name__}")
