"""
Plain-text content renderer implementation.

Lays content out on fixed-width lines: emphasis as ``_text_``, strong as
``**text**``, and the flexible spacer padded with spaces so the rest of
the line ends exactly at the configured width.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from .base import ContentRenderer
from ..content import Block, Content, Emph, HFill, ListNode, Seq, Strong, Text
from ..logging_utils import LOG

DEFAULT_WIDTH = 80
DEFAULT_MARKER = "-"
INDENT = "  "


class _Fill:
    pass


_FILL = _Fill()

Segment = Union[str, _Fill]


class _Line:
    def __init__(self, indent: str) -> None:
        self.indent = indent
        self.segments: List[Segment] = []

    def layout(self, width: int) -> str:
        fills = sum(1 for s in self.segments if s is _FILL)
        used = len(self.indent) + sum(len(s) for s in self.segments if s is not _FILL)
        spare = max(width - used, fills)
        out = [self.indent]
        seen = 0
        for segment in self.segments:
            if segment is _FILL:
                seen += 1
                # Every spacer gets at least one space; the last takes the remainder
                share = spare // fills
                if seen == fills:
                    share = spare - share * (fills - 1)
                out.append(" " * share)
            else:
                out.append(segment)
        return "".join(out).rstrip()


class _TextLayout:
    def __init__(self) -> None:
        self.lines: List[_Line] = []
        self.current = None
        self.depth = 0

    def _indent(self) -> str:
        return INDENT * self.depth

    def _end_line(self) -> None:
        self.current = None

    def _line(self) -> _Line:
        if self.current is None:
            self.current = _Line(self._indent())
            self.lines.append(self.current)
        return self.current

    def add(self, node: Content) -> None:
        if isinstance(node, Text):
            self._line().segments.append(node.text)
        elif isinstance(node, Emph):
            self._wrap(node.body, "_")
        elif isinstance(node, Strong):
            self._wrap(node.body, "**")
        elif isinstance(node, HFill):
            self._line().segments.append(_FILL)
        elif isinstance(node, Seq):
            for child in node.children:
                self.add(child)
        elif isinstance(node, Block):
            self._end_line()
            self.add(node.body)
            self._end_line()
        elif isinstance(node, ListNode):
            marker = node.marker if node.marker is not None else DEFAULT_MARKER
            for item in node.items:
                self._end_line()
                self._line().segments.append(marker + " ")
                self.depth += 1
                self.add(item)
                self.depth -= 1
            self._end_line()
        else:
            raise TypeError(f"Unknown content node: {type(node).__name__}")

    def _wrap(self, body: Content, mark: str) -> None:
        self._line().segments.append(mark)
        self.add(body)
        self._line().segments.append(mark)


def content_to_text(content: Content, width: int = DEFAULT_WIDTH) -> str:
    """
    Lay out content as plain text lines of the given width.

    Lines holding a spacer are padded to exactly ``width`` characters
    (minus trailing whitespace); a spacer never shrinks below one space.
    """
    layout = _TextLayout()
    layout.add(content)
    return "\n".join(line.layout(width) for line in layout.lines)


class PlainTextContentRenderer(ContentRenderer):
    """
    Renders content to a fixed-width plain text file.
    """

    options = ("width",)

    def __init__(self, width: int = DEFAULT_WIDTH) -> None:
        if width <= 0:
            raise ValueError(f"width must be positive, got {width}")
        self.width = width

    def render(self, content: Content, output_path: Path) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content_to_text(content, self.width) + "\n", encoding="utf-8")
        LOG.debug("Wrote %s", output_path)
        return output_path
