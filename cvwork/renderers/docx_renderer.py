"""
DOCX-based content renderer implementation.

Writes a content tree into a Word .docx document with python-docx.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from docx import Document
from docx.enum.text import WD_TAB_ALIGNMENT
from docx.shared import Emu

from .base import ContentRenderer
from ..content import Block, Content, Emph, HFill, ListNode, Seq, Strong, Text
from ..logging_utils import LOG
from ..shared import normalize_text_for_processing

# Word's built-in styles only go three levels deep
_MAX_LIST_DEPTH = 3


def _leveled(style: str, depth: int) -> str:
    depth = min(depth, _MAX_LIST_DEPTH)
    return style if depth <= 1 else f"{style} {depth}"


def check_docx_template(template_path: Path) -> None:
    if not template_path.exists():
        raise FileNotFoundError(f"Template file not found: {template_path}")

    if not template_path.is_file() or template_path.suffix.lower() != ".docx":
        raise ValueError(f"Template must be a .docx file: {template_path}")


class _DocxWriter:
    """Walks a content tree and appends paragraphs and runs to a document."""

    def __init__(self, document) -> None:
        self.document = document
        self.paragraph = None
        self.list_depth = 0
        self._has_tab_stop = False

        section = document.sections[-1]
        if None in (section.page_width, section.left_margin, section.right_margin):
            self.text_width = None
        else:
            self.text_width = Emu(section.page_width - section.left_margin - section.right_margin)

    def _new_paragraph(self, style: Optional[str] = None):
        paragraph = self.document.add_paragraph()
        if style:
            try:
                paragraph.style = style
            except KeyError:
                LOG.debug("Style %r not in document, using default paragraph style", style)
        self.paragraph = paragraph
        self._has_tab_stop = False
        return paragraph

    def _current_paragraph(self):
        if self.paragraph is None:
            style = _leveled("List Continue", self.list_depth) if self.list_depth else None
            self._new_paragraph(style)
        return self.paragraph

    def write(self, node: Content, italic: bool = False, bold: bool = False) -> None:
        if isinstance(node, Text):
            run = self._current_paragraph().add_run(normalize_text_for_processing(node.text))
            if italic:
                run.italic = True
            if bold:
                run.bold = True
        elif isinstance(node, Emph):
            self.write(node.body, italic=True, bold=bold)
        elif isinstance(node, Strong):
            self.write(node.body, italic=italic, bold=True)
        elif isinstance(node, HFill):
            paragraph = self._current_paragraph()
            if self.text_width is not None and not self._has_tab_stop:
                paragraph.paragraph_format.tab_stops.add_tab_stop(self.text_width, WD_TAB_ALIGNMENT.RIGHT)
                self._has_tab_stop = True
            paragraph.add_run("\t")
        elif isinstance(node, Seq):
            for child in node.children:
                self.write(child, italic=italic, bold=bold)
        elif isinstance(node, Block):
            self.paragraph = None
            self.write(node.body, italic=italic, bold=bold)
            self.paragraph = None
        elif isinstance(node, ListNode):
            self._write_list(node, italic=italic, bold=bold)
        else:
            raise TypeError(f"Unknown content node: {type(node).__name__}")

    def _write_list(self, node: ListNode, italic: bool, bold: bool) -> None:
        self.list_depth += 1
        try:
            for item in node.items:
                if node.marker is None:
                    self._new_paragraph(_leveled("List Bullet", self.list_depth))
                else:
                    paragraph = self._new_paragraph(_leveled("List", self.list_depth))
                    paragraph.add_run(normalize_text_for_processing(f"{node.marker} "))
                self.write(item, italic=italic, bold=bold)
                self.paragraph = None
        finally:
            self.list_depth -= 1


class DocxContentRenderer(ContentRenderer):
    """
    Renders content to a Word .docx document using python-docx.

    This implementation:
    - Maps emphasis and strong content to italic and bold runs
    - Turns the flexible spacer into a tab to a right-aligned tab stop
      at the text width, pushing the dates to the right margin
    - Uses the "List Bullet" styles for lists, or a literal marker prefix
    - Optionally starts from an existing .docx so its styles apply
    """

    options = ("template_path",)

    def __init__(self, template_path: Optional[Path] = None) -> None:
        self.template_path = Path(template_path) if template_path else None

    def _open_document(self):
        if self.template_path is None:
            return Document()
        check_docx_template(self.template_path)
        return Document(str(self.template_path))

    def render(self, content: Content, output_path: Path) -> Path:
        """
        Render content to a .docx file.

        Args:
            content: Content tree to render
            output_path: Path where the rendered .docx should be saved

        Returns:
            Path to the rendered .docx file
        """
        output_path = Path(output_path)
        document = self._open_document()
        _DocxWriter(document).write(content)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        document.save(str(output_path))
        LOG.debug("Wrote %s", output_path)
        return output_path
