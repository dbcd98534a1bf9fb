"""
docxtpl-based content renderer implementation.

Renders a content tree into a placeholder of a Word .docx template.
The template marks the insertion point with a rich-text tag, by default
``{{r work_experience }}``.
"""

from __future__ import annotations

from pathlib import Path

from docxtpl import DocxTemplate, RichText

from .base import ContentRenderer
from .docx_renderer import check_docx_template
from ..content import Block, Content, Emph, HFill, ListNode, Seq, Strong, Text
from ..logging_utils import LOG
from ..shared import normalize_text_for_processing

DEFAULT_PLACEHOLDER = "work_experience"
DEFAULT_BULLET = "•"

# docxtpl turns these into a new paragraph and a tab when the template renders
_PARAGRAPH = "\a"
_TAB = "\t"


class _RichTextBuilder:
    """Flattens a content tree into one docxtpl RichText."""

    def __init__(self) -> None:
        self.rich = RichText()
        self.list_depth = 0
        self._line_open = False
        self._pending_break = False

    def _break(self) -> None:
        # Deferred so that content never ends with an empty paragraph
        if self._line_open:
            self._pending_break = True
            self._line_open = False

    def _add(self, text: str, italic: bool = False, bold: bool = False) -> None:
        if self._pending_break:
            self.rich.add(_PARAGRAPH)
            self._pending_break = False
        self.rich.add(text, italic=italic, bold=bold)
        self._line_open = True

    def build(self, node: Content, italic: bool = False, bold: bool = False) -> None:
        if isinstance(node, Text):
            self._add(normalize_text_for_processing(node.text), italic=italic, bold=bold)
        elif isinstance(node, Emph):
            self.build(node.body, italic=True, bold=bold)
        elif isinstance(node, Strong):
            self.build(node.body, italic=italic, bold=True)
        elif isinstance(node, HFill):
            self._add(_TAB)
        elif isinstance(node, Seq):
            for child in node.children:
                self.build(child, italic=italic, bold=bold)
        elif isinstance(node, Block):
            self._break()
            self.build(node.body, italic=italic, bold=bold)
            self._break()
        elif isinstance(node, ListNode):
            self.list_depth += 1
            marker = node.marker if node.marker is not None else DEFAULT_BULLET
            indent = _TAB * (self.list_depth - 1)
            for item in node.items:
                self._break()
                self._add(indent + normalize_text_for_processing(marker) + " ")
                self.build(item, italic=italic, bold=bold)
            self._break()
            self.list_depth -= 1
        else:
            raise TypeError(f"Unknown content node: {type(node).__name__}")


def build_rich_text(content: Content) -> RichText:
    """Convert a content tree to a docxtpl RichText."""
    builder = _RichTextBuilder()
    builder.build(content)
    return builder.rich


class DocxTemplateContentRenderer(ContentRenderer):
    """
    Renders content into a .docx template placeholder using docxtpl.

    This implementation:
    - Converts content to a single RichText (italic/bold runs, tabs for
      the flexible spacer, new paragraphs for blocks and list items)
    - Renders it into ``{{r <placeholder> }}`` with auto-escaping
    - Leaves the rest of the template, including its tab stops, untouched
    """

    options = ("template_path", "placeholder")

    def __init__(self, template_path: Path, placeholder: str = DEFAULT_PLACEHOLDER) -> None:
        self.template_path = Path(template_path)
        self.placeholder = placeholder

    def render(self, content: Content, output_path: Path) -> Path:
        """
        Render content to a .docx file using the configured template.

        Args:
            content: Content tree to render
            output_path: Path where the rendered .docx should be saved

        Returns:
            Path to the rendered .docx file

        Raises:
            FileNotFoundError: If the template file does not exist
            ValueError: If the template is not a .docx file
        """
        check_docx_template(self.template_path)
        output_path = Path(output_path)

        tpl = DocxTemplate(str(self.template_path))
        tpl.render({self.placeholder: build_rich_text(content)}, autoescape=True)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        tpl.save(str(output_path))
        LOG.debug("Rendered template %s into %s", self.template_path, output_path)
        return output_path
