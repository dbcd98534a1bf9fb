# cvwork/__init__.py

from .content import Block, Content, Emph, HFill, ListNode, Seq, Strong, Text, plain_text, seq
from .fields import ABSENT, DateField, PlainField, RichField, as_field
from .shared import DEFAULT_DATE_FORMAT, DEFAULT_TITLE, WorkExperience, WorkSection
from .experience import format_experience, join_optional
from .section import build_section, format_section, merge_entries
from .loader import load_section, section_from_dict
from .render import render_section_from_json

__all__ = [
    "ABSENT",
    "Block",
    "Content",
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_TITLE",
    "DateField",
    "Emph",
    "HFill",
    "ListNode",
    "PlainField",
    "RichField",
    "Seq",
    "Strong",
    "Text",
    "WorkExperience",
    "WorkSection",
    "as_field",
    "build_section",
    "format_experience",
    "format_section",
    "join_optional",
    "load_section",
    "merge_entries",
    "plain_text",
    "render_section_from_json",
    "section_from_dict",
    "seq",
]
