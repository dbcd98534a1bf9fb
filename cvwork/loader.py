"""
JSON loading for work sections.

Reads a work section from JSON:

    {
      "title": "Experience",
      "named": {"current": {...entry...}},
      "entries": [{...entry...}, ...]
    }

Entry keys are the WorkExperience fields. Field values may be plain
strings, ``{"date": "YYYY-MM-DD"}`` for start/end, or content JSON:

    "text"                    -> Text
    [c1, c2, ...]             -> Seq
    {"text": "..."}           -> Text
    {"emph": c}               -> Emph
    {"strong": c}             -> Strong
    {"hfill": true}           -> HFill
    {"block": c}              -> Block
    {"list": [c, ...], "marker": "-"} -> ListNode

For position, company, location, title, start and end a bare string is
plain text (and gets the formatter's styling); wrap it as
``{"text": "..."}`` to pass it through as content instead.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .content import Block, Content, Emph, HFill, ListNode, Strong, Text, seq
from .logging_utils import LOG
from .section import build_section
from .shared import WorkExperience, WorkSection, clean_text

_ENTRY_KEYS = ("position", "company", "location", "start", "end", "body")
_SECTION_KEYS = ("title", "named", "entries")


@dataclass(frozen=True)
class LoadResult:
    section: WorkSection
    warnings: List[str] = field(default_factory=list)


def content_from_json(value: Any, where: str = "content") -> Content:
    """
    Build a content tree from its JSON form.

    Raises:
        ValueError: If the value is not valid content JSON
    """
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, list):
        return seq(*(content_from_json(v, f"{where}[{i}]") for i, v in enumerate(value)))
    if isinstance(value, dict):
        if "text" in value and isinstance(value["text"], str):
            return Text(value["text"])
        if "emph" in value:
            return Emph(content_from_json(value["emph"], f"{where}.emph"))
        if "strong" in value:
            return Strong(content_from_json(value["strong"], f"{where}.strong"))
        if value.get("hfill") is True:
            return HFill()
        if "block" in value:
            return Block(content_from_json(value["block"], f"{where}.block"))
        if "list" in value:
            items = value["list"]
            if not isinstance(items, list):
                raise ValueError(f"{where}.list must be an array")
            marker = value.get("marker")
            if marker is not None and not isinstance(marker, str):
                raise ValueError(f"{where}.marker must be a string")
            return ListNode(
                tuple(content_from_json(v, f"{where}.list[{i}]") for i, v in enumerate(items)),
                marker=marker,
            )
    raise ValueError(f"{where}: not valid content: {value!r}")


def _parse_date(value: Any, where: str) -> date:
    if not isinstance(value, str):
        raise ValueError(f"{where}.date must be an ISO date string")
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise ValueError(f"{where}.date: {e}") from e


def field_from_json(value: Any, where: str, allow_date: bool = False) -> Any:
    """Convert a JSON field value to what WorkExperience accepts."""
    if value is None:
        return None
    if isinstance(value, str):
        text = clean_text(value)
        return text or None
    if allow_date and isinstance(value, dict) and "date" in value:
        return _parse_date(value["date"], where)
    return content_from_json(value, where)


def experience_from_json(raw: Any, where: str, warnings: List[str]) -> WorkExperience:
    if not isinstance(raw, dict):
        raise ValueError(f"{where}: entry must be an object")
    if raw.get("body") is None:
        raise ValueError(f"{where}: missing required field 'body'")

    for key in raw:
        if key not in _ENTRY_KEYS:
            warnings.append(f"{where}: ignored unknown field '{key}'")

    return WorkExperience(
        body=content_from_json(raw["body"], f"{where}.body"),
        position=field_from_json(raw.get("position"), f"{where}.position"),
        company=field_from_json(raw.get("company"), f"{where}.company"),
        location=field_from_json(raw.get("location"), f"{where}.location"),
        start=field_from_json(raw.get("start"), f"{where}.start", allow_date=True),
        end=field_from_json(raw.get("end"), f"{where}.end", allow_date=True),
    )


def section_from_dict(data: Dict[str, Any]) -> LoadResult:
    """
    Build a WorkSection from parsed JSON.

    Raises:
        ValueError: On structurally invalid input
    """
    if not isinstance(data, dict):
        raise ValueError("Section JSON must be an object")

    warnings: List[str] = []
    for key in data:
        if key not in _SECTION_KEYS:
            warnings.append(f"ignored unknown section field '{key}'")

    named_raw = data.get("named") or {}
    if not isinstance(named_raw, dict):
        raise ValueError("'named' must be an object")
    positional_raw = data.get("entries") or []
    if not isinstance(positional_raw, list):
        raise ValueError("'entries' must be an array")

    named = {
        name: experience_from_json(raw, f"named.{name}", warnings)
        for name, raw in named_raw.items()
    }
    positional: Tuple[WorkExperience, ...] = tuple(
        experience_from_json(raw, f"entries[{i}]", warnings)
        for i, raw in enumerate(positional_raw)
    )
    title = field_from_json(data.get("title"), "title")

    section = build_section(title=title, named=named, positional=positional)
    for warning in warnings:
        LOG.warning(warning)
    return LoadResult(section=section, warnings=warnings)


def load_section(path: Path, encoding: Optional[str] = "utf-8") -> LoadResult:
    """Load a WorkSection from a JSON file."""
    path = Path(path)
    with path.open("r", encoding=encoding) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    LOG.debug("Loaded section JSON from %s", path)
    return section_from_dict(data)
