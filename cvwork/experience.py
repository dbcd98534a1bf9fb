"""
Experience formatting.

Turns one WorkExperience into a single content block:

    *Position*, *Company* — Location  <spacer>  Start–End
    body

The leading zone (position, company, location) and the date zone
(start, end) follow different separator rules; see ``_leading_zone``
and ``_date_zone``.
"""

from __future__ import annotations

from typing import Optional

from .content import Block, Content, Emph, HFill, Text, seq
from .fields import AbsentField, DateField, Field, PlainField, RichField
from .shared import DEFAULT_DATE_FORMAT, WorkExperience

COMPANY_SEPARATOR = ", "
LOCATION_SEPARATOR = " — "  # em-dash
DATE_SEPARATOR = "–"  # en-dash


def join_optional(left: Optional[Content], separator: str, right: Optional[Content]) -> Optional[Content]:
    """
    Join two optional pieces of content.

    Returns ``left`` when ``right`` is missing, ``right`` when ``left`` is
    missing, and ``left + separator + right`` otherwise. The separator is
    never emitted next to a missing side.
    """
    if right is None:
        return left
    if left is None:
        return right
    return seq(left, Text(separator), right)


def render_date(field: Field, date_format: Optional[str] = None) -> Optional[Content]:
    """Render a start/end field; only calendar dates use ``date_format``."""
    if isinstance(field, AbsentField):
        return None
    if isinstance(field, DateField):
        pattern = DEFAULT_DATE_FORMAT if date_format is None else date_format
        return Text(field.value.strftime(pattern))
    if isinstance(field, PlainField):
        return Text(field.text)
    if isinstance(field, RichField):
        return field.content
    raise TypeError(f"Unknown field kind: {type(field).__name__}")


def emphasize(field: Field) -> Optional[Content]:
    """Italicize plain text; rich content is left as supplied."""
    if isinstance(field, AbsentField):
        return None
    if isinstance(field, PlainField):
        return Emph(Text(field.text))
    if isinstance(field, RichField):
        return field.content
    raise TypeError(f"Unexpected field kind for emphasis: {type(field).__name__}")


def as_content(field: Field) -> Optional[Content]:
    """Field content with no styling applied."""
    if isinstance(field, AbsentField):
        return None
    if isinstance(field, PlainField):
        return Text(field.text)
    if isinstance(field, RichField):
        return field.content
    raise TypeError(f"Unexpected field kind: {type(field).__name__}")


def _leading_zone(experience: WorkExperience) -> Optional[Content]:
    # A separator goes in only when there is already something on its left
    zone = emphasize(experience.position)
    zone = join_optional(zone, COMPANY_SEPARATOR, emphasize(experience.company))
    zone = join_optional(zone, LOCATION_SEPARATOR, as_content(experience.location))
    return zone


def _date_zone(experience: WorkExperience, date_format: Optional[str]) -> Optional[Content]:
    # The dash is kept whenever either end of the range is known: "Jan 2042–"
    start = render_date(experience.start, date_format)
    end = render_date(experience.end, date_format)
    if start is None and end is None:
        return None
    parts = [part for part in (start, Text(DATE_SEPARATOR), end) if part is not None]
    return seq(*parts)


def format_experience(experience: WorkExperience, date_format: Optional[str] = None) -> Content:
    """
    Format one work experience.

    Args:
        experience: The record to format
        date_format: strftime pattern for calendar-date start/end values;
            DEFAULT_DATE_FORMAT when None. Ignored for text or content dates.

    Returns:
        ``Seq(leading zone, HFill, date zone, Block(body))`` where missing
        zones contribute nothing. The spacer is always present so the date
        zone sits on the right edge.
    """
    parts = []
    leading = _leading_zone(experience)
    if leading is not None:
        parts.append(leading)
    parts.append(HFill())
    dates = _date_zone(experience, date_format)
    if dates is not None:
        parts.append(dates)
    parts.append(Block(experience.body))
    return seq(*parts)
