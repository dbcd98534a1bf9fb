"""
Field values for resume records.

Every optional record field holds exactly one of four kinds: plain text,
rich content, a calendar date, or nothing. Raw Python values are coerced
into these kinds once, when a record is constructed, so the formatters
only ever branch over this closed set.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Union

from .content import Content


@dataclass(frozen=True)
class PlainField:
    text: str


@dataclass(frozen=True)
class RichField:
    content: Content


@dataclass(frozen=True)
class DateField:
    value: date


class AbsentField:
    """The value of a field that was not supplied. Use the ``ABSENT`` singleton."""

    _instance = None

    def __new__(cls) -> "AbsentField":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = AbsentField()

Field = Union[PlainField, RichField, DateField, AbsentField]


def as_field(value: Any, allow_date: bool = False) -> Field:
    """
    Coerce a raw value into a field.

    Args:
        value: None, str, a content node, a ``datetime.date`` or an existing field
        allow_date: Whether calendar dates are valid for this field

    Returns:
        The matching field value

    Raises:
        TypeError: If the value is of an unsupported type, or is a date
            where dates are not allowed
    """
    if value is None:
        return ABSENT
    if isinstance(value, (PlainField, RichField, AbsentField)):
        return value
    if isinstance(value, DateField):
        if not allow_date:
            raise TypeError("Calendar dates are only valid for start/end")
        return value
    if isinstance(value, str):
        return PlainField(value)
    if isinstance(value, Content):
        return RichField(value)
    if isinstance(value, date):
        if not allow_date:
            raise TypeError("Calendar dates are only valid for start/end")
        return DateField(value)
    raise TypeError(f"Unsupported field value type: {type(value).__name__}")


def is_absent(field: Field) -> bool:
    return isinstance(field, AbsentField)
