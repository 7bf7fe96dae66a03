"""
Input shape classification.

Schema.org fields may legally be a scalar, an array or a nested record
depending on the publishing site. Every normalizer classifies its field
first and dispatches on the result.
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class InputShape(Enum):
    """The structural shape of a markup field value."""

    ABSENT = "absent"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    KEYED = "keyed"


def classify(value: Any) -> InputShape:
    if value is None:
        return InputShape.ABSENT
    if isinstance(value, (list, tuple)):
        return InputShape.SEQUENCE
    if isinstance(value, dict):
        return InputShape.KEYED
    return InputShape.SCALAR


def ensure_list(value: Any) -> list[Any]:
    """Wrap a single value in a list; absent values become an empty list."""
    shape = classify(value)
    if shape is InputShape.ABSENT:
        return []
    if shape is InputShape.SEQUENCE:
        return list(value)
    return [value]


def is_number(value: Any) -> bool:
    """True for ints and floats, but not booleans."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def number_to_text(value: int | float) -> str:
    """Render a number without a spurious '.0' suffix."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def first_text(value: Any) -> str | None:
    """Return a field as text, using the first usable element of an array."""
    shape = classify(value)
    if shape is InputShape.SCALAR:
        if isinstance(value, str):
            return value
        if is_number(value):
            return number_to_text(value)
        return None
    if shape is InputShape.SEQUENCE:
        return next(
            (text for text in (first_text(item) for item in value
                               if classify(item) is InputShape.SCALAR) if text),
            None,
        )
    return None
