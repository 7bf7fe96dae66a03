"""Serving count parsing for the recipeYield field."""
from __future__ import annotations

import logging
import re
from typing import Any

from ..const import YIELD_PREFIXES
from ..models.recipe import NumberAmount, RangeAmount, Serving
from .amount import capture
from .shapes import InputShape, classify, is_number, number_to_text

_LOGGER = logging.getLogger(__name__)

YIELD_PREFIX = re.compile(rf"^(?:{'|'.join(YIELD_PREFIXES)})\b:?\s*", re.IGNORECASE)
YIELD_RANGE = re.compile(r"(\d+)\s*(?:[-–]|to)\s*(\d+)\s*(.*)", re.IGNORECASE)
YIELD_SINGLE = re.compile(r"(\d+)\s*(.*)")


def _candidate_text(value: Any) -> str | None:
    if is_number(value):
        return number_to_text(value)
    if isinstance(value, str):
        return value
    return None


def _select_yield_text(recipe_yield: Any) -> str | None:
    shape = classify(recipe_yield)
    if shape is InputShape.SEQUENCE:
        # Longer strings tend to carry the unit, e.g. "4 people" over "4".
        candidates = [text for text in map(_candidate_text, recipe_yield) if text is not None]
        if not candidates:
            return None
        return max(candidates, key=len)
    if shape is InputShape.SCALAR:
        return _candidate_text(recipe_yield)
    return None


def parse_yield(recipe_yield: Any) -> Serving | None:
    """Parse a recipeYield value into a structured serving count.

    Args:
        recipe_yield: A string, number or array of candidate strings

    Returns:
        Serving with a number or range count, or None when no count is found

    Examples:
        >>> parse_yield("Yield: 12 muffins").unit
        'muffins'
        >>> parse_yield("4 to 6").count.value
        ('4', '6')
    """
    text = _select_yield_text(recipe_yield)
    if not text:
        return None

    text = YIELD_PREFIX.sub("", text, count=1).strip()

    match = YIELD_RANGE.search(text)
    if match:
        lower, upper, unit = capture(match, 1), capture(match, 2), capture(match, 3)
        if lower is not None and upper is not None and unit is not None:
            return Serving(count=RangeAmount(value=(lower, upper)), unit=unit.strip())

    match = YIELD_SINGLE.search(text)
    if match:
        value, unit = capture(match, 1), capture(match, 2)
        if value is not None and unit is not None:
            return Serving(count=NumberAmount(value=value), unit=unit.strip())

    _LOGGER.debug("No serving count found in yield '%s'", text)
    return None
