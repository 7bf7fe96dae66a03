"""
Amount grammar for ingredient quantities.

An ordered list of patterns is tried against the start of the text; the
first pattern that matches fully wins and yields both the typed amount and
the unconsumed remainder.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

from ..const import COMMON_FRACTIONS, FRACTION_TOLERANCE, UNICODE_FRACTIONS
from ..models.recipe import FractionAmount, NumberAmount, RangeAmount

_LOGGER = logging.getLogger(__name__)

AmountValue = Union[NumberAmount, FractionAmount, RangeAmount]
AmountResult = tuple[AmountValue, str]


def capture(match: re.Match[str], index: int) -> str | None:
    """Safely extract a capture group, returning None when it did not take part."""
    try:
        return match.group(index)
    except IndexError:
        return None


def normalize_fractions(text: str) -> str:
    """Replace unicode vulgar fractions with 'n/d' text.

    Examples:
        >>> normalize_fractions("1 ½ lemon")
        '1 1/2 lemon'
    """
    for fraction_char, replacement in UNICODE_FRACTIONS.items():
        text = text.replace(fraction_char, replacement)
    return text


def decimal_to_fraction(decimal: float) -> tuple[str, str, str] | None:
    """Snap a decimal to a common culinary fraction.

    Args:
        decimal: The parsed decimal, e.g. 1.5

    Returns:
        (whole, numerator, denominator), or None if the fractional part is
        not within tolerance of a known fraction

    Examples:
        >>> decimal_to_fraction(0.25)
        ('0', '1', '4')
        >>> decimal_to_fraction(2.7) is None
        True
    """
    if not math.isfinite(decimal):
        return None
    whole = math.floor(decimal)
    remainder = decimal - whole
    for numerator, denominator in COMMON_FRACTIONS:
        if abs(remainder - int(numerator) / int(denominator)) < FRACTION_TOLERANCE:
            return str(whole), numerator, denominator
    return None


def _extract_range(match: re.Match[str]) -> AmountResult | None:
    low, high, rest = capture(match, 1), capture(match, 2), capture(match, 3)
    if low is None or high is None or rest is None:
        return None
    return RangeAmount(value=(low, high)), rest


def _extract_mixed(match: re.Match[str]) -> AmountResult | None:
    whole, numerator, denominator, rest = (capture(match, i) for i in range(1, 5))
    if whole is None or numerator is None or denominator is None or rest is None:
        return None
    return FractionAmount(value=(whole, numerator, denominator)), rest


def _extract_fraction(match: re.Match[str]) -> AmountResult | None:
    numerator, denominator, rest = capture(match, 1), capture(match, 2), capture(match, 3)
    if numerator is None or denominator is None or rest is None:
        return None
    return FractionAmount(value=("0", numerator, denominator)), rest


def _extract_decimal(match: re.Match[str]) -> AmountResult | None:
    raw, rest = capture(match, 1), capture(match, 2)
    if raw is None or rest is None:
        return None
    fraction = decimal_to_fraction(float(raw))
    if fraction:
        return FractionAmount(value=fraction), rest
    return NumberAmount(value=raw), rest


def _extract_number(match: re.Match[str]) -> AmountResult | None:
    value, rest = capture(match, 1), capture(match, 2)
    if value is None or rest is None:
        return None
    return NumberAmount(value=value), rest


@dataclass(frozen=True)
class AmountPattern:
    """A named matcher/extractor pair in the amount grammar."""

    name: str
    regex: re.Pattern[str]
    extract: Callable[[re.Match[str]], Optional[AmountResult]]

    def apply(self, text: str) -> AmountResult | None:
        match = self.regex.match(text)
        if not match:
            return None
        return self.extract(match)


# Order matters: the first pattern that matches wins.
AMOUNT_PATTERNS: tuple[AmountPattern, ...] = (
    # "1-2 cups", "4 to 6", "1/4-1/2 tsp"
    AmountPattern(
        "range",
        re.compile(r"^(\d+(?:[/.]\d+)?)\s*(?:[-–]|to)\s*(\d+(?:[/.]\d+)?)\s+(.*)", re.IGNORECASE | re.ASCII),
        _extract_range,
    ),
    # "1 2/3 cups"
    AmountPattern("mixed", re.compile(r"^(\d+)\s+(\d+)/(\d+)\s+(.*)", re.ASCII), _extract_mixed),
    # "1/2 cup"
    AmountPattern("fraction", re.compile(r"^(\d+)/(\d+)\s+(.*)", re.ASCII), _extract_fraction),
    # "1.5 cups", ".25 cup"
    AmountPattern("decimal", re.compile(r"^(\d*\.\d+)\s+(.*)", re.ASCII), _extract_decimal),
    # "5 cups", "250g"
    AmountPattern("number", re.compile(r"^(\d+)\s*(.*)", re.ASCII), _extract_number),
)


def extract_amount(text: str) -> tuple[str, AmountValue | None]:
    """Extract an amount from the start of ingredient text.

    Args:
        text: Ingredient text with unicode fractions already normalized

    Returns:
        (remaining text, amount); the text is returned unchanged when no
        pattern matches

    Examples:
        >>> extract_amount("1 1/4 lemon")[1].value
        ('1', '1', '4')
        >>> extract_amount("Garlic")
        ('Garlic', None)
    """
    for pattern in AMOUNT_PATTERNS:
        result = pattern.apply(text)
        if result is not None:
            amount, remaining = result
            _LOGGER.debug("Matched %s amount in '%s'", pattern.name, text)
            return remaining, amount
    return text, None
