"""Duration parsing for prepTime / cookTime fields."""
from __future__ import annotations

import logging
import math
import re
from typing import Any

from .shapes import InputShape, classify

_LOGGER = logging.getLogger(__name__)

_NUM = r"(\d+(?:[.,]\d+)?)"
ISO_DURATION = re.compile(
    rf"^([-+])?P(?:{_NUM}Y)?(?:{_NUM}M)?(?:{_NUM}W)?(?:{_NUM}D)?"
    rf"(?:T(?:{_NUM}H)?(?:{_NUM}M)?(?:{_NUM}S)?)?$",
    re.IGNORECASE,
)
CLOCK_DURATION = re.compile(r"^([-+])?(?:(\d+)\.)?(\d+):(\d+)(?::(\d+(?:\.\d+)?))?$")

# Seconds per ISO component: years, months, weeks, days, hours, minutes, seconds
_ISO_SECONDS = (365 * 86400, 30 * 86400, 7 * 86400, 86400, 3600, 60, 1)
_CLOCK_SECONDS = (86400, 3600, 60, 1)


def _to_float(text: str | None) -> float:
    return float(text.replace(",", ".")) if text else 0.0


def _iso_seconds(text: str) -> float | None:
    match = ISO_DURATION.match(text)
    if not match:
        return None
    sign, *components = match.groups()
    if not any(components):
        return None
    seconds = sum(_to_float(c) * factor for c, factor in zip(components, _ISO_SECONDS))
    return -seconds if sign == "-" else seconds


def _clock_seconds(text: str) -> float | None:
    match = CLOCK_DURATION.match(text)
    if not match:
        return None
    sign, *components = match.groups()
    seconds = sum(_to_float(c) * factor for c, factor in zip(components, _CLOCK_SECONDS))
    return -seconds if sign == "-" else seconds


def parse_duration(duration: Any) -> int | None:
    """Convert a duration field into whole minutes.

    Accepts ISO-8601 durations ("PT1H30M", "P1DT2H") and clock durations
    ("1:30"), either directly or as the first string of an array.

    Args:
        duration: The raw prepTime/cookTime value

    Returns:
        Minutes rounded up to a whole number, or None if the field is
        missing, unparseable or not positive

    Examples:
        >>> parse_duration("PT1H30M")
        90
        >>> parse_duration(["PT20M"])
        20
        >>> parse_duration("invalid") is None
        True
    """
    shape = classify(duration)
    if shape is InputShape.SCALAR and isinstance(duration, str):
        text = duration
    elif shape is InputShape.SEQUENCE:
        text = next((d for d in duration if isinstance(d, str)), "")
    else:
        return None

    text = text.strip()
    if not text:
        return None

    seconds = _iso_seconds(text)
    if seconds is None:
        seconds = _clock_seconds(text)
    if seconds is None or not math.isfinite(seconds) or seconds <= 0:
        _LOGGER.debug("Ignoring duration '%s'", text)
        return None

    return math.ceil(seconds / 60)
