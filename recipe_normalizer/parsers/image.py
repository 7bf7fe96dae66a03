"""Representative image selection for the image field."""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any

from ..const import IMAGE_URL_KEYS
from .amount import capture
from .shapes import InputShape, classify, ensure_list, is_number

_LOGGER = logging.getLogger(__name__)

# Images without size information are assumed to be the page's main photo.
UNBOUNDED_AREA = math.inf

SIZE_SUFFIX = re.compile(r"[-_](\d+)x(\d+)\.[a-zA-Z0-9]+$")
LEADING_INT = re.compile(r"^\s*([-+]?\d+)")


@dataclass(frozen=True)
class ImageCandidate:
    url: str
    area: int | float


def _to_int(digits: str) -> int | None:
    try:
        return int(digits)
    except ValueError:
        # Beyond the interpreter's int conversion limit
        return None


def _parse_dimension(value: Any) -> int | float | None:
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if is_number(value):
        return value
    if isinstance(value, str):
        match = LEADING_INT.match(value)
        if match:
            return _to_int(match.group(1))
    return None


def calculate_image_area(url: str, width: Any = None, height: Any = None) -> int | float:
    """Estimate an image's area from declared dimensions or its file name.

    Examples:
        >>> calculate_image_area("img.jpg", "100", 50)
        5000
        >>> calculate_image_area("https://example.com/img-225x225.jpg")
        50625
    """
    if width is not None and height is not None:
        w, h = _parse_dimension(width), _parse_dimension(height)
        if w is not None and h is not None:
            try:
                return w * h
            except OverflowError:
                pass
        _LOGGER.debug("Ignoring unusable dimensions %r x %r for %s", width, height, url)

    match = SIZE_SUFFIX.search(url)
    if match:
        w, h = capture(match, 1), capture(match, 2)
        width_px = _to_int(w) if w is not None else None
        height_px = _to_int(h) if h is not None else None
        if width_px is not None and height_px is not None:
            return width_px * height_px

    return UNBOUNDED_AREA


def _to_candidate(item: Any) -> ImageCandidate | None:
    shape = classify(item)
    if shape is InputShape.SCALAR and isinstance(item, str):
        url = item.strip()
        return ImageCandidate(url, calculate_image_area(url)) if url else None

    if shape is InputShape.KEYED:
        url = next((item.get(key) for key in IMAGE_URL_KEYS if item.get(key)), None)
        if isinstance(url, str) and url.strip():
            url = url.strip()
            return ImageCandidate(url, calculate_image_area(url, item.get("width"), item.get("height")))

    return None


def select_best_image(images: Any) -> str | None:
    """Select the largest image from a heterogeneous image field.

    Args:
        images: A URL, an ImageObject record or an array mixing both

    Returns:
        URL of the candidate with the largest area (first seen on ties),
        or None when no candidate has a usable URL
    """
    candidates = [c for c in (_to_candidate(item) for item in ensure_list(images)) if c]
    if not candidates:
        return None

    # max() keeps the first of equally large candidates
    best = max(candidates, key=lambda candidate: candidate.area)
    _LOGGER.debug("Selected image %s from %d candidates", best.url, len(candidates))
    return best.url
