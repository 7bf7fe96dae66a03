"""Markup decoding for free-text recipe fields."""
from __future__ import annotations

import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning


def decode_html(html: str | None) -> str | None:
    """Strip tags and decode entities, returning None for blank text.

    Examples:
        >>> decode_html("1 cup <b>flour</b>")
        '1 cup flour'
        >>> decode_html("sliced &amp; peeled")
        'sliced & peeled'
    """
    if not html:
        return None
    with warnings.catch_warnings():
        # Short plain strings (e.g. "image.jpg") trip this warning but are valid input.
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        text = BeautifulSoup(html, features="html.parser").get_text().strip()
    return text or None
