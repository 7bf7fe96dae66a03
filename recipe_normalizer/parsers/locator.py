"""
Recipe entity lookup.

Pages publish JSON-LD as a single object, a list of objects or an
``@graph`` container; this module finds the Recipe node in any of them.
"""
from __future__ import annotations

import logging
from typing import Any

from ..const import MAX_SEARCH_DEPTH, TYPE_RECIPE
from .shapes import InputShape, classify

_LOGGER = logging.getLogger(__name__)


def has_type(item: Any, type_name: str) -> bool:
    """Check whether a JSON-LD record declares the given @type."""
    if classify(item) is not InputShape.KEYED:
        return False
    item_type = item.get("@type")
    if isinstance(item_type, str):
        return item_type == type_name
    if isinstance(item_type, list):
        return type_name in item_type
    return False


def is_recipe(item: Any) -> bool:
    """Check if a JSON-LD item represents a Recipe."""
    return has_type(item, TYPE_RECIPE)


def find_recipe(data: Any, _depth: int = 0) -> dict[str, Any] | None:
    """Find the first Recipe node in a parsed JSON-LD tree.

    Arrays are scanned in order and ``@graph`` containers are descended
    into; other keys of a record are not searched.

    Args:
        data: Parsed JSON-LD (record, array or scalar)

    Returns:
        The Recipe record, or None if the tree holds none
    """
    if _depth > MAX_SEARCH_DEPTH:
        _LOGGER.debug("Stopped recipe search at depth %d", _depth)
        return None

    if is_recipe(data):
        return data

    shape = classify(data)
    if shape is InputShape.SEQUENCE:
        for item in data:
            found = find_recipe(item, _depth + 1)
            if found is not None:
                return found
    elif shape is InputShape.KEYED and "@graph" in data:
        return find_recipe(data["@graph"], _depth + 1)

    return None
