"""
Tag inference.

This module matches a recipe's cuisine, category and keyword values against
a read-only taxonomy catalog. Tags are only looked up, never created.
"""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, Iterator

from pydantic import ValidationError

from ..const import MAX_SEARCH_DEPTH, TAG_EXTRACTION_CONFIG
from ..default_tags import DEFAULT_TAG_DEFINITIONS
from ..exceptions import CatalogError
from ..models.catalog import TagCatalog
from ..models.recipe import TagReference
from ..parsers.shapes import InputShape, classify

_LOGGER = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def default_catalog() -> TagCatalog:
    """Return the built-in taxonomy catalog."""
    return TagCatalog.from_mapping(DEFAULT_TAG_DEFINITIONS)


def load_catalog(path: str | Path) -> TagCatalog:
    """Load a taxonomy catalog from a JSON file.

    The file maps group names to ``{"tagId", "name", "children"}`` where
    children map tag names to ``{"tagId", "name"}``.

    Raises:
        CatalogError: If the file cannot be read or is not a valid catalog
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogError(f"Cannot read tag catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Tag catalog {path} is not valid JSON: {e}") from e

    try:
        catalog = TagCatalog.from_mapping(data)
    except ValidationError as e:
        raise CatalogError(f"Tag catalog {path} is malformed: {e}") from e

    _LOGGER.debug("Loaded tag catalog with %d groups from %s", len(catalog.root), path)
    return catalog


def extract_candidates(value: Any, _depth: int = 0) -> list[str]:
    """Collect lower-cased candidate names from a string or (nested) array.

    Strings are split on commas; empty entries are skipped and duplicates
    keep their first position. Arrays nested deeper than MAX_SEARCH_DEPTH
    are ignored.

    Examples:
        >>> extract_candidates(["Italian", "dinner, Quick"])
        ['italian', 'dinner', 'quick']
    """
    if _depth > MAX_SEARCH_DEPTH:
        _LOGGER.debug("Stopped collecting tag candidates at depth %d", _depth)
        return []

    shape = classify(value)
    if shape is InputShape.SCALAR and isinstance(value, str):
        parts: Iterable[str] = (part.strip().lower() for part in value.split(","))
    elif shape is InputShape.SEQUENCE:
        parts = (candidate for item in value for candidate in extract_candidates(item, _depth + 1))
    else:
        return []
    return list(dict.fromkeys(part for part in parts if part))


def _matching_tag_ids(recipe: dict[str, Any], catalog: TagCatalog) -> Iterator[str]:
    for field, group_names in TAG_EXTRACTION_CONFIG:
        candidates = extract_candidates(recipe.get(field))
        if not candidates:
            continue
        for group_name in group_names:
            group = catalog.group(group_name)
            if group is None:
                _LOGGER.debug("Tag group '%s' not in catalog", group_name)
                continue
            for candidate in candidates:
                tag = group.lookup(candidate)
                if tag is not None:
                    yield tag.tag_id


def infer_tags(recipe: dict[str, Any], catalog: TagCatalog | None = None) -> list[TagReference] | None:
    """Match recipe fields against the configured taxonomy groups.

    Args:
        recipe: The schema.org Recipe record
        catalog: Taxonomy to match against (defaults to the built-in one)

    Returns:
        Unique tag references in first-match order, or None if nothing matched
    """
    tag_ids = dict.fromkeys(_matching_tag_ids(recipe, catalog if catalog is not None else default_catalog()))
    tags = [TagReference(tag_id=tag_id) for tag_id in tag_ids]

    if not tags:
        return None

    _LOGGER.debug("Inferred %d tags", len(tags))
    return tags
