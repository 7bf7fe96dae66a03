"""
Recipe Extraction Service.

This module orchestrates the extraction of recipe data from a parsed JSON-LD
tree: it locates the Recipe node and hands it to the JSON-LD parser.
"""
from __future__ import annotations

import logging
from typing import Any

from ..models.catalog import TagCatalog
from ..models.recipe import ExtractedRecipe
from ..parsers.jsonld_parser import JSONLDRecipeParser
from ..parsers.locator import find_recipe
from ..parsers.shapes import InputShape, classify

_LOGGER = logging.getLogger(__name__)


def extract_recipe(data: Any, catalog: TagCatalog | None = None) -> ExtractedRecipe:
    """Extract a recipe from a parsed JSON-LD tree.

    This function orchestrates the extraction process:
    1. Finds the first Recipe-typed node (arrays and @graph are searched)
    2. Falls back to the top-level record when no node declares the type
    3. Normalizes every field of the record

    Args:
        data: Parsed JSON-LD (record, array or scalar)
        catalog: Taxonomy used for tag inference (built-in one if None)

    Returns:
        ExtractedRecipe; an input without any usable data still yields a
        record carrying the placeholder name
    """
    recipe_data = find_recipe(data)

    if recipe_data is None:
        if classify(data) is InputShape.KEYED:
            _LOGGER.debug("No Recipe node found, using the top-level record")
            recipe_data = data
        else:
            _LOGGER.warning("No recipe data found in %s input", type(data).__name__)
            recipe_data = {}

    return JSONLDRecipeParser(catalog).parse_recipe(recipe_data)
