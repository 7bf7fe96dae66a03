"""
Recipe Normalizer.

Converts schema.org Recipe markup, already parsed from a page's JSON-LD,
into a strict ExtractedRecipe record.
"""
from __future__ import annotations

from .exceptions import CatalogError, RecipeNormalizerError
from .models.catalog import TagCatalog
from .models.recipe import ExtractedRecipe
from .parsers.jsonld_parser import JSONLDRecipeParser, convert_recipe
from .parsers.locator import find_recipe, is_recipe
from .services.recipe_service import extract_recipe
from .services.tag_service import default_catalog, load_catalog

__all__ = [
    "CatalogError",
    "ExtractedRecipe",
    "JSONLDRecipeParser",
    "RecipeNormalizerError",
    "TagCatalog",
    "convert_recipe",
    "default_catalog",
    "extract_recipe",
    "find_recipe",
    "is_recipe",
    "load_catalog",
]
