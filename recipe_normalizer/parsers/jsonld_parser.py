"""
JSON-LD Recipe Parser.

This module converts a schema.org Recipe record into an ExtractedRecipe by
running each field through its normalizer.
"""
from __future__ import annotations

import logging
from typing import Any

from ..const import DEFAULT_RECIPE_NAME
from ..markup import decode_html
from ..models.catalog import TagCatalog
from ..models.recipe import AdditionalData, ExtractedRecipe
from ..services.tag_service import infer_tags
from .base_parser import BaseRecipeParser
from .duration import parse_duration
from .image import select_best_image
from .ingredient_parser import parse_ingredients
from .instruction_parser import parse_instructions
from .servings import parse_yield
from .shapes import InputShape, classify, first_text

_LOGGER = logging.getLogger(__name__)


def _trimmed(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def parse_source(data: dict[str, Any]) -> str | None:
    """Pick the best external identifier: @id, then url, then mainEntityOfPage."""
    source = _trimmed(data.get("@id")) or _trimmed(data.get("url"))
    if source:
        return source

    main_entity = data.get("mainEntityOfPage")
    if classify(main_entity) is InputShape.KEYED:
        return _trimmed(main_entity.get("@id"))
    return _trimmed(main_entity)


class JSONLDRecipeParser(BaseRecipeParser):
    """Parses recipe data from structured JSON-LD records.

    This parser handles pre-structured recipe data that follows the Schema.org
    Recipe format, requiring no AI inference.
    """

    def __init__(self, catalog: TagCatalog | None = None) -> None:
        """Initialize the JSON-LD recipe parser.

        Args:
            catalog: Taxonomy used for tag inference (built-in one if None)
        """
        self.catalog = catalog
        _LOGGER.debug("Initialized JSONLDRecipeParser")

    def parse_recipe(self, data: dict[str, Any]) -> ExtractedRecipe:
        """Parse a located schema.org Recipe record.

        Args:
            data: The Recipe record

        Returns:
            ExtractedRecipe; fields that cannot be read are left empty
        """
        if classify(data) is not InputShape.KEYED:
            _LOGGER.warning("Expected a recipe record, got %s", type(data).__name__)
            data = {}

        recipe = ExtractedRecipe(
            name=decode_html(first_text(data.get("name"))) or DEFAULT_RECIPE_NAME,
            summary=decode_html(first_text(data.get("description"))),
            source=parse_source(data),
            prep_time=parse_duration(data.get("prepTime")),
            cook_time=parse_duration(data.get("cookTime")),
            servings=parse_yield(data.get("recipeYield")),
            ingredients=parse_ingredients(data.get("recipeIngredient")),
            method=parse_instructions(data.get("recipeInstructions")),
            tags=infer_tags(data, self.catalog),
            additional_data=AdditionalData(image_url=select_best_image(data.get("image"))),
        )

        _LOGGER.info(
            "Parsed recipe '%s' with %d ingredient and %d method sections",
            recipe.name,
            len(recipe.ingredients),
            len(recipe.method),
        )
        return recipe


def convert_recipe(data: dict[str, Any], catalog: TagCatalog | None = None) -> ExtractedRecipe:
    """Convert an already-located Recipe record into an ExtractedRecipe."""
    return JSONLDRecipeParser(catalog).parse_recipe(data)
