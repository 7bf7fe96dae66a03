"""
Base Recipe Parser.

This module defines the base interface that all recipe parsers must implement.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..models.recipe import ExtractedRecipe


class BaseRecipeParser(ABC):
    """Abstract base class for recipe parsers.

    All recipe parsers must implement the parse_recipe method to convert
    a located recipe record into an ExtractedRecipe. Implementations never
    raise on malformed input; fields they cannot read are left empty.
    """

    @abstractmethod
    def parse_recipe(self, data: dict[str, Any]) -> ExtractedRecipe:
        """Parse recipe information from a structured record.

        Args:
            data: The recipe record to parse

        Returns:
            An ExtractedRecipe with every field that could be extracted
        """
