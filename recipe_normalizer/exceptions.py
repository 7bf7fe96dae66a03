"""Exceptions raised outside the extraction core (configuration, catalogs)."""
from __future__ import annotations


class RecipeNormalizerError(Exception):
    """Base class for Recipe Normalizer errors."""


class CatalogError(RecipeNormalizerError):
    """Raised when a taxonomy catalog cannot be loaded."""
