"""
Recipe data models for the Recipe Normalizer.

This module defines the Pydantic models used to structure recipe data
normalized from schema.org Recipe markup.
"""
from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _RecordModel(BaseModel):
    """Base for records serialized with camelCase keys."""

    model_config = ConfigDict(populate_by_name=True)


class NumberAmount(_RecordModel):
    """A plain quantity, e.g. '2' or '2.7'."""

    representation: Literal["number"] = "number"
    value: str = Field(description="The quantity as written, e.g. '2.7'")


class FractionAmount(_RecordModel):
    """A fractional quantity stored as (whole, numerator, denominator)."""

    representation: Literal["fraction"] = "fraction"
    value: tuple[str, str, str] = Field(
        description="Whole part, numerator and denominator, e.g. ('1', '1', '2')"
    )


class RangeAmount(_RecordModel):
    """A quantity range stored as (low, high)."""

    representation: Literal["range"] = "range"
    value: tuple[str, str] = Field(
        description="Lower and upper bound as written, e.g. ('2', '3')"
    )


Amount = Annotated[
    Union[NumberAmount, FractionAmount, RangeAmount],
    Field(discriminator="representation"),
]


class Serving(_RecordModel):
    """A normalized serving count, e.g. 4-6 'people'.

    Attributes:
        count: Number or range of servings
        unit: Free text trailing the count, possibly empty
    """

    count: Annotated[Union[NumberAmount, RangeAmount],
                     Field(discriminator="representation")]
    unit: str = ""


class IngredientItem(_RecordModel):
    """A structured representation of a single ingredient line.

    Attributes:
        id: Identifier assigned when the line is parsed
        name: The name of the ingredient (e.g., 'olive oil')
        amount: Optional parsed quantity
        unit: Optional unit of measurement (e.g., 'tbsp', 'g')
        description: Optional notes taken from commas or parentheses
    """

    id: str
    name: str | None = None
    amount: Amount | None = None
    unit: str | None = None
    description: str | None = None


class MethodStep(_RecordModel):
    """A single instruction step."""

    id: str
    description: str


class IngredientSection(_RecordModel):
    """A named group of ingredients, e.g. 'Marinade'."""

    section_id: str = Field(alias="sectionId")
    name: str
    description: str | None = None
    items: list[IngredientItem] = Field(default_factory=list)


class MethodSection(_RecordModel):
    """A named group of instruction steps, e.g. 'Sauce'."""

    section_id: str = Field(alias="sectionId")
    name: str
    description: str | None = None
    items: list[MethodStep] = Field(default_factory=list)


class TagReference(_RecordModel):
    """A reference to a tag owned by the taxonomy catalog."""

    tag_id: str = Field(alias="tagId")


class AdditionalData(_RecordModel):
    """Extra recipe data that has no dedicated field."""

    image_url: str | None = Field(default=None, alias="imageUrl")


class ExtractedRecipe(_RecordModel):
    """The top-level schema for a normalized recipe.

    Attributes:
        name: The recipe title, or a placeholder when none was declared
        summary: Plain-text description
        source: Best external identifier (usually the page URL)
        prep_time: Preparation time in minutes
        cook_time: Cooking time in minutes
        servings: Structured serving count
        ingredients: Ingredient sections in source order
        method: Method sections in source order
        tags: Unique references into the taxonomy catalog
        additional_data: Extra data such as the representative image
    """

    name: str
    summary: str | None = None
    source: str | None = None
    prep_time: int | None = Field(default=None, alias="prepTime")
    cook_time: int | None = Field(default=None, alias="cookTime")
    servings: Serving | None = None
    ingredients: list[IngredientSection] = Field(default_factory=list)
    method: list[MethodSection] = Field(default_factory=list)
    tags: list[TagReference] | None = None
    additional_data: AdditionalData = Field(
        default_factory=AdditionalData, alias="additionalData"
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys, omitting absent fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
