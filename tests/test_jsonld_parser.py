from __future__ import annotations

import pytest

from recipe_normalizer.models.recipe import NumberAmount, RangeAmount
from recipe_normalizer.parsers.jsonld_parser import JSONLDRecipeParser, convert_recipe, parse_source

FULL_RECIPE = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "@id": "https://example.com/pasta#recipe",
    "name": "Pasta &amp; Pesto",
    "description": "<p>A quick <em>weeknight</em> dinner.</p>",
    "url": "https://example.com/pasta",
    "prepTime": "PT10M",
    "cookTime": "PT1H15M",
    "recipeYield": ["4", "4 servings"],
    "recipeCuisine": "Italian",
    "recipeCategory": "Dinner",
    "keywords": "pasta, quick",
    "image": [
        "https://example.com/pasta-300x200.jpg",
        {"@type": "ImageObject", "url": "https://example.com/pasta-full.jpg", "width": 1600, "height": 900},
    ],
    "recipeIngredient": ["400 g spaghetti", "2 cloves garlic, crushed", "Salt"],
    "recipeInstructions": [
        {"@type": "HowToStep", "text": "Boil the pasta."},
        {
            "@type": "HowToSection",
            "name": "Pesto",
            "itemListElement": [{"@type": "HowToStep", "text": "Blend basil and oil."}],
        },
    ],
}


def test_parse_full_recipe(tag_id):
    recipe = JSONLDRecipeParser().parse_recipe(FULL_RECIPE)

    assert recipe.name == "Pasta & Pesto"
    assert recipe.summary == "A quick weeknight dinner."
    assert recipe.source == "https://example.com/pasta#recipe"
    assert recipe.prep_time == 10
    assert recipe.cook_time == 75
    assert recipe.servings.count == NumberAmount(value="4")
    assert recipe.servings.unit == "servings"
    assert recipe.additional_data.image_url == "https://example.com/pasta-full.jpg"
    assert [tag.tag_id for tag in recipe.tags] == [tag_id("Cuisine", "Italian"), tag_id("Meal", "Dinner")]

    [ingredients] = recipe.ingredients
    assert [(item.name, item.unit, item.description) for item in ingredients.items] == [
        ("spaghetti", "g", None),
        ("garlic", "cloves", "crushed"),
        ("Salt", None, None),
    ]
    assert [section.name for section in recipe.method] == ["Method", "Pesto"]


def test_to_dict_uses_camel_case_and_omits_absent_fields():
    data = convert_recipe(
        {
            "@type": "Recipe",
            "name": "Toast",
            "prepTime": "PT5M",
            "recipeYield": "2-3 slices",
            "recipeIngredient": ["2 slices bread"],
        }
    ).to_dict()

    assert data["prepTime"] == 5
    assert "cookTime" not in data
    assert "summary" not in data
    assert "tags" not in data
    assert data["additionalData"] == {}
    assert data["servings"] == {"count": {"representation": "range", "value": ["2", "3"]}, "unit": "slices"}
    [section] = data["ingredients"]
    assert section["name"] == "Ingredients"
    assert "sectionId" in section
    assert section["items"][0]["amount"] == {"representation": "number", "value": "2"}
    assert data["method"] == []


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"@type": "Recipe"},
        {"@type": "Recipe", "name": ""},
        {"@type": "Recipe", "name": "   "},
        {"@type": "Recipe", "name": {"@value": "Soup"}},
    ],
)
def test_default_name(data):
    assert convert_recipe(data).name == "Untitled Recipe"


def test_name_from_array():
    assert convert_recipe({"name": [None, "", "Soup", "Stew"]}).name == "Soup"


def test_malformed_fields_leave_fields_empty():
    recipe = convert_recipe(
        {
            "@type": "Recipe",
            "name": 12,
            "description": ["", None],
            "prepTime": {"value": "PT5M"},
            "cookTime": 30,
            "recipeYield": {"value": 4},
            "recipeIngredient": {"text": "1 egg"},
            "recipeInstructions": 5,
            "image": [{"width": 10}],
            "keywords": ["", None],
        }
    )

    assert recipe.name == "12"
    assert recipe.summary is None
    assert recipe.prep_time is None
    assert recipe.cook_time is None
    assert recipe.servings is None
    assert recipe.ingredients == []
    assert recipe.method == []
    assert recipe.tags is None
    assert recipe.additional_data.image_url is None


@pytest.mark.parametrize("data", [None, [], "Recipe", 3])
def test_parse_recipe_rejects_non_records(data):
    recipe = JSONLDRecipeParser().parse_recipe(data)
    assert recipe.name == "Untitled Recipe"
    assert recipe.ingredients == []


def test_yield_range():
    recipe = convert_recipe({"recipeYield": "Serves 4-6 people"})
    assert recipe.servings.count == RangeAmount(value=("4", "6"))
    assert recipe.servings.unit == "people"


@pytest.mark.parametrize(
    "data, expected",
    [
        ({"@id": "https://a.example/#r", "url": "https://b.example"}, "https://a.example/#r"),
        ({"@id": "  ", "url": "https://b.example"}, "https://b.example"),
        ({"mainEntityOfPage": "https://c.example"}, "https://c.example"),
        ({"mainEntityOfPage": {"@id": "https://d.example"}}, "https://d.example"),
        ({"mainEntityOfPage": True}, None),
        ({"url": ["https://e.example"]}, None),
        ({}, None),
    ],
)
def test_parse_source(data, expected):
    assert parse_source(data) == expected
