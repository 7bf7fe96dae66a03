from __future__ import annotations

import pytest

from recipe_normalizer import extract_recipe
from recipe_normalizer.models.catalog import TagCatalog


def test_extract_recipe_from_graph():
    data = {
        "@context": "https://schema.org",
        "@graph": [
            {"@type": "WebPage", "name": "Page"},
            {"@type": "Recipe", "name": "Soup", "recipeIngredient": ["1 l stock"]},
        ],
    }
    recipe = extract_recipe(data)

    assert recipe.name == "Soup"
    assert recipe.ingredients[0].items[0].unit == "l"


def test_extract_recipe_uses_first_recipe():
    data = [{"@type": "Recipe", "name": "First"}, {"@type": "Recipe", "name": "Second"}]
    assert extract_recipe(data).name == "First"


def test_extract_recipe_falls_back_to_top_level_record():
    assert extract_recipe({"name": "Untyped"}).name == "Untyped"


def test_extract_recipe_ignores_untyped_records_in_arrays():
    assert extract_recipe([{"name": "Untyped"}]).name == "Untitled Recipe"


@pytest.mark.parametrize("data", [None, "text", 42, [], [1, "a"]])
def test_extract_recipe_without_recipe_data(data):
    recipe = extract_recipe(data)
    assert recipe.name == "Untitled Recipe"
    assert recipe.to_dict() == {
        "name": "Untitled Recipe",
        "ingredients": [],
        "method": [],
        "additionalData": {},
    }


def test_extract_recipe_passes_catalog():
    catalog = TagCatalog.from_mapping(
        {"Meal": {"tagId": "meal", "name": "Meal", "children": {"supper": {"tagId": "supper", "name": "Supper"}}}}
    )
    recipe = extract_recipe({"@type": "Recipe", "recipeCategory": "Supper"}, catalog)
    assert [tag.tag_id for tag in recipe.tags] == ["supper"]
