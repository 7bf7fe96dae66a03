from __future__ import annotations

import pytest

from recipe_normalizer.models.recipe import NumberAmount, RangeAmount, Serving
from recipe_normalizer.parsers.servings import parse_yield


def number(value: str, unit: str = "") -> Serving:
    return Serving(count=NumberAmount(value=value), unit=unit)


def value_range(low: str, high: str, unit: str = "") -> Serving:
    return Serving(count=RangeAmount(value=(low, high)), unit=unit)


@pytest.mark.parametrize(
    "recipe_yield, expected",
    [
        ("4", number("4")),
        ("4 People", number("4", "People")),
        (4, number("4")),
        (4.0, number("4")),
        (["4"], number("4")),
        (["4 People"], number("4", "People")),
        ("4 - 6", value_range("4", "6")),
        ("4 - 6 People", value_range("4", "6", "People")),
        ("4 to 6", value_range("4", "6")),
        ("4–6 servings", value_range("4", "6", "servings")),
        (["4", "4 servings"], number("4", "servings")),
        ("Yield: 12 muffins", number("12", "muffins")),
        ("Makes: 8-10 cookies", value_range("8", "10", "cookies")),
        ("serves 2", number("2")),
        ("For 6 people", number("6", "people")),
    ],
)
def test_parse_yield(recipe_yield, expected):
    assert parse_yield(recipe_yield) == expected


@pytest.mark.parametrize(
    "recipe_yield",
    [None, [], "", "invalid", "Serves: a crowd", True, {"value": 4}, [None]],
)
def test_parse_yield_absent(recipe_yield):
    assert parse_yield(recipe_yield) is None


@pytest.mark.parametrize(
    "recipe_yield",
    [
        ["servings", {"@type": "QuantitativeValue", "value": 4}],
        [["4 servings"]],
        [True, False],
        [{"value": "12 muffins"}, "makes lots"],
    ],
)
def test_parse_yield_ignores_non_text_candidates(recipe_yield):
    assert parse_yield(recipe_yield) is None


@pytest.mark.parametrize(
    "recipe_yield, expected",
    [
        (["4", {"value": "12 servings"}], number("4")),
        ([True, "2"], number("2")),
        ([["8 people"], 6], number("6")),
    ],
)
def test_parse_yield_uses_text_and_number_candidates(recipe_yield, expected):
    assert parse_yield(recipe_yield) == expected
