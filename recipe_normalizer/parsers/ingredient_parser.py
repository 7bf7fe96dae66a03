"""
Ingredient line parsing.

This module decomposes free-text recipeIngredient lines such as
"2 Tbsp olive oil, warmed (optional)" into name, amount, unit and notes.
"""
from __future__ import annotations

import logging
import re
import uuid
from typing import Any

from ..const import DEFAULT_INGREDIENT_SECTION, KNOWN_UNITS
from ..markup import decode_html
from ..models.recipe import IngredientItem, IngredientSection
from .amount import capture, extract_amount, normalize_fractions
from .shapes import ensure_list, is_number, number_to_text

_LOGGER = logging.getLogger(__name__)

PARENTHETICAL = re.compile(r"\({1,2}(.*?)\){1,2}")
WHITESPACE = re.compile(r"\s+")


def extract_parenthetical(text: str) -> tuple[str, str | None]:
    """Remove the first (note) or ((note)) and return it as a description.

    Examples:
        >>> extract_parenthetical("2 garlic cloves (minced)")
        ('2 garlic cloves', 'minced')
    """
    match = PARENTHETICAL.search(text)
    if not match:
        return text, None
    note = capture(match, 1)
    if note is None:
        return text, None
    return text.replace(match.group(0), "", 1).strip(), note.strip()


def extract_comma_suffix(text: str) -> tuple[str, str | None]:
    """Split on the first comma into the leading text and the remainder."""
    head, sep, tail = text.partition(",")
    if not sep:
        return text, None
    return head.strip(), tail.strip() or None


def extract_unit(text: str) -> tuple[str | None, str]:
    """Consume a known unit from the start of the text.

    Plural forms are accepted ("cups" as well as "cup"); the unit is
    returned lower-cased as written.

    Returns:
        (unit, remaining text)
    """
    token = WHITESPACE.split(text, maxsplit=1)[0].lower()
    if token and (token in KNOWN_UNITS or token.removesuffix("s") in KNOWN_UNITS):
        return token, text[len(token):].strip()
    return None, text


def parse_ingredient(raw: str) -> IngredientItem:
    """Parse an ingredient string into name, amount, unit and description.

    Supports formats such as:
    - Quantity-unit-name: "2 Tbsp olive oil", "250g smooth ricotta"
    - Fractions and ranges: "1 1/4 lemon", "¼-½ teaspoon chilli flakes"
    - Notes: "2 garlic cloves (minced)", "2 lemon, 1 juiced, 1 sliced"
    - Name-quantity: "Water, 150 g"

    Args:
        raw: Raw ingredient string, possibly containing markup

    Returns:
        Structured IngredientItem with a fresh id
    """
    text = decode_html(raw) or ""

    text, paren_note = extract_parenthetical(text)
    text = normalize_fractions(text)

    text, amount = extract_amount(text)
    unit = None
    if amount is not None:
        unit, text = extract_unit(text)

    name, comma_suffix = extract_comma_suffix(text)

    # The quantity may trail the name, e.g. "Water, 150 g"
    if amount is None and comma_suffix:
        suffix_rest, suffix_amount = extract_amount(comma_suffix)
        if suffix_amount is not None:
            amount = suffix_amount
            unit, suffix_name = extract_unit(suffix_rest)
            comma_suffix = suffix_name or None

    if comma_suffix and paren_note:
        description = f"{comma_suffix}, {paren_note}"
    else:
        description = comma_suffix or paren_note or None

    return IngredientItem(
        id=str(uuid.uuid4()),
        name=name or None,
        amount=amount,
        unit=unit,
        description=description,
    )


def parse_ingredients(recipe_ingredient: Any) -> list[IngredientSection]:
    """Parse the recipeIngredient field into a single ingredient section.

    Args:
        recipe_ingredient: A string or an array of ingredient lines

    Returns:
        A one-element list with the "Ingredients" section, or an empty list
        when no line produced a named ingredient
    """
    items = []
    for idx, line in enumerate(ensure_list(recipe_ingredient)):
        if is_number(line):
            line = number_to_text(line)
        if not isinstance(line, str):
            _LOGGER.debug("Skipping ingredient %d: not text (%s)", idx + 1, type(line).__name__)
            continue

        item = parse_ingredient(line)
        if not item.name:
            _LOGGER.debug("Skipping ingredient %d: no name in '%s'", idx + 1, line)
            continue
        items.append(item)

    if not items:
        return []

    return [
        IngredientSection(
            section_id=str(uuid.uuid4()),
            name=DEFAULT_INGREDIENT_SECTION,
            items=items,
        )
    ]
