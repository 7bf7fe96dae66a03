"""
Instruction grouping for the recipeInstructions field.

Freestanding steps are collected into anonymous "Method" sections and
HowToSection records become named sections, keeping the source order.
"""
from __future__ import annotations

import logging
import uuid
from typing import Any

from ..const import DEFAULT_METHOD_SECTION, TYPE_HOW_TO_SECTION, TYPE_HOW_TO_STEP
from ..markup import decode_html
from ..models.recipe import MethodSection, MethodStep
from .locator import has_type
from .shapes import InputShape, classify, ensure_list, first_text

_LOGGER = logging.getLogger(__name__)


def get_step_text(step: Any) -> str:
    """Return the raw text of a step (string, HowToStep or untyped record)."""
    shape = classify(step)
    if shape is InputShape.SCALAR:
        return step if isinstance(step, str) else ""
    if shape is InputShape.KEYED:
        if "@type" in step and not has_type(step, TYPE_HOW_TO_STEP):
            return ""
        return first_text(step.get("text")) or first_text(step.get("name")) or ""
    return ""


def is_section(instruction: Any) -> bool:
    """A HowToSection, or an untyped record carrying its own step list."""
    if has_type(instruction, TYPE_HOW_TO_SECTION):
        return True
    return (
        classify(instruction) is InputShape.KEYED
        and "@type" not in instruction
        and "itemListElement" in instruction
    )


def _build_section(name: Any, steps: list[Any]) -> MethodSection | None:
    items = []
    for step in steps:
        description = decode_html(get_step_text(step))
        if description:
            items.append(MethodStep(id=str(uuid.uuid4()), description=description))

    if not items:
        _LOGGER.debug("Dropping method section '%s' with no steps", name)
        return None

    return MethodSection(
        section_id=str(uuid.uuid4()),
        name=decode_html(first_text(name)) or DEFAULT_METHOD_SECTION,
        items=items,
    )


def parse_instructions(recipe_instructions: Any) -> list[MethodSection]:
    """Group recipe instructions into method sections.

    Args:
        recipe_instructions: A string, a step record or an array mixing
            strings, HowToStep and HowToSection records

    Returns:
        Method sections in source order; sections without any usable step
        are omitted
    """
    groups: list[tuple[Any, list[Any]]] = []
    standalone: list[Any] = []

    for instruction in ensure_list(recipe_instructions):
        if is_section(instruction):
            if standalone:
                groups.append((None, standalone))
                standalone = []
            groups.append((instruction.get("name"), ensure_list(instruction.get("itemListElement"))))
        else:
            standalone.append(instruction)

    if standalone:
        groups.append((None, standalone))

    sections = (_build_section(name, steps) for name, steps in groups)
    return [section for section in sections if section is not None]
