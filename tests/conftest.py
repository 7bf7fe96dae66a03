from __future__ import annotations

import pytest

from recipe_normalizer.default_tags import DEFAULT_TAG_DEFINITIONS


@pytest.fixture
def base_recipe() -> dict:
    return {"@type": "Recipe", "name": "Test Recipe"}


@pytest.fixture
def tag_id():
    """Look up a built-in tag id by group and tag name."""

    def _lookup(group: str, name: str) -> str:
        return DEFAULT_TAG_DEFINITIONS[group]["children"][name.lower()]["tagId"]

    return _lookup
