"""
Taxonomy catalog models.

The catalog is owned outside this package; these models only describe its
shape so tag inference can look names up.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator


class TagDefinition(BaseModel):
    """A leaf tag, e.g. Cuisine > Italian."""

    model_config = ConfigDict(populate_by_name=True)

    tag_id: str = Field(alias="tagId")
    name: str


class TagGroup(BaseModel):
    """A top-level tag group with its child tags keyed by lower-cased name."""

    model_config = ConfigDict(populate_by_name=True)

    tag_id: str = Field(alias="tagId")
    name: str
    children: dict[str, TagDefinition] = Field(default_factory=dict)

    @field_validator("children", mode="after")
    @classmethod
    def _lowercase_keys(cls, children: dict[str, TagDefinition]) -> dict[str, TagDefinition]:
        return {key.strip().lower(): tag for key, tag in children.items()}

    def lookup(self, name: str) -> TagDefinition | None:
        return self.children.get(name.strip().lower())


class TagCatalog(RootModel[dict[str, TagGroup]]):
    """Read-only mapping of group name to TagGroup."""

    def group(self, name: str) -> TagGroup | None:
        return self.root.get(name)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> TagCatalog:
        return cls.model_validate(data)
