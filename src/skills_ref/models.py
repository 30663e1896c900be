from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SkillProperties(BaseModel):
    """Represents the properties declared in a skill's SKILL.md frontmatter.

    Instances are immutable; every read builds a new one.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    """Skill name in kebab-case."""

    description: str
    """What the skill does and when the model should use it."""

    license: str | None = None
    """Optional license information for the skill."""

    compatibility: str | None = None
    """Optional compatibility information for the skill."""

    allowed_tools: str | None = Field(default=None, alias="allowed-tools")
    """Tool patterns the skill requires. Kept as an opaque string."""

    metadata: dict[str, str] | None = None
    """Client-specific key-value pairs, only kept when non-empty."""

    @field_validator("name", "description")
    @classmethod
    def _strip_required(cls, value: str, info) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f"Field '{info.field_name}' must be a non-empty string")
        return value

    @field_validator("metadata")
    @classmethod
    def _drop_empty_metadata(cls, value: dict[str, str] | None) -> dict[str, str] | None:
        return value or None

    def to_dict(self) -> dict[str, Any]:
        """Return the frontmatter form of these properties, omitting absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
