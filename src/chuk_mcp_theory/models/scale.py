"""
Scale catalog models - scale types described in YAML.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_theory.core.scale import ScaleType


class ScaleDefinition(BaseModel):
    """A scale type as declared in a catalog file."""

    name: str = Field(description="Catalog key, e.g. 'hungarian_minor'")
    description: str = Field(default="", description="Human-readable description")
    steps: tuple[int, ...] = Field(description="Seven semitone steps summing to 12")
    aliases: list[str] = Field(default_factory=list, description="Alternative names")
    family: str | None = Field(default=None, description="Parent scale, for modes")

    model_config = {"frozen": True}

    @field_validator("steps")
    @classmethod
    def validate_steps(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        # Same rules as ScaleType, reported as a validation error
        ScaleType(v)
        return v

    def to_scale_type(self) -> ScaleType:
        return ScaleType(self.steps, self.name.replace("_", " "))


class ScaleMetadata(BaseModel):
    """Lightweight listing entry for a catalog scale."""

    name: str
    description: str = ""
    aliases: list[str] = Field(default_factory=list)
    family: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_definition(cls, definition: ScaleDefinition) -> ScaleMetadata:
        return cls(
            name=definition.name,
            description=definition.description,
            aliases=definition.aliases,
            family=definition.family,
        )
