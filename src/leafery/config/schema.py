# ABOUTME: Pydantic schema for the leafery YAML configuration file.
# ABOUTME: Validates tags, genres, and series definitions before domain objects are built.

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_TEMPLATE_KINDS = ("axis", "property", "timestamp", "tags")


class TagSchema(BaseModel):
    """One tag of the taxonomy."""

    model_config = ConfigDict(extra="forbid")

    category: str
    plain: str | None = None
    ascii: str | None = None
    social: str | None = None


class GenreSchema(BaseModel):
    """Manifestation settings for one genre marker."""

    model_config = ConfigDict(extra="forbid")

    default_fragment: str
    metadata_head: str | None = None
    social_head: str | None = None


class SpecificitySchema(BaseModel):
    """A numbering axis: {name, min, max}."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    minimum: int = Field(alias="min")
    maximum: int = Field(alias="max")

    @model_validator(mode="after")
    def check_bounds(self) -> SpecificitySchema:
        if self.minimum > self.maximum:
            raise ValueError(f"axis '{self.name}': min {self.minimum} > max {self.maximum}")
        return self


class TemplateEntrySchema(BaseModel):
    """A non-literal template entry. Exactly one of the kind keys must be set.

    Examples:
        {axis: page, pad: 3}
        {axis: part, letters: true}
        {property: title}
        {timestamp: "%Y-%m-%d"}
        {tags: true}
    """

    model_config = ConfigDict(extra="forbid")

    axis: str | None = None
    pad: int = Field(default=0, ge=0)
    letters: bool = False
    property: str | None = None
    timestamp: str | None = None
    tags: bool = False

    @model_validator(mode="after")
    def check_single_kind(self) -> TemplateEntrySchema:
        kinds = [
            kind
            for kind in _TEMPLATE_KINDS
            if getattr(self, kind) not in (None, False)
        ]
        if len(kinds) != 1:
            raise ValueError(
                f"template entry needs exactly one of {', '.join(_TEMPLATE_KINDS)}, "
                f"got {kinds or 'none'}"
            )
        if self.axis is None and (self.pad or self.letters):
            raise ValueError("pad and letters only apply to axis entries")
        return self


class SeriesSchema(BaseModel):
    """A book series definition."""

    model_config = ConfigDict(extra="forbid")

    folder: str | None = None
    specificities: list[SpecificitySchema] = Field(min_length=1)
    template: list[str | TemplateEntrySchema] = Field(default_factory=list)

    @field_validator("specificities")
    @classmethod
    def check_unique_axes(cls, v: list[SpecificitySchema]) -> list[SpecificitySchema]:
        names = [spec.name for spec in v]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate axis name(s): {', '.join(duplicates)}")
        return v


class ConfigSchema(BaseModel):
    """Top-level layout of config.yaml."""

    model_config = ConfigDict(extra="forbid")

    root: str | None = None
    timezone: str = "UTC"
    special_category: str = "special"
    mixed_genre: str = "mixed"
    tags: dict[str, TagSchema] = Field(default_factory=dict)
    genres: dict[str, GenreSchema] = Field(default_factory=dict)
    series: dict[str, SeriesSchema] = Field(default_factory=dict)


def validate_config(data: dict[str, Any]) -> ConfigSchema:
    """Validate raw YAML data against the schema.

    Raises:
        pydantic.ValidationError: If the data does not match.
    """
    return ConfigSchema.model_validate(data)
