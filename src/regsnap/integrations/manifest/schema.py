"""Pydantic models for promoter manifest files."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DIGEST_PATTERN = re.compile(r"^sha256:[0-9a-f]{64}$")
TAG_PATTERN = re.compile(r"^[\w][\w.-]{0,127}$")


class RegistryEntry(BaseModel):
    """A registry listed under `registries:`."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1)
    service_account: str = Field(default="", alias="service-account")
    src: bool = False


class ImageEntry(BaseModel):
    """An image listed under `images:`."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    dmap: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("dmap", mode="before")
    @classmethod
    def default_untagged(cls, v: object) -> object:
        """Treat `digest:` with no value as an untagged digest."""
        if isinstance(v, dict):
            return {digest: tags if tags is not None else [] for digest, tags in v.items()}
        return v

    @field_validator("dmap")
    @classmethod
    def validate_dmap(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        for digest, tags in v.items():
            if not DIGEST_PATTERN.match(digest):
                raise ValueError(f"invalid digest: {digest}")
            for tag in tags:
                if not TAG_PATTERN.match(tag):
                    raise ValueError(f"invalid tag {tag!r} for digest {digest}")
        return v


class ManifestFile(BaseModel):
    """Top-level manifest document."""

    model_config = ConfigDict(frozen=True)

    registries: list[RegistryEntry] = Field(..., min_length=1)
    images: list[ImageEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_single_source(self) -> "ManifestFile":
        sources = [registry.name for registry in self.registries if registry.src]
        if len(sources) != 1:
            raise ValueError(f"expected exactly one source registry, found {len(sources)}")
        return self
