"""Models for the model manifest file consumed by JsonModelSource."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.names import validate_identifier


class AssociationEntry(BaseModel):
    """One association declared on a model."""
    kind: str  # Relation kind as written in the manifest (oneToMany, hasMany, ...)
    target: str  # Canonical identifier of the related model
    alias: str | None = None  # Association name, may differ from the target

    model_config = ConfigDict(extra="forbid")


class ModelEntry(BaseModel):
    """A single model and its associations."""
    name: str  # Namespace-qualified identifier
    associations: list[AssociationEntry] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return validate_identifier(v)

    model_config = ConfigDict(extra="forbid")


class ModelManifest(BaseModel):
    """Complete model manifest."""
    models: list[ModelEntry] = Field(default_factory=list)

    @field_validator("models")
    @classmethod
    def validate_unique_names(cls, v):
        seen = set()
        for entry in v:
            if entry.name in seen:
                raise ValueError(f"duplicate model identifier: {entry.name}")
            seen.add(entry.name)
        return v

    model_config = ConfigDict(extra="forbid")
