"""Model sources and the model manifest format."""

from modelgraph.models.manifest import AssociationEntry, ModelEntry, ModelManifest
from modelgraph.models.source import (
    InMemoryModelSource,
    JsonModelSource,
    ModelSource,
    ModelSourceError,
)

__all__ = [
    "AssociationEntry",
    "ModelEntry",
    "ModelManifest",
    "ModelSource",
    "ModelSourceError",
    "InMemoryModelSource",
    "JsonModelSource",
]
