"""Model sources yielding models and their associations."""

import fnmatch
import json
import logging
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from ..utils.names import split_identifier
from .manifest import ModelEntry, ModelManifest

logger = logging.getLogger(__name__)


class ModelSourceError(Exception):
    """Raised when models cannot be listed or a model cannot be loaded."""
    pass


class ModelSource(Protocol):
    """Anything that can list models and report their associations."""

    def list_models(self) -> list[str]:
        ...

    def associations(self, model: str) -> list[tuple[str, str]]:
        ...


class InMemoryModelSource:
    """Model source backed by plain Python data.

    Args:
        models: Ordered mapping of model identifier to ``(kind, target)`` pairs
        exclude: fnmatch patterns removing models by identifier or namespace
    """

    def __init__(self, models: dict[str, list[tuple[str, str]]], exclude: list[str] | None = None):
        self._models = dict(models)
        self.exclude = list(exclude or [])

    def list_models(self) -> list[str]:
        return [name for name in self._models if not is_excluded(name, self.exclude)]

    def associations(self, model: str) -> list[tuple[str, str]]:
        if model not in self._models:
            raise ModelSourceError(f"Unknown model: {model}")
        return list(self._models[model])


class JsonModelSource:
    """Model source reading a JSON model manifest.

    The manifest is loaded once on construction; ``list_models`` and
    ``associations`` answer from that snapshot.
    """

    def __init__(self, manifest_path: str | Path, exclude: list[str] | None = None, real_models: bool = True):
        self.manifest_path = Path(manifest_path)
        self.exclude = list(exclude or [])
        self.real_models = real_models
        self._entries = self._load(self.manifest_path)

    @staticmethod
    def _load(manifest_path: Path) -> dict[str, ModelEntry]:
        if not manifest_path.exists():
            raise ModelSourceError(f"Model manifest not found: {manifest_path}")

        try:
            with open(manifest_path, encoding="utf-8") as f:
                data = json.load(f)
            manifest = ModelManifest(**data)
        except json.JSONDecodeError as e:
            raise ModelSourceError(f"Invalid JSON in model manifest {manifest_path}: {e}")
        except (ValidationError, TypeError) as e:
            raise ModelSourceError(f"Invalid model manifest {manifest_path}: {e}")
        except (OSError, UnicodeDecodeError) as e:
            raise ModelSourceError(f"Cannot read model manifest {manifest_path}: {e}") from e

        logger.info(f"Loaded {len(manifest.models)} models from {manifest_path}")
        return {entry.name: entry for entry in manifest.models}

    def list_models(self) -> list[str]:
        models = []
        for name in self._entries:
            if is_excluded(name, self.exclude):
                logger.debug(f"Excluding model {name}")
                continue
            models.append(name)
        return models

    def associations(self, model: str) -> list[tuple[str, str]]:
        entry = self._entries.get(model)
        if entry is None:
            raise ModelSourceError(f"Unknown model: {model}")

        result = []
        for association in entry.associations:
            if self.real_models or not association.alias:
                related = association.target
            else:
                related = association.alias
            result.append((association.kind, related))
        return result


def is_excluded(identifier: str, patterns: list[str]) -> bool:
    """Check whether a model identifier or its namespace matches any pattern."""
    namespace, _ = split_identifier(identifier)
    for pattern in patterns:
        if fnmatch.fnmatchcase(identifier, pattern):
            return True
        if namespace and fnmatch.fnmatchcase(namespace, pattern):
            return True
    return False
