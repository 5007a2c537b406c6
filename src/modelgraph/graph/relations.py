"""Relation collection from a model source."""

import logging
from dataclasses import dataclass

from ..models.source import ModelSource
from ..utils.names import split_identifier
from .models import RelationKind

logger = logging.getLogger(__name__)

# namespace -> bare model name -> relation kind -> related model identifiers
RelationMap = dict[str, dict[str, dict[RelationKind, list[str]]]]


@dataclass
class SkippedRelation:
    """An association left out of the relation map."""
    model: str
    kind: str
    target: str
    reason: str


class RelationCollector:
    """Collects relations of each model into a RelationMap.

    Associations with an unknown kind are skipped and recorded in
    ``skipped``. Errors raised by the model source propagate to the caller.
    """

    def __init__(self, source: ModelSource):
        self.source = source
        self.skipped: list[SkippedRelation] = []

    def collect(self, models: list[str]) -> RelationMap:
        result: RelationMap = {}

        for model in models:
            namespace, name = split_identifier(model)
            logger.debug(f"Checking: {model}")

            for raw_kind, related in self.source.associations(model):
                try:
                    kind = RelationKind.parse(raw_kind)
                except ValueError:
                    logger.warning(f"Skipping relation {model} -> {related}: unknown relation kind {raw_kind!r}")
                    self.skipped.append(SkippedRelation(
                        model=model,
                        kind=str(raw_kind),
                        target=related,
                        reason="unknown relation kind",
                    ))
                    continue

                logger.debug(f" - Relation detected: {model} {kind.value} {related}")
                result.setdefault(namespace, {}).setdefault(name, {}).setdefault(kind, []).append(related)

        relation_count = sum(
            len(targets)
            for namespace_models in result.values()
            for relations in namespace_models.values()
            for targets in relations.values()
        )
        logger.info(f"Collected {relation_count} relations from {len(models)} models")
        return result
