"""Graph construction from a model list and a relation map."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from ..config import ModelGraphConfig
from ..utils.names import qualify, split_identifier, strip_namespace, validate_identifier
from .legend import build_legend
from .models import MODEL_NODE_STYLE, EdgeSpec, GraphAttributes, GraphSpec, NodeLookupError, NodeSpec, RelationKind
from .relations import RelationMap
from .styles import style_for

logger = logging.getLogger(__name__)


@dataclass
class LookupFailure:
    """A relation whose source or target node is not in the graph."""
    source: str
    target: str
    kind: RelationKind
    missing: str


class GraphBuilder:
    """Builds a GraphSpec in two passes: nodes, then edges.

    The legend cluster is created first. Namespace clusters follow in the
    order their namespace is first seen in the model list. Relations whose
    endpoints cannot be found are logged, recorded in ``lookup_failures``
    and skipped, so the graph never holds a dangling edge. An invalid model
    identifier raises ValueError before any node is added for it.
    """

    def __init__(self, config: ModelGraphConfig | None = None, clock: Callable[[], datetime] = datetime.now):
        self.config = config or ModelGraphConfig()
        self.clock = clock
        self.lookup_failures: list[LookupFailure] = []

    def build(self, models: list[str], relations: RelationMap) -> GraphSpec:
        graph = GraphSpec(attributes=self._graph_attributes())

        build_legend(graph, self.config.legend.label)
        self._add_nodes(graph, models)
        self._add_edges(graph, relations)

        logger.info(
            f"Built graph with {len(graph.clusters)} clusters, "
            f"{graph.node_count} nodes and {graph.edge_count} edges"
        )
        return graph

    def _graph_attributes(self) -> GraphAttributes:
        settings = self.config.graph
        label = settings.label
        if self.config.output.timestamp:
            label += self.clock().strftime(self.config.output.timestamp)

        return GraphAttributes(
            label=label,
            labelloc=settings.labelloc,
            fontname=settings.fontname,
            fontsize=settings.fontsize,
            concentrate=settings.concentrate,
            landscape=settings.landscape,
            rankdir=settings.rankdir,
        )

    def _add_nodes(self, graph: GraphSpec, models: list[str]) -> None:
        for model in models:
            validate_identifier(model)
            namespace, _ = split_identifier(model)
            cluster = graph.add_cluster(namespace, self._cluster_label(namespace))
            cluster.add_node(NodeSpec(
                id=model,
                label=strip_namespace(model, namespace),
                cluster=cluster.id,
                style=MODEL_NODE_STYLE,
            ))

    def _cluster_label(self, namespace: str) -> str:
        if not namespace:
            return self.config.graph.default_namespace_label
        return namespace

    def _add_edges(self, graph: GraphSpec, relations: RelationMap) -> None:
        for namespace, namespace_models in relations.items():
            for model_name, model_relations in namespace_models.items():
                source = qualify(namespace, model_name)

                for kind, related_models in model_relations.items():
                    # Per-edge labels would clutter the graph; the legend explains each style
                    style = style_for(kind).without_label()

                    for related in related_models:
                        try:
                            graph.link(EdgeSpec(from_node=source, to_node=related, kind=kind, style=style))
                        except NodeLookupError as e:
                            logger.error(f"Could not find node for {e.node_id}")
                            self.lookup_failures.append(LookupFailure(
                                source=source, target=related, kind=kind, missing=e.node_id,
                            ))
