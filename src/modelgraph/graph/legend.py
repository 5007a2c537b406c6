"""Graph legend generation."""

import logging

from .models import LEGEND_ID_PREFIX, LEGEND_NODE_STYLE, ClusterSpec, EdgeSpec, GraphSpec, NodeSpec, RelationKind
from .styles import RELATION_STYLES

logger = logging.getLogger(__name__)


def legend_node_ids(kind: RelationKind) -> tuple[str, str]:
    """Names of the two legend nodes illustrating ``kind``."""
    return f"{LEGEND_ID_PREFIX}{kind.value}_from", f"{LEGEND_ID_PREFIX}{kind.value}_to"


def build_legend(graph: GraphSpec, label: str = "Graph Legend") -> ClusterSpec:
    """Add the legend cluster to ``graph``.

    For every relation kind, two nodes ("A" and "B") are linked using the
    full style of that kind, label included. The nodes live in the legend
    cluster so they don't interfere with the model nodes.
    """
    legend = graph.add_legend(label)

    for kind, style in RELATION_STYLES.items():
        from_id, to_id = legend_node_ids(kind)

        legend.add_node(NodeSpec(id=from_id, label="A", cluster=legend.id, style=LEGEND_NODE_STYLE))
        legend.add_node(NodeSpec(id=to_id, label="B", cluster=legend.id, style=LEGEND_NODE_STYLE))
        legend.link(EdgeSpec(from_node=from_id, to_node=to_id, kind=kind, style=style))

    logger.debug(f"Legend built with {len(legend.edges)} relation kinds")
    return legend
