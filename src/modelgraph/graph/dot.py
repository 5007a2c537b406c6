"""Graphviz DOT serializer."""

import logging

from .framework import GraphRenderer
from .models import ClusterSpec, EdgeSpec, GraphSpec, NodeSpec

logger = logging.getLogger(__name__)

INDENT = "    "


class DotRenderer(GraphRenderer):
    """Serializes a GraphSpec as a Graphviz digraph.

    Output only depends on the graph contents, so identical graphs always
    serialize to identical text.
    """

    @property
    def format_name(self) -> str:
        return "dot"

    def get_file_extension(self) -> str:
        return ".dot"

    def render(self, spec: GraphSpec) -> str:
        lines = [f"digraph {quote(spec.name)} {{"]
        lines.append(f"{INDENT}graph {format_attributes(spec.attributes.attributes())};")

        for cluster in spec.iter_clusters():
            lines.append("")
            lines.extend(self._render_cluster(cluster))

        if spec.edges:
            lines.append("")
            for edge in spec.edges:
                lines.append(f"{INDENT}{self._render_edge(edge)}")

        lines.append("}")
        return "\n".join(lines) + "\n"

    def _render_cluster(self, cluster: ClusterSpec) -> list[str]:
        inner = INDENT * 2
        lines = [f"{INDENT}subgraph {quote('cluster_' + cluster.id)} {{"]
        lines.append(f"{inner}label={quote(cluster.label)};")
        for node in cluster.nodes.values():
            lines.append(f"{inner}{self._render_node(node)}")
        for edge in cluster.edges:
            lines.append(f"{inner}{self._render_edge(edge)}")
        lines.append(f"{INDENT}}}")
        return lines

    def _render_node(self, node: NodeSpec) -> str:
        attrs = {"label": node.label}
        attrs.update(node.style.attributes())
        return f"{quote(node.id)} {format_attributes(attrs)};"

    def _render_edge(self, edge: EdgeSpec) -> str:
        return f"{quote(edge.from_node)} -> {quote(edge.to_node)} {format_attributes(edge.style.attributes())};"


def quote(value: str | int | float | bool) -> str:
    """Quote a DOT identifier or attribute value."""
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    text = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{text}"'


def format_attributes(attrs: dict) -> str:
    return "[" + " ".join(f"{key}={quote(value)}" for key, value in attrs.items()) + "]"
