"""Tests for legend generation."""

from modelgraph.graph import GraphSpec, RelationKind, build_legend, style_for
from modelgraph.graph.legend import legend_node_ids
from modelgraph.graph.models import LEGEND_NODE_STYLE, MODEL_NODE_STYLE


class TestLegend:
    """Test build_legend."""

    def test_two_nodes_and_one_edge_per_kind(self):
        graph = GraphSpec()
        legend = build_legend(graph)

        assert len(legend.nodes) == 2 * len(RelationKind)
        assert len(legend.edges) == len(RelationKind)
        assert graph.legend is legend
        assert graph.clusters == {}

    def test_edges_follow_registry_order_with_full_style(self):
        legend = build_legend(GraphSpec())

        assert [edge.kind for edge in legend.edges] == list(RelationKind)
        for edge in legend.edges:
            assert edge.style == style_for(edge.kind)
            assert edge.style.label != ""

    def test_node_names_and_labels(self):
        legend = build_legend(GraphSpec(), label="Key")

        assert legend.label == "Key"
        assert legend_node_ids(RelationKind.ONE_TO_MANY) == ("legend:oneToMany_from", "legend:oneToMany_to")
        assert legend.nodes["legend:oneToMany_from"].label == "A"
        assert legend.nodes["legend:oneToMany_to"].label == "B"

    def test_legend_node_style_differs_from_model_nodes(self):
        legend = build_legend(GraphSpec())

        for node in legend.nodes.values():
            assert node.style == LEGEND_NODE_STYLE
        assert LEGEND_NODE_STYLE != MODEL_NODE_STYLE
        assert LEGEND_NODE_STYLE.width == 0.5

    def test_legend_nodes_are_not_model_nodes(self):
        graph = GraphSpec()
        build_legend(graph)
        assert graph.find_node("legend:oneToOne_from") is None
