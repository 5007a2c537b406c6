"""Graph construction and rendering for model relation diagrams.

Relations are collected per namespace, assembled into clusters with a legend,
serialized as Graphviz DOT and optionally rendered with the dot layout tool.
"""

from .builder import GraphBuilder, LookupFailure
from .dot import DotRenderer
from .export import RenderError, detect_format, render_dot_file, write_graph
from .framework import GraphGenerator, GraphRenderer
from .legend import build_legend
from .models import (
    ClusterSpec,
    EdgeSpec,
    EdgeStyle,
    GraphAttributes,
    GraphSpec,
    NodeLookupError,
    NodeSpec,
    NodeStyle,
    RelationKind,
)
from .relations import RelationCollector, RelationMap, SkippedRelation
from .styles import RELATION_STYLES, style_for

__all__ = [
    "GraphBuilder",
    "GraphGenerator",
    "GraphRenderer",
    "DotRenderer",
    "LookupFailure",
    "RelationCollector",
    "RelationMap",
    "SkippedRelation",
    "RelationKind",
    "RELATION_STYLES",
    "style_for",
    "build_legend",
    "RenderError",
    "detect_format",
    "render_dot_file",
    "write_graph",
    "GraphSpec",
    "ClusterSpec",
    "NodeSpec",
    "NodeLookupError",
    "EdgeSpec",
    "NodeStyle",
    "EdgeStyle",
    "GraphAttributes",
]
