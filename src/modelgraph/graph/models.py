"""Graph data models for model relation diagrams."""

from dataclasses import dataclass, field, replace
from enum import Enum


class RelationKind(str, Enum):
    """Closed set of association kinds, in legend order."""
    ONE_TO_ONE = "oneToOne"
    ONE_TO_MANY = "oneToMany"
    MANY_TO_ONE = "manyToOne"
    MANY_TO_MANY = "manyToMany"

    @classmethod
    def parse(cls, value: "str | RelationKind") -> "RelationKind":
        """Parse a relation kind from its value or a common alias.

        Raises:
            ValueError: If the value names no known relation kind
        """
        if isinstance(value, cls):
            return value

        key = str(value).strip().replace("-", "").replace("_", "").lower()
        kind = _KIND_ALIASES.get(key)
        if kind is None:
            raise ValueError(f"Unknown relation kind: {value!r}")
        return kind


_KIND_ALIASES = {
    "onetoone": RelationKind.ONE_TO_ONE,
    "hasone": RelationKind.ONE_TO_ONE,
    "onetomany": RelationKind.ONE_TO_MANY,
    "hasmany": RelationKind.ONE_TO_MANY,
    "manytoone": RelationKind.MANY_TO_ONE,
    "belongsto": RelationKind.MANY_TO_ONE,
    "manytomany": RelationKind.MANY_TO_MANY,
    "belongstomany": RelationKind.MANY_TO_MANY,
}


@dataclass(frozen=True)
class EdgeStyle:
    """Visual attributes of a relation edge."""
    label: str
    dir: str
    color: str
    arrowhead: str
    arrowtail: str
    fontname: str
    fontsize: int

    def without_label(self) -> "EdgeStyle":
        return replace(self, label="")

    def attributes(self) -> dict[str, str | int | float | bool]:
        """Attributes in emission order; an empty label is left out."""
        attrs: dict[str, str | int | float | bool] = {}
        if self.label:
            attrs["label"] = self.label
        attrs["dir"] = self.dir
        attrs["color"] = self.color
        attrs["arrowhead"] = self.arrowhead
        attrs["arrowtail"] = self.arrowtail
        attrs["fontname"] = self.fontname
        attrs["fontsize"] = self.fontsize
        return attrs


@dataclass(frozen=True)
class NodeStyle:
    """Visual attributes of a node."""
    shape: str = "box"
    fontname: str = "Helvetica"
    fontsize: int = 10
    width: float | None = None

    def attributes(self) -> dict[str, str | int | float | bool]:
        attrs: dict[str, str | int | float | bool] = {"shape": self.shape}
        if self.width is not None:
            attrs["width"] = self.width
        attrs["fontname"] = self.fontname
        attrs["fontsize"] = self.fontsize
        return attrs


MODEL_NODE_STYLE = NodeStyle()
LEGEND_NODE_STYLE = NodeStyle(width=0.5)


@dataclass
class NodeSpec:
    """A node inside a cluster."""
    id: str  # Full model identifier, or legend node name
    label: str
    cluster: str  # Owning cluster id, fixed at creation
    style: NodeStyle = MODEL_NODE_STYLE


@dataclass
class EdgeSpec:
    """A directed, styled edge between two nodes."""
    from_node: str
    to_node: str
    kind: RelationKind
    style: EdgeStyle


@dataclass
class ClusterSpec:
    """A named group of nodes, rendered as a Graphviz cluster subgraph."""
    id: str
    label: str
    nodes: dict[str, NodeSpec] = field(default_factory=dict)
    edges: list[EdgeSpec] = field(default_factory=list)

    def add_node(self, node: NodeSpec) -> NodeSpec:
        if node.cluster != self.id:
            raise ValueError(f"Node {node.id} belongs to cluster {node.cluster!r}, not {self.id!r}")
        self.nodes[node.id] = node
        return node

    def link(self, edge: EdgeSpec) -> None:
        """Add an edge whose endpoints both live in this cluster."""
        for endpoint in (edge.from_node, edge.to_node):
            if endpoint not in self.nodes:
                raise ValueError(f"Cluster {self.id!r} has no node {endpoint}")
        self.edges.append(edge)


@dataclass
class GraphAttributes:
    """Global attributes of the graph statement."""
    label: str = "Model Relations"
    labelloc: str = "t"
    fontname: str = "Helvetica"
    fontsize: int = 12
    concentrate: bool = True
    landscape: bool = False
    rankdir: str = "TB"

    def attributes(self) -> dict[str, str | int | float | bool]:
        return {
            "label": self.label,
            "labelloc": self.labelloc,
            "fontname": self.fontname,
            "fontsize": self.fontsize,
            "concentrate": self.concentrate,
            "landscape": self.landscape,
            "rankdir": self.rankdir,
        }


# ":" never occurs in a model identifier, so legend ids cannot collide with models
LEGEND_ID_PREFIX = "legend:"
LEGEND_CLUSTER_ID = LEGEND_ID_PREFIX


class NodeLookupError(LookupError):
    """Raised when an edge endpoint is not a model node of the graph."""

    def __init__(self, node_id: str):
        super().__init__(f"Graph has no node {node_id}")
        self.node_id = node_id


@dataclass
class GraphSpec:
    """Complete graph: the legend cluster, namespace clusters and model edges."""
    name: str = "models"
    attributes: GraphAttributes = field(default_factory=GraphAttributes)
    legend: ClusterSpec | None = None
    clusters: dict[str, ClusterSpec] = field(default_factory=dict)
    edges: list[EdgeSpec] = field(default_factory=list)

    def add_legend(self, label: str) -> ClusterSpec:
        if self.legend is None:
            self.legend = ClusterSpec(id=LEGEND_CLUSTER_ID, label=label)
        return self.legend

    def add_cluster(self, name: str, label: str | None = None) -> ClusterSpec:
        """Get the cluster for ``name``, creating it on first use."""
        cluster = self.clusters.get(name)
        if cluster is None:
            cluster = ClusterSpec(id=name, label=name if label is None else label)
            self.clusters[name] = cluster
        return cluster

    def iter_clusters(self):
        """Yield the legend (when present) followed by namespace clusters."""
        if self.legend is not None:
            yield self.legend
        yield from self.clusters.values()

    def find_node(self, node_id: str) -> NodeSpec | None:
        """Find a model node by identifier across all namespace clusters."""
        for cluster in self.clusters.values():
            node = cluster.nodes.get(node_id)
            if node is not None:
                return node
        return None

    def link(self, edge: EdgeSpec) -> None:
        """Add a model edge; both endpoints must already be model nodes.

        Raises:
            NodeLookupError: For the first missing endpoint, source before target
        """
        for endpoint in (edge.from_node, edge.to_node):
            if self.find_node(endpoint) is None:
                raise NodeLookupError(endpoint)
        self.edges.append(edge)

    @property
    def node_count(self) -> int:
        return sum(len(cluster.nodes) for cluster in self.clusters.values())

    @property
    def edge_count(self) -> int:
        return len(self.edges)
