"""modelgraph - Visualize model relations as a clustered directed graph.

modelgraph collects the associations between models grouped by namespace and
renders them as a Graphviz DOT description, optionally converted to an image.
"""

__version__ = "0.1.0"
__author__ = "modelgraph contributors"
__description__ = "Visualize model relations as a clustered directed graph"

from modelgraph.config import ModelGraphConfig

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "ModelGraphConfig",
]
