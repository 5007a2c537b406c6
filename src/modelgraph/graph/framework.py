"""Graph generation framework: renderers and the generation pipeline."""

import logging
from abc import ABC, abstractmethod

from ..config import ModelGraphConfig
from ..models.source import ModelSource
from .builder import GraphBuilder, LookupFailure
from .models import GraphSpec
from .relations import RelationCollector, RelationMap, SkippedRelation

logger = logging.getLogger(__name__)


class GraphRenderer(ABC):
    """Abstract base class for graph renderers."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Name of the output format."""
        pass

    @abstractmethod
    def render(self, spec: GraphSpec) -> str:
        """Render graph specification to string format."""
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get file extension for this format."""
        pass


class GraphGenerator:
    """Runs model discovery, relation collection and graph building."""

    def __init__(self, config: ModelGraphConfig, builder: GraphBuilder | None = None):
        self.config = config
        self.builder = builder or GraphBuilder(config)
        self.renderers: dict[str, GraphRenderer] = {}
        self.skipped_relations: list[SkippedRelation] = []

    def add_renderer(self, renderer: GraphRenderer) -> None:
        """Add a graph renderer."""
        self.renderers[renderer.format_name] = renderer

    @property
    def lookup_failures(self) -> list[LookupFailure]:
        return self.builder.lookup_failures

    def collect(self, source: ModelSource) -> tuple[list[str], RelationMap]:
        """Read the model list and relation map from ``source``."""
        models = source.list_models()
        collector = RelationCollector(source)
        relations = collector.collect(models)
        self.skipped_relations.extend(collector.skipped)
        return models, relations

    def generate(self, source: ModelSource) -> GraphSpec:
        """Build the complete graph for every model ``source`` lists."""
        logger.info("Generating model relation graph")
        models, relations = self.collect(source)
        return self.builder.build(models, relations)

    def render_graph(self, spec: GraphSpec, format_name: str = "dot") -> str:
        """Render graph specification to string.

        Args:
            spec: Graph specification to render
            format_name: Registered renderer name

        Returns:
            Rendered graph as string
        """
        if format_name not in self.renderers:
            available = list(self.renderers.keys())
            raise ValueError(f"Unknown format '{format_name}'. Available: {available}")

        renderer = self.renderers[format_name]
        logger.info(f"Rendering graph with {renderer.format_name} renderer")
        return renderer.render(spec)
