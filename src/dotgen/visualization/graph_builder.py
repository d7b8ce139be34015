"""Graph accumulation and DOT document building."""

import logging
from typing import Iterable, List, Optional, Union

from ..core.models import DotOutput, Edge, Entity, Id, RenderConfig, Subgraph, Vertex
from .dot_generator import DOTGenerator

logger = logging.getLogger(__name__)


class GraphBuilder:
    """Accumulates entities and renders them into a DOT digraph.

    Every identifier in the graph must use the configured ID policy;
    create entities through ``EntityFactory`` to get matching IDs.

    A builder can be built only once: building hands its entities over
    to the generator.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize graph builder with configuration.

        Args:
            config: Render configuration. Defaults to the strict ID policy.
        """
        self.config = config or RenderConfig()
        self._entities: Optional[List[Entity]] = []

    @property
    def entities(self) -> List[Entity]:
        """Accepted top-level entities in emission order."""
        return list(self._require_entities())

    def accept(self, entity: Entity) -> None:
        """Append an entity to the graph.

        Args:
            entity: Vertex, edge or subgraph to emit after those already accepted.

        Raises:
            TypeError: If the entity, or any subgraph child, is not an entity.
            ValueError: If any identifier uses a different ID policy.
        """
        entities = self._require_entities()
        self._check_entity(entity)
        entities.append(entity)

    def accept_all(self, entities: Iterable[Entity]) -> None:
        """Append several entities in iteration order."""
        for entity in entities:
            self.accept(entity)

    def build(self, graph_name: Union[Id, str, None] = None) -> DotOutput:
        """Render the accumulated entities as a DOT digraph.

        Args:
            graph_name: Name of the digraph. Plain strings use the configured
                ID policy; None uses the configured graph name.

        Returns:
            The complete DOT document.
        """
        entities = self._require_entities()

        if graph_name is None:
            graph_name = self.config.graph_name
        if not isinstance(graph_name, Id):
            graph_name = Id(graph_name, self.config.id_policy)
        self._check_id(graph_name)

        # Subgraphs may have been extended after they were accepted.
        for entity in entities:
            self._check_entity(entity)

        self._entities = None

        logger.info(f"Building graph {graph_name} from {len(entities)} entities")
        return DotOutput(DOTGenerator().generate_dot(entities, graph_name))

    def _check_entity(self, entity: Entity) -> None:
        if isinstance(entity, Vertex):
            self._check_id(entity.id)
        elif isinstance(entity, Edge):
            self._check_id(entity.source)
            self._check_id(entity.target)
        elif isinstance(entity, Subgraph):
            self._check_id(entity.id)
            for child in entity.entities:
                self._check_entity(child)
        else:
            raise TypeError(
                f"Expected a Vertex, Edge or Subgraph, got {type(entity).__name__}",
            )

    def _check_id(self, identifier: Id) -> None:
        if identifier.policy != self.config.id_policy:
            raise ValueError(
                f"Identifier {identifier.value!r} uses the {identifier.policy.value} "
                f"policy but the builder is configured as {self.config.id_policy.value}",
            )

    def _require_entities(self) -> List[Entity]:
        if self._entities is None:
            raise RuntimeError("GraphBuilder has already been built")
        return self._entities

    def __len__(self) -> int:
        return len(self._require_entities())
