"""Declarative graph documents loaded from JSON."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from ..visualization.graph_builder import GraphBuilder
from .identifiers import IdPolicy
from .models import (
    Entity,
    EntityFactory,
    IdGenerator,
    NodeDefaults,
    RenderConfig,
    uuid_id_generator,
)

logger = logging.getLogger(__name__)


class NodeDefaultsEntry(BaseModel):
    """Default vertex styling for a subgraph."""

    color: str | None = None
    fontcolor: str | None = None


class VertexEntry(BaseModel):
    """A vertex entry. A missing ``id`` is generated."""

    kind: Literal["vertex"] = "vertex"
    id: str | None = None
    label: str | None = None
    color: str | None = None
    fontcolor: str | None = None


class EdgeEntry(BaseModel):
    """An edge entry."""

    kind: Literal["edge"] = "edge"
    source: str
    target: str
    label: str | None = None
    color: str | None = None
    fontcolor: str | None = None


class SubgraphEntry(BaseModel):
    """A subgraph entry with nested entries."""

    kind: Literal["subgraph"] = "subgraph"
    id: str | None = None
    label: str | None = None
    color: str | None = None
    fontcolor: str | None = None
    node_defaults: NodeDefaultsEntry | None = None
    entities: list[EntityEntry] = Field(default_factory=list)


EntityEntry = Annotated[
    Union[VertexEntry, EdgeEntry, SubgraphEntry],
    Field(discriminator="kind"),
]

SubgraphEntry.model_rebuild()


class GraphDocument(BaseModel):
    """A whole digraph described as data.

    Example::

        {
          "name": "deps",
          "entities": [
            {"kind": "vertex", "id": "a", "label": "A"},
            {"kind": "subgraph", "id": "grp", "entities": [
              {"kind": "vertex", "id": "b"}
            ]},
            {"kind": "edge", "source": "a", "target": "b"}
          ]
        }
    """

    name: str = "G"
    id_policy: IdPolicy = IdPolicy.STRICT
    entities: list[EntityEntry] = Field(default_factory=list)

    @classmethod
    def from_json(cls, text: str | bytes) -> GraphDocument:
        return cls.model_validate_json(text)

    @classmethod
    def load(cls, path: str | Path) -> GraphDocument:
        """Load a document from a JSON file."""
        path = Path(path)
        logger.info(f"Loading graph document from {path}")
        return cls.from_json(path.read_text(encoding="utf-8"))

    def build_graph(
        self,
        config: RenderConfig | None = None,
        id_generator: IdGenerator = uuid_id_generator,
    ) -> GraphBuilder:
        """Convert the document into a populated builder.

        Args:
            config: Overrides the document's own name and ID policy.
            id_generator: Source of identifiers for entries without one.

        Returns:
            Builder holding one entity per top-level entry.
        """
        config = config or RenderConfig(id_policy=self.id_policy, graph_name=self.name)
        factory = EntityFactory(config, id_generator)

        builder = GraphBuilder(config)
        builder.accept_all(self._to_entity(entry, factory) for entry in self.entities)
        return builder

    def _to_entity(self, entry: EntityEntry, factory: EntityFactory) -> Entity:
        if isinstance(entry, VertexEntry):
            return factory.vertex(entry.id, entry.label, entry.color, entry.fontcolor)
        if isinstance(entry, EdgeEntry):
            return factory.edge(entry.source, entry.target, entry.label, entry.color, entry.fontcolor)

        node_defaults = None
        if entry.node_defaults is not None:
            node_defaults = NodeDefaults(entry.node_defaults.color, entry.node_defaults.fontcolor)
        return factory.subgraph(
            entry.id,
            entry.label,
            entry.color,
            entry.fontcolor,
            node_defaults,
            [self._to_entity(child, factory) for child in entry.entities],
        )
