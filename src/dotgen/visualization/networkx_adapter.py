"""Describe NetworkX directed graphs as DOT entities."""

import logging
from typing import Any, Dict, Optional

import networkx as nx

from ..core.models import (
    EntityFactory,
    IdGenerator,
    NodeDefaults,
    RenderConfig,
    Subgraph,
    uuid_id_generator,
)
from .graph_builder import GraphBuilder

logger = logging.getLogger(__name__)


def _text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class NetworkXGraphable:
    """Converts a NetworkX directed graph into a populated GraphBuilder.

    Node attributes ``label``, ``color`` and ``fontcolor`` style the
    vertex, and a ``cluster`` attribute places the vertex in the subgraph
    of that name. Edge attributes ``label``, ``color`` and ``fontcolor``
    style the edge.

    Clusters are styled through ``graph.graph["clusters"][name]``, which
    may hold ``label``, ``color``, ``fontcolor``, ``node_color`` and
    ``node_fontcolor``.
    """

    def __init__(
        self,
        graph: nx.DiGraph,
        config: Optional[RenderConfig] = None,
        id_generator: IdGenerator = uuid_id_generator,
    ):
        """Initialize the adapter.

        Args:
            graph: Directed NetworkX graph.
            config: Render configuration used for IDs and the graph name.
            id_generator: Identifier source for the entity factory.
        """
        if not graph.is_directed():
            raise ValueError("NetworkXGraphable requires a directed graph")
        self.graph = graph
        self.config = config or RenderConfig()
        self.factory = EntityFactory(self.config, id_generator)

    def build_graph(self) -> GraphBuilder:
        """Build vertices (grouped into clusters) followed by all edges."""
        logger.info(
            f"Converting NetworkX graph with {self.graph.number_of_nodes()} nodes "
            f"and {self.graph.number_of_edges()} edges",
        )
        builder = GraphBuilder(self.config)
        clusters: Dict[str, Subgraph] = {}

        for node, data in self.graph.nodes(data=True):
            vertex = self.factory.vertex(
                str(node),
                _text(data.get("label")),
                _text(data.get("color")),
                _text(data.get("fontcolor")),
            )
            cluster = data.get("cluster")
            if cluster is None:
                builder.accept(vertex)
                continue

            cluster = str(cluster)
            if cluster not in clusters:
                clusters[cluster] = self._create_cluster(cluster)
                builder.accept(clusters[cluster])
            clusters[cluster].add(vertex)

        for source, target, data in self.graph.edges(data=True):
            builder.accept(
                self.factory.edge(
                    str(source),
                    str(target),
                    _text(data.get("label")),
                    _text(data.get("color")),
                    _text(data.get("fontcolor")),
                ),
            )

        logger.info(f"Created {len(clusters)} clusters")
        return builder

    def _create_cluster(self, name: str) -> Subgraph:
        style = self.graph.graph.get("clusters", {}).get(name, {})

        node_defaults = NodeDefaults(
            _text(style.get("node_color")),
            _text(style.get("node_fontcolor")),
        )
        return self.factory.subgraph(
            name,
            label=_text(style.get("label")),
            color=_text(style.get("color")),
            fontcolor=_text(style.get("fontcolor")),
            node_defaults=None if node_defaults.is_empty() else node_defaults,
        )
