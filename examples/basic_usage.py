#!/usr/bin/env python3
"""Basic usage examples for python-dotgen."""

import networkx as nx

from dotgen import (
    Edge,
    EntityFactory,
    GraphBuilder,
    IdPolicy,
    NodeDefaults,
    RenderConfig,
    Subgraph,
    Vertex,
    to_dot,
)
from dotgen.visualization import NetworkXGraphable


def main():
    """Demonstrate basic dotgen usage."""

    # Example 1: Vertices and an edge
    builder = GraphBuilder()
    builder.accept(Vertex("node_0", label="node_0"))
    builder.accept(Vertex("node_1", label="node_1"))
    builder.accept(Edge("node_0", "node_1", label="asdf"))
    print(builder.build("test_graph"))

    # Example 2: Nested clusters with node defaults
    builder = GraphBuilder()
    builder.accept(
        Subgraph(
            "backend",
            label="Backend",
            color="gray",
            node_defaults=NodeDefaults(color="blue"),
            entities=[
                Vertex("api"),
                Subgraph("storage", label="Storage", entities=[Vertex("db")]),
            ],
        )
    )
    builder.accept(Edge("api", "db", label="queries"))
    print(builder.build("services"))

    # Example 3: Permissive identifiers are quoted when needed
    config = RenderConfig(id_policy=IdPolicy.PERMISSIVE)
    factory = EntityFactory(config)
    builder = GraphBuilder(config)
    builder.accept(factory.edge("web server", "cache"))
    print(builder.build("my graph"))

    # Example 4: Convert a NetworkX graph
    graph = nx.DiGraph()
    graph.add_node("fetch", label="Fetch", cluster="io")
    graph.add_node("parse", label="Parse")
    graph.add_edge("fetch", "parse")
    print(to_dot(NetworkXGraphable(graph), "pipeline"))


if __name__ == "__main__":
    main()
