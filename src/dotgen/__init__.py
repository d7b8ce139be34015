"""dotgen - build DOT graph documents from Python objects.

Assemble vertices, edges and nested clusters in memory and render them
into a Graphviz DOT digraph.
"""

from .core.graphable import Graphable, to_dot
from .core.identifiers import IdPolicy, InvalidIdentifierError
from .core.models import (
    DotOutput,
    Edge,
    EntityFactory,
    Id,
    NodeDefaults,
    OutputFormat,
    RenderConfig,
    Subgraph,
    Vertex,
)
from .visualization import GraphBuilder

__version__ = "0.3.0"
__all__ = [
    "DotOutput",
    "Edge",
    "EntityFactory",
    "GraphBuilder",
    "Graphable",
    "Id",
    "IdPolicy",
    "InvalidIdentifierError",
    "NodeDefaults",
    "OutputFormat",
    "RenderConfig",
    "Subgraph",
    "Vertex",
    "to_dot",
]
