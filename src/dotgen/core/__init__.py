"""Core dotgen module."""

from .identifiers import (
    IdPolicy,
    InvalidIdentifierError,
    is_unquoted_id,
    maybe_escaped,
    validate_strict,
)
from .models import (
    Color,
    DotOutput,
    Edge,
    Entity,
    EntityFactory,
    Id,
    IdGenerator,
    Label,
    NodeDefaults,
    OutputFormat,
    RenderConfig,
    Subgraph,
    Vertex,
    uuid_id_generator,
)
from .graphable import Graphable, to_dot
from .document import GraphDocument

__all__ = [
    "Color",
    "DotOutput",
    "Edge",
    "Entity",
    "EntityFactory",
    "GraphDocument",
    "Graphable",
    "Id",
    "IdGenerator",
    "IdPolicy",
    "InvalidIdentifierError",
    "Label",
    "NodeDefaults",
    "OutputFormat",
    "RenderConfig",
    "Subgraph",
    "Vertex",
    "is_unquoted_id",
    "maybe_escaped",
    "to_dot",
    "uuid_id_generator",
    "validate_strict",
]
