"""Entity model for DOT documents."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Union

from pydantic import BaseModel

from .identifiers import IdPolicy, maybe_escaped, validate_strict

# Text displayed on or next to an object. Embedded quotes are not escaped.
Label = str

# An HTML/Graphviz color name such as "red" or "lightblue".
Color = str

IdGenerator = Callable[[], str]


class OutputFormat(str, Enum):
    """Supported output formats."""

    DOT = "dot"
    SVG = "svg"
    PNG = "png"


def uuid_id_generator() -> str:
    """Generate a random 128-bit token for entities created without an ID."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Id:
    """The key used to reference a vertex, edge endpoint or subgraph.

    Under the strict policy the value is checked on construction and
    rendered verbatim. Under the permissive policy any value is accepted
    and quoted at render time when needed.
    """

    value: str
    policy: IdPolicy = field(default=IdPolicy.STRICT, compare=False)

    def __post_init__(self) -> None:
        if self.policy == IdPolicy.STRICT:
            validate_strict(self.value)

    def render(self) -> str:
        """Return the token to place in the DOT document."""
        if self.policy == IdPolicy.PERMISSIVE:
            return maybe_escaped(self.value)
        return self.value

    def __str__(self) -> str:
        return self.value


def random_id() -> Id:
    return Id(uuid_id_generator())


def _coerce_id(value: Id | str) -> Id:
    return value if isinstance(value, Id) else Id(value)


@dataclass
class NodeDefaults:
    """Default styling for vertices inside a subgraph (``node [...]``)."""

    color: Color | None = None
    fontcolor: Color | None = None

    def is_empty(self) -> bool:
        return self.color is None and self.fontcolor is None


@dataclass
class Vertex:
    """A single node of the graph."""

    id: Id = field(default_factory=random_id)
    label: Label | None = None
    color: Color | None = None
    fontcolor: Color | None = None

    def __post_init__(self) -> None:
        self.id = _coerce_id(self.id)


@dataclass
class Edge:
    """A directed edge between two vertex identifiers.

    The default endpoints are empty placeholders and must be replaced
    before rendering.
    """

    source: Id = field(default_factory=lambda: Id(""))
    target: Id = field(default_factory=lambda: Id(""))
    label: Label | None = None
    color: Color | None = None
    fontcolor: Color | None = None

    def __post_init__(self) -> None:
        self.source = _coerce_id(self.source)
        self.target = _coerce_id(self.target)


@dataclass
class Subgraph:
    """A cluster of nested entities."""

    id: Id = field(default_factory=random_id)
    label: Label | None = None
    color: Color | None = None
    fontcolor: Color | None = None
    node_defaults: NodeDefaults | None = None
    entities: list[Entity] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.id = _coerce_id(self.id)

    def add(self, entity: Entity) -> None:
        """Append a child entity, keeping insertion order."""
        self.entities.append(entity)


Entity = Union[Subgraph, Vertex, Edge]


@dataclass(frozen=True)
class DotOutput:
    """A rendered DOT document."""

    text: str

    def __str__(self) -> str:
        return self.text


class RenderConfig(BaseModel):
    """Configuration for building DOT documents."""

    id_policy: IdPolicy = IdPolicy.STRICT
    graph_name: str = "G"


class EntityFactory:
    """Creates entities with a configured ID policy and ID source.

    Tests inject a deterministic ``id_generator`` so that entities created
    without an explicit identifier render reproducibly.
    """

    def __init__(
        self,
        config: RenderConfig | None = None,
        id_generator: IdGenerator = uuid_id_generator,
    ):
        self.config = config or RenderConfig()
        self.id_generator = id_generator

    def id(self, value: Id | str | None = None) -> Id:
        """Create an identifier, generating one when ``value`` is None."""
        if isinstance(value, Id):
            return value
        if value is None:
            value = self.id_generator()
        return Id(value, self.config.id_policy)

    def vertex(
        self,
        id: Id | str | None = None,
        label: Label | None = None,
        color: Color | None = None,
        fontcolor: Color | None = None,
    ) -> Vertex:
        return Vertex(self.id(id), label=label, color=color, fontcolor=fontcolor)

    def edge(
        self,
        source: Id | str,
        target: Id | str,
        label: Label | None = None,
        color: Color | None = None,
        fontcolor: Color | None = None,
    ) -> Edge:
        return Edge(
            self.id(source),
            self.id(target),
            label=label,
            color=color,
            fontcolor=fontcolor,
        )

    def subgraph(
        self,
        id: Id | str | None = None,
        label: Label | None = None,
        color: Color | None = None,
        fontcolor: Color | None = None,
        node_defaults: NodeDefaults | None = None,
        entities: list[Entity] | None = None,
    ) -> Subgraph:
        return Subgraph(
            self.id(id),
            label=label,
            color=color,
            fontcolor=fontcolor,
            node_defaults=node_defaults,
            entities=list(entities or []),
        )
