"""Conversion seam for domain objects that can be drawn as graphs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .models import DotOutput, Id

if TYPE_CHECKING:
    from ..visualization.graph_builder import GraphBuilder


@runtime_checkable
class Graphable(Protocol):
    """Implemented by types that know how to describe themselves as a graph."""

    def build_graph(self) -> GraphBuilder:
        """Produce a populated builder describing this value."""
        ...


def to_dot(value: Graphable, graph_name: Id | str | None = None) -> DotOutput:
    """Convert ``value`` into a builder and render it.

    Args:
        value: Any object implementing ``build_graph``.
        graph_name: Name of the digraph; defaults to the builder's configured name.

    Returns:
        The rendered DOT document.
    """
    if not isinstance(value, Graphable):
        raise TypeError(f"{type(value).__name__} does not implement build_graph()")
    return value.build_graph().build(graph_name)
