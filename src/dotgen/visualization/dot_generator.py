"""DOT language generation for Graphviz rendering."""

import logging
from typing import Iterable, List, Optional, Tuple

from ..core.models import Edge, Entity, Id, NodeDefaults, Subgraph, Vertex

logger = logging.getLogger(__name__)

INDENT_STEP = 2


class DOTGenerator:
    """Generates DOT language documents from entity trees.

    The current indent is passed by value through the recursive calls, so
    each nested block returns its parent's indent simply by returning.
    """

    def generate_dot(self, entities: Iterable[Entity], graph_name: Id) -> str:
        """Generate a DOT language digraph from top-level entities.

        Args:
            entities: Entities in emission order.
            graph_name: Name of the digraph.

        Returns:
            DOT language string, ending with a newline.
        """
        logger.info(f"Generating DOT language for graph {graph_name}")

        indent = 0
        parts = [f"digraph {graph_name.render()} {{"]
        indent = self._indent(indent)

        parts.append(self._newline_indent(indent))
        parts.append("compound = true;")

        count = 0
        for entity in entities:
            parts.append("\n")
            parts.append(self._newline_indent(indent))
            parts.append(self.render_entity(entity, indent))
            count += 1

        indent = self._dedent(indent)
        if indent != 0:
            raise AssertionError(f"Indent did not return to zero: {indent}")
        parts.append(self._newline_indent(indent))
        parts.append("}\n")

        logger.info(f"DOT language generation completed ({count} top-level entities)")
        return "".join(parts)

    def render_entity(self, entity: Entity, indent: int) -> str:
        """Render a single entity whose first line starts at ``indent``.

        Args:
            entity: Vertex, edge or subgraph to render.
            indent: Indent of the line the entity starts on.

        Returns:
            The rendered entity, without leading or trailing newline.
        """
        if isinstance(entity, Vertex):
            return self._render_vertex(entity)
        if isinstance(entity, Edge):
            return self._render_edge(entity)
        if isinstance(entity, Subgraph):
            return self._render_subgraph(entity, indent)
        raise TypeError(f"Cannot render {type(entity).__name__} as a DOT entity")

    def _render_vertex(self, vertex: Vertex) -> str:
        logger.debug(f"Rendering vertex {vertex.id}")
        attributes = self._attribute_pairs(vertex.label, vertex.color, vertex.fontcolor)
        return f"{vertex.id.render()}{self._format_attributes(attributes)};"

    def _render_edge(self, edge: Edge) -> str:
        logger.debug(f"Rendering edge {edge.source} -> {edge.target}")
        attributes = self._attribute_pairs(edge.label, edge.color, edge.fontcolor)
        return (
            f"{edge.source.render()} -> {edge.target.render()}"
            f"{self._format_attributes(attributes)};"
        )

    def _render_subgraph(self, subgraph: Subgraph, indent: int) -> str:
        logger.debug(
            f"Rendering subgraph {subgraph.id} with {len(subgraph.entities)} entities",
        )
        parts = [f"subgraph {subgraph.id.render()} {{"]
        indent = self._indent(indent)

        parts.append(self._newline_indent(indent))
        if subgraph.label is not None:
            parts.append(f'label = "{subgraph.label}";')
            parts.append(self._newline_indent(indent))
        parts.append("cluster = true;")
        parts.append(self._newline_indent(indent))
        parts.append("rank = same;")
        parts.append("\n")

        if subgraph.color is not None:
            parts.append(self._newline_indent(indent))
            parts.append(f'color = "{subgraph.color}";')
        if subgraph.fontcolor is not None:
            parts.append(self._newline_indent(indent))
            parts.append(f'fontcolor = "{subgraph.fontcolor}";')
        node_defaults = self._node_defaults(subgraph.node_defaults)
        if node_defaults:
            parts.append(self._newline_indent(indent))
            parts.append(f"node {node_defaults};")
        parts.append("\n")

        for entity in subgraph.entities:
            parts.append(self._newline_indent(indent))
            parts.append(self.render_entity(entity, indent))

        indent = self._dedent(indent)
        parts.append(self._newline_indent(indent))
        parts.append("}")

        return "".join(parts)

    def _node_defaults(self, node_defaults: Optional[NodeDefaults]) -> str:
        if node_defaults is None:
            return ""
        attributes = self._attribute_pairs(None, node_defaults.color, node_defaults.fontcolor)
        return self._format_attributes(attributes)

    @staticmethod
    def _attribute_pairs(
        label: Optional[str],
        color: Optional[str],
        fontcolor: Optional[str],
    ) -> List[Tuple[str, str]]:
        pairs = []
        if label is not None:
            pairs.append(("label", label))
        if color is not None:
            pairs.append(("color", color))
        if fontcolor is not None:
            pairs.append(("fontcolor", fontcolor))
        return pairs

    @staticmethod
    def _format_attributes(pairs: List[Tuple[str, str]]) -> str:
        """Format ``[name="value", ...]`` with a separator after every pair.

        Returns an empty string when there are no attributes.
        """
        if not pairs:
            return ""
        return "[" + "".join(f'{name}="{value}", ' for name, value in pairs) + "]"

    @staticmethod
    def _newline_indent(indent: int) -> str:
        return "\n" + " " * indent

    @staticmethod
    def _indent(indent: int) -> int:
        return indent + INDENT_STEP

    @staticmethod
    def _dedent(indent: int) -> int:
        if indent < INDENT_STEP:
            raise AssertionError(f"Indent underflow: cannot dedent from {indent}")
        return indent - INDENT_STEP
