"""Visualization module for graph building and rendering."""

from .dot_generator import DOTGenerator
from .graph_builder import GraphBuilder
from .networkx_adapter import NetworkXGraphable
from .renderer import GraphRenderer

__all__ = ["DOTGenerator", "GraphBuilder", "GraphRenderer", "NetworkXGraphable"]
