# Graph Module
"""
Word adjacency graph components.

Provides the weighted directed graph model and its builder.
"""

from wordgraph.graph.base import (
    WordEdge,
    WordGraphView,
)
from wordgraph.graph.word_graph import WordGraph, display
from wordgraph.graph.builder import WordGraphBuilder, build_graph

__all__ = [
    "WordEdge",
    "WordGraphView",
    "WordGraph",
    "WordGraphBuilder",
    "build_graph",
    "display",
]
