# WordGraph - Word Adjacency Graph Lab
"""
WordGraph: weighted directed graphs of word adjacency.

Builds a graph from the word pairs of a text file and answers queries over it:
bridge words, bridge-word text generation, shortest paths and random walks.
"""

__version__ = "0.1.0"
__author__ = "WordGraph Team"

from wordgraph.graph import WordGraph, WordGraphBuilder, build_graph, display
from wordgraph.query import (
    BridgeResult,
    BridgeStatus,
    PathResult,
    PathStatus,
    ShortestPathTree,
    StopReason,
    WalkResult,
    WalkStatus,
    generate_text,
    query_bridge_words,
    random_walk,
    shortest_path,
    shortest_paths_from,
)

__all__ = [
    "__version__",
    # Graph
    "WordGraph",
    "WordGraphBuilder",
    "build_graph",
    "display",
    # Queries
    "query_bridge_words",
    "generate_text",
    "shortest_path",
    "shortest_paths_from",
    "random_walk",
    # Results
    "BridgeResult",
    "BridgeStatus",
    "PathResult",
    "PathStatus",
    "ShortestPathTree",
    "StopReason",
    "WalkResult",
    "WalkStatus",
    # Facade
    "WordGraphLab",
]


def __getattr__(name):
    """Lazy import for the facade (pulls in PyYAML)."""
    if name == "WordGraphLab":
        from wordgraph.api import WordGraphLab
        return WordGraphLab
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
