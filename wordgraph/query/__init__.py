# Query Module
"""
Read-only queries over a word graph.

Bridge words, bridge-word text generation, shortest paths and random walks.
"""

from wordgraph.query.types import (
    BridgeResult,
    BridgeStatus,
    PathResult,
    PathStatus,
    RandomSource,
    ShortestPathTree,
    StopReason,
    WalkResult,
    WalkStatus,
)
from wordgraph.query.bridge import find_bridge_words, query_bridge_words
from wordgraph.query.generator import generate_text
from wordgraph.query.shortest_path import shortest_path, shortest_paths_from
from wordgraph.query.random_walk import DEFAULT_MAX_STEPS, random_walk

__all__ = [
    # Types
    "BridgeResult",
    "BridgeStatus",
    "PathResult",
    "PathStatus",
    "RandomSource",
    "ShortestPathTree",
    "StopReason",
    "WalkResult",
    "WalkStatus",
    # Queries
    "find_bridge_words",
    "query_bridge_words",
    "generate_text",
    "shortest_path",
    "shortest_paths_from",
    "random_walk",
    "DEFAULT_MAX_STEPS",
]
