# Shortest Path Solver
"""
Minimum-weight paths between words (Dijkstra over adjacency counts).
"""

from __future__ import annotations

import logging

import networkx as nx

from wordgraph.graph.base import WordGraphView
from wordgraph.observability import timed
from wordgraph.query.types import PathResult, PathStatus, ShortestPathTree

logger = logging.getLogger(__name__)


def _missing(graph: WordGraphView, *words: str) -> tuple[str, ...]:
    return tuple(dict.fromkeys(w for w in words if not graph.has_node(w)))


@timed("query.shortest_path_ms")
def shortest_path(graph: WordGraphView, start: str, end: str) -> PathResult:
    """最短経路を計算

    探索は終点が確定した時点で打ち切る。重みが等しい経路が複数ある
    場合は先に発見したものを返す。

    Args:
        graph: 単語グラフ
        start: 始点の単語
        end: 終点の単語

    Returns:
        FOUND（経路と重み合計）または NO_PATH。
        端点が存在しない場合も NO_PATH とし、missing_words に記録する。
    """
    missing = _missing(graph, start, end)
    if missing:
        return PathResult(
            start=start,
            end=end,
            status=PathStatus.NO_PATH,
            missing_words=missing,
        )

    try:
        length, path = nx.single_source_dijkstra(
            graph.to_networkx(), start, target=end, weight="weight"
        )
    except nx.NetworkXNoPath:
        logger.debug("No path from %r to %r", start, end)
        return PathResult(start=start, end=end, status=PathStatus.NO_PATH)

    return PathResult(
        start=start,
        end=end,
        status=PathStatus.FOUND,
        path=tuple(path),
        length=int(length),
    )


@timed("query.shortest_paths_from_ms")
def shortest_paths_from(graph: WordGraphView, start: str) -> ShortestPathTree:
    """始点から他の全ノードへの最短経路を計算

    Args:
        graph: 単語グラフ
        start: 始点の単語

    Returns:
        終点の単語順に並んだ PathResult の一覧。
        始点が存在しなければ NO_PATH で経路は空。
    """
    if not graph.has_node(start):
        return ShortestPathTree(
            start=start,
            status=PathStatus.NO_PATH,
            missing_words=(start,),
        )

    lengths, paths = nx.single_source_dijkstra(
        graph.to_networkx(), start, weight="weight"
    )

    results = []
    for end in sorted(graph.nodes()):
        if end == start:
            continue
        if end in paths:
            results.append(
                PathResult(
                    start=start,
                    end=end,
                    status=PathStatus.FOUND,
                    path=tuple(paths[end]),
                    length=int(lengths[end]),
                )
            )
        else:
            results.append(PathResult(start=start, end=end, status=PathStatus.NO_PATH))

    return ShortestPathTree(
        start=start,
        status=PathStatus.FOUND,
        paths=tuple(results),
    )
