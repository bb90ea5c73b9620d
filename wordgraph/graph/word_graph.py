# Word Adjacency Graph
"""
Directed, edge-weighted graph of word adjacency.
"""

from __future__ import annotations

from collections.abc import Mapping

import networkx as nx

from wordgraph.errors import GraphError, ValidationError
from wordgraph.graph.base import WordEdge


class WordGraph:
    """単語隣接グラフ

    ``networkx.DiGraph`` を保持し、エッジ属性 ``weight`` に
    隣接出現回数を持つ。同じ単語対の追加は並列エッジを作らず重みを加算する。
    構築完了後は :meth:`freeze` で凍結し、以降は読み取り専用となる。

    Example:
        >>> graph = WordGraph()
        >>> graph.add_edge("new", "worlds")
        1
        >>> graph.neighbors("new")
        {'worlds': 1}
        >>> graph.freeze().is_frozen
        True
    """

    def __init__(self, graph: nx.DiGraph | None = None) -> None:
        """初期化

        Args:
            graph: 既存の有向グラフ（省略時は空グラフ）
        """
        self._graph = graph if graph is not None else nx.DiGraph()

    @classmethod
    def from_adjacency(
        cls,
        adjacency: Mapping[str, Mapping[str, int]],
    ) -> "WordGraph":
        """隣接辞書（単語 -> {隣接単語: 重み}）から構築

        空の辞書に対応付けられた単語は出力エッジを持たないノードとなる。

        Raises:
            ValidationError: 重みが1未満の場合
        """
        graph = cls()
        for source, targets in adjacency.items():
            graph._graph.add_node(source)
            for target, weight in targets.items():
                if int(weight) < 1:
                    raise ValidationError(
                        f"Edge weight must be >= 1: {source} -> {target}",
                        field="weight",
                        value=weight,
                    )
                graph._graph.add_edge(source, target, weight=int(weight))
        return graph

    # ========== 変更操作 ==========

    def add_edge(self, source: str, target: str) -> int:
        """エッジを追加（既存なら重みを1加算）

        Args:
            source: 先行する単語
            target: 直後の単語

        Returns:
            更新後の重み

        Raises:
            GraphError: 凍結済みグラフの場合
        """
        if self.is_frozen:
            raise GraphError(
                "Cannot add an edge to a frozen graph",
                component="graph",
                operation="add_edge",
                source=source,
                target=target,
            )

        if self._graph.has_edge(source, target):
            self._graph[source][target]["weight"] += 1
        else:
            self._graph.add_edge(source, target, weight=1)
        return self._graph[source][target]["weight"]

    def freeze(self) -> "WordGraph":
        """グラフを凍結して自身を返す"""
        nx.freeze(self._graph)
        return self

    @property
    def is_frozen(self) -> bool:
        """凍結済みか"""
        return nx.is_frozen(self._graph)

    # ========== 参照操作 ==========

    def has_node(self, word: str) -> bool:
        """単語がノードとして存在するか"""
        return self._graph.has_node(word)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._graph.has_node(word)

    def has_edge(self, source: str, target: str) -> bool:
        """エッジが存在するか"""
        return self._graph.has_edge(source, target)

    def weight(self, source: str, target: str) -> int | None:
        """エッジの重み（存在しなければNone）"""
        data = self._graph.get_edge_data(source, target)
        if data is None:
            return None
        return data["weight"]

    def neighbors(self, word: str) -> dict[str, int]:
        """出力エッジ（隣接単語 -> 重み）。未知の単語は空辞書"""
        if word not in self._graph:
            return {}
        return {
            target: data["weight"]
            for target, data in self._graph.adj[word].items()
        }

    def nodes(self) -> frozenset[str]:
        """全ノード"""
        return frozenset(self._graph.nodes)

    def edges(self) -> list[WordEdge]:
        """全エッジ（source, target 順）"""
        return sorted(
            (
                WordEdge(source=source, target=target, weight=data["weight"])
                for source, target, data in self._graph.edges(data=True)
            ),
            key=lambda edge: (edge.source, edge.target),
        )

    @property
    def node_count(self) -> int:
        """ノード数"""
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        """エッジ数"""
        return self._graph.number_of_edges()

    @property
    def total_weight(self) -> int:
        """全エッジの重みの合計（= 隣接ペアの総数）"""
        return int(self._graph.size(weight="weight"))

    def is_empty(self) -> bool:
        """ノードが1つもないか"""
        return self.node_count == 0

    def to_networkx(self) -> nx.DiGraph:
        """内部の有向グラフを取得（凍結済みなら変更不可）"""
        return self._graph

    def display(self) -> dict[str, dict[str, int]]:
        """表示用スナップショット（単語順、出力エッジのないノードも含む）"""
        return {
            word: dict(sorted(self.neighbors(word).items()))
            for word in sorted(self._graph.nodes)
        }

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return (
            f"WordGraph(nodes={self.node_count}, edges={self.edge_count}, "
            f"frozen={self.is_frozen})"
        )


def display(graph: WordGraph) -> dict[str, dict[str, int]]:
    """グラフの表示用スナップショットを取得"""
    return graph.display()
