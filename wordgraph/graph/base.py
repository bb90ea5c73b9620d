# Graph Base Classes and Protocols
"""
Base types and the read-only protocol shared by the word graph and its queries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    import networkx as nx


@dataclass(frozen=True)
class WordEdge:
    """単語隣接エッジ

    Attributes:
        source: 先行する単語
        target: 直後に続く単語
        weight: 隣接して出現した回数（1以上）
    """
    source: str
    target: str
    weight: int

    def to_dict(self) -> dict[str, Any]:
        """辞書に変換"""
        return {
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
        }


@runtime_checkable
class WordGraphView(Protocol):
    """単語グラフの読み取り専用ビュー

    クエリはこのプロトコル越しにのみグラフへアクセスする。
    """

    def has_node(self, word: str) -> bool:
        """単語がノードとして存在するか"""
        ...

    def neighbors(self, word: str) -> dict[str, int]:
        """出力エッジ（隣接単語 -> 重み）。未知の単語は空"""
        ...

    def nodes(self) -> frozenset[str]:
        """全ノード"""
        ...

    def to_networkx(self) -> "nx.DiGraph":
        """重み属性 ``weight`` を持つ有向グラフ"""
        ...
