# Bridge Word Finder
"""
Bridge words: for words A and B, every W with edges A -> W and W -> B.
"""

from __future__ import annotations

from wordgraph.graph.base import WordGraphView
from wordgraph.query.types import BridgeResult, BridgeStatus


def find_bridge_words(graph: WordGraphView, word1: str, word2: str) -> list[str]:
    """橋渡し語をアルファベット順で返す（未知の単語なら空リスト）"""
    return sorted(
        word
        for word in graph.neighbors(word1)
        if word2 in graph.neighbors(word)
    )


def query_bridge_words(graph: WordGraphView, word1: str, word2: str) -> BridgeResult:
    """橋渡し語を問い合わせる

    Args:
        graph: 単語グラフ
        word1: 始点の単語
        word2: 終点の単語

    Returns:
        いずれかの単語がなければ WORD_NOT_FOUND、
        橋渡し語がなければ NO_BRIDGE、あれば FOUND
    """
    missing = tuple(
        dict.fromkeys(w for w in (word1, word2) if not graph.has_node(w))
    )
    if missing:
        return BridgeResult(
            word1=word1,
            word2=word2,
            status=BridgeStatus.WORD_NOT_FOUND,
            missing_words=missing,
        )

    bridges = find_bridge_words(graph, word1, word2)
    return BridgeResult(
        word1=word1,
        word2=word2,
        status=BridgeStatus.FOUND if bridges else BridgeStatus.NO_BRIDGE,
        bridge_words=tuple(bridges),
    )
