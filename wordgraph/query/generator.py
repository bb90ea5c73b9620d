# Text Generator
"""
Bridge-word insertion into a word sequence.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from wordgraph.graph.base import WordGraphView
from wordgraph.query.bridge import find_bridge_words
from wordgraph.query.types import RandomSource


def generate_text(
    graph: WordGraphView,
    words: Sequence[str],
    rng: RandomSource | None = None,
) -> list[str]:
    """隣接する単語の間に橋渡し語を挿入した単語列を生成

    各単語対について橋渡し語があれば一様ランダムに1つ選んで挿入する。
    単語が2つ未満なら入力をそのまま返す。

    Args:
        graph: 単語グラフ
        words: 正規化済みの入力単語列
        rng: 乱数源（省略時は新しい ``random.Random``）

    Returns:
        出力単語列
    """
    words = list(words)
    if len(words) < 2:
        return words

    rng = rng or random.Random()
    output: list[str] = []
    for current, following in zip(words, words[1:]):
        output.append(current)
        bridges = find_bridge_words(graph, current, following)
        if bridges:
            output.append(rng.choice(bridges))
    output.append(words[-1])
    return output
