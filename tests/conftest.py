"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from wordgraph.graph import WordGraph, build_graph
from wordgraph.text import get_tokenizer

STAR_TREK_TEXT = (
    "To explore strange new worlds,\n"
    "To seek out new life and new civilizations?\n"
)


class SequenceRandom:
    """choice が指定したインデックス順に要素を返す乱数源

    インデックスを使い切った後は常に先頭を返す。
    """

    def __init__(self, indices: Sequence[int] = ()):
        self.indices = list(indices)
        self.calls: list[list[str]] = []

    def choice(self, seq):
        self.calls.append(list(seq))
        index = self.indices.pop(0) if self.indices else 0
        return seq[index]


@pytest.fixture
def sequence_random():
    """SequenceRandom のファクトリ"""
    return SequenceRandom


@pytest.fixture
def star_trek_text() -> str:
    """2行のサンプルテキスト"""
    return STAR_TREK_TEXT


@pytest.fixture
def star_trek_graph() -> WordGraph:
    """2行のサンプルテキストから構築したグラフ"""
    tokens = get_tokenizer().tokenize_lines(STAR_TREK_TEXT.splitlines())
    return build_graph(tokens)


@pytest.fixture
def triangle_graph() -> WordGraph:
    """a->b(1), b->c(1), a->c(5)"""
    return WordGraph.from_adjacency({
        "a": {"b": 1, "c": 5},
        "b": {"c": 1},
    }).freeze()


@pytest.fixture
def corpus_file(tmp_path):
    """サンプルテキストファイル"""
    path = tmp_path / "corpus.txt"
    path.write_text(STAR_TREK_TEXT, encoding="utf-8")
    return path
