# Text Generator Unit Tests
"""
Unit tests for bridge-word text generation.
"""

from __future__ import annotations

import random

from wordgraph.graph import WordGraph
from wordgraph.query import find_bridge_words, generate_text


class TestGenerateText:
    """generate_textのテスト"""

    def test_no_bridge_leaves_input_unchanged(self, star_trek_graph):
        """橋渡し語がなければ入力のまま"""
        assert generate_text(star_trek_graph, ["new", "worlds"]) == ["new", "worlds"]

    def test_inserts_single_bridge(self, star_trek_graph):
        """橋渡し語が1つなら必ず挿入"""
        output = generate_text(star_trek_graph, ["seek", "to", "explore", "new", "life"])

        assert output == ["seek", "to", "explore", "strange", "new", "life"]

    def test_chosen_bridge_is_valid(self, sequence_random):
        """選ばれる語は橋渡し語集合のいずれか"""
        graph = WordGraph.from_adjacency({
            "a": {"x": 1, "y": 1, "z": 1},
            "x": {"b": 1},
            "y": {"b": 1},
            "z": {"c": 1},
        })
        rng = sequence_random([1])

        output = generate_text(graph, ["a", "b"], rng=rng)

        assert rng.calls == [["x", "y"]]
        assert output == ["a", "y", "b"]

    def test_each_gap_chosen_independently(self, sequence_random):
        """単語対ごとに独立して選ぶ"""
        graph = WordGraph.from_adjacency({
            "a": {"x": 1, "y": 1},
            "x": {"a": 1},
            "y": {"a": 1},
        })
        rng = sequence_random([0, 1])

        output = generate_text(graph, ["a", "a", "a"], rng=rng)

        assert output == ["a", "x", "a", "y", "a"]

    def test_seeded_random(self, star_trek_graph):
        """シード付き乱数なら結果を再現できる"""
        words = ["out", "life", "new", "and", "to", "strange"]

        first = generate_text(star_trek_graph, words, rng=random.Random(3))
        second = generate_text(star_trek_graph, words, rng=random.Random(3))

        assert first == second
        assert first == [
            "out", "new", "life", "and", "new", "life", "and",
            "to", "explore", "strange",
        ]

    def test_output_keeps_input_order(self, star_trek_graph):
        """入力単語は順序を保ち、間には高々1語"""
        words = ["to", "new", "and", "new", "to"]
        output = generate_text(star_trek_graph, words, rng=random.Random(0))

        position = 0
        for current, following in zip(words, words[1:]):
            assert output[position] == current
            bridges = find_bridge_words(star_trek_graph, current, following)
            if bridges:
                assert output[position + 1] in bridges
                position += 2
            else:
                position += 1
        assert output[position:] == [words[-1]]

    def test_unknown_words_pass_through(self, star_trek_graph):
        """グラフにない単語もそのまま出力"""
        output = generate_text(star_trek_graph, ["boldly", "go", "explore", "new"])

        assert output == ["boldly", "go", "explore", "strange", "new"]

    def test_short_input(self, star_trek_graph):
        """2語未満はそのまま"""
        assert generate_text(star_trek_graph, []) == []
        assert generate_text(star_trek_graph, ["new"]) == ["new"]

    def test_empty_graph(self):
        """空グラフでは挿入なし"""
        assert generate_text(WordGraph(), ["a", "b", "c"]) == ["a", "b", "c"]
