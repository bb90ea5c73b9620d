# Facade API Unit Tests
"""
Unit tests for the WordGraphLab facade.
"""

from __future__ import annotations

import logging
import random

import pytest

import wordgraph
from wordgraph.api import LabStatus, WordGraphConfig, WordGraphLab, save_walk
from wordgraph.errors import EmptyInputError, InputError, OutputError
from wordgraph.query import BridgeStatus, PathStatus, StopReason, WalkResult, WalkStatus


@pytest.fixture
def lab(star_trek_text) -> WordGraphLab:
    lab = WordGraphLab({"seed": 42})
    lab.load_text(star_trek_text)
    return lab


class TestWordGraphLabInit:
    """初期化のテスト"""

    def test_default_config(self):
        lab = WordGraphLab()

        assert lab.config == WordGraphConfig()
        assert lab.graph.is_empty()
        assert lab.graph.is_frozen
        assert not lab.get_status().is_loaded

    def test_config_object(self):
        config = WordGraphConfig(max_walk_steps=3)

        assert WordGraphLab(config).config is config

    def test_config_file(self, tmp_path):
        path = tmp_path / "wordgraph.yaml"
        path.write_text("seed: 5\n", encoding="utf-8")

        assert WordGraphLab(path).config.seed == 5

    def test_invalid_config_type(self):
        with pytest.raises(ValueError):
            WordGraphLab(42)

    def test_lazy_top_level_import(self):
        """パッケージ直下からも参照できる"""
        assert wordgraph.WordGraphLab is WordGraphLab


class TestWordGraphLabLoad:
    """グラフ構築のテスト"""

    def test_load_file(self, corpus_file):
        lab = WordGraphLab()

        graph = lab.load(corpus_file)

        assert lab.graph is graph
        status = lab.get_status()
        assert status.is_loaded
        assert status.source == str(corpus_file)
        assert status.token_count == 13
        assert status.node_count == graph.node_count
        assert status.total_weight == 12

    def test_load_missing_file(self, tmp_path):
        lab = WordGraphLab()

        with pytest.raises(InputError):
            lab.load(tmp_path / "missing.txt")

        assert not lab.get_status().is_loaded

    def test_load_empty_file_sets_empty_graph(self, tmp_path, corpus_file, caplog):
        """空ファイルは空グラフに置き換えてから例外（警告レベルでログ）"""
        lab = WordGraphLab()
        lab.load(corpus_file)
        empty = tmp_path / "empty.txt"
        empty.write_text("   \n", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="wordgraph"):
            with pytest.raises(EmptyInputError):
                lab.load(empty)

        assert any(
            r.levelno == logging.WARNING and "EMPTY_INPUT" in r.getMessage()
            for r in caplog.records
        )

        assert lab.graph.is_empty()
        assert lab.get_status().source == str(empty)

    def test_load_text_never_raises(self):
        lab = WordGraphLab()

        graph = lab.load_text("")

        assert graph.is_empty()
        assert lab.get_status().source == "<text>"

    def test_reload_replaces_graph(self, lab):
        lab.load_text("x y")

        assert lab.graph.nodes() == frozenset({"x", "y"})


class TestWordGraphLabQueries:
    """クエリのテスト"""

    def test_display(self, lab):
        assert lab.display()["new"] == {"civilizations": 1, "life": 1, "worlds": 1}

    def test_bridge_words_normalized(self, lab):
        """クエリ語も正規化する"""
        result = lab.query_bridge_words("Explore", " NEW! ")

        assert result.status == BridgeStatus.FOUND
        assert result.bridge_words == ("strange",)

    def test_bridge_words_missing(self, lab):
        result = lab.query_bridge_words("klingon", "new")

        assert result.status == BridgeStatus.WORD_NOT_FOUND

    def test_generate_new_text(self, lab):
        assert lab.generate_new_text("Seek to explore new life") == (
            "seek to explore strange new life"
        )

    def test_generate_new_text_empty(self, lab):
        assert lab.generate_new_text("!!!") == ""

    def test_shortest_path(self, lab):
        result = lab.calc_shortest_path("Strange", "LIFE")

        assert result.path == ("strange", "new", "life")
        assert result.length == 2

    def test_shortest_path_missing(self, lab):
        result = lab.calc_shortest_path("strange", "klingon")

        assert result.status == PathStatus.NO_PATH
        assert result.missing_words == ("klingon",)

    def test_shortest_paths_from(self, lab):
        tree = lab.calc_shortest_paths_from("civilizations")

        assert tree.status == PathStatus.FOUND
        assert tree.reachable == []
        assert len(tree.paths) == lab.graph.node_count - 1

    def test_random_walk_seeded(self, corpus_file):
        """同じシードなら同じウォーク"""
        first = WordGraphLab({"seed": 9})
        second = WordGraphLab({"seed": 9})
        first.load(corpus_file)
        second.load(corpus_file)

        assert first.random_walk() == second.random_walk()

    def test_random_walk_uses_config(self, sequence_random):
        lab = WordGraphLab(
            {"max_walk_steps": 1, "stop_on_repeated_edge": False},
            rng=sequence_random(),
        )
        lab.load_text("a b a b")

        result = lab.random_walk()

        assert result.words == ("a", "b")
        assert result.stop_reason == StopReason.MAX_STEPS

    def test_random_walk_empty_graph(self):
        result = WordGraphLab().random_walk()

        assert result.status == WalkStatus.EMPTY_GRAPH

    def test_random_walk_writes_output(self, tmp_path, star_trek_text):
        """walk_output_path があれば保存"""
        output = tmp_path / "walks" / "walk.txt"
        lab = WordGraphLab({"seed": 1, "walk_output_path": str(output)})
        lab.load_text(star_trek_text)

        result = lab.random_walk()

        assert output.read_text(encoding="utf-8") == result.text + "\n"

    def test_random_walk_unwritable_output(self, tmp_path, star_trek_text):
        """保存先がディレクトリならOutputError（ウォーク結果は保持）"""
        lab = WordGraphLab({"seed": 1, "walk_output_path": str(tmp_path)})
        lab.load_text(star_trek_text)

        with pytest.raises(OutputError) as exc_info:
            lab.random_walk()

        assert exc_info.value.walk is not None
        assert exc_info.value.walk.words
        assert exc_info.value.context.details["path"] == str(tmp_path)
        assert isinstance(exc_info.value.cause, OSError)

    def test_query_counts(self, lab):
        lab.query_bridge_words("a", "b")
        lab.query_bridge_words("a", "b")
        lab.random_walk()

        counts = lab.get_status().query_counts
        assert counts == {"bridge_words": 2, "random_walk": 1}


class TestHelpers:
    """モジュール関数のテスト"""

    def test_save_walk(self, tmp_path):
        result = WalkResult(status=WalkStatus.WALKED, words=("to", "seek"))

        path = save_walk(result, tmp_path / "walk.txt")

        assert path.read_text(encoding="utf-8") == "to seek\n"

    def test_save_walk_to_directory(self, tmp_path):
        result = WalkResult(status=WalkStatus.WALKED, words=("to", "seek"))

        with pytest.raises(OutputError) as exc_info:
            save_walk(result, tmp_path)

        assert exc_info.value.code == "OUTPUT_ERROR"
        assert "Failed to save walk" in exc_info.value.message

    def test_status_to_dict(self):
        status = LabStatus(source="x.txt", token_count=3, node_count=2, edge_count=2)

        assert status.to_dict()["source"] == "x.txt"
        assert status.to_dict()["query_counts"] == {}

    def test_seeded_rng_is_random_instance(self):
        assert isinstance(WordGraphLab({"seed": 1}).rng, random.Random)
