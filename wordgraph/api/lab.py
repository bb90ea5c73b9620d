# WordGraph Main Facade
"""
wordgraph.api.lab - メインFacade API
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Any

from wordgraph.api.base import LabStatus, WordGraphConfig
from wordgraph.api.config import ConfigManager
from wordgraph.errors import EmptyInputError, OutputError
from wordgraph.graph import WordGraph, WordGraphBuilder
from wordgraph.observability import get_metrics
from wordgraph.query import (
    BridgeResult,
    PathResult,
    RandomSource,
    ShortestPathTree,
    WalkResult,
    generate_text,
    query_bridge_words,
    random_walk,
    shortest_path,
    shortest_paths_from,
)
from wordgraph.text import get_tokenizer, normalize_word

logger = logging.getLogger(__name__)


class WordGraphLab:
    """WordGraph メインAPI (Facade)

    1セッション1グラフ。:meth:`load` で構築したグラフは凍結され、
    以降のクエリはすべて読み取り専用。クエリ語は入力テキストと同じ規則で
    正規化してから問い合わせる。

    Example:
        >>> lab = WordGraphLab({"seed": 42})
        >>> _ = lab.load_text("to explore strange new worlds")
        >>> lab.query_bridge_words("strange", "worlds").bridge_words
        ('new',)
    """

    def __init__(
        self,
        config: str | Path | dict[str, Any] | WordGraphConfig | None = None,
        rng: RandomSource | None = None,
    ):
        """
        WordGraphLab を初期化

        Args:
            config: 設定ファイルパス、辞書、またはWordGraphConfigオブジェクト
            rng: 乱数源（省略時は config.seed で初期化した ``random.Random``）
        """
        if config is None:
            self._config_manager = ConfigManager()
        elif isinstance(config, (str, Path)):
            self._config_manager = ConfigManager.from_yaml(config)
        elif isinstance(config, dict):
            self._config_manager = ConfigManager.from_dict(config)
        elif isinstance(config, WordGraphConfig):
            self._config_manager = ConfigManager.from_config(config)
        else:
            raise ValueError(f"Invalid config type: {type(config)}")

        self.rng = rng or random.Random(self.config.seed)
        self.tokenizer = get_tokenizer()

        self._graph = WordGraph().freeze()
        self._status = LabStatus()

    @property
    def config(self) -> WordGraphConfig:
        """設定を取得"""
        return self._config_manager.config

    @property
    def graph(self) -> WordGraph:
        """読み込み済みグラフ（未読み込みなら空グラフ）"""
        return self._graph

    def get_status(self) -> LabStatus:
        """ステータスを取得"""
        return self._status

    # ========== グラフ構築 ==========

    def load(self, path: str | Path) -> WordGraph:
        """テキストファイルからグラフを構築

        Raises:
            InputError: ファイルが読めない場合
            EmptyInputError: 単語対が1つもない場合（空グラフに置き換えてから送出）
        """
        builder = WordGraphBuilder(tokenizer=self.tokenizer, encoding=self.config.encoding)
        try:
            with get_metrics().measure_time("graph.build_ms"):
                graph = builder.build_from_file(path)
        except EmptyInputError as e:
            logger.log(e.severity.to_logging_level(), "%s", e)
            self._set_graph(WordGraph().freeze(), source=str(path), token_count=builder.last_token_count)
            raise
        self._set_graph(graph, source=str(path), token_count=builder.last_token_count)
        return graph

    def load_text(self, text: str) -> WordGraph:
        """文字列からグラフを構築（空でも例外にしない）"""
        builder = WordGraphBuilder(tokenizer=self.tokenizer)
        tokens = self.tokenizer.tokenize_lines(text.splitlines())
        with get_metrics().measure_time("graph.build_ms"):
            builder.add_tokens(tokens)
            graph = builder.build()
        self._set_graph(graph, source="<text>", token_count=builder.last_token_count)
        return graph

    def _set_graph(self, graph: WordGraph, source: str, token_count: int) -> None:
        self._graph = graph
        self._status = LabStatus(
            source=source,
            token_count=token_count,
            node_count=graph.node_count,
            edge_count=graph.edge_count,
            total_weight=graph.total_weight,
        )
        get_metrics().gauge("graph.nodes", graph.node_count)
        get_metrics().gauge("graph.edges", graph.edge_count)
        logger.info(
            "Graph ready from %s: %d nodes, %d edges",
            source,
            graph.node_count,
            graph.edge_count,
        )

    def _count(self, query: str) -> None:
        self._status.query_counts[query] = self._status.query_counts.get(query, 0) + 1
        get_metrics().increment(f"query.{query}")

    # ========== クエリ ==========

    def display(self) -> dict[str, dict[str, int]]:
        """グラフの表示用スナップショット"""
        self._count("display")
        return self._graph.display()

    def query_bridge_words(self, word1: str, word2: str) -> BridgeResult:
        """橋渡し語を問い合わせる"""
        self._count("bridge_words")
        return query_bridge_words(
            self._graph, normalize_word(word1), normalize_word(word2)
        )

    def generate_new_text(self, text: str) -> str:
        """入力テキストに橋渡し語を挿入した新しいテキストを生成"""
        self._count("generate_text")
        words = self.tokenizer.tokenize(text)
        return " ".join(generate_text(self._graph, words, rng=self.rng))

    def calc_shortest_path(self, start: str, end: str) -> PathResult:
        """2単語間の最短経路を計算"""
        self._count("shortest_path")
        return shortest_path(self._graph, normalize_word(start), normalize_word(end))

    def calc_shortest_paths_from(self, start: str) -> ShortestPathTree:
        """1単語から全単語への最短経路を計算"""
        self._count("shortest_paths_from")
        return shortest_paths_from(self._graph, normalize_word(start))

    def random_walk(self) -> WalkResult:
        """ランダムウォークを実行（設定があれば結果をファイルに書き出す）

        Raises:
            OutputError: walk_output_path に書き込めない場合（``walk`` に結果を保持）
        """
        self._count("random_walk")
        result = random_walk(
            self._graph,
            rng=self.rng,
            max_steps=self.config.max_walk_steps,
            stop_on_repeated_edge=self.config.stop_on_repeated_edge,
        )
        if self.config.walk_output_path and result.words:
            try:
                save_walk(result, self.config.walk_output_path)
            except OutputError as e:
                e.walk = result
                raise
        return result


def save_walk(result: WalkResult, path: str | Path) -> Path:
    """ランダムウォークの単語列を1行のテキストとして保存

    Raises:
        OutputError: ディレクトリ作成や書き込みに失敗した場合
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(result.text + "\n")
    except OSError as e:
        logger.error("Failed to save random walk to %s: %s", path, e)
        raise OutputError(
            f"Failed to save walk to {path}: {e.strerror or e}",
            path=str(path),
            cause=e,
            component="lab",
            operation="save_walk",
        ) from e
    logger.info("Saved random walk (%d words) to %s", len(result.words), path)
    return path
