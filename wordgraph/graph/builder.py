# Word Graph Builder
"""
Builder feeding consecutive word pairs into a word graph.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from wordgraph.errors import EmptyInputError, InputError
from wordgraph.graph.word_graph import WordGraph
from wordgraph.text.tokenizer import Tokenizer, get_tokenizer

logger = logging.getLogger(__name__)


class WordGraphBuilder:
    """単語グラフビルダー

    トークン列の隣接する単語対をエッジとしてグラフに追加する。
    直前の単語を呼び出しをまたいで保持するため、行末の単語と
    次の行頭の単語も隣接とみなされる。

    Example:
        >>> builder = WordGraphBuilder()
        >>> builder.add_line("a b c")
        >>> builder.add_line("b c d")
        >>> graph = builder.build()
        >>> graph.weight("b", "c")
        2

    Attributes:
        tokenizer: 行の正規化に使うトークナイザー
        encoding: ファイル読み込み時の文字コード
    """

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self.tokenizer = tokenizer or get_tokenizer()
        self.encoding = encoding

        self._graph = WordGraph()
        self._previous: str | None = None
        self._token_count = 0
        self.last_token_count = 0

    def add_tokens(self, tokens: Iterable[str]) -> None:
        """正規化済みトークンを追加

        Args:
            tokens: 単語列（空文字列は無視）
        """
        for token in tokens:
            if not token:
                continue
            if self._previous is not None:
                self._graph.add_edge(self._previous, token)
            self._previous = token
            self._token_count += 1

    def add_line(self, line: str) -> None:
        """生テキストの1行を正規化して追加"""
        self.add_tokens(self.tokenizer.tokenize(line))

    def build(self) -> WordGraph:
        """凍結済みグラフを返し、ビルダーを初期状態に戻す"""
        graph = self._graph.freeze()
        self.last_token_count = self._token_count
        logger.debug(
            "Built word graph: %d tokens, %d nodes, %d edges",
            self._token_count,
            graph.node_count,
            graph.edge_count,
        )
        self.reset()
        return graph

    def reset(self) -> None:
        """ビルダーをクリア"""
        self._graph = WordGraph()
        self._previous = None
        self._token_count = 0

    @property
    def token_count(self) -> int:
        """これまでに追加したトークン数"""
        return self._token_count

    # ========== まとめて構築 ==========

    def build_from_tokens(self, tokens: Iterable[str]) -> WordGraph:
        """トークン列からグラフを構築"""
        self.reset()
        self.add_tokens(tokens)
        return self.build()

    def build_from_lines(self, lines: Iterable[str]) -> WordGraph:
        """テキスト行からグラフを構築"""
        self.reset()
        self.add_tokens(self.tokenizer.tokenize_lines(lines))
        return self.build()

    def build_from_file(self, path: str | Path) -> WordGraph:
        """テキストファイルからグラフを構築

        Args:
            path: 入力ファイルパス

        Returns:
            凍結済みグラフ

        Raises:
            InputError: ファイルが存在しない、読めない、デコードできない、
                文字コード名が不明な場合
            EmptyInputError: エッジが1本も得られない場合
        """
        path = Path(path)
        self.reset()

        try:
            with open(path, encoding=self.encoding) as f:
                self.add_tokens(self.tokenizer.tokenize_lines(f))
        except FileNotFoundError as e:
            raise InputError(
                f"Input file not found: {path}",
                path=str(path),
                cause=e,
                component="builder",
                operation="build_from_file",
            ) from e
        except (OSError, UnicodeDecodeError, LookupError) as e:
            raise InputError(
                f"Failed to read input file: {path}",
                path=str(path),
                cause=e,
                component="builder",
                operation="build_from_file",
            ) from e

        graph = self.build()
        token_count = self.last_token_count
        logger.info(
            "Loaded %s: %d tokens, %d nodes, %d edges",
            path,
            token_count,
            graph.node_count,
            graph.edge_count,
        )

        if graph.edge_count == 0:
            raise EmptyInputError(
                f"No word pairs found in input file: {path}",
                path=str(path),
                component="builder",
                operation="build_from_file",
                token_count=token_count,
            )
        return graph


def build_graph(tokens: Iterable[str]) -> WordGraph:
    """トークン列から凍結済みの単語グラフを構築"""
    return WordGraphBuilder().build_from_tokens(tokens)
