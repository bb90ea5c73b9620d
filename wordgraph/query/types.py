# Query Types
"""
クエリ結果の型定義

すべてのクエリはタグ付きの結果を返す。失敗（単語なし、経路なし、
空グラフ）は例外ではなく status で表現し、文章化は表示層が行う。
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class RandomSource(Protocol):
    """``random.Random`` 互換の乱数源（choice のみ使用）"""

    def choice(self, seq: Sequence[str]) -> str:
        ...


class BridgeStatus(Enum):
    """橋渡し語クエリの結果種別

    Attributes:
        FOUND: 橋渡し語が1つ以上ある
        NO_BRIDGE: 両単語は存在するが橋渡し語がない
        WORD_NOT_FOUND: いずれかの単語がグラフにない
    """
    FOUND = "found"
    NO_BRIDGE = "no_bridge"
    WORD_NOT_FOUND = "word_not_found"


class PathStatus(Enum):
    """最短経路クエリの結果種別"""
    FOUND = "found"
    NO_PATH = "no_path"


class WalkStatus(Enum):
    """ランダムウォークの結果種別"""
    WALKED = "walked"
    EMPTY_GRAPH = "empty_graph"


class StopReason(Enum):
    """ランダムウォークの停止理由

    Attributes:
        DEAD_END: 出力エッジのないノードに到達
        REPEATED_EDGE: 同じエッジを2度目に通過
        MAX_STEPS: 最大ステップ数に到達
    """
    DEAD_END = "dead_end"
    REPEATED_EDGE = "repeated_edge"
    MAX_STEPS = "max_steps"


@dataclass(frozen=True)
class BridgeResult:
    """橋渡し語クエリ結果

    Attributes:
        word1: 始点の単語
        word2: 終点の単語
        status: 結果種別
        bridge_words: 橋渡し語（アルファベット順）
        missing_words: グラフに存在しなかった単語
    """
    word1: str
    word2: str
    status: BridgeStatus
    bridge_words: tuple[str, ...] = ()
    missing_words: tuple[str, ...] = ()

    @property
    def found(self) -> bool:
        return self.status == BridgeStatus.FOUND

    def to_dict(self) -> dict[str, Any]:
        """辞書に変換"""
        return {
            "word1": self.word1,
            "word2": self.word2,
            "status": self.status.value,
            "bridge_words": list(self.bridge_words),
            "missing_words": list(self.missing_words),
        }


@dataclass(frozen=True)
class PathResult:
    """最短経路クエリ結果

    Attributes:
        start: 始点の単語
        end: 終点の単語
        status: 結果種別
        path: 経路上の単語（始点と終点を含む）
        length: 経路の重み合計（経路がなければNone）
        missing_words: グラフに存在しなかった端点
    """
    start: str
    end: str
    status: PathStatus
    path: tuple[str, ...] = ()
    length: int | None = None
    missing_words: tuple[str, ...] = ()

    @property
    def found(self) -> bool:
        return self.status == PathStatus.FOUND

    @property
    def edges(self) -> list[tuple[str, str]]:
        """経路上のエッジ"""
        return list(zip(self.path, self.path[1:]))

    def to_dict(self) -> dict[str, Any]:
        """辞書に変換"""
        return {
            "start": self.start,
            "end": self.end,
            "status": self.status.value,
            "path": list(self.path),
            "length": self.length,
            "missing_words": list(self.missing_words),
        }


@dataclass(frozen=True)
class ShortestPathTree:
    """単一始点の最短経路一覧

    Attributes:
        start: 始点の単語
        status: 始点が存在すれば FOUND、存在しなければ NO_PATH
        paths: 始点以外の各ノードへの結果（終点の単語順）
        missing_words: 存在しなかった始点
    """
    start: str
    status: PathStatus
    paths: tuple[PathResult, ...] = ()
    missing_words: tuple[str, ...] = ()

    @property
    def reachable(self) -> list[PathResult]:
        """到達可能な経路のみ"""
        return [p for p in self.paths if p.found]

    def to_dict(self) -> dict[str, Any]:
        """辞書に変換"""
        return {
            "start": self.start,
            "status": self.status.value,
            "paths": [p.to_dict() for p in self.paths],
            "missing_words": list(self.missing_words),
        }


@dataclass(frozen=True)
class WalkResult:
    """ランダムウォーク結果

    Attributes:
        status: 結果種別
        words: 訪れた単語の列
        stop_reason: 停止理由（空グラフではNone）
    """
    status: WalkStatus
    words: tuple[str, ...] = ()
    stop_reason: StopReason | None = None

    @property
    def text(self) -> str:
        """空白区切りの文字列"""
        return " ".join(self.words)

    @property
    def steps(self) -> int:
        """通過したエッジ数"""
        return max(len(self.words) - 1, 0)

    def to_dict(self) -> dict[str, Any]:
        """辞書に変換"""
        return {
            "status": self.status.value,
            "words": list(self.words),
            "stop_reason": self.stop_reason.value if self.stop_reason else None,
        }
