# WordGraph API Base Types
"""
wordgraph.api.base - Python API 基本型定義
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from wordgraph.observability import LogLevel
from wordgraph.query.random_walk import DEFAULT_MAX_STEPS


@dataclass
class WordGraphConfig:
    """WordGraph設定"""

    # 入力設定
    encoding: str = "utf-8"

    # ランダムウォーク設定
    max_walk_steps: int | None = DEFAULT_MAX_STEPS
    stop_on_repeated_edge: bool = True
    walk_output_path: Path | None = None

    # 乱数シード（None なら毎回異なる）
    seed: int | None = None

    # ログ設定
    log_level: LogLevel = LogLevel.WARNING

    def __post_init__(self):
        """型変換"""
        if isinstance(self.walk_output_path, str):
            self.walk_output_path = Path(self.walk_output_path)
        if isinstance(self.log_level, str):
            self.log_level = LogLevel(self.log_level.lower())


@dataclass
class LabStatus:
    """読み込み済みグラフの状態"""

    source: str | None = None
    token_count: int = 0
    node_count: int = 0
    edge_count: int = 0
    total_weight: int = 0

    # 実行済みクエリ数（種類別）
    query_counts: dict[str, int] = field(default_factory=dict)

    @property
    def is_loaded(self) -> bool:
        """グラフが読み込まれているか"""
        return self.source is not None

    def to_dict(self) -> dict[str, Any]:
        """辞書に変換"""
        return {
            "source": self.source,
            "token_count": self.token_count,
            "node_count": self.node_count,
            "edge_count": self.edge_count,
            "total_weight": self.total_weight,
            "query_counts": dict(self.query_counts),
        }
