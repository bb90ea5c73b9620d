# WordGraph Observability Module
"""
wordgraph.observability - ロギング、メトリクス

``wordgraph`` ロガーのハンドラ設定と、グラフ構築時間やクエリ回数を
集計するプロセス内メトリクスを提供する。メトリクスは外部へ送出せず、
``wordgraph show --verbose`` で表示する。
"""

from __future__ import annotations

import functools
import logging
import sys
import time
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generator, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

ROOT_LOGGER_NAME = "wordgraph"


class LogLevel(Enum):
    """ログレベル"""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    def to_logging_level(self) -> int:
        """Python logging レベルに変換"""
        return getattr(logging, self.name)


@dataclass
class ObservabilityConfig:
    """Observability設定"""

    # ログ設定
    log_level: LogLevel = LogLevel.WARNING
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_to_console: bool = True
    log_to_file: str | None = None

    # メトリクス設定
    metrics_enabled: bool = True
    metrics_prefix: str = "wordgraph"
    # ヒストグラムごとに保持する直近の値の数
    histogram_window: int = 1000


# ============================================================
# Metrics
# ============================================================


class MetricsCollector:
    """メトリクスコレクター

    カウンタとゲージは最新値のみ、ヒストグラム（タイマー含む）は
    直近 ``histogram_window`` 件のみを保持する。

    Example:
        metrics = MetricsCollector()

        metrics.increment("query.bridge_words")
        metrics.gauge("graph.nodes", 42)
        with metrics.measure_time("graph.build_ms"):
            ...
    """

    def __init__(self, config: ObservabilityConfig | None = None):
        self.config = config or ObservabilityConfig()

        self._counters: dict[str, float] = {}
        self._gauges: dict[str, float] = {}
        self._histograms: dict[str, deque[float]] = {}

    def _metric_name(self, name: str) -> str:
        return f"{self.config.metrics_prefix}.{name}"

    def increment(self, name: str, value: float = 1.0) -> None:
        """カウンタをインクリメント"""
        if not self.config.metrics_enabled:
            return
        full_name = self._metric_name(name)
        self._counters[full_name] = self._counters.get(full_name, 0) + value

    def gauge(self, name: str, value: float) -> None:
        """ゲージ値を設定"""
        if not self.config.metrics_enabled:
            return
        self._gauges[self._metric_name(name)] = value

    def histogram(self, name: str, value: float) -> None:
        """ヒストグラムに値を追加（古い値は捨てる）"""
        if not self.config.metrics_enabled:
            return
        full_name = self._metric_name(name)
        if full_name not in self._histograms:
            self._histograms[full_name] = deque(maxlen=self.config.histogram_window)
        self._histograms[full_name].append(value)

    @contextmanager
    def measure_time(self, name: str) -> Generator[None, None, None]:
        """経過ミリ秒をヒストグラムに記録するコンテキストマネージャ"""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.histogram(name, (time.perf_counter() - start) * 1000)

    def get_counter(self, name: str) -> float:
        """カウンタ値を取得"""
        return self._counters.get(self._metric_name(name), 0.0)

    def get_gauge(self, name: str) -> float | None:
        """ゲージ値を取得"""
        return self._gauges.get(self._metric_name(name))

    def get_histogram_stats(self, name: str) -> dict[str, float] | None:
        """ヒストグラム統計（count/min/max/mean/p50）"""
        values = self._histograms.get(self._metric_name(name))
        if not values:
            return None

        sorted_values = sorted(values)
        n = len(sorted_values)
        return {
            "count": n,
            "min": sorted_values[0],
            "max": sorted_values[-1],
            "mean": sum(sorted_values) / n,
            "p50": sorted_values[n // 2],
        }

    def get_status(self) -> dict[str, Any]:
        """全メトリクスのスナップショット（名前はプレフィックスなし）"""
        prefix = f"{self.config.metrics_prefix}."

        def short(full_name: str) -> str:
            return full_name[len(prefix):] if full_name.startswith(prefix) else full_name

        return {
            "counters": {short(k): v for k, v in self._counters.items()},
            "gauges": {short(k): v for k, v in self._gauges.items()},
            "histograms": {
                short(k): self.get_histogram_stats(short(k))
                for k in self._histograms
            },
        }


# ============================================================
# Observability Manager
# ============================================================


class Observability:
    """``wordgraph`` ロガーのハンドラとメトリクスを束ねる

    Example:
        obs = Observability.create({"log_level": "info"})
        obs.setup_logging()
        obs.metrics.increment("query.random_walk")
    """

    def __init__(self, config: ObservabilityConfig | None = None):
        self.config = config or ObservabilityConfig()
        self.metrics = MetricsCollector(config=self.config)
        self.logger = logging.getLogger(ROOT_LOGGER_NAME)
        self._handlers: list[logging.Handler] = []

    @classmethod
    def create(
        cls,
        config: ObservabilityConfig | dict[str, Any] | None = None,
    ) -> "Observability":
        """辞書（log_level は文字列可）または設定からインスタンスを作成"""
        if isinstance(config, dict):
            config = dict(config)
            if isinstance(config.get("log_level"), str):
                config["log_level"] = LogLevel(config["log_level"].lower())
            config = ObservabilityConfig(**config)

        return cls(config=config)

    def setup_logging(self) -> None:
        """ハンドラを設定（再設定時は置き換え）"""
        self.teardown_logging()
        self.logger.setLevel(self.config.log_level.to_logging_level())

        formatter = logging.Formatter(self.config.log_format)
        if self.config.log_to_console:
            self._handlers.append(logging.StreamHandler(sys.stderr))
        if self.config.log_to_file:
            self._handlers.append(
                logging.FileHandler(self.config.log_to_file, encoding="utf-8")
            )

        for handler in self._handlers:
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def teardown_logging(self) -> None:
        """このインスタンスが追加したハンドラを外す"""
        for handler in self._handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self._handlers.clear()


# ============================================================
# Decorators
# ============================================================


def timed(name: str | None = None) -> Callable[[F], F]:
    """関数の実行時間（ミリ秒）をグローバルメトリクスに記録するデコレータ

    Example:
        @timed("query.shortest_path_ms")
        def shortest_path(graph, start, end) -> PathResult:
            ...
    """
    def decorator(func: F) -> F:
        metric_name = name or f"{func.__module__}.{func.__qualname__}.duration"

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with get_metrics().measure_time(metric_name):
                return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator


# ============================================================
# Global Instance
# ============================================================

_default_observability: Observability | None = None


def configure_observability(
    config: ObservabilityConfig | dict[str, Any] | None = None,
) -> Observability:
    """グローバルObservabilityを作り直し、ロガーのハンドラを組み直す"""
    global _default_observability
    if _default_observability is not None:
        _default_observability.teardown_logging()
    _default_observability = Observability.create(config)
    _default_observability.setup_logging()
    return _default_observability


def get_metrics() -> MetricsCollector:
    """グローバルメトリクスコレクターを取得"""
    global _default_observability
    if _default_observability is None:
        _default_observability = Observability.create()
    return _default_observability.metrics


__all__ = [
    "LogLevel",
    "ObservabilityConfig",
    "MetricsCollector",
    "Observability",
    "timed",
    "configure_observability",
    "get_metrics",
]
