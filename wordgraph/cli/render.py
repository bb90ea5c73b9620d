# WordGraph CLI - Rendering
"""
クエリ結果を表示用の文字列・テーブルに変換する
"""

from __future__ import annotations

from collections.abc import Mapping

from rich.table import Table

from wordgraph.query import (
    BridgeResult,
    BridgeStatus,
    PathResult,
    ShortestPathTree,
    StopReason,
    WalkResult,
    WalkStatus,
)

_STOP_REASON_TEXT = {
    StopReason.DEAD_END: "reached a word with no outgoing edges",
    StopReason.REPEATED_EDGE: "an edge was traversed twice",
    StopReason.MAX_STEPS: "step limit reached",
}


def _quoted(words: tuple[str, ...] | list[str]) -> str:
    return " and ".join(f'"{w}"' for w in words)


def format_missing(words: tuple[str, ...]) -> str:
    """グラフにない単語の文"""
    return f"No {_quoted(words)} in the graph!"


def format_bridge_result(result: BridgeResult) -> str:
    """橋渡し語クエリ結果の文"""
    if result.status == BridgeStatus.WORD_NOT_FOUND:
        return format_missing(result.missing_words)
    if result.status == BridgeStatus.NO_BRIDGE:
        return f'No bridge words from "{result.word1}" to "{result.word2}"!'

    words = result.bridge_words
    if len(words) == 1:
        return (
            f'The bridge word from "{result.word1}" to "{result.word2}" '
            f"is: {words[0]}."
        )
    listed = ", ".join(words[:-1]) + f" and {words[-1]}"
    return (
        f'The bridge words from "{result.word1}" to "{result.word2}" '
        f"are: {listed}."
    )


def format_path_result(result: PathResult) -> str:
    """最短経路クエリ結果の文"""
    if not result.found:
        message = f'No path from "{result.start}" to "{result.end}"'
        if result.missing_words:
            message += f" ({format_missing(result.missing_words)})"
        return message

    return (
        f'Shortest path from "{result.start}" to "{result.end}": '
        f"{' -> '.join(result.path)} with length {result.length}"
    )


def format_path_tree(tree: ShortestPathTree) -> str:
    """単一始点の最短経路一覧"""
    if tree.missing_words:
        return format_missing(tree.missing_words)
    if not tree.paths:
        return f'No other words to reach from "{tree.start}"'

    lines = [f'Shortest paths from "{tree.start}":']
    for path in tree.paths:
        if path.found:
            lines.append(f"  {' -> '.join(path.path)} with length {path.length}")
        else:
            lines.append(f'  "{path.end}": unreachable')
    return "\n".join(lines)


def format_walk_result(result: WalkResult) -> str:
    """ランダムウォーク結果の文"""
    if result.status == WalkStatus.EMPTY_GRAPH:
        return "The graph is empty!"
    return result.text


def describe_stop_reason(result: WalkResult) -> str:
    """停止理由の説明（空グラフでは空文字列）"""
    if result.stop_reason is None:
        return ""
    return f"Stopped after {result.steps} steps: {_STOP_REASON_TEXT[result.stop_reason]}"


def build_graph_table(adjacency: Mapping[str, Mapping[str, int]]) -> Table:
    """グラフのスナップショットをテーブル化"""
    table = Table(title="Word Graph")
    table.add_column("Word", style="cyan")
    table.add_column("Next words (weight)")

    for word, targets in adjacency.items():
        edges = ", ".join(f"{target}({weight})" for target, weight in targets.items())
        table.add_row(word, edges or "[dim]-[/dim]")
    return table


def build_metrics_table(status: Mapping[str, Mapping]) -> Table:
    """``MetricsCollector.get_status()`` をテーブル化"""
    table = Table(title="Metrics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    for name, value in sorted(status["counters"].items()):
        table.add_row(name, f"{value:g}")
    for name, value in sorted(status["gauges"].items()):
        table.add_row(name, f"{value:g}")
    for name, stats in sorted(status["histograms"].items()):
        if stats:
            table.add_row(name, f"{stats['mean']:.2f} (n={stats['count']})")
    return table
