# Random Walker
"""
Randomized traversal from a random start node.
"""

from __future__ import annotations

import logging
import random

from wordgraph.errors import ValidationError
from wordgraph.graph.base import WordGraphView
from wordgraph.query.types import RandomSource, StopReason, WalkResult, WalkStatus

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 1000


def random_walk(
    graph: WordGraphView,
    rng: RandomSource | None = None,
    max_steps: int | None = DEFAULT_MAX_STEPS,
    stop_on_repeated_edge: bool = True,
) -> WalkResult:
    """ランダムウォークを実行

    全ノードから一様ランダムに始点を選び、出力エッジのないノードに
    着くまで、重みを無視して一様ランダムに隣接ノードへ移動する。
    循環するグラフでも必ず停止するよう、同じエッジを2度目に通過した
    時点（そのエッジの終点まで記録）か、``max_steps`` 回移動した時点で打ち切る。

    Args:
        graph: 単語グラフ
        rng: 乱数源（省略時は新しい ``random.Random``）
        max_steps: 最大移動回数（None は無制限。stop_on_repeated_edge 必須）
        stop_on_repeated_edge: エッジの再通過で停止するか

    Returns:
        WALKED（単語列と停止理由）または EMPTY_GRAPH

    Raises:
        ValidationError: 停止条件が1つもない、または max_steps が負の場合
    """
    if max_steps is None and not stop_on_repeated_edge:
        raise ValidationError(
            "A walk needs max_steps or stop_on_repeated_edge to terminate",
            field="max_steps",
        )
    if max_steps is not None and max_steps < 0:
        raise ValidationError(
            "max_steps must be >= 0",
            field="max_steps",
            value=max_steps,
        )

    # 乱数シードで再現できるよう順序を固定
    nodes = sorted(graph.nodes())
    if not nodes:
        return WalkResult(status=WalkStatus.EMPTY_GRAPH)

    rng = rng or random.Random()
    current = rng.choice(nodes)
    words = [current]
    visited: set[tuple[str, str]] = set()
    steps = 0

    while True:
        successors = sorted(graph.neighbors(current))
        if not successors:
            reason = StopReason.DEAD_END
            break
        if max_steps is not None and steps >= max_steps:
            reason = StopReason.MAX_STEPS
            break

        following = rng.choice(successors)
        edge = (current, following)
        words.append(following)
        steps += 1
        current = following

        if stop_on_repeated_edge:
            if edge in visited:
                reason = StopReason.REPEATED_EDGE
                break
            visited.add(edge)

    logger.debug("Random walk stopped after %d steps (%s)", steps, reason.value)
    return WalkResult(
        status=WalkStatus.WALKED,
        words=tuple(words),
        stop_reason=reason,
    )
