"""WordGraph Error Handling.

グラフ構築・設定・入出力で発生する例外。
クエリの失敗（単語なし、経路なし等）は例外ではなく結果型で表現する
（``wordgraph.query.types`` を参照）。

Example:
    >>> from wordgraph.errors import InputError, EmptyInputError
    >>>
    >>> try:
    ...     graph = WordGraphBuilder().build_from_file("missing.txt")
    ... except EmptyInputError:
    ...     graph = WordGraph().freeze()
    ... except InputError as e:
    ...     logger.log(e.severity.to_logging_level(), "%s", e)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from wordgraph.query.types import WalkResult

__all__ = [
    "WordGraphError",
    "ConfigurationError",
    "InputError",
    "EmptyInputError",
    "OutputError",
    "GraphError",
    "ValidationError",
    "ErrorContext",
    "ErrorSeverity",
]


class ErrorSeverity(str, Enum):
    """エラー重要度（CLIはこのレベルでログ出力する）"""

    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    def to_logging_level(self) -> int:
        return getattr(logging, self.name)


@dataclass
class ErrorContext:
    """どこで何をしていたときのエラーか

    Attributes:
        component: 発生箇所（builder, config, lab など）
        operation: 実行中の操作
        details: パスや値などの付加情報
    """

    component: str | None = None
    operation: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


class WordGraphError(Exception):
    """WordGraph基底例外クラス

    Attributes:
        message: エラーメッセージ
        code: エラーコード
        severity: エラー重要度
        context: 発生箇所と付加情報
        cause: 原因となった例外
    """

    default_code: str = "WORDGRAPH_ERROR"
    default_severity: ErrorSeverity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str,
        code: str | None = None,
        severity: ErrorSeverity | None = None,
        cause: Exception | None = None,
        component: str | None = None,
        operation: str | None = None,
        **details: Any,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.severity = severity or self.default_severity
        self.cause = cause
        self.context = ErrorContext(
            component=component,
            operation=operation,
            details=details,
        )

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        where = ".".join(p for p in (self.context.component, self.context.operation) if p)
        if where:
            text += f" ({where})"
        if self.cause:
            text += f": {self.cause}"
        return text


class ConfigurationError(WordGraphError):
    """設定ファイルが見つからない、読めない、値が不正"""

    default_code = "CONFIG_ERROR"


class InputError(WordGraphError):
    """入力テキストファイルが存在しない、読めない、デコードできない"""

    default_code = "INPUT_ERROR"

    def __init__(self, message: str, path: str | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        if path:
            self.context.details["path"] = path


class EmptyInputError(InputError):
    """入力から単語対が1つも得られない（トークン数2未満）

    呼び出し側は中断するか空グラフで続行するかを選べる。
    """

    default_code = "EMPTY_INPUT"
    default_severity = ErrorSeverity.WARNING


class OutputError(WordGraphError):
    """ランダムウォークの保存先に書き込めない

    ``walk`` には保存できなかったウォーク結果が入る（あれば）。
    """

    default_code = "OUTPUT_ERROR"

    def __init__(
        self,
        message: str,
        path: str | None = None,
        walk: WalkResult | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.walk = walk
        if path:
            self.context.details["path"] = path


class GraphError(WordGraphError):
    """凍結済みグラフへの変更など"""

    default_code = "GRAPH_ERROR"


class ValidationError(WordGraphError):
    """引数の検証に失敗"""

    default_code = "VALIDATION_ERROR"
    default_severity = ErrorSeverity.WARNING

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        if field:
            self.context.details["field"] = field
        if value is not None:
            self.context.details["value"] = repr(value)
