# WordGraph Config Manager
"""
wordgraph.api.config - 設定マネージャー
"""

from __future__ import annotations

import codecs
import os
from pathlib import Path
from typing import Any

import yaml

from wordgraph.api.base import WordGraphConfig
from wordgraph.errors import ConfigurationError
from wordgraph.observability import LogLevel
from wordgraph.query.random_walk import DEFAULT_MAX_STEPS

CONFIG_ENV_VAR = "WORDGRAPH_CONFIG"

DEFAULT_CONFIG_PATHS = (
    Path("./wordgraph.yaml"),
    Path("./wordgraph.yml"),
    Path("./config/wordgraph.yaml"),
)


class ConfigManager:
    """設定マネージャー"""

    def __init__(self, config_path: str | Path | None = None):
        self.config_path = Path(config_path) if config_path else None
        self._config: WordGraphConfig | None = None

    @classmethod
    def from_yaml(cls, path: str | Path) -> ConfigManager:
        """YAMLファイルから読み込み"""
        manager = cls(path)
        manager.load()
        return manager

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ConfigManager:
        """辞書から作成"""
        manager = cls()
        manager._config = cls._parse_config(config_dict)
        return manager

    @classmethod
    def from_config(cls, config: WordGraphConfig) -> ConfigManager:
        """WordGraphConfigから作成"""
        manager = cls()
        manager._config = config
        return manager

    def load(self) -> WordGraphConfig:
        """設定を読み込み（ファイルがなければデフォルト）"""
        if not self.config_path or not self.config_path.exists():
            self._config = WordGraphConfig()
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in config file: {self.config_path}",
                cause=e,
                component="config",
                operation="load",
                path=str(self.config_path),
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file must contain a mapping: {self.config_path}",
                component="config",
                operation="load",
                path=str(self.config_path),
            )

        self._config = self._parse_config(data)
        return self._config

    def save(self, path: str | Path | None = None) -> None:
        """設定を保存"""
        if self._config is None:
            return

        save_path = Path(path) if path else self.config_path
        if save_path is None:
            raise ValueError("No path specified for saving config")

        save_path.parent.mkdir(parents=True, exist_ok=True)

        data = self._config_to_dict(self._config)
        with open(save_path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)

    @staticmethod
    def _parse_config(data: dict[str, Any]) -> WordGraphConfig:
        """設定をパース"""
        max_walk_steps = data.get("max_walk_steps", DEFAULT_MAX_STEPS)
        if max_walk_steps is not None:
            if isinstance(max_walk_steps, bool) or not isinstance(max_walk_steps, int):
                raise ConfigurationError(
                    f"max_walk_steps must be an integer: {max_walk_steps!r}",
                    component="config",
                    operation="parse",
                )
            if max_walk_steps < 0:
                raise ConfigurationError(
                    f"max_walk_steps must be >= 0: {max_walk_steps}",
                    component="config",
                    operation="parse",
                )

        stop_on_repeated_edge = data.get("stop_on_repeated_edge", True)
        if not isinstance(stop_on_repeated_edge, bool):
            raise ConfigurationError(
                f"stop_on_repeated_edge must be true or false: {stop_on_repeated_edge!r}",
                component="config",
                operation="parse",
            )
        if max_walk_steps is None and not stop_on_repeated_edge:
            raise ConfigurationError(
                "Random walk needs max_walk_steps or stop_on_repeated_edge",
                component="config",
                operation="parse",
            )

        seed = data.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise ConfigurationError(
                f"seed must be an integer: {seed!r}",
                component="config",
                operation="parse",
            )

        log_level_raw = data.get("log_level", LogLevel.WARNING.value)
        try:
            log_level = (
                log_level_raw
                if isinstance(log_level_raw, LogLevel)
                else LogLevel(str(log_level_raw).lower())
            )
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid log_level: {log_level_raw!r}",
                cause=e,
                component="config",
                operation="parse",
            ) from e

        encoding = data.get("encoding", "utf-8")
        try:
            codecs.lookup(str(encoding))
        except LookupError as e:
            raise ConfigurationError(
                f"Unknown encoding: {encoding!r}",
                cause=e,
                component="config",
                operation="parse",
            ) from e

        walk_output_path = data.get("walk_output_path")

        return WordGraphConfig(
            encoding=str(encoding),
            max_walk_steps=max_walk_steps,
            stop_on_repeated_edge=stop_on_repeated_edge,
            walk_output_path=Path(walk_output_path) if walk_output_path else None,
            seed=seed,
            log_level=log_level,
        )

    @staticmethod
    def _config_to_dict(config: WordGraphConfig) -> dict[str, Any]:
        """WordGraphConfigを辞書に変換"""
        return {
            "encoding": config.encoding,
            "max_walk_steps": config.max_walk_steps,
            "stop_on_repeated_edge": config.stop_on_repeated_edge,
            "walk_output_path": (
                str(config.walk_output_path) if config.walk_output_path else None
            ),
            "seed": config.seed,
            "log_level": config.log_level.value,
        }

    @property
    def config(self) -> WordGraphConfig:
        """設定を取得"""
        if self._config is None:
            self._config = self.load()
        return self._config


def find_config_path(config_path: str | Path | None = None) -> Path | None:
    """設定ファイルを探索

    優先順: 引数、環境変数 WORDGRAPH_CONFIG、カレントディレクトリの既定パス
    """
    candidates: list[Path] = []
    if config_path:
        candidates.append(Path(config_path))
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidates.append(Path(env_path))
    candidates.extend(DEFAULT_CONFIG_PATHS)

    for path in candidates:
        if path.exists():
            return path
    return None


def load_config(path: str | Path | None = None) -> WordGraphConfig:
    """設定を読み込むヘルパー関数"""
    manager = ConfigManager(path)
    return manager.load()
