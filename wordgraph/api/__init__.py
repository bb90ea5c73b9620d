# WordGraph API
"""
wordgraph.api - Python API

単語グラフの構築とクエリをまとめたFacadeと設定管理。
"""

from wordgraph.api.base import LabStatus, WordGraphConfig
from wordgraph.api.config import ConfigManager, find_config_path, load_config
from wordgraph.api.lab import WordGraphLab, save_walk

__all__ = [
    "WordGraphConfig",
    "LabStatus",
    "ConfigManager",
    "find_config_path",
    "load_config",
    "WordGraphLab",
    "save_walk",
]
