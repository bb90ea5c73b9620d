# WordGraph CLI Commands
"""
コマンドモジュールのエクスポート
"""

from wordgraph.cli.commands.query import (
    graph_bridge,
    graph_generate,
    graph_path,
    graph_show,
    graph_walk,
)
from wordgraph.cli.commands.config_cmd import config_app

__all__ = [
    "graph_show",
    "graph_bridge",
    "graph_generate",
    "graph_path",
    "graph_walk",
    "config_app",
]
