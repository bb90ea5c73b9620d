# WordGraph CLI - Main Application
"""
WordGraph CLI (Command Line Interface)
メインアプリケーション構造
"""

from dataclasses import replace
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from wordgraph.errors import ConfigurationError, EmptyInputError, InputError
from wordgraph.observability import LogLevel, configure_observability

# === アプリケーション初期化 ===

app = typer.Typer(
    name="wordgraph",
    help="WordGraph - word adjacency graph lab",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


# === 出力フォーマット ===

class OutputFormat(str, Enum):
    """出力フォーマット"""
    text = "text"
    json = "json"


# === ユーティリティ関数 ===

def get_lab(
    config_path: Optional[Path] = None,
    verbose: bool = False,
    **overrides: Any,
):
    """WordGraphLabインスタンスを取得

    Args:
        config_path: 設定ファイルパス（Noneの場合は探索）
        verbose: DEBUGログを出力するか
        overrides: 設定の上書き（None の値は無視）

    Returns:
        WordGraphLab: 初期化済みインスタンス

    Raises:
        ConfigurationError: 指定された設定ファイルがない、または不正な場合
    """
    from wordgraph.api import ConfigManager, WordGraphLab, find_config_path

    if config_path is not None and not config_path.exists():
        raise ConfigurationError(
            f"Config file not found: {config_path}",
            component="cli",
            path=str(config_path),
        )

    config = ConfigManager(find_config_path(config_path)).load()
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        config = replace(config, **overrides)

    level = LogLevel.DEBUG if verbose else config.log_level
    configure_observability({"log_level": level})

    return WordGraphLab(config)


def open_lab(
    input_file: Path,
    config_path: Optional[Path] = None,
    verbose: bool = False,
    **overrides: Any,
):
    """入力ファイルからグラフを構築済みのWordGraphLabを取得

    読めないファイルは終了コード1で中断し、単語対のないファイルは
    警告を出して空グラフで続行する。
    """
    try:
        lab = get_lab(config_path, verbose, **overrides)
    except ConfigurationError as e:
        print_error(e.message)
        raise typer.Exit(1)

    try:
        lab.load(input_file)
    except EmptyInputError:
        print_warning(f"No word pairs found in {input_file}; the graph is empty")
    except InputError as e:
        print_error(e.message)
        raise typer.Exit(1)

    return lab


def print_error(message: str):
    """エラーメッセージを表示"""
    console.print(f"[red]✗ Error:[/red] {message}")


def print_success(message: str):
    """成功メッセージを表示"""
    console.print(f"[green]✓[/green] {message}")


def print_warning(message: str):
    """警告メッセージを表示"""
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_plain(message: str):
    """結果の文をそのまま表示（マークアップ・折り返しなし）"""
    console.print(message, markup=False, highlight=False, soft_wrap=True)


# === バージョンコマンド ===

@app.command()
def version():
    """Show version information"""
    from wordgraph import __version__

    console.print(Panel.fit(
        f"[bold cyan]WordGraph[/bold cyan] v{__version__}\n"
        "[dim]Word adjacency graph lab[/dim]",
        border_style="cyan"
    ))


# === サブコマンドのアタッチ ===

def attach_commands():
    """コマンドをアタッチ"""
    from wordgraph.cli.commands import (
        config_app,
        graph_bridge,
        graph_generate,
        graph_path,
        graph_show,
        graph_walk,
    )
    from wordgraph.cli.shell import run_shell

    app.command("show")(graph_show)
    app.command("bridge")(graph_bridge)
    app.command("generate")(graph_generate)
    app.command("path")(graph_path)
    app.command("walk")(graph_walk)
    app.command("shell")(run_shell)
    app.add_typer(config_app, name="config")


attach_commands()
