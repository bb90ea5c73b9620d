# WordGraph CLI - Config Commands
"""
WordGraph CLI - config コマンド群
設定ファイルの生成・表示・検証
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.panel import Panel
from rich.table import Table

from wordgraph.cli.main import print_error, print_success, print_warning
from wordgraph.errors import ConfigurationError

console = Console()
config_app = typer.Typer(help="Configuration commands")


# デフォルト設定テンプレート
DEFAULT_CONFIG = """# WordGraph Configuration File

# ======================================
# Input
# ======================================

# Encoding of the input text file
encoding: utf-8

# ======================================
# Random Walk
# ======================================

# Maximum number of moves per walk (null = no limit,
# only allowed while stop_on_repeated_edge is true)
max_walk_steps: 1000

# Stop as soon as an edge is traversed for the second time
stop_on_repeated_edge: true

# Write every walk to this file (optional)
# walk_output_path: ./random_walk.txt

# Random seed for text generation and walks (null = random)
seed: null

# ======================================
# Logging
# ======================================

# debug, info, warning, error, critical
log_level: warning
"""


def _find_config(config: Optional[Path]) -> Optional[Path]:
    from wordgraph.api import find_config_path

    if config is not None:
        return config if config.exists() else None
    return find_config_path()


@config_app.command("init")
def config_init(
    output_path: Path = typer.Option(
        Path("./wordgraph.yaml"),
        "--output", "-o",
        help="Output path for config file",
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite existing file"
    ),
):
    """Initialize a new configuration file"""

    if output_path.exists() and not force:
        print_warning(f"Config file already exists: {output_path}")
        console.print("Use --force to overwrite")
        raise typer.Exit(1)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG)

        print_success(f"Configuration file created: {output_path}")
        console.print("\nEdit the file to customize your settings:")
        console.print(f"  [cyan]$EDITOR {output_path}[/cyan]")

    except OSError as e:
        print_error(f"Failed to create config file: {e}")
        raise typer.Exit(1)


@config_app.command("show")
def config_show(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file path"
    ),
):
    """Show current configuration"""

    config_path = _find_config(config)

    if config_path is None:
        print_warning("No configuration file found")
        console.print("\nCreate one with:")
        console.print("  [cyan]wordgraph config init[/cyan]")
        raise typer.Exit(1)

    try:
        with open(config_path, encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        print_error(f"Failed to read config file: {e}")
        raise typer.Exit(1)

    syntax = Syntax(content, "yaml", theme="monokai", line_numbers=True)
    console.print(Panel(
        syntax,
        title=str(config_path),
        border_style="cyan",
    ))


@config_app.command("validate")
def config_validate(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file path"
    ),
):
    """Validate configuration file"""
    from wordgraph.api import load_config

    config_path = _find_config(config)

    if config_path is None:
        print_error(
            f"Config file not found: {config}" if config else "No configuration file found"
        )
        raise typer.Exit(1)

    try:
        cfg = load_config(config_path)
    except ConfigurationError as e:
        print_error(f"Configuration error: {e.message}")
        raise typer.Exit(1)

    table = Table(title="Configuration Validation")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_column("Status")

    checks = [
        ("Encoding", cfg.encoding),
        ("Max Walk Steps", str(cfg.max_walk_steps)),
        ("Stop On Repeated Edge", str(cfg.stop_on_repeated_edge)),
        ("Walk Output Path", str(cfg.walk_output_path or "-")),
        ("Seed", str(cfg.seed)),
        ("Log Level", cfg.log_level.value),
    ]

    for name, value in checks:
        table.add_row(name, value, "[green]✓[/green]")

    console.print(table)
    print_success("Configuration is valid")
