# WordGraph CLI - Query Commands
"""
WordGraph CLI - グラフ表示とクエリのワンショットコマンド群
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from wordgraph.api import save_walk
from wordgraph.cli.main import (
    OutputFormat,
    open_lab,
    print_error,
    print_plain,
    print_success,
)
from wordgraph.cli.render import (
    build_graph_table,
    build_metrics_table,
    describe_stop_reason,
    format_bridge_result,
    format_path_result,
    format_path_tree,
    format_walk_result,
)
from wordgraph.errors import OutputError
from wordgraph.observability import get_metrics

console = Console()

INPUT_FILE_ARGUMENT = typer.Argument(..., help="Input text file")


def graph_show(
    input_file: Path = INPUT_FILE_ARGUMENT,
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file path"
    ),
    output: OutputFormat = typer.Option(
        OutputFormat.text, "--output", "-o", help="Output format"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging and show metrics"
    ),
):
    """Display the word graph"""
    lab = open_lab(input_file, config, verbose)
    adjacency = lab.display()
    status = lab.get_status()

    if output == OutputFormat.json:
        console.print_json(json.dumps({
            "status": status.to_dict(),
            "edges": [edge.to_dict() for edge in lab.graph.edges()],
        }))
        return

    if not adjacency:
        print_plain("The graph is empty!")
    else:
        console.print(build_graph_table(adjacency))
        console.print(
            f"[dim]{status.node_count} words, {status.edge_count} edges, "
            f"{status.token_count} tokens[/dim]"
        )

    if verbose:
        console.print(build_metrics_table(get_metrics().get_status()))


def graph_bridge(
    input_file: Path = INPUT_FILE_ARGUMENT,
    word1: str = typer.Argument(..., help="First word"),
    word2: str = typer.Argument(..., help="Second word"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file path"
    ),
    output: OutputFormat = typer.Option(
        OutputFormat.text, "--output", "-o", help="Output format"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Query the bridge words between two words"""
    lab = open_lab(input_file, config, verbose)
    result = lab.query_bridge_words(word1, word2)

    if output == OutputFormat.json:
        console.print_json(json.dumps(result.to_dict()))
    else:
        print_plain(format_bridge_result(result))


def graph_generate(
    input_file: Path = INPUT_FILE_ARGUMENT,
    text: str = typer.Argument(..., help="Text to extend with bridge words"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file path"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Generate new text by inserting bridge words"""
    lab = open_lab(input_file, config, verbose, seed=seed)
    print_plain(lab.generate_new_text(text))


def graph_path(
    input_file: Path = INPUT_FILE_ARGUMENT,
    start: str = typer.Argument(..., help="Start word"),
    end: Optional[str] = typer.Argument(
        None, help="End word (omit to list paths to every word)"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file path"
    ),
    output: OutputFormat = typer.Option(
        OutputFormat.text, "--output", "-o", help="Output format"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Calculate the shortest path between two words"""
    lab = open_lab(input_file, config, verbose)

    if end is None:
        tree = lab.calc_shortest_paths_from(start)
        if output == OutputFormat.json:
            console.print_json(json.dumps(tree.to_dict()))
        else:
            print_plain(format_path_tree(tree))
        return

    result = lab.calc_shortest_path(start, end)
    if output == OutputFormat.json:
        console.print_json(json.dumps(result.to_dict()))
    else:
        print_plain(format_path_result(result))


def graph_walk(
    input_file: Path = INPUT_FILE_ARGUMENT,
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file path"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    max_steps: Optional[int] = typer.Option(
        None, "--max-steps", min=0, help="Maximum number of steps"
    ),
    save: Optional[Path] = typer.Option(
        None, "--save", "-s", help="Write the walk to this file"
    ),
    output: OutputFormat = typer.Option(
        OutputFormat.text, "--output", "-o", help="Output format"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Perform a random walk over the graph"""
    lab = open_lab(input_file, config, verbose, seed=seed, max_walk_steps=max_steps)
    save_error: Optional[OutputError] = None
    try:
        result = lab.random_walk()
    except OutputError as e:
        # walk_output_path in the config could not be written
        result, save_error = e.walk, e

    if output == OutputFormat.json:
        console.print_json(json.dumps(result.to_dict()))
    else:
        print_plain(format_walk_result(result))
        reason = describe_stop_reason(result)
        if reason:
            console.print(f"[dim]{reason}[/dim]")

    if save is not None and result.words and save_error is None:
        try:
            save_walk(result, save)
        except OutputError as e:
            save_error = e
        else:
            if output == OutputFormat.text:
                print_success(f"Walk saved to {save}")

    if save_error is not None:
        print_error(save_error.message)
        raise typer.Exit(1)
