# WordGraph CLI - Interactive Shell
"""
WordGraph CLI - メニュー形式の対話モード

``wordgraph-lab FILE`` で起動し、1つのグラフに対してクエリを繰り返す。
"""

from pathlib import Path
from typing import Optional

import typer

from wordgraph.cli.main import console, open_lab, print_error, print_plain
from wordgraph.cli.render import (
    build_graph_table,
    describe_stop_reason,
    format_bridge_result,
    format_path_result,
    format_path_tree,
    format_walk_result,
)
from wordgraph.errors import OutputError

MENU = """Choose an option:
1. Display graph
2. Query bridge words
3. Generate new text
4. Calculate shortest path
5. Random walk
6. Exit"""


class _EndOfInput(Exception):
    """標準入力の終端"""


def _ask(prompt: str) -> str:
    try:
        return console.input(prompt).strip()
    except EOFError as e:
        raise _EndOfInput() from e


def _print_walk(result) -> None:
    print_plain(format_walk_result(result))
    reason = describe_stop_reason(result)
    if reason:
        console.print(f"[dim]{reason}[/dim]")


def run_menu(lab) -> None:
    """メニューループ（6 または入力終端で終了）"""
    while True:
        console.print(MENU, markup=False, highlight=False)
        try:
            choice = _ask("> ")

            if choice == "1":
                adjacency = lab.display()
                if adjacency:
                    console.print(build_graph_table(adjacency))
                else:
                    print_plain("The graph is empty!")

            elif choice == "2":
                word1 = _ask("Enter first word: ")
                word2 = _ask("Enter second word: ")
                print_plain(format_bridge_result(lab.query_bridge_words(word1, word2)))

            elif choice == "3":
                text = _ask("Enter new text: ")
                print_plain(lab.generate_new_text(text))

            elif choice == "4":
                start = _ask("Enter start word: ")
                end = _ask("Enter end word (leave empty for all words): ")
                if end:
                    print_plain(format_path_result(lab.calc_shortest_path(start, end)))
                else:
                    print_plain(format_path_tree(lab.calc_shortest_paths_from(start)))

            elif choice == "5":
                try:
                    _print_walk(lab.random_walk())
                except OutputError as e:
                    _print_walk(e.walk)
                    print_error(e.message)

            elif choice == "6":
                return

            else:
                print_plain("Invalid option. Please try again.")

        except _EndOfInput:
            return


def run_shell(
    input_file: Path = typer.Argument(..., help="Input text file"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file path"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Start the interactive menu for a text file"""
    lab = open_lab(input_file, config, verbose)
    status = lab.get_status()
    console.print(
        f"[dim]Loaded {input_file}: {status.node_count} words, "
        f"{status.edge_count} edges[/dim]"
    )
    run_menu(lab)


shell_app = typer.Typer(
    name="wordgraph-lab",
    help="Interactive word graph lab",
    add_completion=False,
)
shell_app.command()(run_shell)


def main():
    """``wordgraph-lab`` entry point"""
    shell_app()


if __name__ == "__main__":
    main()
