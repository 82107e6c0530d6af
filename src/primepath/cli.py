from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.table import Table

from primepath.core.builder import build_pyramid_graph
from primepath.core.config import Config
from primepath.core.exceptions import ConfigurationError, InputError, SourceUnavailableError
from primepath.core.graph import Graph
from primepath.core.resolver import PathResult, maximum_path_sum
from primepath.sources import prompt_pyramid_values, prompt_row_count, read_pyramid_file


app = typer.Typer(
    add_completion=False,
    help="Maximum sum of a top-to-bottom pyramid path that avoids prime numbers.",
)
console = Console()
logger = logging.getLogger(__name__)

EXIT_UNOPENABLE = 1
EXIT_MALFORMED = 2


def setup_logging(logging_config: Dict[str, Any], debug: bool = False, verbose: bool = False) -> None:
    """Setup logging configuration with optional debug control"""
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = logging.INFO
    else:
        log_level = getattr(logging, str(logging_config.get('level', 'WARNING')).upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format=logging_config.get('format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
        datefmt=logging_config.get('datefmt', '%H:%M:%S'),
    )
    logging.getLogger('primepath').setLevel(log_level)


def _path_table(graph: Graph, result: PathResult) -> Table:
    table = Table(title="Chosen Path", show_lines=True)
    table.add_column("Step", justify="right")
    table.add_column("Level", justify="right")
    table.add_column("Number", justify="right")
    table.add_column("Value", justify="right")

    step = 0
    for edge in result.edges:
        if graph.layout is None or edge.target == graph.layout.sink:
            continue
        step += 1
        row, col = graph.layout.cell_of(edge.target)
        table.add_row(str(step), str(row), str(col + 1), str(-edge.weight))
    return table


@app.command()
def main(
    filename: Optional[Path] = typer.Argument(None, help="Pyramid file; omit to enter values interactively"),
    policy: Optional[str] = typer.Option(
        None,
        "--policy",
        help="best-reachable-suffix (report deepest reachable cell) or strict-sink",
    ),
    show_path: bool = typer.Option(False, "--show-path", help="Print the cells on the chosen path"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML configuration file"),
    environment: str = typer.Option("default", "--environment", help="Reads config/<environment>.yaml when --config is not given"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress"),
    debug: bool = typer.Option(False, "--debug", help="Log every pruned cell"),
) -> None:
    """Find the maximum non-prime path sum through a number pyramid."""
    try:
        config = Config(str(config_path) if config_path else None, environment=environment)
        if policy is not None:
            config.set('resolver.policy', policy)
        resolution_policy = config.resolution_policy
    except ConfigurationError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_MALFORMED)

    setup_logging(config.logging_config, debug=debug, verbose=verbose)

    try:
        if filename is None:
            typer.echo("No filename supplied.")
            rows = prompt_row_count()
            values = prompt_pyramid_values(rows)
        else:
            typer.echo(f"Trying to open {filename}...")
            rows, values = read_pyramid_file(filename)
        graph = build_pyramid_graph(rows, values)
    except SourceUnavailableError as exc:
        logger.debug(str(exc))
        typer.echo("ERROR: Can not open input file.", err=True)
        raise typer.Exit(code=EXIT_UNOPENABLE)
    except InputError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_MALFORMED)

    result = maximum_path_sum(graph, resolution_policy)
    if result is None:
        typer.echo("Maximum sum does not exist.")
        return

    typer.echo(f"Maximum Sum: {result.total}")
    if show_path:
        console.print(_path_table(graph, result))


if __name__ == "__main__":
    app()
