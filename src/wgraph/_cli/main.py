import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from wgraph._codec import DEFAULT_ARROW, deserialize, serialize
from wgraph._graph import WeightedGraph, path_weight, shortest_path, topological_order
from wgraph._types import WeightSystem, vertex_parser, weight_system

from .config import ConfigError, get_config
from .graph_render import render_graph_table, render_vertex_sequence

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

GraphFile = Annotated[Path, typer.Argument(help="Graph text file, or '-' to read from stdin")]
ArrowOption = Annotated[str | None, typer.Option("--arrow", help="Separator between edges on one line")]
WeightsOption = Annotated[str | None, typer.Option("--weights", help="Weight type: float, int or decimal")]
VerticesOption = Annotated[str | None, typer.Option("--vertices", help="Vertex type: str or int")]
AutoDeclareOption = Annotated[
    bool | None,
    typer.Option(
        "--auto-declare/--no-auto-declare",
        help="Declare every edge destination as a vertex",
    ),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Weighted graph toolkit CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


@dataclass(frozen=True, slots=True)
class _LoadedGraph:
    graph: WeightedGraph[Any, Any]
    weights: WeightSystem[Any]
    parse_vertex: Any
    arrow: str


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]✗ {escape(message)}[/red]")
    return typer.Exit(code=1)


def _load_graph(
    file: Path,
    *,
    arrow: str | None,
    weights: str | None,
    vertices: str | None,
    auto_declare: bool | None,
) -> _LoadedGraph:
    """Read a graph file, with CLI options taking precedence over [tool.wgraph]."""
    try:
        config = get_config()
    except ConfigError as e:
        raise _fail(str(e)) from e

    try:
        system = weight_system(weights or config.weights)
        parse_vertex = vertex_parser(vertices or config.vertices)
    except ValueError as e:
        raise _fail(str(e)) from e

    resolved_arrow = arrow if arrow is not None else config.arrow
    resolved_auto_declare = auto_declare if auto_declare is not None else config.auto_declare_destinations

    if str(file) == "-":
        text = sys.stdin.read()
    else:
        try:
            text = file.read_text(encoding="utf-8")
        except OSError as e:
            raise _fail(f"Cannot read {file}: {e.strerror or e}") from e
    logger.debug(f"Read {len(text)} characters from {file}")

    result = deserialize(
        text,
        parse_vertex=parse_vertex,
        parse_weight=system.parse,
        arrow=resolved_arrow,
        auto_declare_destinations=resolved_auto_declare,
    )
    if not result.ok:
        raise _fail(result.error or "Malformed graph")
    logger.debug(f"Loaded {result.graph!r} (stopped: {result.state})")

    return _LoadedGraph(graph=result.graph, weights=system, parse_vertex=parse_vertex, arrow=resolved_arrow)


@app.command()
def show(
    file: GraphFile,
    *,
    arrow: ArrowOption = None,
    weights: WeightsOption = None,
    vertices: VerticesOption = None,
    auto_declare: AutoDeclareOption = None,
) -> None:
    """List the vertices and edges of a graph."""
    loaded = _load_graph(file, arrow=arrow, weights=weights, vertices=vertices, auto_declare=auto_declare)
    render_graph_table(loaded.graph, out_console, format_weight=loaded.weights.format)


@app.command()
def path(
    file: GraphFile,
    source: Annotated[str, typer.Argument(help="Start vertex")],
    destination: Annotated[str, typer.Argument(help="End vertex")],
    *,
    arrow: ArrowOption = None,
    weights: WeightsOption = None,
    vertices: VerticesOption = None,
    auto_declare: AutoDeclareOption = None,
) -> None:
    """Find the least-weight path between two vertices."""
    loaded = _load_graph(file, arrow=arrow, weights=weights, vertices=vertices, auto_declare=auto_declare)

    try:
        start = loaded.parse_vertex(source)
        end = loaded.parse_vertex(destination)
    except ValueError as e:
        raise _fail(f"Invalid vertex: {e}") from e

    route = shortest_path(loaded.graph, start, end, weights=loaded.weights)
    if not route:
        raise _fail(f"No path from {source} to {destination}")

    total = path_weight(loaded.graph, route, weights=loaded.weights)
    render_vertex_sequence(route, out_console)
    err_console.print(f"[cyan]Total weight:[/cyan] {escape(loaded.weights.format(total))}")


@app.command()
def order(
    file: GraphFile,
    *,
    arrow: ArrowOption = None,
    weights: WeightsOption = None,
    vertices: VerticesOption = None,
    auto_declare: AutoDeclareOption = None,
) -> None:
    """Print the vertices in topological order."""
    loaded = _load_graph(file, arrow=arrow, weights=weights, vertices=vertices, auto_declare=auto_declare)

    ordering = topological_order(loaded.graph)
    if not ordering:
        if len(loaded.graph):
            raise _fail("Graph contains a cycle; no topological order exists")
        err_console.print("[dim]Graph has no vertices[/dim]")
        return

    render_vertex_sequence(ordering, out_console, separator=", ")


@app.command(name="format")
def format_(
    file: GraphFile,
    *,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Write to this file instead of stdout"),
    ] = None,
    output_arrow: Annotated[
        str | None,
        typer.Option("--output-arrow", help="Separator to write between edges (defaults to the input one)"),
    ] = None,
    arrow: ArrowOption = None,
    weights: WeightsOption = None,
    vertices: VerticesOption = None,
    auto_declare: AutoDeclareOption = None,
) -> None:
    """Re-serialize a graph in canonical form."""
    loaded = _load_graph(file, arrow=arrow, weights=weights, vertices=vertices, auto_declare=auto_declare)

    text = serialize(
        loaded.graph,
        arrow=output_arrow if output_arrow is not None else loaded.arrow or DEFAULT_ARROW,
        format_weight=loaded.weights.format,
    )

    if output is None:
        out_console.print(text, markup=False, highlight=False, soft_wrap=True)
        return

    output.write_text(text + "\n", encoding="utf-8")
    err_console.print(f"[green]✓ Wrote {len(loaded.graph)} vertices to {escape(str(output))}[/green]")


if __name__ == "__main__":
    app()
