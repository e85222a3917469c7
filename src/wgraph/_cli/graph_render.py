"""Rich rendering utilities for graph commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from wgraph._graph import WeightedGraph


def render_graph_table(
    graph: WeightedGraph[Any, Any],
    console: Console,
    *,
    format_weight: Callable[[Any], str] = str,
) -> None:
    """Render the vertices of a graph and their outgoing edges as a Rich table.

    Args:
        graph: Graph to render.
        console: Rich Console to output to.
        format_weight: Converts a weight to text.

    """
    if not len(graph):
        console.print("[dim]Graph has no vertices[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Vertex", style="bold")
    table.add_column("Edges")
    table.add_column("Out", justify="right")

    for vertex in graph:
        neighbors = graph.neighbors(vertex)
        edges = ", ".join(
            f"{escape(str(destination))} [dim]({escape(format_weight(weight))})[/dim]"
            for destination, weight in neighbors
        )
        table.add_row(escape(str(vertex)), edges or "[dim]-[/dim]", str(len(neighbors)))

    console.print(table)
    console.print(f"\n[dim]Total: {len(graph)} vertices, {graph.edge_count()} edges[/dim]")

    dangling = graph.dangling_destinations()
    if dangling:
        names = ", ".join(escape(str(vertex)) for vertex in dangling)
        console.print(f"[yellow]Undeclared destinations:[/yellow] {names}")


def render_vertex_sequence(vertices: list[Any], console: Console, *, separator: str = " → ") -> None:
    """Render a path or an ordering on one line."""
    console.print(separator.join(f"[bold]{escape(str(vertex))}[/bold]" for vertex in vertices))
