"""Directed weighted graph store."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Any

from wgraph._types import Weight

from ._algorithms import topological_order

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class VertexNotFoundError(LookupError):
    """Raised when an operation needs a vertex that was never declared."""

    def __init__(self, vertex: object) -> None:
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} is not in the graph")


class WeightedGraph[V: Hashable, W: Weight]:
    """A directed graph with weighted edges and ordered adjacency lists.

    Declared vertices are kept in insertion order, and so is each vertex's
    adjacency list. Both orders are observable: they decide tie-breaking in
    the algorithms and the line/edge order of the text format.

    A destination passed to ``add_edge`` becomes a declared vertex only when
    the graph is built with ``auto_declare_destinations=True``. Otherwise it
    lives solely inside its source's adjacency list until declared explicitly.

    Attributes:
        auto_declare_destinations: Whether ``add_edge`` also declares the destination.

    """

    __slots__ = ("_adjacency", "auto_declare_destinations")

    def __init__(self, *, auto_declare_destinations: bool = False) -> None:
        # Each adjacency list is a dict so overwriting a weight keeps its position.
        self._adjacency: dict[V, dict[V, W]] = {}
        self.auto_declare_destinations = auto_declare_destinations

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[V, V, W]],
        *,
        vertices: Iterable[V] = (),
        auto_declare_destinations: bool = False,
    ) -> WeightedGraph[V, W]:
        """Build a graph from ``(source, destination, weight)`` triples.

        Args:
            edges: Edges to add, in order.
            vertices: Vertices to declare before any edge is added.
            auto_declare_destinations: Passed to the new graph.

        Returns:
            A new WeightedGraph instance.

        Example:
            >>> graph = WeightedGraph.from_edges([("a", "b", 1.0)], vertices=["b"])
            >>> list(graph)
            ['b', 'a']

        """
        graph: WeightedGraph[V, W] = cls(auto_declare_destinations=auto_declare_destinations)
        for vertex in vertices:
            graph.add_vertex(vertex)
        for source, destination, weight in edges:
            graph.add_edge(source, destination, weight)
        return graph

    def add_vertex(self, vertex: V) -> None:
        """Declare a vertex. Existing vertices keep their adjacency list."""
        if vertex not in self._adjacency:
            self._adjacency[vertex] = {}

    def add_edge(self, source: V, destination: V, weight: W) -> None:
        """Add an edge, or overwrite the weight of an existing one in place.

        The source is declared if needed.
        """
        self.add_vertex(source)
        self._adjacency[source][destination] = weight
        if self.auto_declare_destinations:
            self.add_vertex(destination)

    def neighbors(self, vertex: V) -> list[tuple[V, W]]:
        """Get the outgoing edges of a vertex as ``(destination, weight)`` pairs.

        Raises:
            VertexNotFoundError: If the vertex is not declared.

        """
        return list(self._adjacent(vertex).items())

    def has_edge(self, source: V, destination: V) -> bool:
        return destination in self._adjacency.get(source, {})

    def weight(self, source: V, destination: V) -> W:
        """Get the weight of an edge.

        Raises:
            VertexNotFoundError: If the source is not declared.
            KeyError: If the source has no edge to the destination.

        """
        adjacent = self._adjacent(source)
        try:
            return adjacent[destination]
        except KeyError:
            msg = f"No edge from {source!r} to {destination!r}"
            raise KeyError(msg) from None

    def vertices(self) -> list[V]:
        """All declared vertices in declaration order."""
        return list(self._adjacency)

    def edges(self) -> Iterator[tuple[V, V, W]]:
        """Iterate ``(source, destination, weight)`` in store order."""
        for source, adjacent in self._adjacency.items():
            for destination, weight in adjacent.items():
                yield source, destination, weight

    def edge_count(self) -> int:
        return sum(len(adjacent) for adjacent in self._adjacency.values())

    def remove_edge(self, source: V, destination: V) -> None:
        """Remove an edge.

        Raises:
            VertexNotFoundError: If the source is not declared.
            KeyError: If the source has no edge to the destination.

        """
        adjacent = self._adjacent(source)
        if destination not in adjacent:
            msg = f"No edge from {source!r} to {destination!r}"
            raise KeyError(msg)
        del adjacent[destination]

    def remove_vertex(self, vertex: V) -> None:
        """Remove a vertex together with every edge into or out of it.

        Raises:
            VertexNotFoundError: If the vertex is not declared.

        """
        if vertex not in self._adjacency:
            raise VertexNotFoundError(vertex)
        del self._adjacency[vertex]
        for adjacent in self._adjacency.values():
            adjacent.pop(vertex, None)

    def dangling_destinations(self) -> list[V]:
        """Destinations that appear in some adjacency list but are not declared.

        Returns:
            Undeclared destinations in first-seen order.

        """
        seen: dict[V, None] = {}
        for _, destination, _ in self.edges():
            if destination not in self._adjacency:
                seen.setdefault(destination)
        return list(seen)

    def has_cycle(self) -> bool:
        """Check if the declared vertices contain a cycle."""
        return bool(self._adjacency) and not topological_order(self)

    def _adjacent(self, vertex: V) -> dict[V, W]:
        try:
            return self._adjacency[vertex]
        except KeyError:
            raise VertexNotFoundError(vertex) from None

    def __iter__(self) -> Iterator[V]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        """Return the number of declared vertices."""
        return len(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedGraph):
            return NotImplemented
        other_graph: WeightedGraph[Any, Any] = other
        if list(self._adjacency) != list(other_graph._adjacency):
            return False
        return all(
            list(adjacent.items()) == list(other_graph._adjacency[vertex].items())
            for vertex, adjacent in self._adjacency.items()
        )

    def __repr__(self) -> str:
        return f"WeightedGraph(vertices={len(self)}, edges={self.edge_count()})"
