"""Graph algorithms over a weighted graph store."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from wgraph._types import FLOAT_WEIGHTS, Weight, WeightSystem, weight_system_for

from ._heap import IndexedMinHeap

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._weighted_graph import WeightedGraph

logger = logging.getLogger(__name__)


def topological_order[V](graph: WeightedGraph[V, Any]) -> list[V]:
    """Order the declared vertices so every edge points forward (Kahn's algorithm).

    Only edges between declared vertices count. Vertices that become ready at
    the same time are emitted in first-in-first-out order, which starts from
    declaration order, so the result is deterministic for a given graph.

    Args:
        graph: The graph to order.

    Returns:
        Declared vertices in topological order, or an empty list if the
        declared vertices contain a cycle.

    Example:
        >>> from wgraph import WeightedGraph
        >>> graph = WeightedGraph.from_edges([("a", "b", 1), ("b", "c", 1)], vertices=["c"])
        >>> topological_order(graph)
        ['a', 'b', 'c']

    """
    # Calculate in-degree for each declared vertex
    indegree: dict[V, int] = dict.fromkeys(graph, 0)
    for _, destination, _ in graph.edges():
        if destination in indegree:
            indegree[destination] += 1

    # Start with vertices that have no predecessors (in-degree 0)
    queue = deque(vertex for vertex, degree in indegree.items() if degree == 0)
    order: list[V] = []

    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for destination, _ in graph.neighbors(vertex):
            if destination not in indegree:
                continue
            indegree[destination] -= 1
            if indegree[destination] == 0:
                queue.append(destination)

    if len(order) != len(indegree):
        logger.debug(f"Cycle detected among {len(indegree) - len(order)} vertices")
        return []

    return order


@dataclass(frozen=True, slots=True)
class ShortestPaths[V, W: Weight]:
    """Distance and predecessor tables from one single-source search.

    Attributes:
        source: The vertex the search started from.
        weights: Weight system the search used.
        distances: Best known distance per vertex. Vertices never reached are absent.
        predecessors: Previous vertex on the best known path. The source has no entry.

    """

    source: V
    weights: WeightSystem[W]
    distances: dict[V, W] = field(default_factory=dict)
    predecessors: dict[V, V] = field(default_factory=dict)

    def distance_to(self, vertex: V) -> W:
        """Get the shortest distance to a vertex, or infinity if it is unreachable."""
        return self.distances.get(vertex, self.weights.infinity)

    def reachable(self, vertex: V) -> bool:
        return vertex == self.source or vertex in self.predecessors

    def path_to(self, destination: V) -> list[V]:
        """Reconstruct the path from the source to a destination.

        Returns:
            Vertices from source to destination inclusive, ``[source]`` when the
            destination is the source, or an empty list if no path was found.

        """
        if destination == self.source:
            return [self.source]

        path: list[V] = []
        current = destination
        # A predecessor chain visits each vertex at most once
        for _ in range(len(self.predecessors)):
            if current not in self.predecessors:
                break
            path.append(current)
            current = self.predecessors[current]
            if current == self.source:
                path.append(self.source)
                path.reverse()
                return path
        return []


def _resolve_weights[W: Weight](graph: WeightedGraph[Any, W], weights: WeightSystem[W] | None) -> WeightSystem[W]:
    """Pick the weight system for a graph, or check that the given one can add its weights.

    Without an explicit system, the first edge weight decides. A graph without
    edges falls back to float weights.

    Raises:
        TypeError: If the weight system cannot add the graph's edge weights.

    """
    sample = next((weight for _, _, weight in graph.edges()), None)
    if weights is None:
        return FLOAT_WEIGHTS if sample is None else weight_system_for(sample)
    if sample is not None:
        try:
            _ = weights.zero + sample
        except TypeError:
            msg = f"Weight system '{weights.name}' cannot add edge weights of type {type(sample).__name__}"
            raise TypeError(msg) from None
    return weights


def shortest_paths[V, W: Weight](
    graph: WeightedGraph[V, W],
    source: V,
    *,
    weights: WeightSystem[W] | None = None,
) -> ShortestPaths[V, W]:
    """Run Dijkstra's algorithm from one source.

    Every declared vertex is queued up front, keyed by its tentative distance
    and then by declaration order. Relaxing an edge lowers the destination's
    key in place. Edge weights must be non-negative; this is not checked.

    Destinations that are not declared vertices still receive distance and
    predecessor entries, but they are never expanded.

    Args:
        graph: The graph to search.
        source: Start vertex. It does not need to be declared.
        weights: Weight system providing zero and infinity. Inferred from the
            edge weights when omitted.

    Returns:
        The distance and predecessor tables of the search.

    Raises:
        TypeError: If the weight system cannot add the graph's edge weights.

    """
    weights = _resolve_weights(graph, weights)
    distances: dict[V, W] = dict.fromkeys(graph, weights.infinity)
    distances[source] = weights.zero
    predecessors: dict[V, V] = {}
    finalized: set[V] = set()

    heap: IndexedMinHeap[V, tuple[W, int]] = IndexedMinHeap()
    rank: dict[V, int] = {}
    for index, vertex in enumerate(graph):
        rank[vertex] = index
        heap.push(vertex, (distances[vertex], index))

    while heap:
        u, (distance_u, _) = heap.pop()
        if weights.is_infinite(distance_u):
            logger.debug(f"Stopping early: {len(heap) + 1} vertices unreachable from {source!r}")
            break
        finalized.add(u)

        for v, w in graph.neighbors(u):
            if v in finalized:
                continue
            candidate = distance_u + w
            if candidate < distances.get(v, weights.infinity):
                distances[v] = candidate
                predecessors[v] = u
                if v in heap:
                    heap.decrease_key(v, (candidate, rank[v]))

    reached = {vertex: distance for vertex, distance in distances.items() if not weights.is_infinite(distance)}
    return ShortestPaths(source=source, weights=weights, distances=reached, predecessors=predecessors)


def shortest_path[V, W: Weight](
    graph: WeightedGraph[V, W],
    source: V,
    destination: V,
    *,
    weights: WeightSystem[W] | None = None,
) -> list[V]:
    """Find one least-weight path between two vertices.

    Args:
        graph: The graph to search.
        source: Start vertex.
        destination: End vertex.
        weights: Weight system providing zero and infinity. Inferred from the
            edge weights when omitted.

    Returns:
        Vertices from source to destination inclusive, ``[source]`` when both
        are equal (even if the vertex is not declared), or an empty list if
        no path exists.

    Example:
        >>> from wgraph import WeightedGraph
        >>> graph = WeightedGraph.from_edges([("a", "b", 1), ("b", "c", 2), ("a", "c", 5)])
        >>> shortest_path(graph, "a", "c")
        ['a', 'b', 'c']

    """
    if source == destination:
        return [source]
    return shortest_paths(graph, source, weights=weights).path_to(destination)


def path_weight[V, W: Weight](
    graph: WeightedGraph[V, W],
    path: Sequence[V],
    *,
    weights: WeightSystem[W] | None = None,
) -> W:
    """Sum the edge weights along a path.

    Raises:
        LookupError: If two consecutive vertices are not joined by an edge.
        TypeError: If the weight system cannot add the graph's edge weights.

    """
    weights = _resolve_weights(graph, weights)
    total = weights.zero
    for u, v in zip(path, path[1:], strict=False):
        total = total + graph.weight(u, v)
    return total
