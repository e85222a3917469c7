"""Graph module providing the weighted graph store and its algorithms.

This module contains:
- WeightedGraph[V, W]: A directed graph with ordered, weighted adjacency lists
- IndexedMinHeap: A binary heap with decrease-key, used by Dijkstra's algorithm
- shortest_path / shortest_paths: Single-source shortest paths (Dijkstra)
- topological_order: Dependency ordering (Kahn's algorithm)
"""

from ._algorithms import ShortestPaths, path_weight, shortest_path, shortest_paths, topological_order
from ._heap import IndexedMinHeap
from ._weighted_graph import VertexNotFoundError, WeightedGraph

__all__ = [
    "IndexedMinHeap",
    "ShortestPaths",
    "VertexNotFoundError",
    "WeightedGraph",
    "path_weight",
    "shortest_path",
    "shortest_paths",
    "topological_order",
]
