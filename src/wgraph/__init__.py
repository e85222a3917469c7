"""Directed weighted graphs with shortest paths, topological order and a text format."""

__all__ = [
    "DECIMAL_WEIGHTS",
    "DEFAULT_ARROW",
    "FLOAT_WEIGHTS",
    "INT_WEIGHTS",
    "IndexedMinHeap",
    "ReadResult",
    "ShortestPaths",
    "StreamState",
    "VertexNotFoundError",
    "Weight",
    "WeightSystem",
    "WeightedGraph",
    "deserialize",
    "path_weight",
    "read_graph",
    "serialize",
    "shortest_path",
    "shortest_paths",
    "topological_order",
    "vertex_parser",
    "weight_system",
    "weight_system_for",
    "write_graph",
]

from ._codec import DEFAULT_ARROW, ReadResult, StreamState, deserialize, read_graph, serialize, write_graph
from ._graph import (
    IndexedMinHeap,
    ShortestPaths,
    VertexNotFoundError,
    WeightedGraph,
    path_weight,
    shortest_path,
    shortest_paths,
    topological_order,
)
from ._types import (
    DECIMAL_WEIGHTS,
    FLOAT_WEIGHTS,
    INT_WEIGHTS,
    Weight,
    WeightSystem,
    vertex_parser,
    weight_system,
    weight_system_for,
)
