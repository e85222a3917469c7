"""Tests for the WeightedGraph store."""

import pytest

from wgraph import VertexNotFoundError, WeightedGraph


@pytest.fixture
def triangle() -> WeightedGraph[str, float]:
    """A -> B (1), B -> C (2), A -> C (5), with C declared."""
    return WeightedGraph.from_edges([("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 5.0)], vertices=["C"])


class TestWeightedGraphConstruction:
    """Tests for building a graph."""

    def test_empty_graph(self) -> None:
        graph: WeightedGraph[str, float] = WeightedGraph()
        assert len(graph) == 0
        assert list(graph) == []
        assert graph.edge_count() == 0

    def test_add_vertex(self) -> None:
        graph: WeightedGraph[str, float] = WeightedGraph()
        graph.add_vertex("A")
        assert "A" in graph
        assert graph.neighbors("A") == []

    def test_add_vertex_is_idempotent(self) -> None:
        graph: WeightedGraph[str, float] = WeightedGraph()
        graph.add_edge("A", "B", 1.0)
        graph.add_vertex("A")
        assert len(graph) == 1
        assert graph.neighbors("A") == [("B", 1.0)]

    def test_add_edge_declares_source(self) -> None:
        graph: WeightedGraph[str, float] = WeightedGraph()
        graph.add_edge("A", "B", 1.0)
        assert "A" in graph

    def test_add_edge_does_not_declare_destination_by_default(self) -> None:
        graph: WeightedGraph[str, float] = WeightedGraph()
        graph.add_edge("A", "B", 1.0)
        assert "B" not in graph
        assert list(graph) == ["A"]
        assert graph.dangling_destinations() == ["B"]

    def test_add_edge_auto_declares_destination(self) -> None:
        graph: WeightedGraph[str, float] = WeightedGraph(auto_declare_destinations=True)
        graph.add_edge("A", "B", 1.0)
        assert list(graph) == ["A", "B"]
        assert graph.neighbors("B") == []
        assert graph.dangling_destinations() == []

    def test_add_edge_overwrites_weight_in_place(self) -> None:
        graph: WeightedGraph[str, float] = WeightedGraph()
        graph.add_edge("A", "B", 1.0)
        graph.add_edge("A", "C", 2.0)
        graph.add_edge("A", "B", 7.0)
        assert graph.neighbors("A") == [("B", 7.0), ("C", 2.0)]
        assert graph.edge_count() == 2

    def test_vertices_keep_insertion_order(self) -> None:
        graph: WeightedGraph[str, float] = WeightedGraph()
        for vertex in ["z", "a", "m"]:
            graph.add_vertex(vertex)
        assert graph.vertices() == ["z", "a", "m"]
        assert list(graph) == ["z", "a", "m"]

    def test_from_edges_declares_vertices_first(self) -> None:
        graph = WeightedGraph.from_edges([("a", "b", 1)], vertices=["b"])
        assert list(graph) == ["b", "a"]

    def test_works_with_integer_vertices(self) -> None:
        graph = WeightedGraph.from_edges([(1, 2, 3), (2, 3, 4)])
        assert graph.neighbors(1) == [(2, 3)]

    def test_works_with_tuple_vertices(self) -> None:
        graph = WeightedGraph.from_edges([(("a", 1), ("b", 2), 0.5)])
        assert graph.neighbors(("a", 1)) == [(("b", 2), 0.5)]


class TestWeightedGraphQueries:
    """Tests for query methods."""

    def test_neighbors_in_insertion_order(self, triangle: WeightedGraph[str, float]) -> None:
        assert triangle.neighbors("A") == [("B", 1.0), ("C", 5.0)]

    def test_neighbors_returns_copy(self, triangle: WeightedGraph[str, float]) -> None:
        neighbors = triangle.neighbors("A")
        neighbors.clear()
        assert triangle.neighbors("A") == [("B", 1.0), ("C", 5.0)]

    def test_neighbors_of_undeclared_vertex_raises(self, triangle: WeightedGraph[str, float]) -> None:
        with pytest.raises(VertexNotFoundError) as exc_info:
            triangle.neighbors("Z")
        assert exc_info.value.vertex == "Z"

    def test_vertex_not_found_is_lookup_error(self, triangle: WeightedGraph[str, float]) -> None:
        with pytest.raises(LookupError):
            triangle.neighbors("Z")

    def test_has_edge(self, triangle: WeightedGraph[str, float]) -> None:
        assert triangle.has_edge("A", "B")
        assert not triangle.has_edge("B", "A")
        assert not triangle.has_edge("Z", "A")

    def test_weight(self, triangle: WeightedGraph[str, float]) -> None:
        assert triangle.weight("B", "C") == 2.0

    def test_weight_missing_edge_raises(self, triangle: WeightedGraph[str, float]) -> None:
        with pytest.raises(KeyError, match="No edge"):
            triangle.weight("C", "A")

    def test_edges(self, triangle: WeightedGraph[str, float]) -> None:
        # C is declared first but has no outgoing edges
        assert list(triangle.edges()) == [
            ("A", "B", 1.0),
            ("A", "C", 5.0),
            ("B", "C", 2.0),
        ]

    def test_len_and_edge_count(self, triangle: WeightedGraph[str, float]) -> None:
        assert len(triangle) == 3
        assert triangle.edge_count() == 3

    def test_has_cycle(self) -> None:
        assert WeightedGraph.from_edges([("a", "b", 1), ("b", "a", 1)]).has_cycle()
        assert not WeightedGraph.from_edges([("a", "b", 1)], vertices=["b"]).has_cycle()

    def test_empty_graph_has_no_cycle(self) -> None:
        assert not WeightedGraph().has_cycle()

    def test_equality(self, triangle: WeightedGraph[str, float]) -> None:
        same = WeightedGraph.from_edges([("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 5.0)], vertices=["C"])
        assert triangle == same

    def test_equality_is_order_sensitive(self) -> None:
        first = WeightedGraph.from_edges([("A", "B", 1), ("A", "C", 2)])
        second = WeightedGraph.from_edges([("A", "C", 2), ("A", "B", 1)])
        assert first != second


class TestWeightedGraphRemoval:
    """Tests for removing edges and vertices."""

    def test_remove_edge(self, triangle: WeightedGraph[str, float]) -> None:
        triangle.remove_edge("A", "C")
        assert triangle.neighbors("A") == [("B", 1.0)]

    def test_remove_missing_edge_raises(self, triangle: WeightedGraph[str, float]) -> None:
        with pytest.raises(KeyError):
            triangle.remove_edge("C", "A")

    def test_remove_vertex_drops_incoming_edges(self, triangle: WeightedGraph[str, float]) -> None:
        triangle.remove_vertex("C")
        assert list(triangle) == ["A", "B"]
        assert triangle.neighbors("A") == [("B", 1.0)]
        assert triangle.neighbors("B") == []

    def test_remove_undeclared_vertex_raises(self, triangle: WeightedGraph[str, float]) -> None:
        with pytest.raises(VertexNotFoundError):
            triangle.remove_vertex("Z")
