"""
Unit tests for AdjacencyMatrixGraph.
"""

import pytest

from adjacency_matrix_graph import AdjacencyMatrixGraph
from errors import (
    EdgeNotFoundError,
    InvalidWeightError,
    NullInputError,
    VertexNotFoundError,
)
from paths import NO_SUCH_ROUTE, WeightedEdge


@pytest.fixture
def letters_graph() -> AdjacencyMatrixGraph:
    g = AdjacencyMatrixGraph()
    g.add_vertices(["a", "z", "s", "x", "d", "c", "f", "v"])

    g.add_edge("a", "s", 1)
    g.add_edge("a", "z", 2)
    g.add_edge("s", "x", 3)
    g.add_edge("x", "d", 1)
    g.add_edge("x", "c", 2)
    g.add_edge("x", "a", 3)
    g.add_edge("d", "f", 1)
    g.add_edge("d", "c", 2)
    g.add_edge("d", "s", 3)
    g.add_edge("c", "f", 1)
    g.add_edge("c", "v", 2)
    g.add_edge("c", "d", 3)
    g.add_edge("v", "f", 1)
    g.add_edge("f", "c", 2)
    return g


def test_vertices_and_edges_count(letters_graph):
    assert letters_graph.vertices_count == 8
    assert letters_graph.edges_count == 14
    assert len(list(letters_graph.edges())) == 14


def test_outgoing_and_incoming_edge_counts(letters_graph):
    outgoing = {"a": 2, "s": 1, "d": 3, "x": 3, "c": 3, "v": 1, "f": 1, "z": 0}
    incoming = {"a": 1, "s": 2, "d": 2, "x": 1, "c": 3, "v": 1, "f": 3, "z": 1}

    for vertex, count in outgoing.items():
        assert len(list(letters_graph.outgoing_edges(vertex))) == count, vertex
    for vertex, count in incoming.items():
        assert len(list(letters_graph.incoming_edges(vertex))) == count, vertex


def test_incoming_edges_carry_incoming_weight(letters_graph):
    """Incoming edges report the weight of the edge pointing at the vertex."""
    edges = list(letters_graph.incoming_edges("c"))
    assert edges == [
        WeightedEdge("x", "c", 2),
        WeightedEdge("d", "c", 2),
        WeightedEdge("f", "c", 2),
    ]
    assert list(letters_graph.incoming_edges("s")) == [
        WeightedEdge("a", "s", 1),
        WeightedEdge("d", "s", 3),
    ]


def test_edges_iterate_in_slot_order_and_restart(letters_graph):
    first = list(letters_graph.outgoing_edges("x"))
    second = list(letters_graph.outgoing_edges("x"))

    assert [e.destination for e in first] == ["a", "d", "c"]
    assert first == second


def test_edge_and_weights(letters_graph):
    assert letters_graph.has_edge("f", "c")
    assert letters_graph.get_edge_weight("f", "c") == 2
    assert letters_graph.has_edge("d", "s")
    assert letters_graph.get_edge_weight("d", "s") == 3
    assert not letters_graph.has_edge("c", "x")


def test_remove_edge(letters_graph):
    assert letters_graph.remove_edge("d", "c")
    assert letters_graph.remove_edge("c", "v")
    assert letters_graph.remove_edge("a", "z")
    assert not letters_graph.remove_edge("a", "z")

    assert letters_graph.vertices_count == 8
    assert letters_graph.edges_count == 11


def test_readding_edge_fails_without_changing_weight():
    g = AdjacencyMatrixGraph(3)
    g.add_vertices(["a", "b"])

    assert g.add_edge("a", "b", 4)
    assert not g.add_edge("a", "b", 9)
    assert g.get_edge_weight("a", "b") == 4
    assert g.edges_count == 1


def test_add_edge_rejects_zero_weight_and_missing_vertices():
    g = AdjacencyMatrixGraph(3)
    g.add_vertices(["a", "b"])

    assert not g.add_edge("a", "b", 0)
    assert not g.add_edge("a", "missing", 1)
    assert not g.add_edge("missing", "a", 1)
    assert g.edges_count == 0


def test_add_edge_raises_on_negative_or_fractional_weight():
    g = AdjacencyMatrixGraph(3)
    g.add_vertices(["a", "b"])

    with pytest.raises(InvalidWeightError):
        g.add_edge("a", "b", -1)
    with pytest.raises(InvalidWeightError):
        g.add_edge("a", "b", 1.5)
    assert g.edges_count == 0


def test_capacity_is_fixed():
    g = AdjacencyMatrixGraph(2)

    assert g.add_vertex("a")
    assert g.add_vertex("b")
    assert not g.add_vertex("c")
    assert not g.add_vertex("a")
    assert g.vertices_count == 2
    assert g.capacity == 2


def test_add_vertices_skips_duplicates_and_overflow():
    g = AdjacencyMatrixGraph(3)
    g.add_vertices(["a", "b", "a", "c", "d"])

    assert list(g.vertices()) == ["a", "b", "c"]


def test_add_vertices_rejects_missing_input():
    g = AdjacencyMatrixGraph()

    with pytest.raises(NullInputError):
        g.add_vertices(None)
    with pytest.raises(NullInputError):
        g.add_vertices([])


def test_first_inserted_tracks_vertex_added_to_empty_graph():
    g = AdjacencyMatrixGraph()
    assert g.first_inserted is None

    g.add_vertices(["b", "a"])
    assert g.first_inserted == "b"

    g.remove_vertex("b")
    g.remove_vertex("a")
    g.add_vertex("c")
    assert g.first_inserted == "c"


def test_remove_vertex_cascades_edges(letters_graph):
    """Every edge touching the removed vertex disappears, and only those."""
    touching = len(list(letters_graph.outgoing_edges("c"))) + len(list(letters_graph.incoming_edges("c")))
    before = letters_graph.edges_count

    assert letters_graph.remove_vertex("c")

    assert letters_graph.edges_count == before - touching
    assert not letters_graph.has_vertex("c")
    for vertex in letters_graph.vertices():
        for edge in letters_graph.outgoing_edges(vertex):
            assert edge.destination != "c"
        for edge in letters_graph.incoming_edges(vertex):
            assert edge.source != "c"
    assert len(list(letters_graph.edges())) == letters_graph.edges_count


def test_remove_vertex_with_self_loop_counts_loop_once():
    g = AdjacencyMatrixGraph(3)
    g.add_vertices(["a", "b"])
    g.add_edge("a", "a", 1)
    g.add_edge("a", "b", 2)
    g.add_edge("b", "a", 3)

    assert g.remove_vertex("a")
    assert g.edges_count == 0


def test_remove_vertex_failures():
    g = AdjacencyMatrixGraph()
    assert not g.remove_vertex("a")

    g.add_vertex("a")
    assert not g.remove_vertex("b")


def test_removed_slot_is_reused():
    g = AdjacencyMatrixGraph(3)
    g.add_vertices(["a", "b", "c"])
    g.add_edge("a", "c", 7)

    g.remove_vertex("b")
    assert g.add_vertex("d")

    # d takes b's slot, so it sits between a and c.
    assert list(g.vertices()) == ["a", "d", "c"]
    assert not g.has_edge("a", "d")
    assert g.get_edge_weight("a", "c") == 7
    assert g.add_edge("d", "c", 1)
    assert g.neighbours_map("d") == {"c": 1}


def test_lookups_on_missing_vertex_raise(letters_graph):
    with pytest.raises(VertexNotFoundError):
        letters_graph.outgoing_edges("missing")
    with pytest.raises(VertexNotFoundError):
        letters_graph.incoming_edges("missing")
    with pytest.raises(EdgeNotFoundError):
        letters_graph.get_edge_weight("missing", "a")
    with pytest.raises(EdgeNotFoundError):
        letters_graph.get_edge_weight("c", "x")


def test_neighbours_and_neighbours_map(letters_graph):
    assert letters_graph.neighbours("c") == ["d", "f", "v"]
    assert letters_graph.neighbours_map("c") == {"d": 3, "f": 1, "v": 2}
    assert letters_graph.neighbours("missing") == []
    assert letters_graph.neighbours_map("missing") is None
    assert letters_graph.outgoing("missing") == {}


def test_sum_consecutive_weights(academy_graph):
    assert academy_graph.sum_consecutive_weights(["A", "B", "C"]) == "9"
    assert academy_graph.sum_consecutive_weights(["A", "D"]) == "5"
    assert academy_graph.sum_consecutive_weights(["A", "D", "C"]) == "13"
    assert academy_graph.sum_consecutive_weights(["A", "E", "B", "C", "D"]) == "22"
    assert academy_graph.sum_consecutive_weights(["A", "E", "D"]) == NO_SUCH_ROUTE


def test_sum_consecutive_weights_checks_vertices_first(academy_graph):
    """A missing vertex raises even when an earlier hop is already missing."""
    with pytest.raises(VertexNotFoundError):
        academy_graph.sum_consecutive_weights(["A", "E", "D", "Z"])
    with pytest.raises(ValueError):
        academy_graph.sum_consecutive_weights(["A"])


def test_clear_keeps_capacity(letters_graph):
    letters_graph.clear()

    assert letters_graph.vertices_count == 0
    assert letters_graph.edges_count == 0
    assert list(letters_graph.vertices()) == []
    assert letters_graph.capacity == 10
    assert letters_graph.add_vertex("a")


def test_copy_is_independent(academy_graph):
    snapshot = academy_graph.copy()
    academy_graph.remove_vertex("C")
    academy_graph.add_edge("E", "D", 1)

    assert snapshot.has_vertex("C")
    assert snapshot.edges_count == 9
    assert not snapshot.has_edge("E", "D")
    assert snapshot.sum_consecutive_weights(["A", "B", "C"]) == "9"


def test_read_queries_are_idempotent(academy_graph):
    assert list(academy_graph.edges()) == list(academy_graph.edges())
    assert academy_graph.neighbours_map("A") == academy_graph.neighbours_map("A")


def test_edge_sequences_can_be_iterated_twice(academy_graph):
    """One returned edge sequence yields the same edges on every pass."""
    outgoing = academy_graph.outgoing_edges("A")
    incoming = academy_graph.incoming_edges("C")
    every = academy_graph.edges()

    assert list(outgoing) == list(outgoing) == [
        WeightedEdge("A", "B", 5),
        WeightedEdge("A", "D", 5),
        WeightedEdge("A", "E", 7),
    ]
    assert list(incoming) == list(incoming) == [
        WeightedEdge("B", "C", 4),
        WeightedEdge("D", "C", 8),
    ]
    assert len(list(every)) == len(list(every)) == 9
