"""Tests for the undirected graph store."""

import networkx as nx
import pytest

from randgraph.errors import InvalidArgumentError
from randgraph.graph import UndirectedGraph, canonicalize, max_edges
from randgraph.summary import summarize


# ── canonicalize ─────────────────────────────────────────────────────

class TestCanonicalize:
    def test_less_than(self):
        assert canonicalize(1, 2) == (1, 2)

    def test_greater_than(self):
        assert canonicalize(2, 1) == (1, 2)

    def test_equal(self):
        assert canonicalize(3, 3) == (3, 3)

    @pytest.mark.parametrize("a,b", [(0, 5), (-4, 7), (9, -9), (10**12, 3)])
    def test_symmetric(self, a, b):
        assert canonicalize(a, b) == canonicalize(b, a)

    def test_static_method_alias(self):
        assert UndirectedGraph.canonicalize(7, 2) == (2, 7)


def test_max_edges():
    assert max_edges(0) == 0
    assert max_edges(1) == 0
    assert max_edges(2) == 1
    assert max_edges(10) == 45


# ── Construction ─────────────────────────────────────────────────────

class TestConstruction:
    def test_adjacency_sized(self):
        g = UndirectedGraph(4)
        assert g.vertex_count == 4
        assert len(g) == 4
        assert set(g.adjacency) == {0, 1, 2, 3}
        assert all(s == set() for s in g.adjacency.values())

    def test_zero_vertices(self):
        g = UndirectedGraph(0)
        assert dict(g.adjacency) == {}
        assert g.number_of_edges() == 0

    def test_negative_vertex_count(self):
        with pytest.raises(InvalidArgumentError, match="Invalid number of vertices"):
            UndirectedGraph(-1)

    def test_non_int_vertex_count(self):
        with pytest.raises(InvalidArgumentError, match="must be an int"):
            UndirectedGraph(2.5)

    def test_vertex_count_read_only(self):
        g = UndirectedGraph(3)
        with pytest.raises(AttributeError):
            g.vertex_count = 5

    def test_adjacency_read_only(self):
        g = UndirectedGraph(3)
        with pytest.raises(AttributeError):
            g.adjacency = {}
        with pytest.raises(TypeError):
            g.adjacency[3] = set()
        assert set(g.adjacency) == {0, 1, 2}


# ── Edges ────────────────────────────────────────────────────────────

class TestEdges:
    def test_has_edge_empty_graph(self):
        g = UndirectedGraph(2)
        assert not g.has_edge(0, 1)
        assert not g.has_edge(1, 0)

    def test_add_edge(self):
        g = UndirectedGraph(2)
        g.add_edge(0, 1)
        assert g.has_edge(0, 1)
        assert g.has_edge(1, 0)

    def test_add_edge_reversed_stored_under_lower(self):
        g = UndirectedGraph(5)
        g.add_edge(4, 1)
        assert g.adjacency[1] == {4}
        assert g.adjacency[4] == set()

    def test_two_edges(self):
        g = UndirectedGraph(3)
        g.add_edge(0, 1)
        g.add_edge(0, 2)
        assert g.has_edge(0, 1)
        assert g.has_edge(0, 2)
        assert not g.has_edge(1, 2)

    def test_idempotent(self):
        once = UndirectedGraph(4)
        once.add_edge(1, 3)

        twice = UndirectedGraph(4)
        twice.add_edge(1, 3)
        twice.add_edge(3, 1)

        assert summarize(once) == summarize(twice)
        assert twice.number_of_edges() == 1

    @pytest.mark.parametrize("method", ["add_edge", "has_edge"])
    def test_self_loop_rejected(self, method):
        g = UndirectedGraph(3)
        with pytest.raises(InvalidArgumentError, match="self-loops"):
            getattr(g, method)(1, 1)

    @pytest.mark.parametrize("method", ["add_edge", "has_edge"])
    @pytest.mark.parametrize("v1,v2", [(-1, 0), (0, 3), (3, 0), (0, -2), (5, 7)])
    def test_out_of_range_rejected(self, method, v1, v2):
        g = UndirectedGraph(3)
        with pytest.raises(InvalidArgumentError, match="Invalid vertex"):
            getattr(g, method)(v1, v2)

    @pytest.mark.parametrize("method", ["add_edge", "has_edge"])
    @pytest.mark.parametrize("bad", [True, False, 1.5, 1.0, None, "1"])
    def test_non_int_vertex_rejected(self, method, bad):
        g = UndirectedGraph(3)
        with pytest.raises(InvalidArgumentError, match="must be ints"):
            getattr(g, method)(0, bad)
        with pytest.raises(InvalidArgumentError, match="must be ints"):
            getattr(g, method)(bad, 2)

    def test_non_int_vertex_not_stored(self):
        g = UndirectedGraph(3)
        with pytest.raises(InvalidArgumentError):
            g.add_edge(0, True)
        with pytest.raises(InvalidArgumentError):
            g.add_edge(0, 1.5)
        assert g.number_of_edges() == 0

    def test_failed_add_leaves_graph_unchanged(self):
        g = UndirectedGraph(3)
        g.add_edge(0, 1)
        with pytest.raises(InvalidArgumentError):
            g.add_edge(1, 3)
        assert sorted(g.edges()) == [(0, 1)]

    def test_edges_canonical(self):
        g = UndirectedGraph(6)
        for v1, v2 in [(5, 0), (2, 3), (4, 1), (3, 2)]:
            g.add_edge(v1, v2)
        assert sorted(g.edges()) == [(0, 5), (1, 4), (2, 3)]
        assert all(lower < upper for lower, upper in g.edges())

    def test_contains(self):
        g = UndirectedGraph(3)
        g.add_edge(0, 2)
        assert (2, 0) in g
        assert (0, 1) not in g
        assert (1, 1) not in g
        assert (0, 9) not in g
        assert "nonsense" not in g


# ── networkx export ──────────────────────────────────────────────────

def test_to_networkx():
    g = UndirectedGraph(5)
    g.add_edge(0, 4)
    g.add_edge(2, 1)

    G = g.to_networkx()
    assert isinstance(G, nx.Graph)
    assert G.number_of_nodes() == 5
    assert G.number_of_edges() == 2
    assert G.has_edge(4, 0)
    assert G.has_edge(1, 2)
