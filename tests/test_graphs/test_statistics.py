"""Tests for graph statistics."""

import math

import pytest

from mstlab.algorithms import AlgorithmKind
from mstlab.graphs import (
    compute_graph_statistics,
    connected_components,
    is_connected,
    theoretical_complexity,
)


class TestComputeGraphStatistics:
    """Tests for compute_graph_statistics."""

    def test_simple_network(self, simple_network):
        """Test size, degree and weight figures on a complete 4-node graph."""
        nodes, edges = simple_network
        stats = compute_graph_statistics(nodes, edges)

        assert stats.node_count == 4
        assert stats.edge_count == 6
        assert stats.max_possible_edges == 6
        assert stats.density == pytest.approx(100.0)
        assert (stats.min_degree, stats.max_degree) == (3, 3)
        assert stats.avg_degree == pytest.approx(3.0)
        assert (stats.min_weight, stats.max_weight) == (8, 25)
        assert stats.avg_weight == pytest.approx(15.0)
        assert stats.total_weight == 90
        assert stats.is_connected
        assert stats.component_count == 1

    def test_mst_progress_and_saving(self, simple_network):
        """Test figures derived from a (partial) tree."""
        nodes, edges = simple_network
        tree = [e for e in edges if e.weight in (8, 10, 12)]

        partial = compute_graph_statistics(nodes, edges, tree[:1], 8)
        assert partial.mst_progress == pytest.approx(100.0 / 3)

        full = compute_graph_statistics(nodes, edges, tree, 30)
        assert full.mst_progress == pytest.approx(100.0)
        assert full.cost_saving == pytest.approx(60 / 90 * 100)

    def test_centrality_ties_keep_node_order(self, simple_network):
        """Test top-3 centrality ordering."""
        nodes, edges = simple_network
        stats = compute_graph_statistics(nodes, edges)

        assert [item[1] for item in stats.top_central] == ["A", "B", "C"]
        assert all(item[3] == pytest.approx(100.0) for item in stats.top_central)

    def test_disconnected_graph(self, disconnected_graph):
        """Test that isolated nodes count with degree zero."""
        nodes, edges = disconnected_graph
        stats = compute_graph_statistics(nodes, edges)

        assert not stats.is_connected
        assert stats.components == (("a", "b"), ("c",))
        assert stats.largest_component == 2
        assert stats.min_degree == 0
        assert stats.avg_degree == pytest.approx(2 / 3)

    def test_empty_graph(self):
        """Test the degenerate empty graph."""
        stats = compute_graph_statistics([], [])

        assert stats.node_count == 0
        assert stats.density == 0.0
        assert stats.total_weight == 0
        assert stats.top_central == ()
        assert stats.is_connected


class TestConnectivity:
    """Tests for connected_components and is_connected."""

    def test_components_in_node_order(self, disconnected_graph):
        """Test component discovery order."""
        nodes, edges = disconnected_graph
        assert connected_components(nodes, edges) == [["a", "b"], ["c"]]
        assert not is_connected(nodes, edges)

    def test_trivial_graphs_are_connected(self, disconnected_graph):
        """Test graphs with at most one node."""
        nodes, _ = disconnected_graph
        assert is_connected([], [])
        assert is_connected(nodes[:1], [])


class TestTheoreticalComplexity:
    """Tests for theoretical_complexity."""

    def test_kruskal(self):
        """Test E log E."""
        assert theoretical_complexity(4, 8, "kruskal") == pytest.approx(24.0)

    def test_prim(self):
        """Test E log V, also accepting an AlgorithmKind."""
        assert theoretical_complexity(4, 6, "prim") == pytest.approx(12.0)
        assert theoretical_complexity(5, 6, AlgorithmKind.PRIM) == pytest.approx(6 * math.log2(5))

    def test_degenerate_sizes(self):
        """Test that empty workloads estimate zero."""
        assert theoretical_complexity(5, 0, "kruskal") == 0.0
        assert theoretical_complexity(1, 0, "prim") == 0.0

    def test_unknown_kind(self):
        """Test that an unknown algorithm is rejected."""
        with pytest.raises(ValueError, match="Unknown algorithm"):
            theoretical_complexity(4, 6, "boruvka")
