"""Property tests shared by both MST engines."""

import numpy as np
import pytest

from mstlab.algorithms import (
    AlgorithmKind,
    initialize_kruskal,
    initialize_prim,
    run_to_completion,
    step_kruskal,
    step_prim,
)
from mstlab.diagnostics import is_acyclic
from mstlab.graphs import DisjointSet, Edge, Node, generate_random_graph


def _reference_mst_cost(nodes, edges):
    """Plain batch Kruskal used as an oracle."""
    ds = DisjointSet(nodes)
    return sum(e.weight for e in sorted(edges, key=lambda e: e.weight) if ds.union(e.source, e.target))


@pytest.mark.parametrize("seed", range(8))
def test_engines_agree_on_cost(seed):
    """Test that both engines find the same cost as a batch oracle."""
    nodes, edges = generate_random_graph(4 + seed, rng=np.random.default_rng(seed))
    expected = _reference_mst_cost(nodes, edges)

    for kind in AlgorithmKind:
        final = run_to_completion(kind, nodes, edges)[-1]
        assert final.completed
        assert final.total_cost == expected
        assert len(final.mst_edges) == len(nodes) - 1


@pytest.mark.parametrize("kind", list(AlgorithmKind))
def test_cost_is_monotonic_and_tree_stays_acyclic(kind, rng):
    """Test per-step invariants along a full trace."""
    nodes, edges = generate_random_graph(10, rng=rng)
    trace = run_to_completion(kind, nodes, edges)

    costs = [run.total_cost for run in trace]
    assert costs == sorted(costs)
    for run in trace:
        assert is_acyclic(run.mst_edges)
        assert run.total_cost == sum(e.weight for e in run.mst_edges)
        assert len(run.mst_edges) <= len(nodes) - 1


def test_step_on_completed_state_is_identity(simple_network):
    """Test that terminal states are fixed points."""
    nodes, edges = simple_network
    kruskal = run_to_completion("kruskal", nodes, edges)[-1].state
    prim = run_to_completion("prim", nodes, edges)[-1].state

    assert step_kruskal(kruskal, nodes) is kruskal
    assert step_prim(prim, nodes, edges) is prim


def test_step_is_reentrant(simple_network):
    """Test that stepping the same snapshot twice gives equal results."""
    nodes, edges = simple_network

    kruskal = step_kruskal(initialize_kruskal(nodes, edges, start_time=0.0), nodes)
    assert step_kruskal(kruskal, nodes) == step_kruskal(kruskal, nodes)

    prim = step_prim(initialize_prim(nodes, edges, start_time=0.0), nodes, edges)
    assert step_prim(prim, nodes, edges) == step_prim(prim, nodes, edges)


def test_interleaved_runs_are_independent(simple_network):
    """Test that two runs on the same graph do not influence each other."""
    nodes, edges = simple_network
    solo = [s.state for s in run_to_completion("kruskal", nodes, edges, start_time=0.0)]

    first = initialize_kruskal(nodes, edges, start_time=0.0)
    second = initialize_kruskal(nodes, edges, start_time=0.0)
    first = step_kruskal(first, nodes)
    first = step_kruskal(first, nodes)
    second = step_kruskal(second, nodes)

    assert first == solo[2]
    assert second == solo[1]

    # Paused snapshot resumes exactly where the solo run went
    assert step_kruskal(second, nodes) == solo[2]


def test_disconnected_graph_produces_forest_and_partial_tree():
    """Test the two engines on a graph with two components."""
    nodes = [Node(i, i.upper()) for i in "abcde"]
    edges = [
        Edge("ab", "a", "b", 3),
        Edge("bc", "b", "c", 1),
        Edge("ac", "a", "c", 2),
        Edge("de", "d", "e", 4),
    ]

    kruskal = run_to_completion("kruskal", nodes, edges)[-1].state
    assert kruskal.total_cost == 1 + 2 + 4
    assert kruskal.disconnected

    prim = run_to_completion("prim", nodes, edges)[-1].state
    assert prim.total_cost == 1 + 2
    assert prim.visited_nodes == {"a", "b", "c"}
    assert prim.disconnected
