"""Tests for debug mode and invariant checks."""

from dataclasses import replace

import pytest

from mstlab.algorithms import initialize_kruskal, initialize_prim, step_kruskal, step_prim
from mstlab.diagnostics import (
    assert_acyclic,
    check_kruskal_state,
    check_prim_state,
    debug_context,
    is_acyclic,
    is_debug_enabled,
    set_debug_enabled,
)
from mstlab.graphs import Edge, EdgeStatus, generate_random_graph


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        assert not is_debug_enabled()

        with debug_context(True):
            assert is_debug_enabled()

        assert not is_debug_enabled()

        set_debug_enabled(True)
        assert is_debug_enabled()

        with debug_context(False):
            assert not is_debug_enabled()

        assert is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_debug_context_nested() -> None:
    """Test nested debug contexts."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)

        with debug_context(True):
            assert is_debug_enabled()

            with debug_context(False):
                assert not is_debug_enabled()

            assert is_debug_enabled()

        assert not is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_is_acyclic() -> None:
    """Test cycle detection on small edge sets."""
    path = [Edge("e0", "a", "b", 1), Edge("e1", "b", "c", 1)]
    cycle = path + [Edge("e2", "c", "a", 1)]

    assert is_acyclic([])
    assert is_acyclic(path)
    assert not is_acyclic(cycle)

    assert_acyclic(path)
    with pytest.raises(ValueError, match="cycle"):
        assert_acyclic(cycle)


def test_engines_pass_invariant_checks_in_debug_mode(rng) -> None:
    """Test that full runs on random graphs satisfy every checked invariant."""
    with debug_context(True):
        for size in (1, 2, 5, 9):
            nodes, edges = generate_random_graph(size, rng=rng)

            kruskal = initialize_kruskal(nodes, edges, start_time=0.0)
            while not kruskal.completed:
                kruskal = step_kruskal(kruskal, nodes)

            prim = initialize_prim(nodes, edges, start_time=0.0)
            while not prim.completed:
                prim = step_prim(prim, nodes, edges)

            assert kruskal.total_cost == prim.total_cost


def test_check_kruskal_state_detects_corruption(simple_network) -> None:
    """Test that a state with a wrong cost or status layout is rejected."""
    nodes, edges = simple_network
    state = step_kruskal(initialize_kruskal(nodes, edges, start_time=0.0), nodes)

    check_kruskal_state(state)

    with pytest.raises(ValueError, match="total_cost"):
        check_kruskal_state(replace(state, total_cost=999))

    with pytest.raises(ValueError, match="status"):
        check_kruskal_state(replace(state, step=0))


def test_check_prim_state_detects_corruption(simple_network) -> None:
    """Test that a frontier edge inside the tree is rejected."""
    nodes, edges = simple_network
    state = step_prim(initialize_prim(nodes, edges, start_time=0.0), nodes, edges)

    check_prim_state(state)

    inner = state.mst_edges[0].with_status(EdgeStatus.PENDING)
    with pytest.raises(ValueError, match="visited endpoints"):
        check_prim_state(replace(state, candidate_edges=(inner,) + state.candidate_edges))
