"""Pytest configuration and shared fixtures for mstlab tests.

This module provides:
- Deterministic RNG fixtures for numpy
- Small reference graphs with known minimum spanning trees
"""

import os
from typing import List, Tuple

import numpy as np
import pytest

from mstlab.graphs import Edge, Node, get_scenario


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set the global numpy seed for reproducibility."""
    np.random.seed(int(os.environ.get("TEST_RNG_SEED", "0")))


@pytest.fixture
def simple_network() -> Tuple[List[Node], List[Edge]]:
    """Four nodes A-D, six edges, MST cost 30.

    Edges: A-B:10, A-C:15, B-D:12, C-D:8, A-D:25, B-C:20.
    """
    scenario = get_scenario("Simple Network")
    return list(scenario.nodes), list(scenario.edges)


@pytest.fixture
def triangle_with_tail() -> Tuple[List[Node], List[Edge]]:
    """Triangle A-B-C with a pendant D; Kruskal rejects A-C on its third step."""
    nodes = [Node("a", "A"), Node("b", "B"), Node("c", "C"), Node("d", "D")]
    edges = [
        Edge("ab", "a", "b", 1),
        Edge("bc", "b", "c", 2),
        Edge("ac", "a", "c", 3),
        Edge("cd", "c", "d", 4),
    ]
    return nodes, edges


@pytest.fixture
def disconnected_graph() -> Tuple[List[Node], List[Edge]]:
    """Three nodes, one edge A-B:5; C is unreachable."""
    nodes = [Node("a", "A"), Node("b", "B"), Node("c", "C")]
    edges = [Edge("ab", "a", "b", 5)]
    return nodes, edges
