"""Invariant checks for engine states.

These are the checks debug mode runs after every engine step. They can also
be called directly from tests or from a driver that wants to audit a trace.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence

from ..graphs.core import Edge, EdgeStatus
from ..graphs.union_find import DisjointSet

if TYPE_CHECKING:
    from ..algorithms.kruskal import KruskalState
    from ..algorithms.prim import PrimState


def is_acyclic(edges: Iterable[Edge]) -> bool:
    """
    Check whether a set of undirected edges forms a forest.

    Parameters
    ----------
    edges:
        Edges to check; endpoints need not be declared anywhere else.

    Returns
    -------
    bool
        True if no edge closes a cycle.
    """
    edges = list(edges)
    ds = DisjointSet.from_ids(
        dict.fromkeys(endpoint for edge in edges for endpoint in edge.endpoints)
    )
    return all(ds.union(edge.source, edge.target) for edge in edges)


def assert_acyclic(edges: Iterable[Edge]) -> None:
    """
    Assert that a set of edges forms a forest.

    Raises
    ------
    ValueError
        If the edges contain a cycle.
    """
    edges = list(edges)
    if not is_acyclic(edges):
        raise ValueError(
            f"Edge set contains a cycle: {[edge.id for edge in edges]}"
        )


def _assert_cost(mst_edges: Sequence[Edge], total_cost: int) -> None:
    expected = sum(edge.weight for edge in mst_edges)
    if expected != total_cost:
        raise ValueError(
            f"total_cost {total_cost} does not match accepted weights sum {expected}"
        )


def check_kruskal_state(state: "KruskalState") -> None:
    """
    Verify the invariants of a Kruskal engine state.

    - at most ``node_count - 1`` accepted edges, forming a forest
    - ``total_cost`` equals the sum of accepted weights
    - ``sorted_edges[:step]`` are terminal, ``sorted_edges[step:]`` pending
    - ``sorted_edges`` is ordered by non-decreasing weight

    Raises
    ------
    ValueError
        On the first violated invariant.
    """
    if state.node_count > 0 and len(state.mst_edges) > state.node_count - 1:
        raise ValueError(
            f"{len(state.mst_edges)} accepted edges exceed node_count - 1 "
            f"= {state.node_count - 1}"
        )
    _assert_cost(state.mst_edges, state.total_cost)
    assert_acyclic(state.mst_edges)

    for index, edge in enumerate(state.sorted_edges):
        if index < state.step and not edge.status.is_terminal:
            raise ValueError(
                f"Processed edge {edge.id} at index {index} has status {edge.status.value}"
            )
        if index >= state.step and edge.status is not EdgeStatus.PENDING:
            raise ValueError(
                f"Unprocessed edge {edge.id} at index {index} has status {edge.status.value}"
            )

    weights = [edge.weight for edge in state.sorted_edges]
    if any(a > b for a, b in zip(weights, weights[1:])):
        raise ValueError("sorted_edges is not ordered by weight")


def check_prim_state(state: "PrimState") -> None:
    """
    Verify the invariants of a Prim engine state.

    - every candidate has exactly one endpoint in ``visited_nodes``
    - candidates are ordered by non-decreasing weight
    - ``len(visited_nodes) == len(mst_edges) + 1`` (for a non-empty graph)
    - ``total_cost`` equals the sum of accepted weights, edges form a tree

    Raises
    ------
    ValueError
        On the first violated invariant.
    """
    for edge in state.candidate_edges:
        inside = (edge.source in state.visited_nodes) + (edge.target in state.visited_nodes)
        if inside != 1:
            raise ValueError(
                f"Frontier edge {edge.id} has {inside} visited endpoints, expected 1"
            )

    weights = [edge.weight for edge in state.candidate_edges]
    if any(a > b for a, b in zip(weights, weights[1:])):
        raise ValueError("candidate_edges is not ordered by weight")

    if state.node_count > 0 and len(state.visited_nodes) != len(state.mst_edges) + 1:
        raise ValueError(
            f"{len(state.visited_nodes)} visited nodes but {len(state.mst_edges)} tree edges"
        )

    _assert_cost(state.mst_edges, state.total_cost)
    assert_acyclic(state.mst_edges)
