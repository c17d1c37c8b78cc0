"""
Stepwise Kruskal engine.

Kruskal's algorithm as a pure state machine: :func:`initialize_kruskal`
builds the initial snapshot and each :func:`step_kruskal` call examines
exactly one edge of the weight-sorted list, returning a new snapshot.

The disjoint-set partition is never stored in the state. Every step builds
a fresh :class:`~mstlab.graphs.union_find.DisjointSet` and replays the edges
already accepted in ``sorted_edges[:step]``, so a snapshot can be paused,
copied, compared or serialized and stepped again later with identical
results. The replay costs O(step) per call, O(E^2) over a full run, which
is fine for teaching-sized graphs.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2 (Kruskal).
"""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Sequence, Tuple

from ..diagnostics import check_kruskal_state, is_debug_enabled
from ..graphs.core import Edge, EdgeStatus, Node, node_names
from ..graphs.union_find import DisjointSet
from ..logging import get_logger

logger = get_logger(__name__)

READY_MESSAGE = (
    "Ready to start Kruskal's algorithm. "
    "We'll process edges in order of increasing weight."
)
EMPTY_MESSAGE = "No edges to process. Kruskal's algorithm has nothing to do."


@dataclass(frozen=True)
class KruskalState:
    """
    Immutable snapshot of a Kruskal run.

    Attributes:
        step: Number of edges processed so far.
        total_steps: Number of edges in the graph.
        sorted_edges: All edges, stably sorted by weight, each carrying its
            progress status (terminal before ``step``, pending from ``step``).
        mst_edges: Accepted edges in acceptance order.
        total_cost: Sum of accepted weights.
        current_edge: Edge examined by the most recent step, with its final
            status, or None before the first step.
        completed: True once every edge was examined or the tree is spanning.
        explanation: Narration of the most recent transition.
        start_time: Wall-clock milliseconds at initialization.
        node_count: Number of nodes the run was last stepped with.
    """

    step: int
    total_steps: int
    sorted_edges: Tuple[Edge, ...]
    mst_edges: Tuple[Edge, ...]
    total_cost: int
    current_edge: Optional[Edge]
    completed: bool
    explanation: str
    start_time: float
    node_count: int = 0

    @property
    def disconnected(self) -> bool:
        """True if the run finished without a spanning tree."""
        return self.completed and self.node_count > 0 and len(self.mst_edges) < self.node_count - 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step": self.step,
            "totalSteps": self.total_steps,
            "sortedEdges": [edge.to_dict() for edge in self.sorted_edges],
            "mstEdges": [edge.to_dict() for edge in self.mst_edges],
            "totalCost": self.total_cost,
            "currentEdge": self.current_edge.to_dict() if self.current_edge else None,
            "completed": self.completed,
            "explanation": self.explanation,
            "startTime": self.start_time,
        }


def initialize_kruskal(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    start_time: Optional[float] = None,
) -> KruskalState:
    """
    Build the initial Kruskal snapshot.

    Edges are stably sorted by weight, so equal-weight edges keep their
    input order; every edge is reset to pending.

    Args:
        nodes: Graph nodes.
        edges: Graph edges.
        start_time: Milliseconds to stamp; defaults to the current wall clock.

    Returns:
        Initial state. An edgeless graph yields an already completed state.
    """
    sorted_edges = tuple(
        edge.with_status(EdgeStatus.PENDING)
        for edge in sorted(edges, key=lambda edge: edge.weight)
    )
    empty = len(sorted_edges) == 0

    state = KruskalState(
        step=0,
        total_steps=len(sorted_edges),
        sorted_edges=sorted_edges,
        mst_edges=(),
        total_cost=0,
        current_edge=None,
        completed=empty,
        explanation=EMPTY_MESSAGE if empty else READY_MESSAGE,
        start_time=time.time() * 1000.0 if start_time is None else start_time,
        node_count=len(nodes),
    )
    logger.debug("kruskal initialized: %d nodes, %d edges", len(nodes), len(sorted_edges))
    return state


def step_kruskal(state: KruskalState, nodes: Sequence[Node]) -> KruskalState:
    """
    Examine the next edge of the sorted list.

    A completed state (or one with no edges left) is returned unchanged.
    Otherwise the partition is rebuilt from the accepted edges in
    ``sorted_edges[:step]`` and the edge at ``step`` is accepted when it
    joins two components or rejected when it would close a cycle.

    Args:
        state: Current snapshot.
        nodes: Graph nodes (the same graph the state was initialized with).

    Returns:
        New snapshot with ``step + 1``.
    """
    if state.completed or state.step >= state.total_steps:
        return state

    names = node_names(nodes)
    forest = DisjointSet(nodes)
    mst_edges = []
    total_cost = 0

    for edge in state.sorted_edges[: state.step]:
        if edge.status is EdgeStatus.ACCEPTED:
            forest.union(edge.source, edge.target)
            mst_edges.append(edge)
            total_cost += edge.weight

    current = state.sorted_edges[state.step].with_status(EdgeStatus.CONSIDERING)
    source_name = names.get(current.source, current.source)
    target_name = names.get(current.target, current.target)

    if forest.connected(current.source, current.target):
        current = current.with_status(EdgeStatus.REJECTED)
        explanation = (
            f"Edge {source_name}-{target_name} (weight: {current.weight}) "
            f"creates a cycle. Rejected."
        )
    else:
        forest.union(current.source, current.target)
        current = current.with_status(EdgeStatus.ACCEPTED)
        mst_edges.append(current)
        total_cost += current.weight
        explanation = (
            f"Edge {source_name}-{target_name} (weight: {current.weight}) "
            f"connects different components. Added to MST."
        )

    completed = (
        state.step + 1 >= state.total_steps or len(mst_edges) >= len(nodes) - 1
    )
    if completed:
        explanation += (
            f" Algorithm completed! MST has {len(mst_edges)} edges "
            f"with total cost {total_cost}."
        )

    sorted_edges = list(state.sorted_edges)
    sorted_edges[state.step] = current

    new_state = replace(
        state,
        step=state.step + 1,
        sorted_edges=tuple(sorted_edges),
        mst_edges=tuple(mst_edges),
        total_cost=total_cost,
        current_edge=current,
        completed=completed,
        explanation=explanation,
        node_count=len(nodes),
    )

    logger.debug(
        "kruskal step %d/%d: %s %s (cost %d)",
        new_state.step,
        new_state.total_steps,
        current.id,
        current.status.value,
        total_cost,
    )

    if is_debug_enabled():
        check_kruskal_state(new_state)

    return new_state
