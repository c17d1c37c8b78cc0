"""
Stepwise Prim engine.

Prim's algorithm as a pure state machine. The tree grows from the first
node in input order; each :func:`step_prim` call annexes exactly one node
through the cheapest frontier edge and returns a new snapshot.

The frontier (``candidate_edges``) is kept as a list sorted by weight with a
stable sort, so among equal weights the edge that entered the frontier
first wins. That ordering is part of the contract: it decides which edge
is accepted when several minimum spanning trees exist.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2 (Prim).
"""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Any, Dict, FrozenSet, List, Optional, Sequence, Tuple

from ..diagnostics import check_prim_state, is_debug_enabled
from ..graphs.core import Edge, EdgeStatus, Node, node_names
from ..logging import get_logger

logger = get_logger(__name__)

NO_NODES_MESSAGE = "No nodes to process"


@dataclass(frozen=True)
class PrimState:
    """
    Immutable snapshot of a Prim run.

    Attributes:
        step: Number of nodes annexed so far.
        total_steps: ``node_count - 1``.
        completed: True once the tree spans the graph or the frontier is empty.
        mst_edges: Accepted edges in acceptance order.
        total_cost: Sum of accepted weights.
        visited_nodes: Vertex set of the grown tree.
        candidate_edges: Frontier edges (exactly one endpoint visited),
            sorted by weight.
        current_edge: Cheapest frontier edge, or None when the frontier is empty.
        explanation: Narration of the most recent transition.
        start_node: Id of the root node ("" for an empty graph).
        start_time: Wall-clock milliseconds at initialization.
        node_count: Number of nodes in the graph.
        disconnected: True if the run completed before reaching every node.
    """

    step: int
    total_steps: int
    completed: bool
    mst_edges: Tuple[Edge, ...]
    total_cost: int
    visited_nodes: FrozenSet[str]
    candidate_edges: Tuple[Edge, ...]
    current_edge: Optional[Edge]
    explanation: str
    start_node: str
    start_time: float
    node_count: int = 0
    disconnected: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step": self.step,
            "totalSteps": self.total_steps,
            "completed": self.completed,
            "mstEdges": [edge.to_dict() for edge in self.mst_edges],
            "totalCost": self.total_cost,
            "visitedNodes": sorted(self.visited_nodes),
            "candidateEdges": [edge.to_dict() for edge in self.candidate_edges],
            "currentEdge": self.current_edge.to_dict() if self.current_edge else None,
            "explanation": self.explanation,
            "startNode": self.start_node,
            "startTime": self.start_time,
            "disconnected": self.disconnected,
        }


def _by_weight(edges: Sequence[Edge]) -> Tuple[Edge, ...]:
    return tuple(sorted(edges, key=lambda edge: edge.weight))


def _crosses(edge: Edge, visited: FrozenSet[str]) -> bool:
    """True if exactly one endpoint of ``edge`` is in ``visited``."""
    return (edge.source in visited) != (edge.target in visited)


def _disconnected_message(visited: int, node_count: int, total_cost: int) -> str:
    return (
        f"Algorithm completed. No edge leaves the tree, so only {visited} of "
        f"{node_count} nodes could be connected: the graph is disconnected. "
        f"Total cost of the partial tree: {total_cost}."
    )


def initialize_prim(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    start_time: Optional[float] = None,
) -> PrimState:
    """
    Build the initial Prim snapshot rooted at ``nodes[0]``.

    Args:
        nodes: Graph nodes; the first one becomes the root.
        edges: Graph edges.
        start_time: Milliseconds to stamp; defaults to the current wall clock.

    Returns:
        Initial state. A graph without nodes, or whose root has no incident
        edge, yields an already completed state.
    """
    stamp = time.time() * 1000.0 if start_time is None else start_time

    if not nodes:
        return PrimState(
            step=0,
            total_steps=0,
            completed=True,
            mst_edges=(),
            total_cost=0,
            visited_nodes=frozenset(),
            candidate_edges=(),
            current_edge=None,
            explanation=NO_NODES_MESSAGE,
            start_node="",
            start_time=stamp,
            node_count=0,
        )

    root = nodes[0]
    visited = frozenset([root.id])
    candidates = _by_weight(
        [edge.with_status(EdgeStatus.PENDING) for edge in edges if edge.touches(root.id)]
    )

    if candidates:
        explanation = (
            f"Starting Prim's algorithm from node {root.name}. We begin by adding "
            f"this node to our MST and considering all its adjacent edges."
        )
    elif len(nodes) == 1:
        explanation = (
            f"Graph has a single node {root.name}; it is already a spanning tree."
        )
    else:
        explanation = _disconnected_message(1, len(nodes), 0)

    logger.debug("prim initialized from %s: %d frontier edges", root.id, len(candidates))

    return PrimState(
        step=0,
        total_steps=len(nodes) - 1,
        completed=not candidates,
        mst_edges=(),
        total_cost=0,
        visited_nodes=visited,
        candidate_edges=candidates,
        current_edge=candidates[0] if candidates else None,
        explanation=explanation,
        start_node=root.id,
        start_time=stamp,
        node_count=len(nodes),
        disconnected=not candidates and len(nodes) > 1,
    )


def step_prim(state: PrimState, nodes: Sequence[Node], edges: Sequence[Edge]) -> PrimState:
    """
    Annex one node through the cheapest frontier edge.

    Args:
        state: Current snapshot.
        nodes: Graph nodes (the same graph the state was initialized with).
        edges: Graph edges.

    Returns:
        New snapshot. A completed state is returned as is; a state with an
        empty frontier is returned marked completed.
    """
    if state.completed:
        return state
    if not state.candidate_edges:
        return replace(
            state,
            completed=True,
            disconnected=len(state.visited_nodes) < len(nodes),
        )

    selected: Optional[Edge] = None
    selected_index = -1
    for index, edge in enumerate(state.candidate_edges):
        if _crosses(edge, state.visited_nodes):
            selected = edge
            selected_index = index
            break

    if selected is None:
        disconnected = len(state.visited_nodes) < len(nodes)
        return replace(
            state,
            completed=True,
            disconnected=disconnected,
            explanation=(
                _disconnected_message(len(state.visited_nodes), len(nodes), state.total_cost)
                if disconnected
                else "Algorithm completed. All nodes have been connected with minimum cost."
            ),
        )

    tree_node = selected.source if selected.source in state.visited_nodes else selected.target
    new_node = selected.other(tree_node)
    visited = state.visited_nodes | {new_node}

    mst_edges = state.mst_edges + (selected.with_status(EdgeStatus.ACCEPTED),)
    total_cost = state.total_cost + selected.weight

    # Drop the selected edge and any candidate that now closes a cycle
    candidates: List[Edge] = [
        edge
        for index, edge in enumerate(state.candidate_edges)
        if index != selected_index and _crosses(edge, visited)
    ]

    known = {edge.id for edge in candidates} | {edge.id for edge in mst_edges}
    for edge in edges:
        if edge.touches(new_node) and edge.id not in known and _crosses(edge, visited):
            candidates.append(edge.with_status(EdgeStatus.PENDING))
            known.add(edge.id)

    frontier = _by_weight(candidates)
    step = state.step + 1
    completed = step >= state.total_steps or not frontier
    disconnected = completed and len(visited) < len(nodes)

    names = node_names(nodes)
    if disconnected:
        explanation = _disconnected_message(len(visited), len(nodes), total_cost)
    elif completed:
        explanation = (
            f"Algorithm completed! We've connected all nodes with total cost {total_cost}. "
            f"Prim's algorithm builds the MST by always choosing the minimum weight edge "
            f"that connects the growing tree to a new node."
        )
    else:
        explanation = (
            f"Added edge from {names.get(tree_node, tree_node)} to "
            f"{names.get(new_node, new_node)} (weight: {selected.weight}). This was the "
            f"minimum weight edge connecting our current tree to an unvisited node. "
            f"Total cost so far: {total_cost}."
        )

    new_state = replace(
        state,
        step=step,
        completed=completed,
        mst_edges=mst_edges,
        total_cost=total_cost,
        visited_nodes=visited,
        candidate_edges=frontier,
        current_edge=frontier[0] if frontier else None,
        explanation=explanation,
        node_count=len(nodes),
        disconnected=disconnected,
    )

    logger.debug(
        "prim step %d/%d: %s annexed via %s (cost %d)",
        step,
        state.total_steps,
        new_node,
        selected.id,
        total_cost,
    )

    if is_debug_enabled():
        check_prim_state(new_state)

    return new_state


def project_prim_edges(state: PrimState, all_edges: Sequence[Edge]) -> List[Edge]:
    """
    Annotate every edge of the graph for display.

    Tree edges are accepted, the cheapest frontier edge is considering, and
    everything else, frontier candidates included, is pending: the frontier
    is not highlighted edge by edge.

    Args:
        state: Snapshot to project.
        all_edges: Edges of the graph in display order.

    Returns:
        New list of edges, one per input edge, in input order.
    """
    tree_ids = {edge.id for edge in state.mst_edges}
    current_id = state.current_edge.id if state.current_edge is not None else None

    projected = []
    for edge in all_edges:
        if edge.id in tree_ids:
            projected.append(edge.with_status(EdgeStatus.ACCEPTED))
        elif edge.id == current_id:
            projected.append(edge.with_status(EdgeStatus.CONSIDERING))
        else:
            projected.append(edge.with_status(EdgeStatus.PENDING))
    return projected
