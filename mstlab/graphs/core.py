"""
Core graph data model.

Nodes and edges are small frozen dataclasses. Identity is the string ``id``;
layout coordinates and the edge ``status`` annotation are replaced by
building new instances rather than mutated in place, so any snapshot held
by an engine state stays valid after the caller edits the graph.

Edges are undirected: ``(source, target)`` order carries no meaning for the
algorithms, but it is preserved so that duplicate-edge checks can look at
both orderings.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple


class EdgeStatus(str, Enum):
    """Visualization annotation attached to an edge by the engines."""

    PENDING = "pending"
    CONSIDERING = "considering"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self in (EdgeStatus.ACCEPTED, EdgeStatus.REJECTED)


@dataclass(frozen=True)
class Node:
    """
    A graph vertex.

    Attributes:
        id: Unique node identifier.
        name: Display name used in explanations.
        x: Horizontal canvas coordinate, or None when not yet placed.
        y: Vertical canvas coordinate, or None when not yet placed.
    """

    id: str
    name: str
    x: Optional[float] = None
    y: Optional[float] = None

    @property
    def has_position(self) -> bool:
        return self.x is not None and self.y is not None

    def moved_to(self, x: float, y: float) -> "Node":
        """Return a copy of this node placed at ``(x, y)``."""
        return replace(self, x=float(x), y=float(y))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "x": self.x, "y": self.y}


@dataclass(frozen=True)
class Edge:
    """
    An undirected weighted edge.

    Attributes:
        id: Unique edge identifier.
        source: Id of one endpoint.
        target: Id of the other endpoint.
        weight: Positive integer weight.
        status: Transient visualization annotation. The engines never read
            it to decide correctness (Kruskal's engine only reads it from
            its own sorted list when replaying accepted edges).
    """

    id: str
    source: str
    target: str
    weight: int
    status: EdgeStatus = EdgeStatus.PENDING

    @property
    def endpoints(self) -> Tuple[str, str]:
        return (self.source, self.target)

    def with_status(self, status: EdgeStatus) -> "Edge":
        """Return a copy of this edge carrying ``status``."""
        if self.status is status:
            return self
        return replace(self, status=status)

    def touches(self, node_id: str) -> bool:
        return self.source == node_id or self.target == node_id

    def other(self, node_id: str) -> str:
        """
        Return the endpoint opposite ``node_id``.

        Raises:
            ValueError: If ``node_id`` is not an endpoint of this edge.
        """
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        raise ValueError(f"Node {node_id} is not an endpoint of edge {self.id}")

    def connects(self, a: str, b: str) -> bool:
        """True if this edge joins ``a`` and ``b`` in either orientation."""
        return (self.source == a and self.target == b) or (
            self.source == b and self.target == a
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
            "status": self.status.value,
        }


def node_names(nodes: Iterable[Node]) -> Dict[str, str]:
    """Map node id -> display name."""
    return {node.id: node.name for node in nodes}


def find_edge_between(edges: Iterable[Edge], a: str, b: str) -> Optional[Edge]:
    """
    Return the first edge joining ``a`` and ``b`` in either orientation.

    Used by graph builders to refuse duplicate undirected edges.
    """
    for edge in edges:
        if edge.connects(a, b):
            return edge
    return None


def remove_node(
    nodes: Sequence[Node], edges: Sequence[Edge], node_id: str
) -> Tuple[List[Node], List[Edge]]:
    """
    Delete a node, cascading to every incident edge.

    Returns:
        New ``(nodes, edges)`` lists; the inputs are left untouched.
    """
    kept_nodes = [node for node in nodes if node.id != node_id]
    kept_edges = [edge for edge in edges if not edge.touches(node_id)]
    return kept_nodes, kept_edges


def reset_statuses(edges: Iterable[Edge]) -> List[Edge]:
    """Return copies of ``edges`` with every status set back to pending."""
    return [edge.with_status(EdgeStatus.PENDING) for edge in edges]
