"""
Descriptive graph statistics.

Summaries shown next to a running algorithm: size and density, degree and
weight distributions, connectivity, and how far an MST has progressed.
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from .core import Edge, Node


@dataclass(frozen=True)
class GraphStatistics:
    """
    Summary statistics of a graph and (optionally) its partial MST.

    Attributes:
        node_count: Number of nodes.
        edge_count: Number of edges.
        max_possible_edges: n(n-1)/2.
        density: Percentage of possible edges present.
        min_degree, avg_degree, max_degree: Degree distribution over all nodes.
        min_weight, avg_weight, max_weight, total_weight: Weight distribution.
        mst_progress: Percentage of the n-1 MST edges found so far.
        cost_saving: Percentage of total weight saved by the MST.
        is_connected: Whether the graph is connected.
        components: Connected components as lists of node ids.
        top_central: Up to three ``(node_id, name, degree, centrality %)``
            tuples ordered by decreasing degree centrality.
    """

    node_count: int
    edge_count: int
    max_possible_edges: int
    density: float
    min_degree: int
    avg_degree: float
    max_degree: int
    min_weight: int
    avg_weight: float
    max_weight: int
    total_weight: int
    mst_progress: float
    cost_saving: float
    is_connected: bool
    components: Tuple[Tuple[str, ...], ...]
    top_central: Tuple[Tuple[str, str, int, float], ...]

    @property
    def component_count(self) -> int:
        return len(self.components)

    @property
    def largest_component(self) -> int:
        return max((len(c) for c in self.components), default=0)


def _adjacency(edges: Sequence[Edge]) -> Dict[str, List[str]]:
    adj: Dict[str, List[str]] = {}
    for edge in edges:
        adj.setdefault(edge.source, []).append(edge.target)
        adj.setdefault(edge.target, []).append(edge.source)
    return adj


def connected_components(nodes: Sequence[Node], edges: Sequence[Edge]) -> List[List[str]]:
    """
    Connected components in node input order.

    Each component lists its node ids in BFS discovery order starting from
    the earliest node (by input order) of the component.

    Complexity: O(V + E).
    """
    adj = _adjacency(edges)
    visited = set()
    components: List[List[str]] = []

    for node in nodes:
        if node.id in visited:
            continue
        component: List[str] = []
        queue = deque([node.id])
        visited.add(node.id)
        while queue:
            current = queue.popleft()
            component.append(current)
            for neighbor in adj.get(current, []):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        components.append(component)

    return components


def is_connected(nodes: Sequence[Node], edges: Sequence[Edge]) -> bool:
    """True if every node is reachable from every other (vacuously for n <= 1)."""
    if len(nodes) <= 1:
        return True
    return len(connected_components(nodes, edges)) == 1


def theoretical_complexity(node_count: int, edge_count: int, kind: str) -> float:
    """
    Textbook operation-count estimate for a graph size.

    Kruskal is dominated by sorting, ``E log2 E``; Prim with a binary heap is
    ``E log2 V``. Degenerate sizes (no edges, or a single node for Prim)
    return 0.

    Args:
        node_count: Number of vertices V.
        edge_count: Number of edges E.
        kind: "kruskal" or "prim".

    Raises:
        ValueError: For an unknown algorithm kind.
    """
    kind = str(getattr(kind, "value", kind)).lower()
    if kind == "kruskal":
        return edge_count * math.log2(edge_count) if edge_count > 0 else 0.0
    if kind == "prim":
        if edge_count <= 0 or node_count <= 1:
            return 0.0
        return edge_count * math.log2(node_count)
    raise ValueError(f"Unknown algorithm kind '{kind}'")


def compute_graph_statistics(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    mst_edges: Sequence[Edge] = (),
    mst_cost: int = 0,
) -> GraphStatistics:
    """
    Compute summary statistics for a graph.

    Args:
        nodes: Graph nodes.
        edges: Graph edges.
        mst_edges: Edges accepted so far by an engine (may be partial).
        mst_cost: Total weight of ``mst_edges``.

    Returns:
        GraphStatistics snapshot.
    """
    n = len(nodes)
    m = len(edges)
    max_possible = n * (n - 1) // 2 if n > 1 else 0
    density = (m / max_possible) * 100.0 if max_possible > 0 else 0.0

    degree = {node.id: 0 for node in nodes}
    for edge in edges:
        degree[edge.source] = degree.get(edge.source, 0) + 1
        degree[edge.target] = degree.get(edge.target, 0) + 1
    degrees = np.array(list(degree.values()), dtype=np.int64)

    weights = np.array([edge.weight for edge in edges], dtype=np.int64)
    total_weight = int(weights.sum()) if weights.size else 0

    mst_progress = (len(mst_edges) / (n - 1)) * 100.0 if n > 1 else 0.0
    cost_saving = (
        ((total_weight - mst_cost) / total_weight) * 100.0
        if total_weight > 0 and mst_cost > 0
        else 0.0
    )

    max_degree = int(degrees.max()) if degrees.size else 0
    centrality = [
        (
            node.id,
            node.name,
            degree.get(node.id, 0),
            (degree.get(node.id, 0) / max_degree) * 100.0 if max_degree > 0 else 0.0,
        )
        for node in nodes
    ]
    # Stable: ties keep input order
    centrality.sort(key=lambda item: -item[3])

    components = connected_components(nodes, edges)

    return GraphStatistics(
        node_count=n,
        edge_count=m,
        max_possible_edges=max_possible,
        density=density,
        min_degree=int(degrees.min()) if degrees.size else 0,
        avg_degree=float(degrees.mean()) if degrees.size else 0.0,
        max_degree=max_degree,
        min_weight=int(weights.min()) if weights.size else 0,
        avg_weight=float(weights.mean()) if weights.size else 0.0,
        max_weight=int(weights.max()) if weights.size else 0,
        total_weight=total_weight,
        mst_progress=mst_progress,
        cost_saving=cost_saving,
        is_connected=n <= 1 or len(components) == 1,
        components=tuple(tuple(c) for c in components),
        top_central=tuple(centrality[:3]),
    )
