"""
Graph generators.

Random and parametric graph families used as graph sources. All ids follow
the ``node-N`` / ``edge-N`` convention so that a builder can continue
numbering after a generated graph (see :func:`next_id_counters`).

Randomness comes from a ``numpy.random.Generator``; pass a seeded one for
reproducible graphs.
"""

from __future__ import annotations

import math
import re
from typing import List, Optional, Sequence, Set, Tuple

import numpy as np

from .core import Edge, Node

GraphPair = Tuple[List[Node], List[Edge]]

SAMPLE_CITIES = (
    "City A",
    "City B",
    "City C",
    "City D",
    "City E",
    "City F",
    "City G",
    "City H",
)

_ID_PATTERN = re.compile(r"^(?:node|edge)-(\d+)$")


def _rng_or_default(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def _weight(rng: np.random.Generator, low: int, span: int) -> int:
    """Uniform integer in ``[low, low + span)``."""
    return int(rng.integers(low, low + span))


def generate_random_graph(
    num_nodes: int = 6, rng: Optional[np.random.Generator] = None
) -> GraphPair:
    """
    Generate a random connected graph.

    Nodes are placed on a jittered circle around (300, 200). Every node
    ``i > 0`` is joined to a random earlier node, which guarantees
    connectivity; ``floor(0.5 * n)`` further random edges are then tried,
    skipping self-loops and duplicates. Weights are drawn from [10, 60).

    Args:
        num_nodes: Number of nodes (>= 0).
        rng: Random generator; a fresh unseeded one if None.

    Returns:
        ``(nodes, edges)``.

    Raises:
        ValueError: If num_nodes is negative.
    """
    if num_nodes < 0:
        raise ValueError(f"num_nodes must be non-negative, got {num_nodes}")
    rng = _rng_or_default(rng)

    nodes: List[Node] = []
    for i in range(num_nodes):
        city = SAMPLE_CITIES[i % len(SAMPLE_CITIES)]
        angle = (i / num_nodes) * 2 * math.pi
        radius = 150.0
        nodes.append(
            Node(
                id=f"node-{i}",
                name=f"{city}{i if i > len(SAMPLE_CITIES) - 1 else ''}",
                x=300.0 + radius * math.cos(angle) + (rng.random() - 0.5) * 100,
                y=200.0 + radius * math.sin(angle) + (rng.random() - 0.5) * 100,
            )
        )

    edges: List[Edge] = []
    seen: Set[Tuple[str, str]] = set()

    def _try_add(source: str, target: str) -> None:
        key = tuple(sorted((source, target)))
        if source == target or key in seen:
            return
        seen.add(key)
        edges.append(
            Edge(
                id=f"edge-{len(edges)}",
                source=source,
                target=target,
                weight=_weight(rng, 10, 50),
            )
        )

    for i in range(1, num_nodes):
        _try_add(f"node-{int(rng.integers(0, i))}", f"node-{i}")

    for _ in range(num_nodes // 2):
        _try_add(
            f"node-{int(rng.integers(0, num_nodes))}",
            f"node-{int(rng.integers(0, num_nodes))}",
        )

    return nodes, edges


def star_graph(
    center_name: str = "Hub", num_spokes: int = 5, rng: Optional[np.random.Generator] = None
) -> GraphPair:
    """Hub at (300, 200) joined to ``num_spokes`` nodes on a circle; weights in [5, 25)."""
    rng = _rng_or_default(rng)
    nodes = [Node("node-0", center_name, 300.0, 200.0)]
    edges: List[Edge] = []
    for i in range(1, num_spokes + 1):
        angle = ((i - 1) / num_spokes) * 2 * math.pi
        nodes.append(
            Node(f"node-{i}", f"Node {i}", 300.0 + 120 * math.cos(angle), 200.0 + 120 * math.sin(angle))
        )
        edges.append(Edge(f"edge-{i - 1}", "node-0", f"node-{i}", _weight(rng, 5, 20)))
    return nodes, edges


def complete_graph(num_nodes: int = 4, rng: Optional[np.random.Generator] = None) -> GraphPair:
    """Every pair of nodes joined; nodes on a circle of radius 100; weights in [10, 40)."""
    rng = _rng_or_default(rng)
    nodes = [
        Node(
            f"node-{i}",
            f"N{i + 1}",
            300.0 + 100 * math.cos((i / num_nodes) * 2 * math.pi),
            200.0 + 100 * math.sin((i / num_nodes) * 2 * math.pi),
        )
        for i in range(num_nodes)
    ]
    edges: List[Edge] = []
    for i in range(num_nodes):
        for j in range(i + 1, num_nodes):
            edges.append(Edge(f"edge-{len(edges)}", f"node-{i}", f"node-{j}", _weight(rng, 10, 30)))
    return nodes, edges


def linear_chain(num_nodes: int = 5, rng: Optional[np.random.Generator] = None) -> GraphPair:
    """Nodes in a horizontal line, each joined to the next; weights in [8, 33)."""
    rng = _rng_or_default(rng)
    spacing = 500.0 / (num_nodes - 1) if num_nodes > 1 else 0.0
    nodes: List[Node] = []
    edges: List[Edge] = []
    for i in range(num_nodes):
        nodes.append(Node(f"node-{i}", f"Node {i + 1}", 50.0 + i * spacing, 200.0))
        if i < num_nodes - 1:
            edges.append(Edge(f"edge-{i}", f"node-{i}", f"node-{i + 1}", _weight(rng, 8, 25)))
    return nodes, edges


def binary_tree(levels: int = 3, rng: Optional[np.random.Generator] = None) -> GraphPair:
    """Complete binary tree with ``levels`` levels, parent -> child edges; weights in [5, 25)."""
    rng = _rng_or_default(rng)
    nodes: List[Node] = []
    edges: List[Edge] = []
    node_id = 0
    for level in range(levels):
        count = 2**level
        spacing = 400.0 / (count + 1)
        for i in range(count):
            nodes.append(Node(f"node-{node_id}", f"L{level}N{i + 1}", 100.0 + (i + 1) * spacing, 100.0 + level * 80))
            if level > 0:
                parent = (node_id - 1) // 2
                edges.append(
                    Edge(f"edge-{len(edges)}", f"node-{parent}", f"node-{node_id}", _weight(rng, 5, 20))
                )
            node_id += 1
    return nodes, edges


def grid_graph(rows: int = 3, cols: int = 3, rng: Optional[np.random.Generator] = None) -> GraphPair:
    """``rows x cols`` lattice with right and down neighbour edges; weights in [5, 20)."""
    rng = _rng_or_default(rng)
    cell_w = 400.0 / cols
    cell_h = 300.0 / rows
    nodes = [
        Node(
            f"node-{r * cols + c}",
            f"{r + 1},{c + 1}",
            100.0 + c * cell_w + cell_w / 2,
            100.0 + r * cell_h + cell_h / 2,
        )
        for r in range(rows)
        for c in range(cols)
    ]
    edges: List[Edge] = []
    for r in range(rows):
        for c in range(cols):
            current = r * cols + c
            if c < cols - 1:
                edges.append(Edge(f"edge-{len(edges)}", f"node-{current}", f"node-{current + 1}", _weight(rng, 5, 15)))
            if r < rows - 1:
                edges.append(Edge(f"edge-{len(edges)}", f"node-{current}", f"node-{current + cols}", _weight(rng, 5, 15)))
    return nodes, edges


def next_id_counters(nodes: Sequence[Node], edges: Sequence[Edge]) -> Tuple[int, int]:
    """
    Next free numeric suffixes for ``node-N`` and ``edge-N`` ids.

    Ids that do not follow the convention count as 0.

    Returns:
        ``(next_node_counter, next_edge_counter)``.
    """

    def _next(ids: Sequence[str]) -> int:
        highest = -1
        for ident in ids:
            match = _ID_PATTERN.match(ident)
            highest = max(highest, int(match.group(1)) if match else 0)
        return highest + 1

    return _next([n.id for n in nodes]), _next([e.id for e in edges])
