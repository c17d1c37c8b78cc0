"""
Force-directed layout.

A small spring-electrical simulation: every node pair repels with
``k^2 / d^2``, every edge pulls its endpoints together with ``(d - k) * 0.1``,
where ``k = 0.5 * sqrt(width * height / n)``. Forces accumulate into
velocities, which are damped by 0.85 per iteration before moving the
nodes; positions are then clamped to the padded canvas.

All forces of one iteration are computed from the positions at the start
of that iteration, so the pairwise and per-edge sums are evaluated with
numpy in one pass.

The result is deterministic when every node already has coordinates.
Nodes without coordinates start at a random point of the padded canvas;
pass a seeded ``numpy.random.Generator`` for reproducible output.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Optional, Sequence

import numpy as np

from ..graphs.core import Edge, Node

if TYPE_CHECKING:
    from .core import LayoutOptions

DEFAULT_FORCE_ITERATIONS = 100
VISUAL_FORCE_ITERATIONS = 150
DAMPING = 0.85
ATTRACTION = 0.1


def _initial_positions(
    nodes: Sequence[Node], options: "LayoutOptions", rng: Optional[np.random.Generator]
) -> np.ndarray:
    positions = np.empty((len(nodes), 2), dtype=np.float64)
    span_x = options.width - 2 * options.padding
    span_y = options.height - 2 * options.padding
    for i, node in enumerate(nodes):
        if node.has_position:
            positions[i] = (node.x, node.y)
        else:
            if rng is None:
                rng = np.random.default_rng()
            positions[i, 0] = options.padding + rng.random() * span_x
            positions[i, 1] = options.padding + rng.random() * span_y
    return positions


def _nonzero(distance: np.ndarray) -> np.ndarray:
    """Replace exact zero distances by 1 so coincident nodes do not divide by zero."""
    return np.where(distance == 0, 1.0, distance)


def force_directed_layout(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    options: "LayoutOptions",
    iterations: int = DEFAULT_FORCE_ITERATIONS,
    rng: Optional[np.random.Generator] = None,
) -> List[Node]:
    """
    Run the force simulation and return the settled nodes.

    Args:
        nodes: Nodes to place; existing coordinates are the starting point.
        edges: Springs; edges whose endpoints are not among ``nodes`` are ignored.
        options: Canvas geometry.
        iterations: Number of simulation steps.
        rng: Source of starting points for nodes without coordinates.

    Returns:
        New node list in input order.
    """
    n = len(nodes)
    if n == 0:
        return []

    positions = _initial_positions(nodes, options, rng)
    velocities = np.zeros_like(positions)

    k = math.sqrt(options.width * options.height / n) * 0.5
    repulsion = k * k

    index = {node.id: i for i, node in enumerate(nodes)}
    springs = [
        (index[edge.source], index[edge.target])
        for edge in edges
        if edge.source in index and edge.target in index
    ]
    src = np.array([s for s, _ in springs], dtype=np.intp)
    dst = np.array([t for _, t in springs], dtype=np.intp)

    low_x, high_x = options.padding, options.width - options.padding
    low_y, high_y = options.padding, options.height - options.padding

    for _ in range(iterations):
        # Pairwise repulsion; diff[i, j] points from j to i
        diff = positions[:, None, :] - positions[None, :, :]
        distance = _nonzero(np.sqrt((diff**2).sum(axis=-1)))
        magnitude = repulsion / distance**2
        velocities += (diff / distance[..., None] * magnitude[..., None]).sum(axis=1)

        if springs:
            delta = positions[dst] - positions[src]
            length = _nonzero(np.sqrt((delta**2).sum(axis=-1)))
            pull = delta / length[:, None] * ((length - k) * ATTRACTION)[:, None]
            np.add.at(velocities, src, pull)
            np.add.at(velocities, dst, -pull)

        velocities *= DAMPING
        positions += velocities

        positions[:, 0] = np.maximum(low_x, np.minimum(high_x, positions[:, 0]))
        positions[:, 1] = np.maximum(low_y, np.minimum(high_y, positions[:, 1]))

    return [node.moved_to(float(x), float(y)) for node, (x, y) in zip(nodes, positions)]
