"""
Deterministic node placement.

Circular, grid and hierarchical layouts are pure functions of the node
order, the edge list and the canvas options. :func:`apply_layout` is the
single entry point used by a visualization layer; it also dispatches to
the force-directed simulation in :mod:`mstlab.layout.force`.

Every layout returns new :class:`~mstlab.graphs.core.Node` instances with
the same ids and names; only coordinates change.
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

import numpy as np

from ..graphs.core import Edge, Node
from ..logging import get_logger
from .force import VISUAL_FORCE_ITERATIONS, force_directed_layout

logger = get_logger(__name__)


class LayoutType(str, Enum):
    """Available placement algorithms."""

    MANUAL = "manual"
    CIRCULAR = "circular"
    FORCE_DIRECTED = "force-directed"
    HIERARCHICAL = "hierarchical"
    GRID = "grid"


@dataclass(frozen=True)
class LayoutOptions:
    """
    Canvas geometry for a layout pass.

    Attributes:
        width: Canvas width (> 0).
        height: Canvas height (> 0).
        padding: Margin kept free on every side (>= 0).
    """

    width: float
    height: float
    padding: float = 50.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas size must be positive, got {self.width}x{self.height}"
            )
        if self.padding < 0:
            raise ValueError(f"padding must be non-negative, got {self.padding}")

    @property
    def center(self) -> tuple:
        return (self.width / 2, self.height / 2)


def circular_layout(nodes: Sequence[Node], options: LayoutOptions) -> List[Node]:
    """
    Place node i of n at angle 2*pi*i/n on a circle around the canvas center.

    The radius is ``min(width, height) / 2 - padding``.

    Example:
        >>> opts = LayoutOptions(400, 400, 50)
        >>> [(round(n.x), round(n.y)) for n in circular_layout([Node("a", "A"), Node("b", "B")], opts)]
        [(350, 200), (50, 200)]
    """
    if not nodes:
        return []
    cx, cy = options.center
    radius = min(options.width, options.height) / 2 - options.padding
    n = len(nodes)
    return [
        node.moved_to(
            cx + radius * math.cos(2 * math.pi * i / n),
            cy + radius * math.sin(2 * math.pi * i / n),
        )
        for i, node in enumerate(nodes)
    ]


def grid_layout(nodes: Sequence[Node], options: LayoutOptions) -> List[Node]:
    """
    Place nodes row by row in a ``ceil(sqrt(n))``-column grid.

    Each node sits at the center of its cell; cells share the padded canvas
    evenly.
    """
    if not nodes:
        return []
    n = len(nodes)
    cols = math.ceil(math.sqrt(n))
    rows = math.ceil(n / cols)
    cell_w = (options.width - 2 * options.padding) / cols
    cell_h = (options.height - 2 * options.padding) / rows
    return [
        node.moved_to(
            options.padding + (i % cols) * cell_w + cell_w / 2,
            options.padding + (i // cols) * cell_h + cell_h / 2,
        )
        for i, node in enumerate(nodes)
    ]


def hierarchical_levels(nodes: Sequence[Node], edges: Sequence[Edge]) -> Optional[Dict[str, int]]:
    """
    BFS depth of every node from the set of roots.

    Edges are read as directed ``source -> target`` here, unlike anywhere
    else in the package. Roots are nodes no edge points to. Nodes not
    reachable from any root get level 0.

    Returns:
        Mapping node id -> level, or None when the graph has no root.
    """
    has_incoming = {edge.target for edge in edges}
    roots = [node.id for node in nodes if node.id not in has_incoming]
    if not roots:
        return None

    children: Dict[str, List[str]] = {}
    for edge in edges:
        children.setdefault(edge.source, []).append(edge.target)

    levels: Dict[str, int] = {root: 0 for root in roots}
    queue = deque(roots)
    while queue:
        current = queue.popleft()
        for child in children.get(current, []):
            if child not in levels:
                levels[child] = levels[current] + 1
                queue.append(child)

    return {node.id: levels.get(node.id, 0) for node in nodes}


def hierarchical_layout(
    nodes: Sequence[Node], edges: Sequence[Edge], options: LayoutOptions
) -> List[Node]:
    """
    Layer nodes by BFS depth from the roots.

    Nodes of one level are spread evenly across the padded width (a lone
    node is centered); level ``l`` sits at ``padding + l * level_height``
    where ``level_height = (height - 2 * padding) / max_level`` (the full
    padded height when every node is on level 0). Falls back to
    :func:`circular_layout` when no node is a root.
    """
    levels = hierarchical_levels(nodes, edges)
    if levels is None:
        logger.debug("hierarchical layout: no root node, falling back to circular")
        return circular_layout(nodes, options)

    by_level: Dict[int, List[str]] = {}
    for node in nodes:
        by_level.setdefault(levels[node.id], []).append(node.id)

    max_level = max(levels.values(), default=0)
    level_height = (options.height - 2 * options.padding) / (max_level or 1)
    level_width = options.width - 2 * options.padding

    placed = []
    for node in nodes:
        level = levels[node.id]
        peers = by_level[level]
        if len(peers) > 1:
            x = options.padding + (peers.index(node.id) / (len(peers) - 1)) * level_width
        else:
            x = options.width / 2
        placed.append(node.moved_to(x, options.padding + level * level_height))
    return placed


def apply_layout(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    layout_type: Union[LayoutType, str],
    options: LayoutOptions,
    rng: Optional[np.random.Generator] = None,
) -> List[Node]:
    """
    Position nodes with the chosen algorithm.

    Args:
        nodes: Nodes to place.
        edges: Graph edges (used by hierarchical and force-directed).
        layout_type: A LayoutType or its string value.
        options: Canvas geometry.
        rng: Random generator for force-directed placement of nodes that
            have no coordinates yet.

    Returns:
        New node list in input order. MANUAL returns the nodes unchanged.

    Raises:
        ValueError: If layout_type is not a known layout.
    """
    layout_type = LayoutType(layout_type)
    logger.debug("applying %s layout to %d nodes", layout_type.value, len(nodes))

    if layout_type is LayoutType.CIRCULAR:
        return circular_layout(nodes, options)
    if layout_type is LayoutType.GRID:
        return grid_layout(nodes, options)
    if layout_type is LayoutType.HIERARCHICAL:
        return hierarchical_layout(nodes, edges, options)
    if layout_type is LayoutType.FORCE_DIRECTED:
        return force_directed_layout(
            nodes, edges, options, iterations=VISUAL_FORCE_ITERATIONS, rng=rng
        )
    return list(nodes)
