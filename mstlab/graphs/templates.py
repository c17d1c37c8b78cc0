"""
Named graph templates and fixed teaching scenarios.

Templates are built on demand because most of them draw random weights;
fixed scenarios are plain constant graphs whose MST is known in advance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from .core import Edge, Node
from .generators import GraphPair, binary_tree, complete_graph, grid_graph, linear_chain, star_graph


def _fixed(
    node_specs: List[Tuple[str, float, float]], edge_specs: List[Tuple[int, int, int]]
) -> GraphPair:
    nodes = [Node(f"node-{i}", name, float(x), float(y)) for i, (name, x, y) in enumerate(node_specs)]
    edges = [
        Edge(f"edge-{i}", f"node-{s}", f"node-{t}", w) for i, (s, t, w) in enumerate(edge_specs)
    ]
    return nodes, edges


def ring_network(rng: Optional[np.random.Generator] = None) -> GraphPair:
    """Six nodes in a ring."""
    return _fixed(
        [("A", 300, 120), ("B", 380, 160), ("C", 380, 240), ("D", 300, 280), ("E", 220, 240), ("F", 220, 160)],
        [(0, 1, 15), (1, 2, 12), (2, 3, 18), (3, 4, 14), (4, 5, 16), (5, 0, 13)],
    )


def power_grid(rng: Optional[np.random.Generator] = None) -> GraphPair:
    """Plant, two substations, three cities and a backup site."""
    return _fixed(
        [
            ("Plant", 300, 100),
            ("Sub1", 200, 180),
            ("Sub2", 400, 180),
            ("City1", 150, 280),
            ("City2", 300, 280),
            ("City3", 450, 280),
            ("Backup", 300, 350),
        ],
        [(0, 1, 25), (0, 2, 30), (1, 3, 15), (1, 4, 20), (2, 4, 18), (2, 5, 22), (4, 6, 12), (3, 4, 35), (4, 5, 28)],
    )


@dataclass(frozen=True)
class GraphTemplate:
    """
    A named graph family.

    Attributes:
        id: Registry key.
        name: Display name.
        description: One-line description.
        category: "basic", "special" or "real-world".
        complexity: "Simple", "Medium" or "Complex".
        use_case: Typical real-world use.
        builder: Callable taking an optional rng and returning ``(nodes, edges)``.
    """

    id: str
    name: str
    description: str
    category: str
    complexity: str
    use_case: str
    builder: Callable[[Optional[np.random.Generator]], GraphPair]

    def build(self, rng: Optional[np.random.Generator] = None) -> GraphPair:
        return self.builder(rng)


GRAPH_TEMPLATES: Tuple[GraphTemplate, ...] = (
    GraphTemplate(
        "star-5",
        "Star Network",
        "Central hub connected to 5 nodes - common in client-server architectures",
        "basic",
        "Simple",
        "Client-Server, Network Hubs",
        lambda rng: star_graph("Hub", 5, rng=rng),
    ),
    GraphTemplate(
        "complete-4",
        "Complete Graph",
        "Every node connected to every other node - fully meshed network",
        "basic",
        "Medium",
        "Redundant Networks, Peer-to-Peer",
        lambda rng: complete_graph(4, rng=rng),
    ),
    GraphTemplate(
        "linear-chain",
        "Linear Chain",
        "Nodes connected in a straight line - simple pipeline topology",
        "basic",
        "Simple",
        "Assembly Lines, Data Pipelines",
        lambda rng: linear_chain(5, rng=rng),
    ),
    GraphTemplate(
        "binary-tree",
        "Binary Tree",
        "Hierarchical tree structure with binary branching",
        "special",
        "Medium",
        "Organizational Charts, Decision Trees",
        lambda rng: binary_tree(3, rng=rng),
    ),
    GraphTemplate(
        "grid-3x3",
        "Grid Network",
        "3x3 grid with nearest neighbor connections",
        "special",
        "Medium",
        "Mesh Networks, City Streets",
        lambda rng: grid_graph(3, 3, rng=rng),
    ),
    GraphTemplate(
        "ring-network",
        "Ring Network",
        "Nodes connected in a circular topology with redundant paths",
        "real-world",
        "Simple",
        "Token Ring, Backup Networks",
        ring_network,
    ),
    GraphTemplate(
        "power-grid",
        "Power Grid",
        "Realistic power distribution network with redundancy",
        "real-world",
        "Complex",
        "Power Distribution, Infrastructure",
        power_grid,
    ),
)

_TEMPLATES_BY_ID: Dict[str, GraphTemplate] = {t.id: t for t in GRAPH_TEMPLATES}


def get_template(template_id: str) -> GraphTemplate:
    """
    Look up a template by id.

    Raises:
        KeyError: If no template has this id.
    """
    try:
        return _TEMPLATES_BY_ID[template_id]
    except KeyError:
        raise KeyError(
            f"Unknown template '{template_id}'. Available: {sorted(_TEMPLATES_BY_ID)}"
        ) from None


def templates_in_category(category: str) -> List[GraphTemplate]:
    """Templates of one category; "all" returns every template."""
    if category == "all":
        return list(GRAPH_TEMPLATES)
    return [t for t in GRAPH_TEMPLATES if t.category == category]


@dataclass(frozen=True)
class Scenario:
    """A fixed teaching graph with a name and description."""

    name: str
    description: str
    nodes: Tuple[Node, ...]
    edges: Tuple[Edge, ...]


def _scenario(name: str, description: str, graph: GraphPair) -> Scenario:
    nodes, edges = graph
    return Scenario(name, description, tuple(nodes), tuple(edges))


SCENARIOS: Tuple[Scenario, ...] = (
    _scenario(
        "Simple Network",
        "A basic 4-node network perfect for understanding MST concepts",
        _fixed(
            [("A", 150, 150), ("B", 450, 150), ("C", 150, 350), ("D", 450, 350)],
            [(0, 1, 10), (0, 2, 15), (1, 3, 12), (2, 3, 8), (0, 3, 25), (1, 2, 20)],
        ),
    ),
    _scenario(
        "City Power Grid",
        "A realistic city power grid scenario with 6 cities and varying connection costs",
        _fixed(
            [
                ("Metro", 300, 100),
                ("North", 200, 200),
                ("East", 500, 200),
                ("West", 100, 350),
                ("South", 300, 400),
                ("Port", 450, 350),
            ],
            [(0, 1, 15), (0, 2, 18), (1, 3, 22), (1, 4, 28), (2, 5, 12), (3, 4, 30), (4, 5, 25), (0, 4, 35), (2, 4, 20)],
        ),
    ),
    _scenario(
        "Dense Network",
        "A densely connected 5-node network showcasing algorithm efficiency",
        _fixed(
            [("Hub", 300, 200), ("N1", 200, 100), ("N2", 400, 100), ("N3", 150, 300), ("N4", 450, 300)],
            [(0, 1, 8), (0, 2, 12), (0, 3, 15), (0, 4, 10), (1, 2, 25), (1, 3, 18), (2, 4, 14), (3, 4, 22), (1, 4, 30), (2, 3, 28)],
        ),
    ),
)


def get_scenario(name: str) -> Scenario:
    """
    Look up a fixed scenario by name.

    Raises:
        KeyError: If no scenario has this name.
    """
    for scenario in SCENARIOS:
        if scenario.name == name:
            return scenario
    raise KeyError(f"Unknown scenario '{name}'")
