"""
Graph model and graph sources for mstlab.

This package provides:
- The data model (Node, Edge, EdgeStatus)
- The DisjointSet (union-find) structure used by Kruskal's engine
- Boundary validation (validate_graph, InvalidGraphError)
- Descriptive statistics (compute_graph_statistics, connected_components)
- Graph sources: a random generator, parametric templates and fixed scenarios
"""

from .core import Edge, EdgeStatus, Node, find_edge_between, node_names, remove_node, reset_statuses
from .generators import (
    binary_tree,
    complete_graph,
    generate_random_graph,
    grid_graph,
    linear_chain,
    next_id_counters,
    star_graph,
)
from .statistics import (
    GraphStatistics,
    compute_graph_statistics,
    connected_components,
    is_connected,
    theoretical_complexity,
)
from .templates import (
    GRAPH_TEMPLATES,
    SCENARIOS,
    GraphTemplate,
    Scenario,
    get_scenario,
    get_template,
    templates_in_category,
)
from .union_find import DisjointSet
from .validation import InvalidGraphError, graph_problems, validate_graph

__all__ = [
    "Node",
    "Edge",
    "EdgeStatus",
    "node_names",
    "find_edge_between",
    "remove_node",
    "reset_statuses",
    "DisjointSet",
    "InvalidGraphError",
    "graph_problems",
    "validate_graph",
    "GraphStatistics",
    "compute_graph_statistics",
    "connected_components",
    "is_connected",
    "theoretical_complexity",
    "generate_random_graph",
    "star_graph",
    "complete_graph",
    "linear_chain",
    "binary_tree",
    "grid_graph",
    "next_id_counters",
    "GraphTemplate",
    "GRAPH_TEMPLATES",
    "get_template",
    "templates_in_category",
    "Scenario",
    "SCENARIOS",
    "get_scenario",
]
