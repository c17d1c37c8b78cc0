"""mstlab - stepwise minimum spanning tree engines and graph layouts for visualization."""

__version__ = "0.1.0"

# Engines
from .algorithms import (
    AlgorithmKind,
    AlgorithmRun,
    KruskalState,
    PrimState,
    advance_run,
    edges_for_visualization,
    initialize_kruskal,
    initialize_prim,
    project_prim_edges,
    run_to_completion,
    start_run,
    step_kruskal,
    step_prim,
)

# Comparison drivers
from .comparison import (
    ComparisonResult,
    ComparisonSession,
    ExecutionHistory,
    ExecutionRecord,
    Side,
    SyncMode,
)

# Diagnostics
from .diagnostics import (
    assert_acyclic,
    debug_context,
    is_acyclic,
    is_debug_enabled,
    set_debug_enabled,
)

# Graph model and sources
from .graphs import (
    GRAPH_TEMPLATES,
    SCENARIOS,
    DisjointSet,
    Edge,
    EdgeStatus,
    GraphStatistics,
    InvalidGraphError,
    Node,
    compute_graph_statistics,
    generate_random_graph,
    get_scenario,
    get_template,
    validate_graph,
)

# Layout
from .layout import LayoutOptions, LayoutType, apply_layout, force_directed_layout

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graph model
    "Node",
    "Edge",
    "EdgeStatus",
    "DisjointSet",
    "InvalidGraphError",
    "validate_graph",
    "GraphStatistics",
    "compute_graph_statistics",
    "generate_random_graph",
    "GRAPH_TEMPLATES",
    "get_template",
    "SCENARIOS",
    "get_scenario",
    # Engines
    "KruskalState",
    "initialize_kruskal",
    "step_kruskal",
    "PrimState",
    "initialize_prim",
    "step_prim",
    "project_prim_edges",
    "AlgorithmKind",
    "AlgorithmRun",
    "start_run",
    "advance_run",
    "edges_for_visualization",
    "run_to_completion",
    # Layout
    "LayoutType",
    "LayoutOptions",
    "apply_layout",
    "force_directed_layout",
    # Comparison
    "ComparisonSession",
    "ComparisonResult",
    "Side",
    "SyncMode",
    "ExecutionHistory",
    "ExecutionRecord",
    # Diagnostics
    "is_acyclic",
    "assert_acyclic",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
