"""Stepwise MST engines."""

from .kruskal import KruskalState, initialize_kruskal, step_kruskal
from .prim import PrimState, initialize_prim, project_prim_edges, step_prim
from .runs import (
    AlgorithmKind,
    AlgorithmRun,
    advance_run,
    edges_for_visualization,
    run_to_completion,
    start_run,
)

__all__ = [
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
]
