"""
Algorithm runs: a tagged union over the two engines.

Drivers that handle either algorithm hold an :class:`AlgorithmRun`, which
pairs an :class:`AlgorithmKind` tag with the matching engine state, and
dispatch on the tag. Nothing here relies on the two state types sharing
attribute names.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from ..graphs.core import Edge, Node
from .kruskal import KruskalState, initialize_kruskal, step_kruskal
from .prim import PrimState, initialize_prim, project_prim_edges, step_prim

EngineState = Union[KruskalState, PrimState]


class AlgorithmKind(str, Enum):
    """Which MST engine a run uses."""

    KRUSKAL = "kruskal"
    PRIM = "prim"

    @property
    def label(self) -> str:
        return "Kruskal's" if self is AlgorithmKind.KRUSKAL else "Prim's"


@dataclass(frozen=True)
class AlgorithmRun:
    """
    One engine state tagged with its kind.

    Attributes:
        kind: Engine that owns ``state``.
        state: KruskalState when kind is KRUSKAL, PrimState when kind is PRIM.
    """

    kind: AlgorithmKind
    state: EngineState

    def __post_init__(self) -> None:
        expected = KruskalState if self.kind is AlgorithmKind.KRUSKAL else PrimState
        if not isinstance(self.state, expected):
            raise ValueError(
                f"{self.kind.value} run requires {expected.__name__}, "
                f"got {type(self.state).__name__}"
            )

    @property
    def completed(self) -> bool:
        return self.state.completed

    @property
    def total_cost(self) -> int:
        return self.state.total_cost

    @property
    def mst_edges(self) -> Tuple[Edge, ...]:
        return self.state.mst_edges

    @property
    def step(self) -> int:
        return self.state.step

    @property
    def explanation(self) -> str:
        return self.state.explanation

    @property
    def start_time(self) -> float:
        return self.state.start_time

    def progress(self, node_count: int) -> float:
        """Share of the ``node_count - 1`` tree edges found, as a percentage capped at 100."""
        if node_count <= 1:
            return 100.0 if self.completed else 0.0
        return min(len(self.mst_edges) / (node_count - 1) * 100.0, 100.0)


def start_run(
    kind: Union[AlgorithmKind, str],
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    start_time: Optional[float] = None,
) -> AlgorithmRun:
    """
    Initialize an engine of the given kind.

    Raises:
        ValueError: If kind is not a known algorithm.
    """
    kind = AlgorithmKind(kind)
    if kind is AlgorithmKind.KRUSKAL:
        return AlgorithmRun(kind, initialize_kruskal(nodes, edges, start_time=start_time))
    return AlgorithmRun(kind, initialize_prim(nodes, edges, start_time=start_time))


def advance_run(run: AlgorithmRun, nodes: Sequence[Node], edges: Sequence[Edge]) -> AlgorithmRun:
    """Step the engine behind ``run`` once."""
    if run.kind is AlgorithmKind.KRUSKAL:
        return AlgorithmRun(run.kind, step_kruskal(run.state, nodes))
    return AlgorithmRun(run.kind, step_prim(run.state, nodes, edges))


def edges_for_visualization(run: AlgorithmRun, edges: Sequence[Edge]) -> List[Edge]:
    """
    Edges annotated with the run's progress.

    Kruskal reports its sorted list, where every processed edge keeps its
    verdict; Prim reports :func:`~mstlab.algorithms.prim.project_prim_edges`.
    """
    if run.kind is AlgorithmKind.KRUSKAL:
        return list(run.state.sorted_edges)
    return project_prim_edges(run.state, edges)


def run_to_completion(
    kind: Union[AlgorithmKind, str],
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    max_steps: Optional[int] = None,
    start_time: Optional[float] = None,
) -> List[AlgorithmRun]:
    """
    Step a fresh run until it completes.

    Args:
        kind: Engine to run.
        nodes: Graph nodes.
        edges: Graph edges.
        max_steps: Stop after this many steps even if not completed.
        start_time: Forwarded to the initializer.

    Returns:
        The trace: initial run followed by one run per step.
    """
    run = start_run(kind, nodes, edges, start_time=start_time)
    trace = [run]
    # Both engines finish within max(E, V) steps on valid input
    limit = max(len(edges), len(nodes)) + 1
    if max_steps is not None:
        limit = min(limit, max_steps)
    while not run.completed and len(trace) <= limit:
        run = advance_run(run, nodes, edges)
        trace.append(run)
    return trace
