"""Execution history of completed runs."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Iterator, Optional, Sequence, Tuple

import numpy as np

from ..algorithms.runs import AlgorithmKind, AlgorithmRun
from ..graphs.core import Edge, Node

DEFAULT_HISTORY_SIZE = 10


@dataclass(frozen=True)
class ExecutionRecord:
    """
    One completed run.

    Attributes:
        algorithm: Engine used.
        steps: Number of engine steps taken.
        time_ms: Wall-clock milliseconds from initialization to completion.
        nodes: Node count of the graph.
        edges: Edge count of the graph.
        total_cost: Cost of the tree (or forest) found.
    """

    algorithm: AlgorithmKind
    steps: int
    time_ms: float
    nodes: int
    edges: int
    total_cost: int = 0


class ExecutionHistory:
    """
    Bounded record of the most recent executions.

    Older records are discarded once ``maxlen`` is reached.
    """

    def __init__(self, maxlen: int = DEFAULT_HISTORY_SIZE):
        if maxlen <= 0:
            raise ValueError(f"maxlen must be positive, got {maxlen}")
        self._records: Deque[ExecutionRecord] = deque(maxlen=maxlen)

    @property
    def maxlen(self) -> int:
        return self._records.maxlen

    @property
    def records(self) -> Tuple[ExecutionRecord, ...]:
        return tuple(self._records)

    def record(self, entry: ExecutionRecord) -> None:
        self._records.append(entry)

    def record_run(
        self,
        run: AlgorithmRun,
        nodes: Sequence[Node],
        edges: Sequence[Edge],
        now: Optional[float] = None,
    ) -> ExecutionRecord:
        """
        Append a record for a finished run.

        Args:
            run: The run to record (normally completed).
            nodes: Graph the run was driven on.
            edges: Graph the run was driven on.
            now: Completion time in milliseconds; defaults to the wall clock.

        Returns:
            The appended record.
        """
        now = time.time() * 1000.0 if now is None else now
        entry = ExecutionRecord(
            algorithm=run.kind,
            steps=run.step,
            time_ms=max(0.0, now - run.start_time),
            nodes=len(nodes),
            edges=len(edges),
            total_cost=run.total_cost,
        )
        self.record(entry)
        return entry

    def averages(self) -> Dict[AlgorithmKind, Tuple[float, float]]:
        """Mean ``(steps, time_ms)`` per algorithm over the kept records."""
        result: Dict[AlgorithmKind, Tuple[float, float]] = {}
        for kind in AlgorithmKind:
            rows = [(r.steps, r.time_ms) for r in self._records if r.algorithm is kind]
            if rows:
                means = np.mean(np.array(rows, dtype=np.float64), axis=0)
                result[kind] = (float(means[0]), float(means[1]))
        return result

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ExecutionRecord]:
        return iter(tuple(self._records))
