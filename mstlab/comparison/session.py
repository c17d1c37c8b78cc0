"""
Side-by-side comparison of two engine runs.

A :class:`ComparisonSession` owns two lanes, each holding its own
:class:`~mstlab.algorithms.runs.AlgorithmRun`. The lanes share the graph
but no state: each step rebuilds its own disjoint set or extends its own
frontier. The session is driven by an external timer through
:meth:`ComparisonSession.tick`, under one of two disciplines:

- synchronized: a tick steps both lanes together, and only fires while
  both are running and neither has completed;
- independent: a tick steps every lane that is running and not completed,
  so one lane may finish, pause or reset without affecting the other.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Union

from ..algorithms.runs import AlgorithmKind, AlgorithmRun, advance_run, edges_for_visualization, start_run
from ..graphs.core import Edge, Node
from ..logging import get_logger
from .history import ExecutionHistory

logger = get_logger(__name__)


class SyncMode(str, Enum):
    SYNCHRONIZED = "synchronized"
    INDEPENDENT = "independent"


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


def _wall_clock_ms() -> float:
    return time.time() * 1000.0


@dataclass
class Lane:
    """
    One algorithm instance inside a comparison.

    Attributes:
        kind: Engine this lane runs.
        run: Current run, or None before initialization / after reset.
        is_running: Whether the timer should step this lane.
        step_count: Steps taken since initialization.
        execution_time: Milliseconds between ``start_time`` and the last step.
        start_time: Milliseconds at initialization or at the last start().
    """

    kind: AlgorithmKind
    run: Optional[AlgorithmRun] = None
    is_running: bool = False
    step_count: int = 0
    execution_time: float = 0.0
    start_time: float = 0.0

    @property
    def completed(self) -> bool:
        return self.run is not None and self.run.completed


@dataclass(frozen=True)
class ComparisonResult:
    """
    Outcome of a comparison once both lanes completed.

    Attributes:
        winner: "left" or "right" for the lane that needed fewer steps, else "tie".
        steps: Step count per side.
        times: Execution time per side, in milliseconds.
        efficiency: ``total_cost / step_count`` per side (0 without steps).
        same_cost: Whether both trees have the same total cost.
    """

    winner: str
    steps: Dict[str, int] = field(default_factory=dict)
    times: Dict[str, float] = field(default_factory=dict)
    efficiency: Dict[str, float] = field(default_factory=dict)
    same_cost: bool = True


class ComparisonSession:
    """
    Two engine runs on one graph, driven by a shared or per-lane timer.

    Args:
        nodes: Graph nodes.
        edges: Graph edges.
        sync_mode: Stepping discipline.
        left: Engine of the left lane.
        right: Engine of the right lane.
        clock: Callable returning milliseconds; the wall clock by default.
        history: Optional history receiving a record whenever a lane completes.

    Example:
        >>> session = ComparisonSession(nodes, edges)
        >>> session.initialize_both()
        >>> session.start()
        True
        >>> while session.tick():
        ...     pass
        >>> session.result().same_cost
        True
    """

    def __init__(
        self,
        nodes: Sequence[Node],
        edges: Sequence[Edge],
        sync_mode: Union[SyncMode, str] = SyncMode.SYNCHRONIZED,
        left: Union[AlgorithmKind, str] = AlgorithmKind.KRUSKAL,
        right: Union[AlgorithmKind, str] = AlgorithmKind.PRIM,
        clock: Optional[Callable[[], float]] = None,
        history: Optional[ExecutionHistory] = None,
    ):
        self.nodes: List[Node] = list(nodes)
        self.edges: List[Edge] = list(edges)
        self.sync_mode = SyncMode(sync_mode)
        self.lanes: Dict[Side, Lane] = {
            Side.LEFT: Lane(AlgorithmKind(left)),
            Side.RIGHT: Lane(AlgorithmKind(right)),
        }
        self.history = history
        self._clock = clock or _wall_clock_ms

    def lane(self, side: Union[Side, str]) -> Lane:
        """
        Return the lane on ``side``.

        Raises:
            ValueError: If side is not "left" or "right".
        """
        return self.lanes[Side(side)]

    def _targets(self, target: Union[Side, str, None]) -> List[Side]:
        if target is None or target == "both":
            return [Side.LEFT, Side.RIGHT]
        return [Side(target)]

    def initialize(self, side: Union[Side, str], kind: Union[AlgorithmKind, str, None] = None) -> AlgorithmRun:
        """
        (Re)initialize one lane, optionally switching its engine.

        The lane is paused and its counters cleared.
        """
        lane = self.lane(side)
        if kind is not None:
            lane.kind = AlgorithmKind(kind)
        now = self._clock()
        lane.run = start_run(lane.kind, self.nodes, self.edges, start_time=now)
        lane.is_running = False
        lane.step_count = 0
        lane.execution_time = 0.0
        lane.start_time = now
        logger.info("%s lane initialized with %s", Side(side).value, lane.kind.value)
        return lane.run

    def initialize_both(self) -> None:
        for side in Side:
            self.initialize(side)

    @property
    def can_start(self) -> bool:
        """Both lanes hold a run and neither has completed."""
        return all(lane.run is not None and not lane.completed for lane in self.lanes.values())

    @property
    def is_running(self) -> bool:
        return any(lane.is_running for lane in self.lanes.values())

    @property
    def both_completed(self) -> bool:
        return all(lane.completed for lane in self.lanes.values())

    def start(self) -> bool:
        """
        Mark both lanes running and restart their clocks.

        Returns:
            False (and does nothing) unless both lanes are initialized.
        """
        if any(lane.run is None for lane in self.lanes.values()):
            return False
        now = self._clock()
        for lane in self.lanes.values():
            lane.is_running = True
            lane.start_time = now
        logger.info("comparison started (%s)", self.sync_mode.value)
        return True

    def pause(self) -> None:
        for lane in self.lanes.values():
            lane.is_running = False

    def reset(self) -> None:
        """Drop both runs, keeping each lane's engine choice."""
        for side, lane in self.lanes.items():
            self.lanes[side] = Lane(lane.kind)
        logger.info("comparison reset")

    def set_graph(self, nodes: Sequence[Node], edges: Sequence[Edge]) -> None:
        """Replace the graph; both runs are discarded since they describe the old one."""
        self.nodes = list(nodes)
        self.edges = list(edges)
        self.reset()

    def set_sync_mode(self, sync_mode: Union[SyncMode, str]) -> None:
        self.sync_mode = SyncMode(sync_mode)

    def step(self, target: Union[Side, str, None] = None) -> None:
        """
        Advance the targeted lanes by one engine step.

        Lanes without a run or already completed are skipped. A lane stops
        running once its run completes.

        Args:
            target: Side.LEFT, Side.RIGHT, or None / "both" for both lanes.
        """
        for side in self._targets(target):
            lane = self.lanes[side]
            if lane.run is None or lane.run.completed:
                continue
            lane.run = advance_run(lane.run, self.nodes, self.edges)
            lane.step_count += 1
            now = self._clock()
            lane.execution_time = now - lane.start_time
            lane.is_running = lane.is_running and not lane.run.completed
            if lane.run.completed:
                logger.info(
                    "%s lane (%s) completed in %d steps, cost %d",
                    side.value,
                    lane.kind.value,
                    lane.step_count,
                    lane.run.total_cost,
                )
                if self.history is not None:
                    self.history.record_run(lane.run, self.nodes, self.edges, now=now)

    def tick(self) -> bool:
        """
        One timer firing.

        Returns:
            True if any lane was stepped.
        """
        if self.sync_mode is SyncMode.SYNCHRONIZED:
            left, right = self.lanes[Side.LEFT], self.lanes[Side.RIGHT]
            if left.is_running and right.is_running and not left.completed and not right.completed:
                self.step()
                return True
            return False

        due = [
            side
            for side, lane in self.lanes.items()
            if lane.is_running and lane.run is not None and not lane.completed
        ]
        for side in due:
            self.step(side)
        return bool(due)

    def progress(self, side: Union[Side, str]) -> float:
        """Percentage of the ``n - 1`` tree edges found by a lane."""
        lane = self.lane(side)
        if lane.run is None:
            return 0.0
        return lane.run.progress(len(self.nodes))

    def edges_for_visualization(self, side: Union[Side, str]) -> List[Edge]:
        """Edges annotated by the lane's run, or the raw graph edges before initialization."""
        lane = self.lane(side)
        if lane.run is None:
            return list(self.edges)
        return edges_for_visualization(lane.run, self.edges)

    def result(self) -> Optional[ComparisonResult]:
        """Comparison outcome, or None until both lanes have completed."""
        if not self.both_completed:
            return None
        left, right = self.lanes[Side.LEFT], self.lanes[Side.RIGHT]

        if left.step_count < right.step_count:
            winner = Side.LEFT.value
        elif right.step_count < left.step_count:
            winner = Side.RIGHT.value
        else:
            winner = "tie"

        def _efficiency(lane: Lane) -> float:
            return lane.run.total_cost / lane.step_count if lane.step_count else 0.0

        return ComparisonResult(
            winner=winner,
            steps={"left": left.step_count, "right": right.step_count},
            times={"left": left.execution_time, "right": right.execution_time},
            efficiency={"left": _efficiency(left), "right": _efficiency(right)},
            same_cost=left.run.total_cost == right.run.total_cost,
        )
