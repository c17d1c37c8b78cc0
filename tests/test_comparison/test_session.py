"""Tests for side-by-side comparison sessions."""

import pytest

from mstlab.algorithms import AlgorithmKind
from mstlab.comparison import ComparisonSession, ExecutionHistory, Side, SyncMode
from mstlab.graphs import EdgeStatus


class FakeClock:
    """Deterministic millisecond clock advancing 10 ms per reading."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        self.now += 10.0
        return self.now


def _drain(session, limit=50):
    ticks = 0
    while session.tick():
        ticks += 1
        assert ticks < limit
    return ticks


class TestLifecycle:
    """Tests for initialize / start / pause / reset."""

    def test_start_requires_both_lanes(self, simple_network):
        """Test that start refuses uninitialized lanes."""
        session = ComparisonSession(*simple_network, clock=FakeClock())
        assert not session.start()

        session.initialize(Side.LEFT)
        assert not session.can_start
        assert not session.start()
        assert not session.is_running

        session.initialize("right")
        assert session.can_start
        assert session.start()
        assert session.is_running

    def test_default_kinds(self, simple_network):
        """Test that the left lane runs Kruskal and the right lane Prim."""
        session = ComparisonSession(*simple_network)
        assert session.lane("left").kind is AlgorithmKind.KRUSKAL
        assert session.lane("right").kind is AlgorithmKind.PRIM

    def test_initialize_can_switch_kind(self, simple_network):
        """Test choosing the engine per lane."""
        session = ComparisonSession(*simple_network, clock=FakeClock())
        run = session.initialize(Side.RIGHT, "kruskal")

        assert run.kind is AlgorithmKind.KRUSKAL
        assert session.lane(Side.RIGHT).kind is AlgorithmKind.KRUSKAL

    def test_unknown_side(self, simple_network):
        """Test that only left and right exist."""
        session = ComparisonSession(*simple_network)
        with pytest.raises(ValueError):
            session.lane("middle")
        with pytest.raises(ValueError):
            session.step("middle")

    def test_pause_stops_ticks(self, simple_network):
        """Test that a paused session does not advance on ticks."""
        session = ComparisonSession(*simple_network, clock=FakeClock())
        session.initialize_both()
        session.start()
        session.tick()
        session.pause()

        assert not session.is_running
        assert not session.tick()
        assert session.lane(Side.LEFT).step_count == 1

    def test_reset_keeps_kinds(self, simple_network):
        """Test that reset drops runs but not engine choices."""
        session = ComparisonSession(*simple_network, clock=FakeClock())
        session.initialize(Side.LEFT, "prim")
        session.initialize(Side.RIGHT)
        session.start()
        session.tick()

        session.reset()

        left = session.lane(Side.LEFT)
        assert left.kind is AlgorithmKind.PRIM
        assert left.run is None
        assert left.step_count == 0
        assert not session.is_running
        assert not session.can_start
        assert session.progress(Side.LEFT) == 0.0

    def test_set_graph_resets(self, simple_network, disconnected_graph):
        """Test that replacing the graph discards the runs."""
        session = ComparisonSession(*simple_network, clock=FakeClock())
        session.initialize_both()

        session.set_graph(*disconnected_graph)

        assert session.lane(Side.LEFT).run is None
        assert len(session.nodes) == 3


class TestSynchronized:
    """Tests for the synchronized stepping discipline."""

    def test_runs_to_a_tie(self, simple_network):
        """Test that both engines need three steps on the reference graph."""
        session = ComparisonSession(*simple_network, clock=FakeClock())
        session.initialize_both()
        session.start()

        assert _drain(session) == 3
        assert not session.is_running

        result = session.result()
        assert result.winner == "tie"
        assert result.steps == {"left": 3, "right": 3}
        assert result.same_cost
        assert result.efficiency == {"left": pytest.approx(10.0), "right": pytest.approx(10.0)}
        assert result.times["left"] > 0

    def test_stops_when_one_lane_completes(self, triangle_with_tail):
        """Test that a synchronized session halts with the faster lane."""
        session = ComparisonSession(*triangle_with_tail, clock=FakeClock())
        session.initialize_both()
        session.start()

        assert _drain(session) == 3
        assert session.lane(Side.RIGHT).completed
        assert not session.lane(Side.LEFT).completed
        assert session.result() is None

    def test_manual_step_both(self, triangle_with_tail):
        """Test explicit stepping while paused."""
        session = ComparisonSession(*triangle_with_tail, clock=FakeClock())
        session.initialize_both()

        for _ in range(4):
            session.step()

        result = session.result()
        assert result.winner == "right"
        assert result.steps == {"left": 4, "right": 3}
        assert result.same_cost


class TestIndependent:
    """Tests for the independent stepping discipline."""

    def test_faster_lane_finishes_first(self, triangle_with_tail):
        """Test that each lane runs to its own completion."""
        session = ComparisonSession(
            *triangle_with_tail, sync_mode=SyncMode.INDEPENDENT, clock=FakeClock()
        )
        session.initialize_both()
        session.start()

        assert _drain(session) == 4
        result = session.result()
        assert result.winner == "right"
        assert result.efficiency["left"] == pytest.approx(7 / 4)
        assert result.efficiency["right"] == pytest.approx(7 / 3)

    def test_one_lane_paused(self, simple_network):
        """Test that pausing one lane leaves the other running."""
        session = ComparisonSession(*simple_network, sync_mode="independent", clock=FakeClock())
        session.initialize_both()
        session.start()
        session.lane(Side.LEFT).is_running = False

        _drain(session)

        assert session.lane(Side.RIGHT).completed
        assert session.lane(Side.LEFT).step_count == 0
        assert session.progress(Side.RIGHT) == 100.0

    def test_switch_sync_mode(self, triangle_with_tail):
        """Test changing the discipline mid-run."""
        session = ComparisonSession(*triangle_with_tail, clock=FakeClock())
        session.initialize_both()
        session.start()
        _drain(session)

        session.set_sync_mode("independent")
        session.lane(Side.LEFT).is_running = True
        assert session.tick()
        assert session.result() is not None


class TestVisualizationAndHistory:
    """Tests for per-lane edge views and history recording."""

    def test_edges_for_visualization(self, simple_network):
        """Test the per-lane edge annotations."""
        nodes, edges = simple_network
        session = ComparisonSession(nodes, edges, clock=FakeClock())
        assert session.edges_for_visualization(Side.LEFT) == edges

        session.initialize_both()
        session.step()

        left = session.edges_for_visualization(Side.LEFT)
        assert left[0].status is EdgeStatus.ACCEPTED
        assert left[0].weight == 8

        right = {e.id: e.status for e in session.edges_for_visualization(Side.RIGHT)}
        assert right["edge-0"] is EdgeStatus.ACCEPTED

    def test_completed_lanes_are_recorded(self, simple_network):
        """Test that each completed lane lands in the history."""
        history = ExecutionHistory()
        session = ComparisonSession(*simple_network, clock=FakeClock(), history=history)
        session.initialize_both()
        session.start()
        _drain(session)

        assert [r.algorithm for r in history] == [AlgorithmKind.KRUSKAL, AlgorithmKind.PRIM]
        assert all(r.steps == 3 and r.total_cost == 30 for r in history)
        assert all(r.nodes == 4 and r.edges == 6 for r in history)
