"""Comparison demo: Kruskal vs Prim side by side on random graphs.

A ComparisonSession is driven by an explicit tick loop, first with
synchronized stepping and then with independent stepping, and every
completed lane is kept in an ExecutionHistory.
"""

from __future__ import annotations

import numpy as np

import mstlab as ml


def run_session(nodes, edges, sync_mode, history) -> ml.ComparisonResult:
    """Run one comparison to completion and return its result."""
    session = ml.ComparisonSession(nodes, edges, sync_mode=sync_mode, history=history)
    session.initialize_both()
    session.start()

    ticks = 0
    while session.tick():
        ticks += 1

    # A synchronized session halts when the first lane completes
    while session.result() is None:
        session.step()

    print(f"  {sync_mode.value}: {ticks} ticks")
    return session.result()


def main() -> None:
    """Compare both engines on a few seeded random graphs."""
    rng = np.random.default_rng(7)
    history = ml.ExecutionHistory(maxlen=10)

    for size in (5, 8, 12):
        nodes, edges = ml.generate_random_graph(size, rng=rng)
        print(f"Graph with {len(nodes)} nodes and {len(edges)} edges")

        for mode in ml.SyncMode:
            result = run_session(nodes, edges, mode, history)
            print(
                f"    winner={result.winner} steps={result.steps} "
                f"same_cost={result.same_cost}"
            )

    print("\nAverages over history:")
    for kind, (steps, time_ms) in history.averages().items():
        print(f"  {kind.label}: {steps:.1f} steps, {time_ms:.3f} ms")

    print("Comparison finished")


if __name__ == "__main__":
    main()
