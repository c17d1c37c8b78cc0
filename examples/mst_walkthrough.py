"""MST walkthrough: stepping Kruskal and Prim on a small network.

This example loads the "Simple Network" scenario, lays it out on a circle,
and prints every transition of both engines together with the edge
annotations a visualization would draw.
"""

from __future__ import annotations

import mstlab as ml
from mstlab.layout import LayoutOptions


def main() -> None:
    """Step both engines to completion and print each transition."""
    scenario = ml.get_scenario("Simple Network")
    nodes = ml.apply_layout(scenario.nodes, scenario.edges, "circular", LayoutOptions(600, 400))
    edges = list(scenario.edges)
    ml.validate_graph(nodes, edges)

    print(f"Scenario: {scenario.name} ({len(nodes)} nodes, {len(edges)} edges)")
    for node in nodes:
        print(f"  {node.name}: ({node.x:.1f}, {node.y:.1f})")

    for kind in ml.AlgorithmKind:
        print(f"\n{kind.label} algorithm")
        run = ml.start_run(kind, nodes, edges)
        print(f"  [0] {run.explanation}")

        while not run.completed:
            run = ml.advance_run(run, nodes, edges)
            shown = ml.edges_for_visualization(run, edges)
            marks = " ".join(f"{e.id}:{e.status.value[0]}" for e in shown)
            print(f"  [{run.step}] {run.explanation}")
            print(f"      edges {marks}")

        print(f"Final {kind.value} MST cost: {run.total_cost}")

    stats = ml.compute_graph_statistics(nodes, edges, run.mst_edges, run.total_cost)
    print(f"\nDensity: {stats.density:.1f}%  cost saving: {stats.cost_saving:.1f}%")


if __name__ == "__main__":
    main()
