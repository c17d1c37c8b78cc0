"""Benchmark full engine runs and layout passes."""

import time
from typing import Dict

import numpy as np

import mstlab as ml
from mstlab.layout import LayoutOptions


def benchmark_engine(kind: str, num_nodes: int, repeats: int = 5, seed: int = 0) -> Dict[str, float]:
    """Benchmark stepping one engine to completion.

    Args:
        kind: "kruskal" or "prim".
        num_nodes: Size of the random graph.
        repeats: Number of timed runs.
        seed: Seed of the graph generator.

    Returns:
        Dictionary with timing results.
    """
    nodes, edges = ml.generate_random_graph(num_nodes, rng=np.random.default_rng(seed))

    # Warmup
    ml.run_to_completion(kind, nodes, edges)

    start = time.perf_counter()
    for _ in range(repeats):
        trace = ml.run_to_completion(kind, nodes, edges)
    end = time.perf_counter()

    total_time = (end - start) / repeats
    steps = len(trace) - 1

    return {
        "num_nodes": num_nodes,
        "num_edges": len(edges),
        "steps": steps,
        "run_time_sec": total_time,
        "time_per_step_sec": total_time / max(steps, 1),
    }


def benchmark_force_layout(num_nodes: int, iterations: int = 150, seed: int = 0) -> Dict[str, float]:
    """Benchmark one force-directed layout pass."""
    nodes, edges = ml.generate_random_graph(num_nodes, rng=np.random.default_rng(seed))
    options = LayoutOptions(800, 600)

    start = time.perf_counter()
    ml.force_directed_layout(nodes, edges, options, iterations=iterations)
    end = time.perf_counter()

    return {"num_nodes": num_nodes, "iterations": iterations, "time_sec": end - start}


if __name__ == "__main__":
    print("Benchmarking engines...")

    for size in (10, 50, 200):
        for kind in ("kruskal", "prim"):
            results = benchmark_engine(kind, size)
            print(f"{kind} ({size} nodes, {results['num_edges']} edges):")
            print(f"  Run time: {results['run_time_sec']*1e3:.2f} ms")
            print(f"  Time per step: {results['time_per_step_sec']*1e6:.2f} μs")

    for size in (10, 50, 200):
        results = benchmark_force_layout(size)
        print(f"force-directed ({size} nodes, {results['iterations']} iterations): {results['time_sec']*1e3:.2f} ms")
