#!/usr/bin/env python3
"""
Quick benchmark comparing Dijkstra and A* on generated graphs.

Both algorithms must agree on the route distance; A* should expand fewer
vertices.
"""

from __future__ import annotations

import math
import sys
from pathlib import Path

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging
logging.basicConfig(level=logging.WARNING)  # Quiet mode

from route_planner.pathfinding import available_algorithms, get_pathfinder
from route_planner.planner import generate_organic

# Test cases: (vertices, edge level, avg distance, traffic level)
TEST_CASES = [
    (50, 3, 300, 0),
    (100, 3, 300, 1),
    (200, 4, 250, 2),
    (400, 3, 300, 1),
    (400, 6, 500, 4),
]

SEEDS = [1, 2, 3]
QUERIES_PER_GRAPH = 10


def run_benchmark():
    print("=" * 70)
    print("Route Planner - Algorithm Comparison")
    print("=" * 70)

    algorithms = available_algorithms()
    pathfinders = {name: get_pathfinder(name) for name in algorithms}
    totals = {name: {"expanded": 0, "time_ms": 0.0, "found": 0} for name in algorithms}
    mismatches = 0

    for i, (vertices, edges, distance, traffic) in enumerate(TEST_CASES, 1):
        print(f"\n[{i}/{len(TEST_CASES)}] {vertices} vertices, edges={edges}, "
              f"distance={distance}, traffic={traffic}")
        print("-" * 50)

        for seed in SEEDS:
            graph = generate_organic(vertices, edges, distance, traffic, seed=seed)
            rng = np.random.default_rng(seed)
            names = graph.names

            for _ in range(QUERIES_PER_GRAPH):
                start, target = rng.choice(names, size=2, replace=False)
                results = {
                    name: finder.find_path(graph, str(start), str(target))
                    for name, finder in pathfinders.items()
                }

                for name, result in results.items():
                    totals[name]["expanded"] += result.expanded
                    totals[name]["time_ms"] += result.elapsed_ms
                    totals[name]["found"] += int(result.found)

                distances = [r.distance for r in results.values()]
                if not all(math.isclose(d, distances[0], rel_tol=1e-9) for d in distances):
                    mismatches += 1
                    print(f"  MISMATCH seed={seed} {start} -> {target}: "
                          + ", ".join(f"{n}={r.distance:.2f}" for n, r in results.items()))

            print(f"  seed {seed}: {len(graph)} vertices, {graph.edge_count()} edges")

    # Summary
    print("\n" + "=" * 70)
    print("SUMMARY")
    print("=" * 70)

    for name in algorithms:
        stats = totals[name]
        print(f"  {name:10} : {stats['found']} routes, {stats['expanded']} expansions, "
              f"{stats['time_ms']:.1f} ms total")

    print(f"\n  Distance mismatches: {mismatches}")
    return 0 if mismatches == 0 else 1


if __name__ == "__main__":
    sys.exit(run_benchmark())
