#!/usr/bin/env python3
"""
Route Planner CLI - plan a route across a generated or example graph.

Usage:
    python scripts/plan_route.py --example --start a --target e
    python scripts/plan_route.py --vertices 60 --seed 7 --start 00 --target random
    python scripts/plan_route.py --vertices 200 --traffic 3 --algorithm astar --seed 1
    python scripts/plan_route.py --example --start a --target e --dump

Algorithms:
    dijkstra - Uniform-cost search (default)
    astar    - A* with straight-line distance heuristic
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from route_planner.config import (  # noqa: E402
    DEFAULT_ALGORITHM,
    DEFAULT_AVG_DISTANCE,
    DEFAULT_EDGE_LEVEL,
    DEFAULT_SEED,
    DEFAULT_TRAFFIC_LEVEL,
    DEFAULT_VERTEX_COUNT,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
)
from route_planner.generation import GenerationStalledError  # noqa: E402
from route_planner.graph import Graph, generate_example  # noqa: E402
from route_planner.pathfinding import available_algorithms  # noqa: E402
from route_planner.planner import generate_organic, shortest_path  # noqa: E402


def pick_vertex(graph: Graph, name: str, exclude: str | None = None) -> str:
    """Resolve 'random' to a random vertex name (different from exclude)."""
    if name.lower() != "random":
        return name
    candidates = [n for n in graph.names if n != exclude] or graph.names
    return random.choice(candidates)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Plan the shortest route between two vertices",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--start",
        type=str,
        default="random",
        help="Start vertex name (or 'random', the default)",
    )
    parser.add_argument(
        "--target",
        type=str,
        default="random",
        help="Target vertex name (or 'random', the default)",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=available_algorithms(),
        help=f"Pathfinding algorithm (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--example",
        action="store_true",
        help="Use the fixed six-vertex example graph instead of generating one",
    )
    parser.add_argument(
        "--vertices",
        type=int,
        default=DEFAULT_VERTEX_COUNT,
        help=f"Number of vertices to generate (default: {DEFAULT_VERTEX_COUNT})",
    )
    parser.add_argument(
        "--edges",
        type=int,
        default=DEFAULT_EDGE_LEVEL,
        help=f"Edge concentration, 2-8 (default: {DEFAULT_EDGE_LEVEL})",
    )
    parser.add_argument(
        "--distance",
        type=float,
        default=DEFAULT_AVG_DISTANCE,
        help=f"Average distance between vertices (default: {DEFAULT_AVG_DISTANCE:g})",
    )
    parser.add_argument(
        "--traffic",
        type=float,
        default=DEFAULT_TRAFFIC_LEVEL,
        help=f"Traffic level, 0-4 (default: {DEFAULT_TRAFFIC_LEVEL:g})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help="Random seed for reproducible graphs and endpoint picks",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print every vertex and its connections",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if args.seed is not None:
        random.seed(args.seed)

    if args.example:
        graph = generate_example()
    else:
        try:
            graph = generate_organic(
                vertex_count=args.vertices,
                edge_level=args.edges,
                avg_distance=args.distance,
                traffic_level=args.traffic,
                seed=args.seed,
            )
        except GenerationStalledError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    if args.dump:
        print(graph.describe())

    start = pick_vertex(graph, args.start)
    target = pick_vertex(graph, args.target, exclude=start)

    print("\n" + "=" * 60)
    print("Route Planner")
    print("=" * 60)
    print(f"  Graph:     {len(graph)} vertices, {graph.edge_count()} edges")
    print(f"  Start:     {start}")
    print(f"  Target:    {target}")
    print(f"  Algorithm: {args.algorithm}")
    print("=" * 60 + "\n")

    result = shortest_path(graph, start, target, algorithm=args.algorithm)

    if not result.found:
        print(f"No route: {result.status.value.replace('_', ' ')}")
        return 1

    print("Route:")
    for i, vertex in enumerate(result.path):
        marker = " (START)" if i == 0 else " (TARGET)" if i == len(result.path) - 1 else ""
        print(f"  {i}. {vertex}{marker}")

    print(f"\nDistance: {result.distance:.2f}")
    print(f"Expanded: {result.expanded} vertices")
    print(f"Search time: {result.elapsed_ms:.2f} ms")

    return 0


if __name__ == "__main__":
    sys.exit(main())
