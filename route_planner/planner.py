"""
Boundary functions for presentation code.

The demo UI and scripts only talk to the core through these functions and
the read-only Vertex accessors (name, x, y, connections).

Usage:
    from route_planner.planner import generate_organic, shortest_path

    graph = generate_organic(40, 3, 300, 1, seed=7)
    result = shortest_path(graph, "00", "39", algorithm="astar")
    if result.found:
        print(result.names, result.distance)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from route_planner.config import (
    DEFAULT_ALGORITHM,
    DEFAULT_AVG_DISTANCE,
    DEFAULT_EDGE_LEVEL,
    DEFAULT_TRAFFIC_LEVEL,
    DEFAULT_VERTEX_COUNT,
)
from route_planner.generation import OrganicGenerator
from route_planner.graph import Graph, Vertex
from route_planner.pathfinding import PathResult, get_pathfinder

logger = logging.getLogger(__name__)


def create_graph(*vertices: Vertex) -> Graph:
    """Create a graph holding the given vertices (connections untouched)."""
    return Graph(*vertices)


def add_connection(graph: Graph, a: Vertex, b: Vertex, weight: float) -> bool:
    """
    Add both vertices (if absent) and an undirected connection between them.

    Returns:
        True if anything in the graph changed
    """
    return graph.add(a, b, weight)


def remove_vertex(graph: Graph, vertex: Vertex, purge_edges: bool = True) -> bool:
    """
    Remove a vertex from the graph.

    Args:
        graph: Graph to modify
        vertex: Vertex to remove
        purge_edges: Also remove its connections from all neighbors. When
            False, neighbors keep dangling edges to the removed vertex.

    Returns:
        True if the vertex or any connection was removed
    """
    if purge_edges:
        return graph.remove(vertex)
    return graph.remove_vertex(vertex)


def shortest_path(
    graph: Graph,
    source: Vertex | str,
    target: Vertex | str,
    algorithm: str = DEFAULT_ALGORITHM,
) -> PathResult:
    """
    Find the shortest route between two vertices.

    Args:
        graph: Graph to search
        source: Start vertex or its name
        target: Goal vertex or its name
        algorithm: 'dijkstra' or 'astar'

    Returns:
        PathResult; check result.status for NO_PATH / INVALID_QUERY

    Raises:
        ValueError: If algorithm name is unknown
    """
    return get_pathfinder(algorithm).find_path(graph, source, target)


def generate_organic(
    vertex_count: int = DEFAULT_VERTEX_COUNT,
    edge_level: int = DEFAULT_EDGE_LEVEL,
    avg_distance: float = DEFAULT_AVG_DISTANCE,
    traffic_level: float = DEFAULT_TRAFFIC_LEVEL,
    seed: int | None = None,
) -> Graph:
    """
    Generate an organic random graph.

    The same seed and parameters always produce the same graph.

    Raises:
        GenerationStalledError: If placement could not finish
    """
    generator = OrganicGenerator(
        vertex_count=vertex_count,
        edge_level=edge_level,
        avg_distance=avg_distance,
        traffic_level=traffic_level,
        seed=seed,
    )
    return generator.generate()


def path_weight(path: Sequence[Vertex]) -> float:
    """
    Total weight of consecutive edges along a path.

    Raises:
        KeyError: If two consecutive vertices are not connected
    """
    return float(sum(current.connections[following] for current, following in zip(path, path[1:])))
