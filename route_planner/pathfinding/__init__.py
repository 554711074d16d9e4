"""
Pathfinding module.

Provides single-pair shortest-path algorithms over a Graph:
- DijkstraPathfinder: Uniform-cost search
- AStarPathfinder: Euclidean-heuristic guided search
- PathResult / QueryStatus: Query outcome records
"""

from route_planner.pathfinding.astar import AStarPathfinder
from route_planner.pathfinding.base import Pathfinder
from route_planner.pathfinding.dijkstra import DijkstraPathfinder
from route_planner.pathfinding.result import PathResult, QueryStatus

__all__ = [
    "Pathfinder",
    "DijkstraPathfinder",
    "AStarPathfinder",
    "PathResult",
    "QueryStatus",
    "get_pathfinder",
    "available_algorithms",
]

_PATHFINDERS = {
    "dijkstra": DijkstraPathfinder,
    "astar": AStarPathfinder,
}


def available_algorithms() -> list[str]:
    """Names accepted by get_pathfinder()."""
    return list(_PATHFINDERS)


def get_pathfinder(name: str) -> Pathfinder:
    """
    Get a pathfinder by name.

    Args:
        name: Algorithm identifier (dijkstra, astar)

    Returns:
        Instantiated pathfinder

    Raises:
        ValueError: If algorithm name is unknown
    """
    key = name.lower().replace("*", "star").replace("-", "")
    if key not in _PATHFINDERS:
        available = ", ".join(_PATHFINDERS)
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")
    return _PATHFINDERS[key]()
