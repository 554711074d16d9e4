"""
A* search guided by straight-line distance to the target.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from route_planner.pathfinding.base import Pathfinder

if TYPE_CHECKING:
    from route_planner.graph.vertex import Vertex


class AStarPathfinder(Pathfinder):
    """
    A* with the Euclidean distance heuristic.

    Frontier priority is g(n) + h(n) where h is the cartesian distance
    to the target. Relaxation still compares g only. The heuristic is
    admissible and consistent whenever every edge weight is at least the
    distance between its endpoints, which holds for generated graphs
    (distance plus non-negative traffic), so paths stay optimal.
    """

    @property
    def name(self) -> str:
        return "astar"

    @property
    def description(self) -> str:
        return "A* with straight-line distance heuristic"

    def heuristic(self, vertex: Vertex, target: Vertex) -> float:
        return vertex.dist_to(target)
