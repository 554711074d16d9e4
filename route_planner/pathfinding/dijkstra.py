"""
Dijkstra's algorithm: best-first search by tentative distance alone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from route_planner.pathfinding.base import Pathfinder

if TYPE_CHECKING:
    from route_planner.graph.vertex import Vertex


class DijkstraPathfinder(Pathfinder):
    """
    Classical Dijkstra over non-negative edge weights.

    Always optimal; expands every vertex closer to the source than the
    target.
    """

    @property
    def name(self) -> str:
        return "dijkstra"

    @property
    def description(self) -> str:
        return "Dijkstra's algorithm (uniform-cost search)"

    def heuristic(self, vertex: Vertex, target: Vertex) -> float:
        return 0.0
