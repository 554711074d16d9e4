"""
Pathfinder base class and the shared best-first search.

All scratch state (tentative distances, predecessors, frontier) lives in
locals of a single find_path() call, so any number of queries may run over
the same graph at once and the graph itself is never written to.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from route_planner.pathfinding.result import PathResult, QueryStatus

if TYPE_CHECKING:
    from route_planner.graph.graph import Graph
    from route_planner.graph.vertex import Vertex

logger = logging.getLogger(__name__)


class Pathfinder(ABC):
    """
    Abstract base class for single-pair shortest-path algorithms.

    Subclasses only supply a heuristic; the search loop is shared. The
    frontier is a binary heap ordered by distance + heuristic with lazy
    deletion: a relaxed vertex is pushed again and its outdated entries
    are skipped when popped. Ties are broken by insertion order.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier (e.g., 'dijkstra', 'astar')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the algorithm."""
        ...

    @abstractmethod
    def heuristic(self, vertex: Vertex, target: Vertex) -> float:
        """Estimated remaining cost from vertex to target."""
        ...

    def find_path(
        self,
        graph: Graph,
        source: Vertex | str,
        target: Vertex | str,
    ) -> PathResult:
        """
        Find the minimum-weight directed path from source to target.

        Args:
            graph: Graph to search
            source: Start vertex (or its name)
            target: Goal vertex (or its name)

        Returns:
            PathResult with status FOUND, NO_PATH or INVALID_QUERY
        """
        start_time = time.perf_counter()

        source_vertex = self._resolve(graph, source)
        target_vertex = self._resolve(graph, target)
        if source_vertex is None or target_vertex is None:
            logger.warning(f"{self.name}: path vertices not in graph ({source!s} -> {target!s})")
            return PathResult(status=QueryStatus.INVALID_QUERY, algorithm=self.name)

        result = self._search(graph, source_vertex, target_vertex)
        result.elapsed_ms = (time.perf_counter() - start_time) * 1000

        if result.found:
            logger.debug(
                f"{self.name}: {' -> '.join(result.names)} "
                f"(distance {result.distance:.2f}, expanded {result.expanded})"
            )
        else:
            logger.debug(f"{self.name}: no path from '{source_vertex.name}' to '{target_vertex.name}'")
        return result

    @staticmethod
    def _resolve(graph: Graph, endpoint: Vertex | str) -> Vertex | None:
        """Map a name or vertex to the vertex registered under that name."""
        if isinstance(endpoint, str):
            return graph.get(endpoint)
        return graph.get(endpoint.name)

    def _search(self, graph: Graph, source: Vertex, target: Vertex) -> PathResult:
        distance: dict[Vertex, float] = {source: 0.0}
        previous: dict[Vertex, Vertex] = {}
        visited: set[Vertex] = set()

        # Entries: (priority, sequence, distance when pushed, vertex)
        sequence = itertools.count()
        frontier = [(self.heuristic(source, target), next(sequence), 0.0, source)]

        while frontier:
            _, _, dist, current = heapq.heappop(frontier)
            if current in visited or dist > distance[current]:
                continue  # stale entry
            visited.add(current)

            if current is target:
                return PathResult(
                    status=QueryStatus.FOUND,
                    algorithm=self.name,
                    path=self._reconstruct(previous, source, target),
                    distance=dist,
                    expanded=len(visited),
                )

            for neighbor, weight in current.connections.items():
                # Edges may dangle after Graph.remove_vertex()
                if neighbor in visited or not graph.contains(neighbor):
                    continue
                candidate = dist + weight
                if candidate < distance.get(neighbor, math.inf):
                    distance[neighbor] = candidate
                    previous[neighbor] = current
                    priority = candidate + self.heuristic(neighbor, target)
                    heapq.heappush(frontier, (priority, next(sequence), candidate, neighbor))

        return PathResult(
            status=QueryStatus.NO_PATH,
            algorithm=self.name,
            expanded=len(visited),
        )

    @staticmethod
    def _reconstruct(previous: dict[Vertex, Vertex], source: Vertex, target: Vertex) -> list[Vertex]:
        """Follow predecessor links from target back to source."""
        path = [target]
        current = target
        while current is not source:
            current = previous[current]
            path.append(current)
        path.reverse()
        return path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
