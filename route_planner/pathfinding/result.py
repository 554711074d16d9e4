"""
Result dataclasses for shortest-path queries.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from route_planner.graph.vertex import Vertex


class QueryStatus(str, Enum):
    """Outcome of a path query."""

    FOUND = "found"
    NO_PATH = "no_path"
    INVALID_QUERY = "invalid_query"


@dataclass
class PathResult:
    """
    Complete record of a finished path query.

    Attributes:
        status: Whether a path was found, the target was unreachable,
            or an endpoint was not in the graph
        algorithm: Name of the pathfinder that answered the query
        path: Vertices from source to target (empty unless FOUND)
        distance: Total path weight (inf unless FOUND)
        expanded: Number of vertices popped and expanded
        elapsed_ms: Wall time spent in the search (milliseconds)
    """

    status: QueryStatus
    algorithm: str
    path: list[Vertex] = field(default_factory=list)
    distance: float = math.inf
    expanded: int = 0
    elapsed_ms: float = 0.0

    @property
    def found(self) -> bool:
        return self.status is QueryStatus.FOUND

    @property
    def names(self) -> list[str]:
        """Vertex names along the path."""
        return [v.name for v in self.path]

    @property
    def hops(self) -> int:
        """Number of edges traversed (0 when no path)."""
        return max(len(self.path) - 1, 0)

    def __str__(self) -> str:
        if not self.found:
            return f"{self.algorithm}: {self.status.value}"
        return f"{self.algorithm}: {' -> '.join(self.names)} (distance {self.distance:.2f})"
