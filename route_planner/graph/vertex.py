"""
Vertex: a named point in the plane with directed, weighted adjacency.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from route_planner.config import (
    MAX_TRAFFIC_LEVEL,
    MIN_TRAFFIC_LEVEL,
    TRAFFIC_LEVEL_SCALE,
)
from route_planner.geometry import clamp, distance

if TYPE_CHECKING:
    import numpy as np


@dataclass(frozen=True, eq=False)
class Vertex:
    """
    A named, positioned node in a graph.

    Vertices compare and hash by identity. The name is the key a Graph
    registers them under; coordinates are payload only.

    Attributes:
        name: Unique key within a Graph
        x: Horizontal position
        y: Vertical position
        connections: Neighbor vertex -> edge weight (directed)
    """

    name: str
    x: float
    y: float
    connections: dict[Vertex, float] = field(default_factory=dict, repr=False)

    @property
    def degree(self) -> int:
        """Number of outgoing edges."""
        return len(self.connections)

    def dist_to_point(self, x: float, y: float) -> float:
        """Cartesian distance to a location."""
        return distance(self.x, self.y, x, y)

    def dist_to(self, other: Vertex) -> float:
        """Cartesian distance to another vertex."""
        return self.dist_to_point(other.x, other.y)

    def angle_to(self, other: Vertex) -> float:
        """Direction of other as seen from this vertex, in radians."""
        return math.atan2(other.y - self.y, other.x - self.x)

    def add_edge(self, adjacent: Vertex | None, weight: float) -> bool:
        """
        Add or update the directed edge to adjacent.

        Args:
            adjacent: Vertex the edge points to
            weight: Finite, non-negative edge cost

        Returns:
            True if the edge is new or its weight changed

        Raises:
            ValueError: If weight is negative, NaN or infinite
        """
        if not math.isfinite(weight) or weight < 0:
            raise ValueError(f"Edge weight must be finite and non-negative, got {weight}")
        if adjacent is None:
            return False

        previous = self.connections.get(adjacent)
        self.connections[adjacent] = weight
        return previous is None or previous != weight

    def add_trafficked_edge(
        self,
        adjacent: Vertex,
        traffic_level: float,
        rng: np.random.Generator,
    ) -> bool:
        """
        Add an edge weighted by distance plus random congestion.

        The extra cost is dist * (N(0,1) + traffic_level * 0.5), floored
        at zero, so the weight never drops below the straight-line distance.
        """
        if adjacent is None:
            return False
        dist = self.dist_to(adjacent)
        traffic_level = clamp(traffic_level, MIN_TRAFFIC_LEVEL, MAX_TRAFFIC_LEVEL)
        traffic = dist * (rng.standard_normal() + traffic_level * TRAFFIC_LEVEL_SCALE)
        return self.add_edge(adjacent, dist + max(float(traffic), 0.0))

    def remove_edge(self, adjacent: Vertex) -> bool:
        """Remove the edge to adjacent. Returns True if one existed."""
        return self.connections.pop(adjacent, None) is not None

    def copy_without_connections(self) -> Vertex:
        return Vertex(self.name, self.x, self.y)

    def __str__(self) -> str:
        return f"{self.name}({self.x}, {self.y})"
