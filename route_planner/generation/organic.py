"""
Organic random graph generation.

Grows a graph one vertex at a time: each new vertex sprouts from a random
existing "anchor" in the anchor's least crowded direction, is accepted
only if it keeps its distance from every other vertex, and is connected to
the anchor and to whatever else lies close by. The result looks like a
road network rather than a uniform scatter.

Every random draw comes from one numpy Generator, so a seed fully
determines the output for fixed parameters.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass

import numpy as np

from route_planner.config import (
    ANCHOR_RELAX_INTERVAL,
    ANGLE_SPREAD,
    DEFAULT_AVG_DISTANCE,
    DEFAULT_EDGE_LEVEL,
    DEFAULT_TRAFFIC_LEVEL,
    DEFAULT_VERTEX_COUNT,
    DISTANCE_SPREAD,
    EDGE_BUDGET_JITTER,
    MAX_ATTEMPTS_PER_VERTEX,
    MAX_EDGE_BUDGET,
    MAX_EDGE_LEVEL,
    MAX_TRAFFIC_LEVEL,
    MAX_VERTICES,
    MIN_AVG_DISTANCE,
    MIN_DIST_DECAY,
    MIN_DIST_DIVISOR,
    MIN_DIST_FLOOR,
    MIN_DIST_MARGIN,
    MIN_EDGE_BUDGET,
    MIN_EDGE_LEVEL,
    MIN_TRAFFIC_LEVEL,
    MIN_VERTICES,
    ORIGIN_X,
    ORIGIN_Y,
)
from route_planner.geometry import clamp, is_between, normalize_angle, polar_offset
from route_planner.geometry.mathutil import TAU
from route_planner.graph.graph import Graph
from route_planner.graph.vertex import Vertex

logger = logging.getLogger(__name__)


class GenerationStalledError(RuntimeError):
    """
    Raised when a vertex could not be placed within the attempt cap.

    Attributes:
        graph: The partially generated graph at the time of the stall
    """

    def __init__(self, message: str, graph: Graph) -> None:
        super().__init__(message)
        self.graph = graph


@dataclass
class GenerationStats:
    """
    Counters from the most recent generate() call.

    Attributes:
        vertices: Vertices placed
        edges: Directed edges created
        anchor_rejections: Anchors re-rolled because they were at their edge budget
        placement_rejections: Candidate positions rejected as too crowded
        elapsed_ms: Generation wall time (milliseconds)
    """

    vertices: int = 0
    edges: int = 0
    anchor_rejections: int = 0
    placement_rejections: int = 0
    elapsed_ms: float = 0.0


def least_dense_direction(vertex: Vertex, rng: np.random.Generator) -> float:
    """
    Pick a growth direction pointing away from vertex's neighbors.

    Neighbor angles are sorted around the circle and the bisector of the
    widest gap between consecutive ones (wrapping around) is returned,
    jittered by N(0, gap / 8). With a single neighbor the gap is the full
    circle, so the result is the opposite direction. Without neighbors the
    angle is uniform.
    """
    angles = sorted(vertex.angle_to(other) for other in vertex.connections if other is not vertex)
    if not angles:
        return normalize_angle(float(rng.uniform(0.0, TAU)))

    best_start, best_gap = angles[-1], angles[0] + TAU - angles[-1]
    for start, end in zip(angles, angles[1:]):
        if end - start > best_gap:
            best_start, best_gap = start, end - start

    bisector = best_start + best_gap / 2
    return normalize_angle(bisector + float(rng.normal(0.0, best_gap / ANGLE_SPREAD)))


def _clamp_param(name: str, value: float, low: float, high: float) -> float:
    if is_between(value, low, high):
        return value
    clamped = clamp(value, low, high)
    logger.warning(f"{name}={value} out of range, clamped to {clamped}")
    return clamped


class OrganicGenerator:
    """
    Density-aware incremental graph generator.

    Out-of-range parameters are clamped (with a warning), never rejected.

    Example:
        generator = OrganicGenerator(vertex_count=40, edge_level=3, seed=7)
        graph = generator.generate()
        print(generator.stats)
    """

    def __init__(
        self,
        vertex_count: int = DEFAULT_VERTEX_COUNT,
        edge_level: int = DEFAULT_EDGE_LEVEL,
        avg_distance: float = DEFAULT_AVG_DISTANCE,
        traffic_level: float = DEFAULT_TRAFFIC_LEVEL,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
        max_attempts: int = MAX_ATTEMPTS_PER_VERTEX,
    ) -> None:
        """
        Initialize the generator.

        Args:
            vertex_count: Number of vertices to produce, within [1, 1000]
            edge_level: Target edges per vertex, within [2, 8]
            avg_distance: Mean edge length, at least 80
            traffic_level: Congestion noise on weights, within [0, 4]
            rng: Random source; takes precedence over seed
            seed: Seed for a fresh numpy Generator when rng is not given
            max_attempts: Attempt cap per vertex before giving up
        """
        self.vertex_count = int(_clamp_param("vertex_count", int(vertex_count), MIN_VERTICES, MAX_VERTICES))
        self.edge_level = int(_clamp_param("edge_level", int(edge_level), MIN_EDGE_LEVEL, MAX_EDGE_LEVEL))
        self.avg_distance = float(_clamp_param("avg_distance", float(avg_distance), MIN_AVG_DISTANCE, math.inf))
        self.traffic_level = float(
            _clamp_param("traffic_level", float(traffic_level), MIN_TRAFFIC_LEVEL, MAX_TRAFFIC_LEVEL)
        )
        self.max_attempts = max_attempts

        # Base crowding threshold; the accepted radius never falls below it
        self.min_dist = max(self.avg_distance / MIN_DIST_DIVISOR, MIN_DIST_FLOOR)

        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self.stats = GenerationStats()

    def generate(self) -> Graph:
        """
        Grow a new graph.

        Returns:
            Graph with exactly vertex_count vertices, connected by construction

        Raises:
            GenerationStalledError: If a vertex could not be placed within
                max_attempts tries
        """
        start_time = time.perf_counter()
        self.stats = GenerationStats()

        graph = Graph()
        placed: list[Vertex] = []
        xs: list[float] = []
        ys: list[float] = []

        for index in range(self.vertex_count):
            name = self._vertex_name(index)
            if index == 0:
                vertex = Vertex(name, ORIGIN_X, ORIGIN_Y)
            else:
                vertex = self._grow(graph, placed, np.asarray(xs), np.asarray(ys), name)

            graph.add_vertex(vertex)
            placed.append(vertex)
            xs.append(vertex.x)
            ys.append(vertex.y)

        self.stats.vertices = len(graph)
        self.stats.edges = graph.edge_count()
        self.stats.elapsed_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            f"Generated {self.stats.vertices} vertices, {self.stats.edges} edges "
            f"in {self.stats.elapsed_ms:.0f} ms"
        )
        return graph

    def least_dense_direction(self, vertex: Vertex) -> float:
        return least_dense_direction(vertex, self._rng)

    def _vertex_name(self, index: int) -> str:
        """Zero-padded index so names sort in creation order."""
        return str(index).zfill(len(str(self.vertex_count)))

    def _pick_anchor(self, graph: Graph, placed: list[Vertex], attempts: int) -> tuple[Vertex, int]:
        """
        Choose an existing vertex that still has room for another edge.

        Returns:
            The anchor and the updated attempt count
        """
        rejections = 0
        while True:
            attempts = self._count_attempt(graph, attempts)
            anchor = placed[int(self._rng.integers(len(placed)))]

            jitter = int(self._rng.integers(-EDGE_BUDGET_JITTER, EDGE_BUDGET_JITTER + 1))
            budget = clamp(self.edge_level + jitter, MIN_EDGE_BUDGET, MAX_EDGE_BUDGET)
            # Starvation valve: loosen the budget the longer we search
            budget += rejections // ANCHOR_RELAX_INTERVAL

            if anchor.degree < budget:
                return anchor, attempts

            rejections += 1
            self.stats.anchor_rejections += 1

    def _grow(
        self,
        graph: Graph,
        placed: list[Vertex],
        xs: np.ndarray,
        ys: np.ndarray,
        name: str,
    ) -> Vertex:
        """Place one new vertex next to an anchor and connect it."""
        anchor, attempts = self._pick_anchor(graph, placed, 0)

        relaxed_min_dist = self.min_dist + MIN_DIST_MARGIN
        spread = self.avg_distance / DISTANCE_SPREAD
        while True:
            attempts = self._count_attempt(graph, attempts)

            length = max(float(self._rng.normal(self.avg_distance, spread)), 0.0)
            dx, dy = polar_offset(length, self.least_dense_direction(anchor))
            x, y = anchor.x + dx, anchor.y + dy

            gaps = np.hypot(xs - x, ys - y)
            if gaps.min() > relaxed_min_dist:
                break

            # Anneal so that crowded regions still terminate
            relaxed_min_dist -= self.min_dist * MIN_DIST_DECAY
            self.stats.placement_rejections += 1

        # Each existing vertex gets its own acceptance radius
        radii = np.maximum(self._rng.normal(self.avg_distance, spread, size=len(placed)), self.min_dist)
        neighbors = [anchor]
        neighbors.extend(placed[i] for i in np.flatnonzero(gaps <= radii) if placed[i] is not anchor)

        vertex = Vertex(name, x, y)
        for neighbor in neighbors:
            vertex.add_trafficked_edge(neighbor, self.traffic_level, self._rng)
            if vertex not in neighbor.connections:
                neighbor.add_trafficked_edge(vertex, self.traffic_level, self._rng)
        return vertex

    def _count_attempt(self, graph: Graph, attempts: int) -> int:
        attempts += 1
        if attempts > self.max_attempts:
            raise GenerationStalledError(
                f"Could not place vertex {len(graph)} after {self.max_attempts} attempts",
                graph,
            )
        return attempts


def generate_random_organic(
    vertex_count: int = DEFAULT_VERTEX_COUNT,
    edge_level: int = DEFAULT_EDGE_LEVEL,
    avg_distance: float = DEFAULT_AVG_DISTANCE,
    traffic_level: float = DEFAULT_TRAFFIC_LEVEL,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> Graph:
    """Generate an organic graph in one call. See OrganicGenerator."""
    generator = OrganicGenerator(
        vertex_count=vertex_count,
        edge_level=edge_level,
        avg_distance=avg_distance,
        traffic_level=traffic_level,
        rng=rng,
        seed=seed,
    )
    return generator.generate()
