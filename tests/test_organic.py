"""
Unit tests for the organic graph generator.
"""

import math
from collections import deque

import numpy as np
import pytest

from route_planner.config import ANCHOR_RELAX_INTERVAL, MIN_DIST_DECAY, MIN_DIST_MARGIN
from route_planner.generation import (
    GenerationStalledError,
    OrganicGenerator,
    generate_random_organic,
    least_dense_direction,
)
from route_planner.graph import Graph, Vertex
from tests.helpers import FixedRandom


def snapshot(graph: Graph) -> dict:
    """Comparable view of names, positions and weights."""
    return {
        v.name: (v.x, v.y, sorted((o.name, w) for o, w in v.connections.items()))
        for v in graph
    }


def reachable_names(graph: Graph, start: str) -> set[str]:
    seen = {start}
    queue = deque([graph.get(start)])
    while queue:
        current = queue.popleft()
        for neighbor in current.connections:
            if neighbor.name not in seen:
                seen.add(neighbor.name)
                queue.append(neighbor)
    return seen


class TestLeastDenseDirection:
    """Test the growth direction heuristic."""

    def test_no_neighbors_is_uniform(self, fixed_rng):
        """Isolated vertices take the uniform draw."""
        angle = least_dense_direction(Vertex("a", 0, 0), fixed_rng)
        assert -math.pi <= angle < math.pi

    def test_single_neighbor_points_away(self, fixed_rng):
        """One neighbor to the east sends growth west."""
        a, b = Vertex("a", 0, 0), Vertex("b", 10, 0)
        a.add_edge(b, 10)
        angle = least_dense_direction(a, fixed_rng)
        assert math.cos(angle) == pytest.approx(-1)

    def test_bisects_widest_gap(self, fixed_rng):
        """Neighbors east and south leave the widest gap centred north-west."""
        a = Vertex("a", 0, 0)
        a.add_edge(Vertex("east", 10, 0), 10)
        a.add_edge(Vertex("south", 0, 10), 10)
        angle = least_dense_direction(a, fixed_rng)
        assert angle == pytest.approx(-3 * math.pi / 4)

    def test_gap_between_sorted_neighbors(self, fixed_rng):
        """The widest gap may sit between two neighbors rather than at the seam."""
        a = Vertex("a", 0, 0)
        for angle in (-3.0, -2.5, 2.5, 3.0):
            a.add_edge(Vertex(str(angle), math.cos(angle), math.sin(angle)), 1)
        result = least_dense_direction(a, fixed_rng)
        assert result == pytest.approx(0.0, abs=1e-9)

    def test_jitter_is_bounded_in_practice(self):
        """With real noise the direction stays near the opposite side."""
        a, b = Vertex("a", 0, 0), Vertex("b", 10, 0)
        a.add_edge(b, 10)
        rng = np.random.default_rng(0)
        angles = [least_dense_direction(a, rng) for _ in range(200)]
        assert np.mean([math.cos(x) for x in angles]) < -0.5


class TestParameters:
    """Out-of-range parameters are clamped."""

    def test_clamps(self):
        generator = OrganicGenerator(vertex_count=0, edge_level=20, avg_distance=10, traffic_level=-3)
        assert generator.vertex_count == 1
        assert generator.edge_level == 8
        assert generator.avg_distance == 80
        assert generator.traffic_level == 0

    def test_upper_vertex_bound(self):
        assert OrganicGenerator(vertex_count=10**6).vertex_count == 1000

    def test_out_of_range_logs_warning(self, caplog):
        with caplog.at_level("WARNING", logger="route_planner.generation.organic"):
            OrganicGenerator(edge_level=20)
        assert "edge_level=20 out of range" in caplog.text

    def test_in_range_is_silent(self, caplog):
        with caplog.at_level("WARNING", logger="route_planner.generation.organic"):
            OrganicGenerator(vertex_count=1000, edge_level=2, avg_distance=80, traffic_level=4)
        assert caplog.records == []

    def test_min_dist(self):
        assert OrganicGenerator(avg_distance=300).min_dist == 80
        assert OrganicGenerator(avg_distance=1000).min_dist == 200


class TestGeneration:
    """Test generated graph invariants."""

    def test_single_vertex(self):
        """One vertex, no edges."""
        graph = generate_random_organic(1, 3, 300, 1, seed=0)
        assert len(graph) == 1
        assert graph.vertices[0].connections == {}

    @pytest.mark.parametrize("count", [2, 10, 40, 120])
    def test_exact_vertex_count(self, count):
        graph = generate_random_organic(count, 3, 300, 1, seed=count)
        assert len(graph) == count

    def test_names_are_zero_padded(self):
        graph = generate_random_organic(12, 3, 300, 1, seed=1)
        assert graph.names == [f"{i:02d}" for i in range(12)]

    def test_first_vertex_at_origin(self):
        graph = generate_random_organic(5, 3, 300, 1, seed=1)
        first = graph.get("0")
        assert (first.x, first.y) == (0.0, 0.0)

    @pytest.mark.parametrize("seed", range(4))
    def test_every_later_vertex_connected(self, seed):
        graph = generate_random_organic(60, 3, 300, 2, seed=seed)
        for vertex in graph.vertices[1:]:
            assert vertex.degree >= 1

    @pytest.mark.parametrize("seed", range(3))
    def test_connected_both_ways(self, seed):
        """Every vertex reaches and is reached from the first one."""
        graph = generate_random_organic(50, 4, 250, 1, seed=seed)
        assert reachable_names(graph, "00") == set(graph.names)
        for vertex in graph:
            for neighbor in vertex.connections:
                assert vertex in neighbor.connections

    def test_no_self_edges(self):
        graph = generate_random_organic(80, 6, 200, 1, seed=9)
        for vertex in graph:
            assert vertex not in vertex.connections

    @pytest.mark.parametrize("traffic", [0, 2, 4])
    def test_weights_at_least_distance(self, traffic):
        """Traffic only adds cost, keeping A* admissible."""
        graph = generate_random_organic(40, 3, 300, traffic, seed=5)
        for vertex in graph:
            for neighbor, weight in vertex.connections.items():
                assert weight >= vertex.dist_to(neighbor) - 1e-9

    def test_same_seed_same_graph(self):
        first = generate_random_organic(50, 3, 300, 1, seed=42)
        second = generate_random_organic(50, 3, 300, 1, seed=42)
        assert snapshot(first) == snapshot(second)

    def test_different_seed_different_graph(self):
        first = generate_random_organic(50, 3, 300, 1, seed=1)
        second = generate_random_organic(50, 3, 300, 1, seed=2)
        assert snapshot(first) != snapshot(second)

    def test_injected_rng(self):
        """An explicit Generator is used instead of the seed."""
        first = generate_random_organic(30, 3, 300, 1, rng=np.random.default_rng(7), seed=999)
        second = generate_random_organic(30, 3, 300, 1, seed=7)
        assert snapshot(first) == snapshot(second)

    def test_stats(self):
        generator = OrganicGenerator(vertex_count=30, seed=3)
        graph = generator.generate()
        assert generator.stats.vertices == 30
        assert generator.stats.edges == graph.edge_count()
        assert generator.stats.elapsed_ms >= 0

    def test_stall_raises_with_partial_graph(self):
        """The attempt cap surfaces as an explicit error."""
        generator = OrganicGenerator(vertex_count=5, seed=0, max_attempts=1)
        with pytest.raises(GenerationStalledError) as excinfo:
            generator.generate()
        assert len(excinfo.value.graph) == 1

    def test_deterministic_layout_with_fixed_rng(self):
        """Without noise the second vertex lands avg_distance from the origin."""
        generator = OrganicGenerator(vertex_count=2, avg_distance=300, rng=FixedRandom())
        graph = generator.generate()
        second = graph.get("1")
        assert math.hypot(second.x, second.y) == pytest.approx(300)
        assert graph.adjacent(graph.get("0"), second)
        assert graph.adjacent(second, graph.get("0"))


class TestCrowdingSchedule:
    """Test the mechanisms that keep generation from starving."""

    def test_budget_relaxes_after_repeated_anchor_rejections(self):
        """
        With the lowest jitter every draw, the origin's budget is one edge.
        Once it holds that edge, only the relaxation lets it anchor again.
        """
        generator = OrganicGenerator(vertex_count=3, edge_level=2, avg_distance=300, rng=FixedRandom())
        graph = generator.generate()

        assert len(graph) == 3
        assert generator.stats.anchor_rejections == ANCHOR_RELAX_INTERVAL
        assert graph.adjacent(graph.get("2"), graph.get("0"))

    def test_threshold_decays_until_candidate_fits(self):
        """
        A candidate exactly min_dist away is too close at first and is
        accepted once the threshold has decayed below its gap.
        """
        generator = OrganicGenerator(vertex_count=2, avg_distance=80, rng=FixedRandom())
        graph = generator.generate()

        second = graph.get("1")
        gap = math.hypot(second.x, second.y)
        rejections = generator.stats.placement_rejections
        start = generator.min_dist + MIN_DIST_MARGIN

        assert gap == pytest.approx(80)
        assert gap < start
        assert 100 <= rejections <= 101
        assert gap > start - generator.min_dist * MIN_DIST_DECAY * rejections - 1e-6

    def test_crowded_seeded_runs_anneal(self):
        """Dense parameters reject candidates and still finish."""
        generator = OrganicGenerator(vertex_count=150, edge_level=8, avg_distance=80, seed=11)
        graph = generator.generate()
        assert len(graph) == 150
        assert generator.stats.placement_rejections > 0
