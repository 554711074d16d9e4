"""
Tests for the plotly figure builders used by the UI.
"""

import pytest

from route_planner.graph import Vertex
from route_planner.planner import shortest_path
from ui.components.charts import (
    TRAFFIC_BUCKETS,
    create_expansion_chart,
    create_graph_figure,
    traffic_ratio,
)


class TestGraphFigure:
    """Test the graph drawing."""

    def test_traces_without_route(self, example_graph):
        """One trace per traffic bucket plus the locations."""
        fig = create_graph_figure(example_graph)
        assert len(fig.data) == len(TRAFFIC_BUCKETS) + 1
        assert list(fig.data[-1].text) == example_graph.names

    def test_route_trace(self, example_graph):
        result = shortest_path(example_graph, "a", "e")
        fig = create_graph_figure(example_graph, result, start="a", goal="e")
        route = fig.data[len(TRAFFIC_BUCKETS)]
        assert list(route.x) == [0, 20, 300]
        assert list(route.y) == [100, 550, 600]

    def test_each_pair_drawn_once(self, example_graph):
        """Distance-weighted edges are all clear and drawn once each."""
        fig = create_graph_figure(example_graph)
        clear = fig.data[0]
        # Three points (a, b, None) per segment
        assert len(clear.x) == 9 * 3

    def test_dangling_edges_not_drawn(self, example_graph):
        example_graph.remove_vertex(example_graph.get("c"))
        fig = create_graph_figure(example_graph)
        assert len(fig.data[0].x) == 5 * 3


class TestTrafficRatio:
    """Test edge cost relative to length."""

    def test_plain_distance(self):
        a, b = Vertex("a", 0, 0), Vertex("b", 3, 4)
        a.add_edge(b, 5)
        b.add_edge(a, 5)
        assert traffic_ratio(a, b) == pytest.approx(1.0)

    def test_mean_of_directions(self):
        a, b = Vertex("a", 0, 0), Vertex("b", 3, 4)
        a.add_edge(b, 10)
        b.add_edge(a, 20)
        assert traffic_ratio(a, b) == pytest.approx(3.0)


def test_expansion_chart():
    fig = create_expansion_chart({"dijkstra": 40, "astar": 12})
    assert list(fig.data[0].x) == ["dijkstra", "astar"]
    assert list(fig.data[0].y) == [40, 12]
