"""
Plotly chart components for the planner UI.
"""

from __future__ import annotations

import plotly.graph_objects as go

from route_planner.config import (
    GRAPH_EDGE_WIDTH,
    GRAPH_FIGURE_HEIGHT,
    GRAPH_NODE_SIZE,
    GRAPH_PATH_WIDTH,
)
from route_planner.graph import Graph, Vertex
from route_planner.pathfinding import PathResult

# (upper bound of weight / distance, label, color); last bucket catches the rest
TRAFFIC_BUCKETS = [
    (1.25, "Clear", "#2ecc71"),
    (2.0, "Busy", "#f39c12"),
    (float("inf"), "Jammed", "#e74c3c"),
]


def traffic_ratio(a: Vertex, b: Vertex) -> float:
    """Mean cost of the a-b connection relative to its straight-line length."""
    weights = [w for w in (a.connections.get(b), b.connections.get(a)) if w is not None]
    dist = a.dist_to(b)
    if not weights or dist == 0:
        return 1.0
    return sum(weights) / len(weights) / dist


def _edge_pairs(graph: Graph) -> list[tuple[Vertex, Vertex]]:
    """Each connected pair once, skipping edges to removed vertices."""
    seen: set[tuple[str, str]] = set()
    pairs = []
    for vertex in graph:
        for other in vertex.connections:
            if not graph.contains(other):
                continue
            key = tuple(sorted((vertex.name, other.name)))
            if key not in seen:
                seen.add(key)
                pairs.append((vertex, other))
    return pairs


def create_graph_figure(
    graph: Graph,
    result: PathResult | None = None,
    start: str | None = None,
    goal: str | None = None,
) -> go.Figure:
    """Draw vertices, connections coloured by traffic, and an optional route."""
    fig = go.Figure()

    buckets: dict[str, tuple[list, list]] = {label: ([], []) for _, label, _ in TRAFFIC_BUCKETS}
    for a, b in _edge_pairs(graph):
        ratio = traffic_ratio(a, b)
        label = next(name for bound, name, _ in TRAFFIC_BUCKETS if ratio < bound)
        xs, ys = buckets[label]
        xs.extend([a.x, b.x, None])
        ys.extend([a.y, b.y, None])

    for _, label, color in TRAFFIC_BUCKETS:
        xs, ys = buckets[label]
        fig.add_trace(go.Scatter(
            x=xs, y=ys,
            mode="lines",
            line=dict(width=GRAPH_EDGE_WIDTH, color=color),
            name=label,
            hoverinfo="skip",
        ))

    if result is not None and result.found:
        fig.add_trace(go.Scatter(
            x=[v.x for v in result.path],
            y=[v.y for v in result.path],
            mode="lines",
            line=dict(width=GRAPH_PATH_WIDTH, color="#3498db"),
            name=f"Route ({result.distance:.0f})",
            hoverinfo="skip",
        ))

    def node_color(name: str) -> str:
        if name == start:
            return "#27ae60"
        if name == goal:
            return "#c0392b"
        return "#00bcd4"

    vertices = graph.vertices
    fig.add_trace(go.Scatter(
        x=[v.x for v in vertices],
        y=[v.y for v in vertices],
        mode="markers+text",
        text=[v.name for v in vertices],
        textposition="middle center",
        textfont=dict(size=9),
        marker=dict(
            size=GRAPH_NODE_SIZE,
            color=[node_color(v.name) for v in vertices],
            line=dict(width=2, color="#1f3a93"),
        ),
        name="Locations",
        hovertemplate="<b>%{text}</b><br>(%{x:.0f}, %{y:.0f})<extra></extra>",
    ))

    fig.update_layout(
        height=GRAPH_FIGURE_HEIGHT,
        showlegend=True,
        margin=dict(t=20, b=20, l=20, r=20),
        plot_bgcolor="white",
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False, scaleanchor="x", scaleratio=1, autorange="reversed")
    return fig


def create_expansion_chart(expanded: dict[str, int]) -> go.Figure:
    """Bar chart of total expanded vertices per algorithm."""
    fig = go.Figure(data=[
        go.Bar(x=list(expanded), y=list(expanded.values()), marker_color="#3498db")
    ])

    fig.update_layout(
        title="Vertices Expanded",
        yaxis_title="Expanded",
        showlegend=False,
        height=280,
        margin=dict(t=35, b=45, l=45, r=15),
    )
    return fig
