"""
Cached graph generation for the Streamlit pages.
"""

import streamlit as st

from route_planner.graph import Graph
from route_planner.planner import generate_organic


@st.cache_resource(max_entries=8)
def get_graph(
    vertex_count: int,
    edge_level: int,
    avg_distance: float,
    traffic_level: float,
    seed: int,
) -> Graph:
    """Generate (or reuse) the graph for these parameters."""
    return generate_organic(vertex_count, edge_level, avg_distance, traffic_level, seed=seed)
