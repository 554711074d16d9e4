"""
Planner - generate a graph and plan a route on it.
"""

import sys
from pathlib import Path

import streamlit as st

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from route_planner.config import (  # noqa: E402
    DEFAULT_AVG_DISTANCE,
    DEFAULT_EDGE_LEVEL,
    DEFAULT_TRAFFIC_LEVEL,
    DEFAULT_VERTEX_COUNT,
    UI_AVG_DISTANCE_RANGE,
    UI_EDGE_LEVEL_RANGE,
    UI_TRAFFIC_RANGE,
    UI_VERTEX_RANGE,
)
from route_planner.generation import GenerationStalledError  # noqa: E402
from route_planner.pathfinding import available_algorithms  # noqa: E402
from route_planner.planner import shortest_path  # noqa: E402
from ui.components.charts import create_graph_figure  # noqa: E402
from ui.components.graph_cache import get_graph  # noqa: E402

st.set_page_config(page_title="Planner", page_icon="🧭", layout="wide")

if "seed" not in st.session_state:
    st.session_state.seed = 0

with st.sidebar:
    st.header("Generation")
    vertex_count = st.slider("# of vertices", *UI_VERTEX_RANGE, DEFAULT_VERTEX_COUNT)
    edge_level = st.slider("Edge concentration", *UI_EDGE_LEVEL_RANGE, DEFAULT_EDGE_LEVEL)
    avg_distance = st.slider("Average distance", *UI_AVG_DISTANCE_RANGE, int(DEFAULT_AVG_DISTANCE))
    traffic_level = st.slider("Traffic level", *UI_TRAFFIC_RANGE, int(DEFAULT_TRAFFIC_LEVEL))
    st.session_state.seed = st.number_input("Seed", min_value=0, value=st.session_state.seed, step=1)
    if st.button("Generate New Graph", use_container_width=True):
        st.session_state.seed += 1
        st.rerun()

try:
    graph = get_graph(vertex_count, edge_level, float(avg_distance), float(traffic_level), int(st.session_state.seed))
except GenerationStalledError as e:
    st.error(f"Generation stalled: {e}")
    st.stop()

names = graph.names

c1, c2, c3 = st.columns(3)
start = c1.selectbox("Start location", names, index=0)
goal = c2.selectbox("Goal location", names, index=len(names) - 1)
algorithm = c3.radio("Algorithm", available_algorithms(), horizontal=True)

result = shortest_path(graph, start, goal, algorithm=algorithm)

m1, m2, m3, m4 = st.columns(4)
m1.metric("Vertices", len(graph))
m2.metric("Edges", graph.edge_count())
if result.found:
    m3.metric("Distance", f"{result.distance:.0f}")
    m4.metric("Expanded", result.expanded, f"{result.elapsed_ms:.2f} ms", delta_color="off")
else:
    m3.metric("Distance", "n/a")
    st.warning(f"No route: {result.status.value.replace('_', ' ')}")

st.plotly_chart(create_graph_figure(graph, result, start=start, goal=goal), use_container_width=True)

if result.found:
    st.caption(" → ".join(result.names))
