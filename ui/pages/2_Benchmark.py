"""
Benchmark - Dijkstra vs A* on the same queries.
"""

import sys
from pathlib import Path

import numpy as np
import streamlit as st

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from route_planner.config import DEFAULT_AVG_DISTANCE, DEFAULT_EDGE_LEVEL, DEFAULT_TRAFFIC_LEVEL  # noqa: E402
from route_planner.pathfinding import available_algorithms, get_pathfinder  # noqa: E402
from ui.components.charts import create_expansion_chart  # noqa: E402
from ui.components.graph_cache import get_graph  # noqa: E402

st.set_page_config(page_title="Benchmark", page_icon="📊", layout="wide")

st.title("Benchmark")

c1, c2, c3 = st.columns(3)
vertex_count = c1.number_input("Vertices", min_value=2, max_value=1000, value=200, step=50)
queries = c2.number_input("Queries", min_value=1, max_value=500, value=50, step=10)
seed = c3.number_input("Seed", min_value=0, value=1, step=1)

graph = get_graph(int(vertex_count), DEFAULT_EDGE_LEVEL, DEFAULT_AVG_DISTANCE, DEFAULT_TRAFFIC_LEVEL, int(seed))
rng = np.random.default_rng(int(seed))
pairs = [rng.choice(graph.names, size=2, replace=False) for _ in range(int(queries))]

rows = []
expanded_by_algorithm: dict[str, int] = {}
for name in available_algorithms():
    finder = get_pathfinder(name)
    results = [finder.find_path(graph, str(a), str(b)) for a, b in pairs]
    expanded = sum(r.expanded for r in results)
    rows.append({
        "Algorithm": finder.description,
        "Routes": sum(r.found for r in results),
        "Expanded": expanded,
        "Avg expanded": f"{expanded / len(results):.1f}",
        "Time": f"{sum(r.elapsed_ms for r in results):.1f} ms",
    })
    expanded_by_algorithm[name] = expanded

st.dataframe(rows, use_container_width=True, hide_index=True)
st.plotly_chart(create_expansion_chart(expanded_by_algorithm), use_container_width=True)
