"""
Route Planner
"""

import sys
from pathlib import Path

import streamlit as st

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

st.set_page_config(page_title="Route Planner", page_icon="🗺️", layout="wide")

st.title("Route Planner")
st.caption("Grow a random road network and find the shortest route across it.")

col1, col2 = st.columns(2)

with col1:
    if st.button("🧭 Planner", use_container_width=True, type="primary"):
        st.switch_page("pages/1_Planner.py")

with col2:
    if st.button("📊 Benchmark", use_container_width=True):
        st.switch_page("pages/2_Benchmark.py")

st.divider()

st.markdown(
    "- Edit generation settings to vary graphs\n"
    "- Select start/goal locations to plan the shortest route\n"
    "- Compare Dijkstra and A* on the same queries"
)
