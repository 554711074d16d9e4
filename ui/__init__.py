"""
Streamlit UI module.

Provides the web interface for the Route Planner:
- Planner: Generate a graph and plan routes on it
- Benchmark: Compare Dijkstra and A* on generated graphs
"""
