"""
Graph data model.

Provides the planar graph that pathfinding and generation operate on:
- Vertex: Named point with directed, weighted adjacency
- Graph: Registry of vertices keyed by name
- generate_example: Six-vertex example graph
"""

from route_planner.graph.examples import generate_example
from route_planner.graph.graph import Graph
from route_planner.graph.vertex import Vertex

__all__ = [
    "Graph",
    "Vertex",
    "generate_example",
]
