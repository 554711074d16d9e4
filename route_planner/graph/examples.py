"""
Hand-built example graphs.
"""

from __future__ import annotations

from route_planner.graph.graph import Graph
from route_planner.graph.vertex import Vertex

# Undirected pairs of the six-vertex example
EXAMPLE_EDGES = [
    ("a", "b"),
    ("a", "c"),
    ("a", "f"),
    ("b", "c"),
    ("b", "d"),
    ("c", "f"),
    ("c", "d"),
    ("d", "e"),
    ("f", "e"),
]


def generate_example() -> Graph:
    """
    Return a graph of 6 vertices joined by undirected edges weighted by
    their cartesian distance.
    """
    vertices = {
        "a": Vertex("a", 0, 100),
        "b": Vertex("b", 210, 0),
        "c": Vertex("c", 200, 400),
        "d": Vertex("d", 600, 520),
        "e": Vertex("e", 300, 600),
        "f": Vertex("f", 20, 550),
    }

    example = Graph()
    for first, second in EXAMPLE_EDGES:
        a, b = vertices[first], vertices[second]
        example.add(a, b, a.dist_to(b))
    return example
