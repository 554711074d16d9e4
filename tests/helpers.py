"""
Shared test helpers (non-fixture).
"""

import numpy as np

from route_planner.graph import Graph, Vertex


class FixedRandom:
    """
    Stand-in for numpy's Generator that returns the centre of every
    distribution, making jittered computations exact.
    """

    def __init__(self, standard_normal: float = 0.0) -> None:
        self._standard_normal = standard_normal

    def normal(self, loc=0.0, scale=1.0, size=None):
        if size is None:
            return loc
        return np.full(size, loc, dtype=float)

    def standard_normal(self):
        return self._standard_normal

    def uniform(self, low=0.0, high=1.0):
        return low

    def integers(self, low, high=None):
        return 0 if high is None else low


def make_random_graph(seed: int, size: int = 7, edge_probability: float = 0.35) -> Graph:
    """
    Build a small random directed graph whose weights are at least the
    Euclidean distance between endpoints (so A* stays admissible).
    """
    rng = np.random.default_rng(seed)
    vertices = [
        Vertex(f"v{i}", float(rng.uniform(0, 1000)), float(rng.uniform(0, 1000)))
        for i in range(size)
    ]
    graph = Graph(*vertices)
    for a in vertices:
        for b in vertices:
            if a is not b and rng.random() < edge_probability:
                a.add_edge(b, a.dist_to(b) * (1 + float(rng.uniform(0, 1.5))))
    return graph
