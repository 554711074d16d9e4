"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from route_planner.graph import Graph, Vertex, generate_example
from tests.helpers import FixedRandom


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def example_graph() -> Graph:
    """Return the six-vertex example graph."""
    return generate_example()


@pytest.fixture
def fixed_rng() -> FixedRandom:
    """Return a deterministic, jitter-free random source."""
    return FixedRandom()


@pytest.fixture
def line_graph() -> Graph:
    """Return a directed chain a -> b -> c plus an isolated vertex z."""
    a, b, c = Vertex("a", 0, 0), Vertex("b", 100, 0), Vertex("c", 200, 0)
    z = Vertex("z", 500, 500)
    graph = Graph(a, b, c, z)
    a.add_edge(b, 100)
    b.add_edge(c, 100)
    return graph
