"""
Route Planner.

Maintains weighted, named-vertex graphs embedded in a 2-D plane, answers
shortest-path queries over them (Dijkstra and A*), and grows realistic
random road networks with a density-aware organic generator.
"""

__version__ = "0.1.0"
