"""
Graph generation module.

Provides procedural generators for test and demo graphs:
- OrganicGenerator: Density-aware incremental growth
- generate_random_organic: One-call wrapper
- GenerationStats / GenerationStalledError: Run counters and failure signal
"""

from route_planner.generation.organic import (
    GenerationStalledError,
    GenerationStats,
    OrganicGenerator,
    generate_random_organic,
    least_dense_direction,
)

__all__ = [
    "OrganicGenerator",
    "GenerationStats",
    "GenerationStalledError",
    "generate_random_organic",
    "least_dense_direction",
]
