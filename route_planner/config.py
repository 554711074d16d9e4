"""
Configuration constants for the Route Planner project.

All tunable parameters for graph generation, pathfinding and the demo
surfaces are defined here. Overrides are read from environment variables
(a local .env file is loaded if present).
"""

import os
from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Generation Bounds
# =============================================================================

# Vertex count is clamped into this range
MIN_VERTICES = 1
MAX_VERTICES = 1000

# Edge concentration ("edge level") is clamped into this range
MIN_EDGE_LEVEL = 2
MAX_EDGE_LEVEL = 8

# Per-anchor edge budget after jitter is clamped into this range
MIN_EDGE_BUDGET = 1
MAX_EDGE_BUDGET = 8

# Edge budget jitter: uniform integer in [-EDGE_BUDGET_JITTER, +EDGE_BUDGET_JITTER]
EDGE_BUDGET_JITTER = 2

# Average inter-vertex distance never goes below this
MIN_AVG_DISTANCE = 80.0

# Traffic level is clamped into this range
MIN_TRAFFIC_LEVEL = 0.0
MAX_TRAFFIC_LEVEL = 4.0

# Traffic noise: dist * (N(0,1) + level * TRAFFIC_LEVEL_SCALE)
TRAFFIC_LEVEL_SCALE = 0.5

# =============================================================================
# Generation Tuning
# =============================================================================

# Crowding threshold base: max(avg_distance / MIN_DIST_DIVISOR, MIN_DIST_FLOOR)
MIN_DIST_DIVISOR = 5.0
MIN_DIST_FLOOR = 80.0

# Initial crowding threshold is the base plus this margin
MIN_DIST_MARGIN = 80.0

# Fraction of the base threshold removed after every rejected placement
MIN_DIST_DECAY = 0.01

# Std-dev of sampled edge lengths: avg_distance / DISTANCE_SPREAD
DISTANCE_SPREAD = 6.0

# Std-dev of the growth direction jitter: largest_gap / ANGLE_SPREAD
ANGLE_SPREAD = 8.0

# Raise the anchor edge budget by one after this many rejected anchors
ANCHOR_RELAX_INTERVAL = 25

# Hard cap on attempts (anchor re-rolls + placements) for a single vertex
MAX_ATTEMPTS_PER_VERTEX = int(os.environ.get("ROUTE_PLANNER_MAX_ATTEMPTS", "20000"))

# Where the first vertex is placed
ORIGIN_X = 0.0
ORIGIN_Y = 0.0

# =============================================================================
# Generation Defaults (match the demo sliders)
# =============================================================================

DEFAULT_VERTEX_COUNT = int(os.environ.get("ROUTE_PLANNER_VERTICES", "40"))
DEFAULT_EDGE_LEVEL = int(os.environ.get("ROUTE_PLANNER_EDGE_LEVEL", "3"))
DEFAULT_AVG_DISTANCE = float(os.environ.get("ROUTE_PLANNER_AVG_DISTANCE", "300"))
DEFAULT_TRAFFIC_LEVEL = float(os.environ.get("ROUTE_PLANNER_TRAFFIC_LEVEL", "1"))

# Seed used by scripts when none is given (None = nondeterministic)
_seed = os.environ.get("ROUTE_PLANNER_SEED")
DEFAULT_SEED = int(_seed) if _seed else None

# =============================================================================
# Pathfinding Configuration
# =============================================================================

# Algorithm used when callers don't name one
DEFAULT_ALGORITHM = "dijkstra"

# =============================================================================
# Visualization Configuration
# =============================================================================

# Plotly figure settings
GRAPH_NODE_SIZE = 18
GRAPH_EDGE_WIDTH = 1.5
GRAPH_PATH_WIDTH = 5
GRAPH_FIGURE_HEIGHT = 720

# Demo slider ranges
UI_VERTEX_RANGE = (20, 1000)
UI_EDGE_LEVEL_RANGE = (2, 10)
UI_AVG_DISTANCE_RANGE = (150, 1000)
UI_TRAFFIC_RANGE = (0, 4)

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Format shared by scripts
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
