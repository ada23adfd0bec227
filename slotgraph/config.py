"""
Configuration constants for slotgraph.

All capacities, limits and tunable settings are defined here.
Overrides are read from environment variables (a local .env is loaded first).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Store Configuration
# =============================================================================

# Number of vertex slots in a route map
ROUTE_CAPACITY = int(os.environ.get("SLOTGRAPH_ROUTE_CAPACITY", "50"))

# Number of vertex slots in a social network
SOCIAL_CAPACITY = int(os.environ.get("SLOTGRAPH_SOCIAL_CAPACITY", "100"))

# Hard ceiling on any store (DFS recursion depth is bounded by this)
MAX_CAPACITY = 500

# Labels longer than this are silently truncated on registration
MAX_LABEL_LENGTH = 49

# Largest accepted route weight (keeps path sums well inside int64)
MAX_EDGE_WEIGHT = 2**31 - 1

# =============================================================================
# Service Configuration
# =============================================================================

API_HOST = os.environ.get("SLOTGRAPH_API_HOST", "127.0.0.1")
API_PORT = int(os.environ.get("SLOTGRAPH_API_PORT", "5000"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
