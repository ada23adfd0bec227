"""
Graph algorithms module.

Provides the algorithms that run over a VertexStore:
- shortest_path: Dijkstra with predecessor reconstruction
- breadth_first: BFS with hop levels
- depth_first / depth_first_order: Recursive pre-order DFS
- is_connected: Iterative stack-based reachability
- second_degree: Neighbor-of-neighbor suggestions
"""

from slotgraph.graph.dijkstra import shortest_path
from slotgraph.graph.results import LevelVisit, PathResult, Suggestion
from slotgraph.graph.traversal import (
    breadth_first,
    depth_first,
    depth_first_order,
    is_connected,
    second_degree,
)

__all__ = [
    "shortest_path",
    "breadth_first",
    "depth_first",
    "depth_first_order",
    "is_connected",
    "second_degree",
    "PathResult",
    "LevelVisit",
    "Suggestion",
]
