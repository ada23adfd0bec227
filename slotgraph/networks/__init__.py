"""
Graph variants module.

Provides the two concrete graphs built on the shared engine:
- RouteMap: Weighted directed routes with Dijkstra shortest paths
- SocialNetwork: Undirected friendships with BFS/DFS, groups and suggestions
- demo_route_map / demo_social_network: Seeded sample graphs
"""

from slotgraph.networks.base import Graph
from slotgraph.networks.demo import demo_route_map, demo_social_network
from slotgraph.networks.routes import RouteMap
from slotgraph.networks.social import SocialNetwork

__all__ = [
    "Graph",
    "RouteMap",
    "SocialNetwork",
    "demo_route_map",
    "demo_social_network",
]


def get_graph(kind: str, **kwargs) -> Graph:
    """
    Get an empty graph by kind.

    Args:
        kind: Graph identifier (routes, social)
        **kwargs: Passed to the graph constructor (e.g., capacity)

    Raises:
        ValueError: If kind is unknown
    """
    graphs = {
        "routes": RouteMap,
        "social": SocialNetwork,
    }

    if kind not in graphs:
        available = ", ".join(graphs.keys())
        raise ValueError(f"Unknown graph kind '{kind}'. Available: {available}")

    return graphs[kind](**kwargs)
