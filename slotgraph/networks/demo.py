"""
Sample graphs used by the command line, the service layer and the tests.
"""

from __future__ import annotations

from slotgraph.networks.routes import RouteMap
from slotgraph.networks.social import SocialNetwork

DEMO_CITIES = ["A", "B", "C", "D", "E"]

# (origin, destination, weight)
DEMO_ROUTES = [
    ("A", "B", 4),
    ("A", "C", 2),
    ("B", "C", 5),
    ("B", "D", 10),
    ("C", "D", 3),
    ("C", "E", 7),
    ("D", "E", 4),
    ("B", "A", 6),
]

# Frank has no friends
DEMO_USERS = ["Alice", "Bob", "Charlie", "David", "Eve", "Frank"]

DEMO_FRIENDSHIPS = [
    ("Alice", "Bob"),
    ("Alice", "Charlie"),
    ("Bob", "David"),
    ("Charlie", "David"),
    ("David", "Eve"),
]


def seed_routes(route_map: RouteMap) -> RouteMap:
    """Register the demo cities and routes into an existing map."""
    handles = {name: route_map.register(name) for name in DEMO_CITIES}
    for origin, destination, weight in DEMO_ROUTES:
        route_map.add_edge(handles[origin], handles[destination], weight)
    return route_map


def seed_network(network: SocialNetwork) -> SocialNetwork:
    """Register the demo users and friendships into an existing network."""
    handles = {name: network.register(name) for name in DEMO_USERS}
    for a, b in DEMO_FRIENDSHIPS:
        network.add_edge(handles[a], handles[b])
    return network


def demo_route_map(capacity: int | None = None) -> RouteMap:
    """Fresh route map holding the demo cities A..E."""
    route_map = RouteMap() if capacity is None else RouteMap(capacity)
    return seed_routes(route_map)


def demo_social_network(capacity: int | None = None) -> SocialNetwork:
    """Fresh social network holding the demo users Alice..Frank."""
    network = SocialNetwork() if capacity is None else SocialNetwork(capacity)
    return seed_network(network)
